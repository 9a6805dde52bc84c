"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, clubctl.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ClubConfig(BaseModel):
    """[club] section."""

    model_config = {"frozen": True}

    name: str = "Fitness Club"


class PricingConfig(BaseModel):
    """[pricing] section."""

    model_config = {"frozen": True}

    strategy: Literal["default", "discount"] = "default"
    discount_percent: float = Field(default=0.0, ge=0, le=100)


class DemoConfig(BaseModel):
    """[demo] section — the fixed scenario run by ``clubctl demo``."""

    model_config = {"frozen": True}

    client_name: str = "Ivan"
    membership_type: str = "MONTH"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
