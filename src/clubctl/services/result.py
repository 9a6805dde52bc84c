"""ServiceResult and ServiceError — the service boundary contract.

INVARIANT: ClubService operations return ServiceResult instead of raising
domain errors. Failure codes distinguish a bad membership label
(``INVALID_ARGUMENT``) from an expired membership (``MEMBERSHIP_EXPIRED``).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Error codes surfaced in :class:`ServiceError`."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    MEMBERSHIP_EXPIRED = "MEMBERSHIP_EXPIRED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"enroll"``).
        data: JSON-serializable payload on success.
        warnings: Non-fatal issues, such as a failing plugin hook.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result carrying a single :class:`ServiceError`."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
