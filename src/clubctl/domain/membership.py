"""Membership hierarchy — priced subscriptions with a one-way expiry.

Each variant carries a fixed class-level price. Instances start active and
may be expired exactly once; the active flag is private state that only
:meth:`Membership.expire` changes, so there is no transition back.

Price lookup (:meth:`Membership.get_price`) never checks activity. The
active/expired rule is enforced by price strategies in
:mod:`clubctl.domain.pricing`.
"""

from __future__ import annotations

from abc import abstractmethod
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, PrivateAttr


class MembershipType(StrEnum):
    """Built-in membership labels (matched case-insensitively)."""

    MONTH = "month"
    YEAR = "year"


class Membership(BaseModel):
    """Abstract priced subscription record.

    Subclasses set ``label`` and implement :meth:`get_price`.
    """

    label: ClassVar[str] = ""

    _active: bool = PrivateAttr(default=True)

    @abstractmethod
    def get_price(self) -> float:
        """Return the fixed price of this variant, regardless of activity."""

    def is_active(self) -> bool:
        return self._active

    def expire(self) -> None:
        """Deactivate the membership. Repeated calls have no further effect."""
        self._active = False


class MonthlyMembership(Membership):
    """One-month subscription."""

    label: ClassVar[str] = MembershipType.MONTH
    PRICE: ClassVar[float] = 500.0

    def get_price(self) -> float:
        return self.PRICE


class YearlyMembership(Membership):
    """Twelve-month subscription."""

    label: ClassVar[str] = MembershipType.YEAR
    PRICE: ClassVar[float] = 5000.0

    def get_price(self) -> float:
        return self.PRICE
