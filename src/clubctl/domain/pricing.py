"""Price strategies — the policy deciding how (and whether) to charge.

Strategies are the only place the active/expired rule is enforced.
Alternative policies can be swapped in without touching Membership or
Client.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from clubctl.domain.errors import MembershipExpired
from clubctl.domain.membership import Membership


class PriceStrategy(ABC):
    """Compute a chargeable price from a membership."""

    @abstractmethod
    def calculate_price(self, membership: Membership) -> float:
        """Return the price to charge for *membership*."""

    @staticmethod
    def _require_active(membership: Membership) -> None:
        if not membership.is_active():
            msg = "Membership expired"
            raise MembershipExpired(msg)


class DefaultPriceStrategy(PriceStrategy):
    """Charge the membership's fixed price while it is active."""

    def calculate_price(self, membership: Membership) -> float:
        self._require_active(membership)
        return membership.get_price()


class DiscountPriceStrategy(PriceStrategy):
    """Charge the fixed price less a percentage discount."""

    def __init__(self, percent: float) -> None:
        if not 0 <= percent <= 100:
            msg = f"Discount percent must be between 0 and 100, got {percent}"
            raise ValueError(msg)
        self.percent = percent

    def calculate_price(self, membership: Membership) -> float:
        self._require_active(membership)
        return membership.get_price() * (100 - self.percent) / 100


STRATEGY_NAMES = ("default", "discount")


def get_price_strategy(name: str, *, discount_percent: float = 0.0) -> PriceStrategy:
    """Resolve a strategy by configuration name.

    Raises:
        ValueError: If *name* is not one of :data:`STRATEGY_NAMES`.
    """
    if name == "default":
        return DefaultPriceStrategy()
    if name == "discount":
        return DiscountPriceStrategy(discount_percent)
    msg = f"Unknown price strategy {name!r}; expected one of {', '.join(STRATEGY_NAMES)}"
    raise ValueError(msg)
