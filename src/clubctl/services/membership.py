"""ClubService — enrollment, pricing and expiry as ServiceResult operations.

Domain errors are translated here so callers can branch on
``result.error.code`` instead of catching exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from clubctl.domain.errors import InvalidMembershipType, MembershipExpired
from clubctl.domain.people import Client
from clubctl.services.base import BaseService
from clubctl.services.observers import ClientObserver
from clubctl.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from clubctl.domain.factory import MembershipFactory
    from clubctl.domain.pricing import PriceStrategy
    from clubctl.plugins.manager import PluginManager
    from clubctl.services.club import Club

logger = logging.getLogger(__name__)


class ClubService(BaseService):
    """Operations over a :class:`Club` using a factory and a price strategy."""

    def __init__(
        self,
        club: Club,
        factory: MembershipFactory,
        strategy: PriceStrategy,
        *,
        plugins: PluginManager | None = None,
    ) -> None:
        super().__init__(club, plugins=plugins)
        self._factory = factory
        self._strategy = strategy

    def enroll(
        self,
        name: str,
        membership_type: str,
        *,
        notify: bool = True,
        echo: Callable[[str], None] | None = None,
    ) -> ServiceResult:
        """Create a membership, wrap it in a client and add it to the club.

        When *notify* is set, a :class:`ClientObserver` for the new client is
        registered before the client is added, so it receives the broadcast.
        *echo* replaces the observer's stdout writer, e.g. to collect the
        notification lines for JSON output.
        """
        op = "enroll"
        try:
            membership = self._factory.create_membership(membership_type)
        except InvalidMembershipType as exc:
            return ServiceResult.failure(
                op, ErrorCode.INVALID_ARGUMENT, str(exc), membership_type=exc.label
            )

        client = Client(name=name, membership=membership)
        if notify:
            observer = ClientObserver(client) if echo is None else ClientObserver(client, echo=echo)
            self._club.register_observer(observer)
        notified = self._club.add_client(client)
        logger.info("Enrolled %s with %s membership", name, membership.label)

        warnings: list[str] = []
        self._dispatch_event(
            "post_enroll",
            {"client_name": name, "membership_type": membership.label},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "membership_type": membership.label,
                "active": membership.is_active(),
                "notified": notified,
            },
            warnings=warnings,
        )

    def quote(self, name: str) -> ServiceResult:
        """Price the membership of the client registered under *name*."""
        op = "quote"
        client = self._club.find_client(name)
        if client is None:
            return _unknown_client(op, name)
        try:
            price = self._strategy.calculate_price(client.get_membership())
        except MembershipExpired as exc:
            return ServiceResult.failure(op, ErrorCode.MEMBERSHIP_EXPIRED, str(exc), name=name)
        return ServiceResult(ok=True, op=op, data={"name": name, "price": price})

    def expire(self, name: str) -> ServiceResult:
        """Expire the membership of the client registered under *name*."""
        op = "expire"
        client = self._club.find_client(name)
        if client is None:
            return _unknown_client(op, name)
        client.get_membership().expire()
        return ServiceResult(ok=True, op=op, data={"name": name, "active": False})

    def membership_types(self) -> ServiceResult:
        """List registered membership labels with their fixed prices.

        Variants that cannot be built without arguments are skipped with a
        warning.
        """
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        for label, model_cls in self._factory.types().items():
            try:
                price = model_cls().get_price()
            except ValidationError:
                logger.warning("Cannot price membership type %s", label, exc_info=True)
                warnings.append(f"Membership type {label!r} requires arguments; price unavailable")
                continue
            items.append({"type": label, "price": price})
        return ServiceResult(
            ok=True,
            op="types",
            data={"items": items, "count": len(items)},
            warnings=warnings,
        )


def _unknown_client(op: str, name: str) -> ServiceResult:
    return ServiceResult.failure(
        op, ErrorCode.INVALID_ARGUMENT, f"No client named {name!r}", name=name
    )
