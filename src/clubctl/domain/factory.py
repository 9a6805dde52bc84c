"""MembershipFactory — maps a type label to a fresh Membership instance.

The factory owns its own label registry, seeded with the built-in
variants. Adding a tier means defining a :class:`Membership` subclass and
registering it here (directly or through a plugin).
"""

from __future__ import annotations

from clubctl.domain.errors import InvalidMembershipType
from clubctl.domain.membership import Membership, MonthlyMembership, YearlyMembership

BUILTIN_MEMBERSHIPS: dict[str, type[Membership]] = {
    MonthlyMembership.label: MonthlyMembership,
    YearlyMembership.label: YearlyMembership,
}


def _normalize_label(label: str) -> str:
    return label.strip().lower()


class MembershipFactory:
    """Create memberships by case-insensitive type label."""

    def __init__(self) -> None:
        self._registry: dict[str, type[Membership]] = dict(BUILTIN_MEMBERSHIPS)

    def create_membership(self, membership_type: str) -> Membership:
        """Return a new membership for *membership_type*.

        Matching ignores letter case only; padded labels such as
        ``" month"`` are not recognized.

        Raises:
            InvalidMembershipType: If the label is not registered. No
                instance is created in that case.
        """
        model_cls = self._registry.get(membership_type.lower())
        if model_cls is None:
            raise InvalidMembershipType(membership_type)
        return model_cls()

    def register(self, label: str, model_cls: type[Membership]) -> None:
        """Register an additional membership variant under *label*.

        Built-in labels are reserved and cannot be overridden.
        """
        normalized = _normalize_label(label)
        if not normalized:
            msg = "Membership type label must not be empty"
            raise ValueError(msg)

        if not isinstance(model_cls, type) or not issubclass(model_cls, Membership):
            msg = f"Membership type {normalized!r} must extend Membership"
            raise TypeError(msg)

        if normalized in BUILTIN_MEMBERSHIPS:
            msg = f"Membership type {normalized!r} conflicts with a built-in type"
            raise ValueError(msg)

        existing = self._registry.get(normalized)
        if existing is not None and existing is not model_cls:
            msg = f"Membership type {normalized!r} is already registered"
            raise ValueError(msg)

        self._registry[normalized] = model_cls

    def types(self) -> dict[str, type[Membership]]:
        """Return a copy of the label -> variant mapping, in registration order."""
        return dict(self._registry)
