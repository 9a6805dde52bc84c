"""Typed domain errors.

Two failure families are kept distinct so callers can tell a configuration
mistake (unknown membership label) from a business-rule violation
(charging an expired membership).
"""

from __future__ import annotations


class ClubError(Exception):
    """Base class for all clubctl domain errors."""


class InvalidArgument(ClubError, ValueError):
    """A caller supplied a value the domain does not recognize."""


class InvalidMembershipType(InvalidArgument):
    """Raised by the membership factory for an unregistered type label."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Unknown membership type: {label!r}")


class MembershipExpired(ClubError):
    """Raised by a price strategy when the membership is no longer active."""
