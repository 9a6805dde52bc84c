"""Pluggy hook specifications for clubctl.

One lifecycle event (``post_enroll``) and one setup-time hook that lets
plugins contribute extra membership types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from clubctl.domain.membership import Membership

hookspec = pluggy.HookspecMarker("clubctl")
hookimpl = pluggy.HookimplMarker("clubctl")


class ClubctlHookSpec:
    """Hook specifications for the clubctl plugin system."""

    @hookspec
    def post_enroll(self, client_name: str, membership_type: str) -> None:
        """Called after a client has been added to the club."""

    @hookspec
    def register_membership_types(self) -> dict[str, type[Membership]] | None:
        """Return label -> Membership subclass mappings for the factory."""
