"""BaseService — shared foundation for clubctl services.

Every service receives the :class:`Club` it operates on, plus an optional
:class:`PluginManager` for lifecycle hooks.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from clubctl.plugins.manager import PluginManager
    from clubctl.services.club import Club

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class MyService(BaseService):
            def do_thing(self) -> ServiceResult:
                client = self._club.find_client(...)
                ...
    """

    def __init__(self, club: Club, *, plugins: PluginManager | None = None) -> None:
        self._club = club
        self._plugins = plugins

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call a plugin hook. No-op if no plugin manager is attached.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")
