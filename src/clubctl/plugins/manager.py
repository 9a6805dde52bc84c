"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
Capabilities: lifecycle hooks and extra membership types.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from clubctl.plugins.hookspecs import ClubctlHookSpec

if TYPE_CHECKING:
    from clubctl.domain.factory import MembershipFactory

PROJECT_NAME = "clubctl"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, registration, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ClubctlHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``clubctl.plugins`` entry point group.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints("clubctl.plugins")
        self._normalize_plugin_instances()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def load_membership_types(self, factory: MembershipFactory) -> list[str]:
        """Register plugin-provided membership types on *factory*.

        Bad registrations are logged and skipped. Returns the labels added.
        """
        added: list[str] = []
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, "register_membership_types", None)
            if hook is None:
                continue

            try:
                type_map = hook()
            except Exception:
                logger.warning(
                    "Failed to collect membership types from plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            if type_map is None:
                continue
            if not isinstance(type_map, dict):
                logger.warning(
                    "Plugin %s returned non-dict membership type registrations",
                    plugin_name,
                )
                continue

            for label, model_cls in type_map.items():
                try:
                    factory.register(label, model_cls)
                except (TypeError, ValueError):
                    logger.warning(
                        "Skipping membership type %r from plugin %s",
                        label,
                        plugin_name,
                        exc_info=True,
                    )
                    continue
                added.append(label.strip().lower())
        return added

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly; hook
        dispatch against a class leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)
