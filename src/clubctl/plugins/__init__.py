"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) in the ``clubctl.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from clubctl.plugins.manager import PluginManager

__all__ = ["PluginManager"]
