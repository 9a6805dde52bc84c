"""Subcommand modules for clubctl.

Provides register_commands() which uses deferred imports to keep
``clubctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from clubctl.commands.demo import demo
    from clubctl.commands.types_cmd import types_cmd

    cli.add_command(demo)
    cli.add_command(types_cmd)
