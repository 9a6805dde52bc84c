"""Command: list registered membership types and their prices."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clubctl.commands._base import ClubCommand

if TYPE_CHECKING:
    from clubctl.commands._context import AppContext


@click.command(
    "types",
    cls=ClubCommand,
    examples="""\
  clubctl types
  clubctl --json types""",
)
@click.pass_obj
def types_cmd(app: AppContext) -> None:
    """List membership types available to the factory."""
    app.emit(app.service.membership_types())
