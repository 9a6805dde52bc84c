"""Command: run the enrollment-and-pricing scenario."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clubctl.commands._base import ClubCommand

if TYPE_CHECKING:
    from clubctl.commands._context import AppContext


@click.command(
    cls=ClubCommand,
    examples="""\
  clubctl demo
  clubctl demo --name Anna --type year
  clubctl demo --expire
  clubctl --json demo""",
)
@click.option("--name", default=None, help="Client name (default from [demo] config).")
@click.option(
    "--type",
    "membership_type",
    default=None,
    help="Membership type label, e.g. MONTH or YEAR (default from [demo] config).",
)
@click.option("--expire", is_flag=True, help="Expire the membership before pricing it.")
@click.pass_obj
def demo(app: AppContext, name: str | None, membership_type: str | None, expire: bool) -> None:
    """Enroll a client, broadcast the notification, and print the membership price.

    With ``--json`` the notification lines are collected into the emitted
    result's ``data["notifications"]`` so stdout stays a single JSON document.
    """
    svc = app.service
    name = name or app.settings.demo.client_name
    membership_type = membership_type or app.settings.demo.membership_type
    json_output = app.settings.json_output

    notifications: list[str] = []
    enrolled = svc.enroll(name, membership_type, echo=notifications.append if json_output else None)
    if not enrolled.ok:
        app.emit(enrolled)
    app.warn(enrolled)

    if expire:
        svc.expire(name)

    quoted = svc.quote(name)
    if json_output:
        app.emit(
            quoted.model_copy(
                update={
                    "data": {**quoted.data, "notifications": notifications},
                    "warnings": [*enrolled.warnings, *quoted.warnings],
                }
            )
        )
        return
    if not quoted.ok:
        app.emit(quoted)
    click.echo(f"Membership price: {quoted.data['price']}")
