"""Root CLI group for clubctl with global flags and command registration."""

from __future__ import annotations

import click

from clubctl import __version__
from clubctl.commands import register_commands
from clubctl.commands._context import AppContext
from clubctl.config.settings import ClubSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="clubctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """clubctl — fitness club membership registry.

    Runs the ``demo`` scenario when no command is given.
    """
    settings = ClubSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from clubctl.commands.demo import demo

        ctx.invoke(demo)


register_commands(cli)
