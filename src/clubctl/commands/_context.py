"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the club, factory, price strategy and plugin
manager lazily, and centralizes result emission (stdout/stderr routing
and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clubctl.output.formatters import format_result

if TYPE_CHECKING:
    from clubctl.config.settings import ClubSettings
    from clubctl.services.membership import ClubService
    from clubctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service graph is built on first use so ``--help`` and
    ``--version`` never load plugins.
    """

    def __init__(self, settings: ClubSettings) -> None:
        self.settings = settings
        self._service: ClubService | None = None

        from clubctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ClubService:
        """The ClubService for this invocation (created lazily)."""
        if self._service is None:
            from clubctl.domain.factory import MembershipFactory
            from clubctl.domain.pricing import get_price_strategy
            from clubctl.plugins.manager import PluginManager
            from clubctl.services.club import Club
            from clubctl.services.membership import ClubService

            factory = MembershipFactory()
            plugins: PluginManager | None = None
            if self.settings.plugins.enabled:
                plugins = PluginManager()
                plugins.discover_and_load()
                plugins.load_membership_types(factory)

            pricing = self.settings.pricing
            try:
                strategy = get_price_strategy(
                    pricing.strategy, discount_percent=pricing.discount_percent
                )
            except ValueError as exc:
                raise click.ClickException(str(exc)) from exc

            self._service = ClubService(
                Club(self.settings.club.name),
                factory,
                strategy,
                plugins=plugins,
            )
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr unless JSON
          output already carries them.
        * Failure: writes to stderr and exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            self.warn(result)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def warn(self, result: ServiceResult) -> None:
        """Echo a result's warnings to stderr (skipped in JSON mode)."""
        if self.settings.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
