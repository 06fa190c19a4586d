"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds the network lazily and centralizes result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from socialtrack.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from socialtrack.config.settings import SocialTrackSettings
    from socialtrack.infrastructure.network import SocialNetwork
    from socialtrack.services.network import NetworkService
    from socialtrack.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SocialTrackSettings) -> None:
        self.settings = settings
        self._network: SocialNetwork | None = None

        from socialtrack.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from socialtrack.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def network(self) -> SocialNetwork:
        """The in-memory network (created on first access)."""
        if self._network is None:
            from socialtrack.infrastructure.network import SocialNetwork

            self._network = SocialNetwork(default_weight=self.settings.graph.default_weight)
        return self._network

    @property
    def service(self) -> NetworkService:
        from socialtrack.services.network import NetworkService

        return NetworkService(self.network)

    def data_path(self, data: Path | None) -> Path:
        """The data file to load: *data* if given, else the configured one."""
        path = data or self.settings.resolved_data_file()
        if path is None:
            raise click.UsageError("No data file given; pass --data or set [graph] data_file.")
        return path

    def load_or_exit(self, data: Path | None) -> None:
        """Load the data file, emitting the error and exiting 1 on failure."""
        result = self.service.load(self.data_path(data))
        if not result.ok:
            self.emit(result)

    def show(self, result: ServiceResult) -> None:
        """Print a result without deciding the exit status.

        Successes and their warnings go to stdout and stderr respectively;
        failures go to stderr.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)

    def emit(self, result: ServiceResult) -> None:
        """Print a result; exit with code 1 if it failed."""
        self.show(result)
        if not result.ok:
            raise SystemExit(1)
