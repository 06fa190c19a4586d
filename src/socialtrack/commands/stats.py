"""Command: network statistics."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from socialtrack.commands._base import TrackCommand, data_option

if TYPE_CHECKING:
    from socialtrack.commands._context import AppContext


@click.command(
    cls=TrackCommand,
    examples="""\
  socialtrack stats -d socialnetwork.dot
  socialtrack --json stats -d socialnetwork.dot
  socialtrack -q stats""",
)
@data_option
@click.pass_obj
def stats(app: AppContext, data: Path | None) -> None:
    """Show participant, friendship, and average-friends counts."""
    app.load_or_exit(data)
    app.emit(app.service.stats(decimals=app.settings.report.decimals))
