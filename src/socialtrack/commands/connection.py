"""Command: closest connection between two participants."""

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
  socialtrack connection -d socialnetwork.dot user0 user37
  socialtrack -v connection user0 user37
  socialtrack -q connection user0 user37
  socialtrack --json connection user0 user37""",
)
@data_option
@click.argument("person1")
@click.argument("person2")
@click.pass_obj
def connection(app: AppContext, data: Path | None, person1: str, person2: str) -> None:
    """Find the closest connection between PERSON1 and PERSON2."""
    app.load_or_exit(data)
    app.emit(app.service.connection(person1, person2))
