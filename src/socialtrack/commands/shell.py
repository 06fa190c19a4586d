"""Command: interactive menu loop.

Numbered menu, one command per iteration; failures are reported and the
loop carries on. End of input leaves the loop like the exit command.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from socialtrack.commands._base import TrackCommand, data_option

if TYPE_CHECKING:
    from socialtrack.commands._context import AppContext

MENU = """\
Welcome to the Social Track App. Choose your command:
1 : Load a data file
2 : Show statistics
3 : Display closest connection
4 : Exit app"""

LOAD, STATS, CONNECTION, EXIT = 1, 2, 3, 4


def _load(app: AppContext, path: str | Path) -> None:
    result = app.service.load(path)
    app.show(result)
    if result.ok:
        click.echo("File loaded.\n")


def _connection(app: AppContext) -> None:
    person1 = click.prompt("Enter the name of the first person")
    person2 = click.prompt("Enter the name of the second person")
    app.show(app.service.connection(person1, person2))


@click.command(
    cls=TrackCommand,
    examples="""\
  socialtrack shell
  socialtrack shell -d socialnetwork.dot""",
)
@data_option
@click.pass_obj
def shell(app: AppContext, data: Path | None) -> None:
    """Run the interactive menu (load, statistics, closest connection)."""
    preload = data or app.settings.resolved_data_file()
    if preload is not None:
        _load(app, preload)

    while True:
        click.echo(MENU)
        try:
            command = click.prompt("Command", type=click.IntRange(LOAD, EXIT))
            if command == LOAD:
                _load(app, click.prompt("Specify a data file to load"))
            elif command == STATS:
                app.show(app.service.stats(decimals=app.settings.report.decimals))
            elif command == CONNECTION:
                _connection(app)
            else:
                break
        except click.Abort:
            click.echo()
            break

    click.echo("Exiting app...")
