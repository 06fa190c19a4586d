"""Subcommand modules for socialtrack.

register_commands() imports lazily so ``socialtrack --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from socialtrack.commands.connection import connection
    from socialtrack.commands.shell import shell
    from socialtrack.commands.stats import stats

    cli.add_command(stats)
    cli.add_command(connection)
    cli.add_command(shell)
