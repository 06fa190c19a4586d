"""Rich Console factory and theme for socialtrack output.

Consoles render into a StringIO buffer so renderers return plain strings.
Rich drops color codes by itself when not attached to a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SOCIALTRACK_THEME = Theme(
    {
        "st.ok": "bold green",
        "st.error": "bold red",
        "st.warning": "bold yellow",
        "st.op": "bold cyan",
        "st.key": "dim",
        "st.person": "bold blue",
        "st.endpoint": "bold magenta",
        "st.number": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SOCIALTRACK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
