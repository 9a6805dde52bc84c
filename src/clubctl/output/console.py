"""Rich Console factory and theme for clubctl output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CLUB_THEME = Theme(
    {
        "club.ok": "bold green",
        "club.error": "bold red",
        "club.warning": "bold yellow",
        "club.op": "bold cyan",
        "club.key": "dim",
        "club.type": "bold blue",
        "club.price": "magenta",
    }
)


def create_console() -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=CLUB_THEME,
        highlight=False,
        width=100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
