"""Rich Console factory and theme for shapematch output.

Consoles render to a StringIO buffer so renderers keep a ``-> str``
contract.  Outside a terminal (tests, pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SHAPEMATCH_THEME = Theme(
    {
        "sm.ok": "bold green",
        "sm.error": "bold red",
        "sm.warning": "bold yellow",
        "sm.op": "bold cyan",
        "sm.key": "dim",
        "sm.path": "bold magenta",
        "sm.schema": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SHAPEMATCH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
