"""Rich Console factory and theme for frozengraph output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRAPH_THEME = Theme(
    {
        "fg.ok": "bold green",
        "fg.error": "bold red",
        "fg.warning": "bold yellow",
        "fg.op": "bold cyan",
        "fg.key": "dim",
        "fg.id": "bold blue",
        "fg.neighbor": "cyan",
        "fg.empty": "dim italic",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (consistent output in tests).
    """
    return Console(
        file=StringIO(),
        theme=GRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
