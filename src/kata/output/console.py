"""Rich Console factory and theme for kata output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

KATA_THEME = Theme(
    {
        "kata.ok": "bold green",
        "kata.error": "bold red",
        "kata.warning": "bold yellow",
        "kata.op": "bold cyan",
        "kata.key": "dim",
        "kata.true": "green",
        "kata.false": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=KATA_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_value(value: object) -> str:
    """Return the Rich style name for a data value."""
    if value is True:
        return "kata.true"
    if value is False:
        return "kata.false"
    return ""
