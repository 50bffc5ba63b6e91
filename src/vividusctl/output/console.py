"""Rich Console factory and theme for vividusctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

VIVIDUS_THEME = Theme(
    {
        "viv.ok": "bold green",
        "viv.error": "bold red",
        "viv.warning": "bold yellow",
        "viv.op": "bold cyan",
        "viv.key": "dim",
        "viv.path": "dim",
        "viv.version": "bold blue",
        "viv.verdict.passed": "green",
        "viv.verdict.known_issues_only": "yellow",
        "viv.verdict.exit_ignored": "magenta",
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
        theme=VIVIDUS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_verdict(verdict: str) -> str:
    return f"viv.verdict.{verdict}" if verdict else ""
