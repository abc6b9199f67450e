"""Rich Console factory and theme for ratetier output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Outside a TTY (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RATE_THEME = Theme(
    {
        "rate.ok": "bold green",
        "rate.error": "bold red",
        "rate.op": "bold cyan",
        "rate.key": "dim",
        "rate.value": "magenta",
        "rate.tier.basic": "white",
        "rate.tier.standard": "cyan",
        "rate.tier.premium": "bold yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=RATE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tier(tier: str) -> str:
    return f"rate.tier.{tier}" if tier in {"basic", "standard", "premium"} else ""
