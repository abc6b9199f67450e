"""Subcommand modules for ratetier.

Provides register_commands() which uses deferred imports to keep
``ratetier --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from ratetier.commands.health import health
    from ratetier.commands.resolve import resolve
    from ratetier.commands.tiers import tiers

    cli.add_command(resolve)
    cli.add_command(tiers)
    cli.add_command(health)
