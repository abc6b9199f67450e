"""Command: show the rate band table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ratetier.commands._base import RateCommand

if TYPE_CHECKING:
    from ratetier.commands._context import AppContext


@click.command(
    cls=RateCommand,
    examples="""\
  ratetier tiers
  ratetier --json tiers""",
)
@click.pass_obj
def tiers(app: AppContext) -> None:
    """List every rate tier with its balance range."""
    from ratetier.services.rates import RateService

    app.emit(RateService(app.settings).list_tiers())
