"""Command: liveness check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ratetier.commands._base import RateCommand

if TYPE_CHECKING:
    from ratetier.commands._context import AppContext


@click.command(
    cls=RateCommand,
    examples="""\
  ratetier health
  ratetier -q health""",
)
@click.pass_obj
def health(app: AppContext) -> None:
    """Report service health."""
    from ratetier.services.health import HealthService

    app.emit(HealthService(app.settings).status())
