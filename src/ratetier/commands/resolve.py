"""Command: resolve balances to interest rates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ratetier.commands._base import RateCommand

if TYPE_CHECKING:
    from ratetier.commands._context import AppContext


@click.command(
    cls=RateCommand,
    examples="""\
  ratetier resolve 2500
  ratetier resolve 999.99 1000 10000
  ratetier --json resolve 15000
  ratetier -q resolve 500
  ratetier resolve -- -1""",
)
@click.argument("balances", nargs=-1, required=True, type=click.FLOAT)
@click.pass_obj
def resolve(app: AppContext, balances: tuple[float, ...]) -> None:
    """Resolve one or more BALANCES to their interest rate tier."""
    from ratetier.services.rates import RateService

    svc = RateService(app.settings)
    if len(balances) == 1:
        app.emit(svc.resolve(balances[0]))
    else:
        app.emit(svc.resolve_many(balances))
