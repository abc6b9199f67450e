"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from ratetier.output.console import create_console, get_output, style_for_tier

if TYPE_CHECKING:
    from rich.console import Console

    from ratetier.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, currency: str = "USD", verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, currency)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    if result.op == "resolve_rate":
        return str(result.data["rate"])
    if result.op == "resolve_rates":
        return "\n".join(str(item["rate"]) for item in result.data["items"])
    if result.op == "list_tiers":
        return "\n".join(f"{item['name']} {item['rate']}" for item in result.data["items"])
    if result.op == "health":
        return str(result.data["status"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _money(amount: float | None, currency: str) -> str:
    if amount is None:
        return "-"
    return f"{amount:,.2f} {currency}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="rate.ok"), Text(f"  {result.op}", style="rate.op"), sep="")


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="rate.key"), Text(str(value), style=style), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_resolve(result: ServiceResult, console: Console, currency: str) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "balance", _money(data["balance"], currency))
    _field(console, "tier", data["tier"], style_for_tier(data["tier"]))
    _field(console, "rate", f"{data['rate']} ({data['percent']}%)", "rate.value")


def _render_resolve_many(result: ServiceResult, console: Console, currency: str) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold")
    table.add_column("Balance", justify="right")
    table.add_column("Tier")
    table.add_column("Rate", justify="right")
    table.add_column("Percent", justify="right")
    for item in result.data["items"]:
        table.add_row(
            _money(item["balance"], currency),
            Text(item["tier"], style=style_for_tier(item["tier"])),
            str(item["rate"]),
            f"{item['percent']}%",
        )
    console.print(table)
    console.print(Text(f"  {result.data['count']} balance(s)", style="rate.key"))


def _render_tiers(result: ServiceResult, console: Console, currency: str) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold")
    table.add_column("Tier")
    table.add_column("From", justify="right")
    table.add_column("Below", justify="right")
    table.add_column("Rate", justify="right")
    for item in result.data["items"]:
        table.add_row(
            Text(item["name"], style=style_for_tier(item["name"])),
            _money(item["lower"], currency),
            _money(item["upper"], currency),
            f"{item['rate']} ({item['percent']}%)",
        )
    console.print(table)


def _render_health(result: ServiceResult, console: Console, currency: str) -> None:
    _status_line(console, result)
    _field(console, "status", result.data["status"], "rate.ok")
    _field(console, "version", result.data["version"])


def _render_generic(result: ServiceResult, console: Console, currency: str) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="rate.error"),
        Text(f"  {result.op}", style="rate.op"),
        sep="",
    )
    console.print(Text(f"  {msg}"))
    if verbose and result.error and result.error.detail:
        _field(console, "code", result.error.code)
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, str], None]] = {
    "resolve_rate": _render_resolve,
    "resolve_rates": _render_resolve_many,
    "list_tiers": _render_tiers,
    "health": _render_health,
}
