"""RateService: resolve balances to interest rate tiers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import structlog

from ratetier.domain.rates import (
    RATE_BANDS,
    Balance,
    InvalidArgumentError,
    RateBand,
    resolve_band,
)
from ratetier.services.base import BaseService
from ratetier.services.contracts import (
    ResolveManyResultData,
    ResolveResultData,
    TierListResultData,
    dump_validated,
)
from ratetier.services.result import ErrorCode, ServiceResult

log = structlog.get_logger(__name__)


def _as_float(balance: Balance) -> float:
    """Payload value for *balance*; ints beyond float range become ``inf``."""
    if isinstance(balance, int):
        return float(Decimal(balance))
    return float(balance)


class RateService(BaseService):
    """Balance-to-rate lookups and the band table."""

    def _percent(self, rate: float) -> float:
        return round(rate * 100, self._settings.display.percent_precision)

    def _row(self, balance: Balance, band: RateBand, warnings: list[str]) -> dict[str, Any]:
        amount = _as_float(balance)
        if math.isinf(amount):
            warnings.append("Balance is beyond float range; payload reports inf")
        return {
            "balance": amount,
            "rate": band.rate,
            "percent": self._percent(band.rate),
            "tier": band.name,
        }

    def resolve(self, balance: Balance) -> ServiceResult:
        """Resolve a single balance."""
        op = "resolve_rate"
        try:
            band = resolve_band(balance)
        except InvalidArgumentError as exc:
            amount = _as_float(balance)
            log.info("rate.rejected", balance=amount)
            return ServiceResult.failure(op, ErrorCode.INVALID_ARGUMENT, str(exc), balance=amount)

        warnings: list[str] = []
        row = self._row(balance, band, warnings)
        log.debug("rate.resolved", balance=row["balance"], tier=band.name, rate=band.rate)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(ResolveResultData, row),
            warnings=warnings,
        )

    def resolve_many(self, balances: Sequence[Balance]) -> ServiceResult:
        """Resolve several balances; any invalid balance fails the whole batch."""
        op = "resolve_rates"
        if not balances:
            return ServiceResult.failure(op, ErrorCode.EMPTY_INPUT, "No balances given")

        rows: list[dict[str, Any]] = []
        warnings: list[str] = []
        for index, balance in enumerate(balances):
            try:
                band = resolve_band(balance)
            except InvalidArgumentError as exc:
                amount = _as_float(balance)
                log.info("rate.rejected", balance=amount, index=index)
                return ServiceResult.failure(
                    op,
                    ErrorCode.INVALID_ARGUMENT,
                    str(exc),
                    balance=amount,
                    index=index,
                )
            rows.append(self._row(balance, band, warnings))

        log.debug("rate.resolved_batch", count=len(rows))
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(ResolveManyResultData, {"count": len(rows), "items": rows}),
            warnings=warnings,
        )

    def list_tiers(self) -> ServiceResult:
        """Describe every rate band, lowest first."""
        items = [
            {
                "name": band.name,
                "lower": band.lower,
                "upper": band.upper,
                "rate": band.rate,
                "percent": self._percent(band.rate),
            }
            for band in RATE_BANDS
        ]
        return ServiceResult(
            ok=True,
            op="list_tiers",
            data=dump_validated(TierListResultData, {"count": len(items), "items": items}),
        )
