"""Balance-tiered interest rates.

Three fixed bands, evaluated in order (first match wins):

    balance < 1000          -> 0.01   (basic)
    1000 <= balance < 10000 -> 0.015  (standard)
    balance >= 10000        -> 0.02   (premium)

Negative balances are rejected with :class:`InvalidArgumentError`.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Final

from pydantic import BaseModel

Balance = int | float | Decimal

STANDARD_THRESHOLD: Final = 1000
PREMIUM_THRESHOLD: Final = 10000


class RateTierError(Exception):
    """Base class for rate resolution failures."""


class InvalidArgumentError(RateTierError, ValueError):
    """Raised when a balance is outside the resolver's domain."""

    def __init__(self, balance: Balance) -> None:
        super().__init__(f"Balance must be non-negative, got {balance}")
        self.balance = balance


class RateBand(BaseModel):
    """One rate tier: ``lower <= balance < upper`` earns ``rate``."""

    model_config = {"frozen": True}

    name: str
    lower: float
    upper: float | None = None
    rate: float

    def contains(self, balance: Balance) -> bool:
        if balance < self.lower:
            return False
        return self.upper is None or balance < self.upper


RATE_BANDS: Final[tuple[RateBand, ...]] = (
    RateBand(name="basic", lower=0, upper=STANDARD_THRESHOLD, rate=0.01),
    RateBand(name="standard", lower=STANDARD_THRESHOLD, upper=PREMIUM_THRESHOLD, rate=0.015),
    RateBand(name="premium", lower=PREMIUM_THRESHOLD, rate=0.02),
)


def _check_balance(balance: Balance) -> None:
    # Only floats and Decimals can be NaN; ints of any size compare exactly.
    if isinstance(balance, Decimal):
        invalid = balance.is_nan() or balance < 0
    elif isinstance(balance, float):
        invalid = math.isnan(balance) or balance < 0
    else:
        invalid = balance < 0
    if invalid:
        raise InvalidArgumentError(balance)


def resolve_band(balance: Balance) -> RateBand:
    """Return the band *balance* falls into.

    Raises:
        InvalidArgumentError: if *balance* is negative or NaN.
    """
    _check_balance(balance)
    for band in RATE_BANDS:
        if band.contains(balance):
            return band
    # Bands cover [0, inf) with no gaps.
    raise AssertionError(f"No rate band for balance {balance}")


def resolve_rate(balance: Balance) -> float:
    """Return the annual rate fraction for *balance*.

    Examples:
        >>> resolve_rate(999.99)
        0.01
        >>> resolve_rate(1000)
        0.015
        >>> resolve_rate(10000)
        0.02
    """
    return resolve_band(balance).rate


class RateTierResolver:
    """Stateless resolver; holds no data between calls."""

    bands = RATE_BANDS

    def resolve_rate(self, balance: Balance) -> float:
        return resolve_rate(balance)

    def resolve_band(self, balance: Balance) -> RateBand:
        return resolve_band(balance)
