"""Tests for the balance-to-rate resolver."""

from __future__ import annotations

import math
from decimal import Decimal

import pytest

from ratetier.domain.rates import (
    PREMIUM_THRESHOLD,
    RATE_BANDS,
    STANDARD_THRESHOLD,
    InvalidArgumentError,
    RateBand,
    RateTierError,
    RateTierResolver,
    resolve_band,
    resolve_rate,
)


class TestResolveRate:
    @pytest.mark.parametrize(
        "balance,expected",
        [
            (0, 0.01),
            (0.01, 0.01),
            (500, 0.01),
            (999.99, 0.01),
            (1000, 0.015),
            (5000, 0.015),
            (9999.99, 0.015),
            (10000, 0.02),
            (250_000, 0.02),
        ],
    )
    def test_band_boundaries(self, balance: float, expected: float) -> None:
        assert resolve_rate(balance) == expected

    def test_accepts_decimal(self) -> None:
        assert resolve_rate(Decimal("999.99")) == 0.01
        assert resolve_rate(Decimal("1000.00")) == 0.015
        assert resolve_rate(Decimal("10000")) == 0.02

    def test_infinity_is_premium(self) -> None:
        assert resolve_rate(math.inf) == 0.02

    def test_repeated_calls_agree(self) -> None:
        results = {resolve_rate(4321.5) for _ in range(50)}
        assert results == {0.015}


class TestInvalidBalance:
    @pytest.mark.parametrize("balance", [-1, -0.01, -10_000, Decimal("-5")])
    def test_negative_rejected(self, balance: float) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            resolve_rate(balance)
        assert exc_info.value.balance == balance
        assert "non-negative" in str(exc_info.value)

    @pytest.mark.parametrize("balance", [math.nan, Decimal("NaN")])
    def test_nan_rejected(self, balance: float) -> None:
        with pytest.raises(InvalidArgumentError):
            resolve_rate(balance)

    def test_error_hierarchy(self) -> None:
        with pytest.raises(ValueError):
            resolve_rate(-1)
        with pytest.raises(RateTierError):
            resolve_rate(-1)

    def test_negative_zero_is_valid(self) -> None:
        assert resolve_rate(-0.0) == 0.01


class TestRateBands:
    def test_band_order(self) -> None:
        assert [b.name for b in RATE_BANDS] == ["basic", "standard", "premium"]
        assert [b.rate for b in RATE_BANDS] == [0.01, 0.015, 0.02]

    def test_bands_are_contiguous(self) -> None:
        assert RATE_BANDS[0].lower == 0
        for lower, upper in zip(RATE_BANDS, RATE_BANDS[1:], strict=False):
            assert lower.upper == upper.lower
        assert RATE_BANDS[-1].upper is None

    def test_thresholds(self) -> None:
        assert STANDARD_THRESHOLD == 1000
        assert PREMIUM_THRESHOLD == 10000

    def test_contains_is_half_open(self) -> None:
        band = RateBand(name="x", lower=10, upper=20, rate=0.1)
        assert band.contains(10)
        assert band.contains(19.99)
        assert not band.contains(20)
        assert not band.contains(9.99)

    def test_frozen(self) -> None:
        with pytest.raises(Exception):
            RATE_BANDS[0].rate = 0.5  # type: ignore[misc]

    def test_resolve_band_returns_named_band(self) -> None:
        assert resolve_band(999.99).name == "basic"
        assert resolve_band(1000).name == "standard"
        assert resolve_band(10000).name == "premium"


class TestRateTierResolver:
    def test_delegates_to_module_functions(self) -> None:
        resolver = RateTierResolver()
        assert resolver.resolve_rate(1500) == 0.015
        assert resolver.resolve_band(20_000).name == "premium"

    def test_exposes_bands(self) -> None:
        assert RateTierResolver.bands is RATE_BANDS

    def test_instances_share_no_state(self) -> None:
        a, b = RateTierResolver(), RateTierResolver()
        assert a.resolve_rate(999) == b.resolve_rate(999) == 0.01
        with pytest.raises(InvalidArgumentError):
            a.resolve_rate(-1)
        assert a.resolve_rate(999) == 0.01


class TestHugeBalances:
    def test_int_beyond_float_range_is_premium(self) -> None:
        assert resolve_rate(10**400) == 0.02

    def test_negative_int_beyond_float_range_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            resolve_rate(-(10**400))

    def test_decimal_beyond_float_range_is_premium(self) -> None:
        assert resolve_rate(Decimal("1e400")) == 0.02
