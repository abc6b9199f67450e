"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from ratetier.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("ratetier").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("ratetier").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("ratetier.test").warning("rate.rejected", balance="-1")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "rate.rejected"
        assert parsed["balance"] == "-1"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "ratetier.test"
        assert "timestamp" in parsed

    def test_debug_hidden_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("ratetier.services.rates").debug("rate.resolved")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
