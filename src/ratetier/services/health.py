"""HealthService: static liveness report."""

from __future__ import annotations

from ratetier import __version__
from ratetier.services.base import BaseService
from ratetier.services.contracts import HealthResultData, dump_validated
from ratetier.services.result import ServiceResult


class HealthService(BaseService):
    def status(self) -> ServiceResult:
        """Report the resolver as up. Performs no I/O."""
        return ServiceResult(
            ok=True,
            op="health",
            data=dump_validated(HealthResultData, {"status": "UP", "version": __version__}),
        )
