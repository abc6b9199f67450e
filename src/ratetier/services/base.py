"""BaseService: foundation for all ratetier services.

Every service receives the resolved :class:`RateSettings` at construction
time. Services are cheap to build and hold no state between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ratetier.config.settings import RateSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RateService(BaseService):
            def resolve(self, balance: float) -> ServiceResult:
                ...
    """

    def __init__(self, settings: RateSettings | None = None) -> None:
        if settings is None:
            from ratetier.config.settings import RateSettings

            settings = RateSettings()
        self._settings = settings
