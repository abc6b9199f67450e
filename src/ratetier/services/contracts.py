"""Typed payload contracts for service boundaries.

Payloads are validated before they leave the service layer so shape
regressions (for example ``rate`` vs ``rate_tier``) fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ResolveResultData(BaseModel):
    """Payload contract for ``RateService.resolve``."""

    model_config = ConfigDict(extra="forbid")

    balance: float = Field(ge=0)
    rate: float
    percent: float
    tier: str


class ResolveManyResultData(BaseModel):
    """Payload contract for ``RateService.resolve_many``."""

    count: int
    items: list[ResolveResultData]


class TierItem(BaseModel):
    """One row of the band table."""

    name: str
    lower: float
    upper: float | None = None
    rate: float
    percent: float


class TierListResultData(BaseModel):
    """Payload contract for ``RateService.list_tiers``."""

    count: int
    items: list[TierItem]


class HealthResultData(BaseModel):
    """Payload contract for ``HealthService.status``."""

    status: Literal["UP"]
    version: str
