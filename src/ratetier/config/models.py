"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``ratetier.toml`` only holds
overrides. Rate bands are fixed in the domain layer and are not configurable.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    percent_precision: int = Field(default=2, ge=0, le=10)
    currency: str = "USD"


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    json_output: bool = Field(default=False, alias="json")

