"""Configuration: TOML discovery, pydantic-settings, and structlog setup."""
