"""Runtime settings, read from PAYDAYS_* environment variables."""

from __future__ import annotations

import os
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

ENV_PREFIX = "PAYDAYS_"
SETTINGS_KEY = "PAYDAYS_SETTINGS"


class ConfigurationError(Exception):
    """Raised when the environment holds an unusable setting."""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    log_level: str = Field("INFO", description="loguru level for the stderr sink.")
    max_points: int = Field(
        240,
        ge=0,
        description="Upper bound on chart points per series; 0 keeps every payday.",
    )
    y_tick_target: int = Field(3, ge=1, le=20, description="Target number of linear y-axis gridlines.")
    compare_spread: float = Field(
        2.0,
        ge=0,
        le=14,
        description="Percentage points between the base rate and the low/high compare lines.",
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the environment; unset variables keep their defaults."""
    env = os.environ if environ is None else environ
    overrides: Dict[str, str] = {}
    for name in Settings.model_fields:
        raw = env.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip() != "":
            overrides[name] = raw

    try:
        return Settings.model_validate(overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid {ENV_PREFIX}* settings: {exc}") from exc
