"""Validated runtime settings for logging and drawing geometry."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .geometry import HexGeometry

ENV_PREFIX = "HEXLATTICE_"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """How the ``hexlattice`` logger reports."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="WARNING")
    structured: bool = Field(default=False)
    format_str: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LEVELS)}")
        return level


class LatticeSettings(BaseModel):
    """Top-level settings payload."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    geometry: HexGeometry = Field(default_factory=HexGeometry)


def load_settings(environ: Mapping[str, str] | None = None) -> LatticeSettings:
    """Build settings from ``HEXLATTICE_*`` environment variables."""

    env = os.environ if environ is None else environ
    payload: dict[str, dict[str, object]] = {"logging": {}, "geometry": {}}

    level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
    if level:
        payload["logging"]["level"] = level
    structured = env.get(f"{ENV_PREFIX}STRUCTURED_LOGS")
    if structured:
        payload["logging"]["structured"] = structured.strip().lower() in ("1", "true", "yes")
    size = env.get(f"{ENV_PREFIX}HEX_SIZE")
    if size:
        payload["geometry"]["size"] = size

    return LatticeSettings.model_validate(payload)
