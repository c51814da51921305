"""Runtime settings for the service entry points.

Read from ``SOLAR_SWITCH_*`` environment variables; every field has a default
so a bare ``solar-switch-api`` works out of the box.
"""

from __future__ import annotations

import logging
import os
from typing import Literal

from pydantic import BaseModel, Field


ENV_PREFIX = "SOLAR_SWITCH_"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ApiSettings(BaseModel):
    """Where the API binds and how loudly it logs."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65_535, description="Bind port")
    reload: bool = Field(default=False, description="uvicorn auto-reload (development only)")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ApiSettings":
        """Build settings from the environment; unset variables keep defaults."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw.upper() if name == "log_level" else raw
        return cls(**values)


def configure_logging(level: str = "INFO") -> None:
    """Root logger setup shared by the API and dashboard entry points."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
