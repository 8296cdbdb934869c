"""Configuration loading for dispatch_fu.

Only logging is configurable; the engine itself carries no settings.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from .constants import DEFAULT_LOG_LEVEL, ENV_LOG_FILE, ENV_LOG_LEVEL, LOG_LEVEL_NAMES
from .errors import ConfigError


class DispatchConfig(BaseModel):
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVEL_NAMES:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVEL_NAMES)}; got {value!r}"
            )
        return level


def load_config(environ: Mapping[str, str] | None = None) -> DispatchConfig:
    """Build a DispatchConfig from environment variables.

    Empty values are treated as unset.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, str] = {}

    level = env.get(ENV_LOG_LEVEL, "").strip()
    if level:
        raw["log_level"] = level

    log_file = env.get(ENV_LOG_FILE, "").strip()
    if log_file:
        raw["log_file"] = log_file

    try:
        return DispatchConfig.model_validate(raw)
    except ValidationError as exc:
        messages = "; ".join(err["msg"] for err in exc.errors())
        raise ConfigError(f"Invalid configuration: {messages}") from exc
