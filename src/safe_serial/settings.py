"""Runtime settings for safe-serial.

Settings come from an optional YAML file, overlaid by environment variables:

- ``SAFE_SERIAL_CHUNK_LIMIT``: characters processed per chunk by the entity
  transcoder. Clamped to 512..40960; non-numeric values fall back to 4096.
- ``SAFE_SERIAL_CHARSET``: encoding used for serialized string lengths.
- ``SAFE_SERIAL_LOG_LEVEL``: level used by the command line tool.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import Field, ValidationError, field_validator

from safe_serial.exceptions import SettingsLoadError
from safe_serial.schemas import SchemaBase

CHUNK_LIMIT_ENV_VAR = "SAFE_SERIAL_CHUNK_LIMIT"
CHARSET_ENV_VAR = "SAFE_SERIAL_CHARSET"
LOG_LEVEL_ENV_VAR = "SAFE_SERIAL_LOG_LEVEL"

DEFAULT_CHUNK_LIMIT = 4096
MIN_CHUNK_LIMIT = 512
MAX_CHUNK_LIMIT = 40960


def clamp_chunk_limit(raw: Any) -> int:
    """Turn a configured chunk limit into a usable one.

    Non-numeric input gives the default, negative numbers are made positive,
    and the result is kept within MIN_CHUNK_LIMIT..MAX_CHUNK_LIMIT.
    """
    try:
        limit = abs(int(float(raw)))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_CHUNK_LIMIT
    return max(MIN_CHUNK_LIMIT, min(limit, MAX_CHUNK_LIMIT))


class SanitizerSettings(SchemaBase):
    chunk_limit: int = Field(default=DEFAULT_CHUNK_LIMIT)
    charset: str = Field(default="utf-8")
    log_level: str = Field(default="WARNING")

    @field_validator("chunk_limit", mode="before")
    @classmethod
    def _clamp(cls, value: Any) -> int:
        return clamp_chunk_limit(value)

    @field_validator("charset", "log_level", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("log_level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()


def _env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    env = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    if env.get(CHUNK_LIMIT_ENV_VAR) is not None:
        overrides["chunk_limit"] = env[CHUNK_LIMIT_ENV_VAR]
    if env.get(CHARSET_ENV_VAR):
        overrides["charset"] = env[CHARSET_ENV_VAR]
    if env.get(LOG_LEVEL_ENV_VAR):
        overrides["log_level"] = env[LOG_LEVEL_ENV_VAR]
    return overrides


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> SanitizerSettings:
    """Build settings from defaults and environment variables only."""
    return SanitizerSettings(**_env_overrides(environ))


def load_settings(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SanitizerSettings:
    """Load settings from a YAML file, then apply environment overrides.

    Args:
        path: Optional YAML file. A missing file is treated as empty.
        environ: Mapping used instead of ``os.environ`` (mainly for tests).

    Raises:
        SettingsLoadError: The file is not valid YAML, is not a mapping, or
            holds values the settings model rejects.
    """
    payload: Dict[str, Any] = {}
    if path is not None and path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, OSError) as e:
            raise SettingsLoadError(path.name, str(e))
        if not isinstance(data, dict):
            raise SettingsLoadError(path.name, "top-level value must be a mapping")
        payload.update(data)

    payload.update(_env_overrides(environ))
    try:
        return SanitizerSettings.model_validate(payload)
    except ValidationError as e:
        raise SettingsLoadError(path.name if path else "<environment>", str(e))


__all__ = [
    "CHUNK_LIMIT_ENV_VAR",
    "CHARSET_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "DEFAULT_CHUNK_LIMIT",
    "MIN_CHUNK_LIMIT",
    "MAX_CHUNK_LIMIT",
    "SanitizerSettings",
    "clamp_chunk_limit",
    "settings_from_env",
    "load_settings",
]
