"""Process-wide settings for path resolution and logging."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

_ENV_PREFIX = "GRAPHWALKER_"


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(
        f"{name} must be a boolean (1/0/true/false/yes/no/on/off), got {raw!r}"
    )


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


class GraphWalkerConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    path_cache_size: int = Field(default=1024, ge=0)
    coerce_int_keys: bool = True
    allow_attributes: bool = False
    log_level: LogLevel = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GraphWalkerConfig:
        """Build a config from ``GRAPHWALKER_*`` environment variables.

        Unset or blank variables fall back to the field defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            path_cache_size=_env_int(
                env, f"{_ENV_PREFIX}PATH_CACHE_SIZE", defaults.path_cache_size
            ),
            coerce_int_keys=_env_bool(
                env, f"{_ENV_PREFIX}COERCE_INT_KEYS", defaults.coerce_int_keys
            ),
            allow_attributes=_env_bool(
                env, f"{_ENV_PREFIX}ALLOW_ATTRIBUTES", defaults.allow_attributes
            ),
            log_level=env.get(f"{_ENV_PREFIX}LOG_LEVEL", defaults.log_level)
            .strip()
            .upper()
            or defaults.log_level,
        )


GRAPHWALKER_CONFIG = GraphWalkerConfig.from_env()


__all__ = ["GRAPHWALKER_CONFIG", "GraphWalkerConfig", "LogLevel"]
