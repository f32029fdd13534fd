"""Settings for the dependency audit and package logging.

Each setting resolves with the priority:
1. Explicit override mapping passed to :func:`load_settings`
2. Environment variable (``SEMVER_RANGE_SECTIONS``, ``SEMVER_RANGE_LOG_LEVEL``)
3. Built-in default
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ConfigError

SECTIONS_ENV_VAR = "SEMVER_RANGE_SECTIONS"
LOG_LEVEL_ENV_VAR = "SEMVER_RANGE_LOG_LEVEL"

DEFAULT_SECTIONS: tuple[str, ...] = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)
DEFAULT_LOG_LEVEL = "WARNING"
_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved configuration."""

    sections: tuple[str, ...] = DEFAULT_SECTIONS
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not self.sections:
            raise ConfigError("'sections' must contain at least one entry")
        if any(not isinstance(s, str) or not s for s in self.sections):
            raise ConfigError("'sections' entries must be non-empty strings")
        if len(set(self.sections)) != len(self.sections):
            raise ConfigError(f"Duplicate entries in 'sections': {', '.join(self.sections)}")
        if self.log_level not in _VALID_LOG_LEVELS:
            known = ", ".join(sorted(_VALID_LOG_LEVELS))
            raise ConfigError(f"Unknown log level '{self.log_level}'. Expected one of: {known}")


def _resolve_sections(overrides: Mapping[str, Any]) -> tuple[str, ...]:
    if "sections" in overrides:
        value = overrides["sections"]
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise ConfigError("'sections' must be a list of strings")
        return tuple(value)

    env_value = os.environ.get(SECTIONS_ENV_VAR)
    if env_value is not None:
        return tuple(part.strip() for part in env_value.split(",") if part.strip())

    return DEFAULT_SECTIONS


def _resolve_log_level(overrides: Mapping[str, Any]) -> str:
    value = overrides.get("log_level")
    if value is None:
        value = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    if not isinstance(value, str):
        raise ConfigError("'log_level' must be a string")
    return value.strip().upper()


def load_settings(overrides: Mapping[str, Any] | None = None) -> Settings:
    """Resolve and validate settings.

    Raises:
        ConfigError: If an override has the wrong type or a value is invalid.
    """
    overrides = overrides or {}
    unknown = set(overrides) - {"sections", "log_level"}
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    return Settings(
        sections=_resolve_sections(overrides),
        log_level=_resolve_log_level(overrides),
    )


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply ``settings.log_level`` to the package logger.

    A stderr handler is attached only when the logger has none yet.
    """
    settings = settings or load_settings()
    logger = logging.getLogger("semver_range")
    logger.setLevel(getattr(logging, settings.log_level))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
