"""Environment driven settings for pdfdesk tools."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

LOGGER = logging.getLogger("pdfdesk.config")

RENDER_SCALE_ENV = "PDFDESK_RENDER_SCALE"
DEFAULT_QUALITY_ENV = "PDFDESK_DEFAULT_QUALITY"
LOG_LEVEL_ENV = "PDFDESK_LOG_LEVEL"

DEFAULT_RENDER_SCALE = 1.5
DEFAULT_QUALITY = 0.7
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    render_scale: float = DEFAULT_RENDER_SCALE
    default_quality: float = DEFAULT_QUALITY
    log_level: str = DEFAULT_LOG_LEVEL


def _float_from_env(name: str, default: float, *, upper: float | None = None) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        number = float(value)
    except ValueError:
        LOGGER.warning("Ignoring %s=%r: not a number", name, value)
        return default
    if not math.isfinite(number) or number <= 0 or (upper is not None and number > upper):
        LOGGER.warning("Ignoring %s=%r: out of range", name, value)
        return default
    return number


def _log_level_from_env() -> str:
    value = os.getenv(LOG_LEVEL_ENV)
    if value is None or not value.strip():
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        LOGGER.warning("Ignoring %s=%r: unknown log level", LOG_LEVEL_ENV, value)
        return DEFAULT_LOG_LEVEL
    return level


def load_settings() -> Settings:
    """Read :class:`Settings` from the process environment."""

    return Settings(
        render_scale=_float_from_env(RENDER_SCALE_ENV, DEFAULT_RENDER_SCALE),
        default_quality=_float_from_env(DEFAULT_QUALITY_ENV, DEFAULT_QUALITY, upper=1.0),
        log_level=_log_level_from_env(),
    )


__all__ = ["Settings", "load_settings", "DEFAULT_RENDER_SCALE", "DEFAULT_QUALITY"]
