"""Configuration: observer geometry and log level from environment."""

from __future__ import annotations

import logging
import os

from thyrannic_sky.constants import DEFAULT_LATITUDE, DEFAULT_TILT

logger = logging.getLogger(__name__)

LATITUDE_ENV = 'THYRANNIC_SKY_LATITUDE'
TILT_ENV = 'THYRANNIC_SKY_TILT'
LOG_ENV = 'THYRANNIC_SKY_LOG'


def _float_from_env(name: str, default: float) -> float:
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning('Ignoring %s=%r (not a number); using %s', name, raw, default)
        return default


def get_observer_latitude() -> float:
    """Return observer latitude in degrees (THYRANNIC_SKY_LATITUDE or default)."""
    return _float_from_env(LATITUDE_ENV, DEFAULT_LATITUDE)


def get_observer_tilt() -> float:
    """Return observer axial tilt in degrees (THYRANNIC_SKY_TILT or default)."""
    return _float_from_env(TILT_ENV, DEFAULT_TILT)


def get_log_level(default: int = logging.WARNING) -> int:
    """Return log level named by THYRANNIC_SKY_LOG, or ``default``.

    Returns:
        A ``logging`` level constant.
    """
    env_level = os.environ.get(LOG_ENV, '').strip().upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        return getattr(logging, env_level)
    return default
