"""Body configurations (orbital elements, observer) and the default sky registry."""

from __future__ import annotations

import logging

from thyrannic_sky.bodies.arukma import ARUKMA
from thyrannic_sky.bodies.base import ObserverState, OrbitalElements, SkyConfig
from thyrannic_sky.bodies.losit import LOSIT
from thyrannic_sky.bodies.sun import SUN
from thyrannic_sky.config import get_observer_latitude, get_observer_tilt
from thyrannic_sky.constants import DEFAULT_OBSERVER_NAME

logger = logging.getLogger(__name__)

_DEFAULT_BODIES: dict[str, OrbitalElements] = {
    'sun': SUN,
    'arukma': ARUKMA,
    'losit': LOSIT,
}


def default_observer(
    latitude: float | None = None,
    tilt: float | None = None,
) -> ObserverState:
    """Return the homeworld observer; unset values come from the environment.

    Parameters:
        latitude: Latitude in degrees, or None for THYRANNIC_SKY_LATITUDE/default.
        tilt: Axial tilt in degrees, or None for THYRANNIC_SKY_TILT/default.
    """
    return ObserverState(
        name=DEFAULT_OBSERVER_NAME,
        latitude=get_observer_latitude() if latitude is None else latitude,
        tilt=get_observer_tilt() if tilt is None else tilt,
    )


def default_config(observer: ObserverState | None = None) -> SkyConfig:
    """Return the standard sky: Sun (primary), Arukma, and Losit."""
    return SkyConfig(
        observer=observer or default_observer(),
        primary='sun',
        bodies=dict(_DEFAULT_BODIES),
    )


def parse_body_spec(config: SkyConfig, tokens: list[str]) -> list[str]:
    """Convert body tokens to registry keys (CLI body selection).

    Parameters:
        config: Sky registry to resolve names against.
        tokens: Case-insensitive registry keys or display names, or ``all``.

    Returns:
        Ordered list of unique registry keys. An empty token list selects every
        body. Unknown names are skipped (logged).
    """
    name_to_key = {key.lower(): key for key in config.bodies}
    name_to_key.update({el.name.lower(): key for key, el in config.bodies.items()})

    out: list[str] = []
    for token in tokens:
        s = token.strip().lower()
        if not s:
            continue
        if s == 'all':
            keys = config.body_names()
        elif s in name_to_key:
            keys = [name_to_key[s]]
        else:
            logger.warning('Unknown body name %r', token)
            continue
        for key in keys:
            if key not in out:
                out.append(key)
    if not tokens:
        return config.body_names()
    return out


__all__ = [
    'ARUKMA',
    'LOSIT',
    'SUN',
    'ObserverState',
    'OrbitalElements',
    'SkyConfig',
    'default_config',
    'default_observer',
    'parse_body_spec',
]
