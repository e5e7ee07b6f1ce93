"""Sky orchestrator: advance every body's position together, once per tick."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from thyrannic_sky.bodies.base import ObserverState, OrbitalElements, SkyConfig
from thyrannic_sky.calendar_date import CalendarDateTime
from thyrannic_sky.geometry import (
    ComputedPosition,
    time_of_day,
    update_equatorial,
    update_horizontal,
)
from thyrannic_sky.temporal_unit import TemporalUnit

logger = logging.getLogger(__name__)

_DAYS_PER_HOUR = TemporalUnit.HOUR.as_unit(TemporalUnit.DAY)


class Sky:
    """One independent simulation of the sky seen from ``config.observer``.

    Holds a ``ComputedPosition`` per registered body. Positions are derived
    from the time value alone, so calling ``tick`` twice with the same value
    leaves them unchanged. Ticks must not interleave.
    """

    def __init__(self, config: SkyConfig) -> None:
        self._config = config
        self._order = config.body_names()
        self._positions: dict[str, ComputedPosition] = {
            name: ComputedPosition() for name in self._order
        }
        self._time_value: float | None = None

    @property
    def config(self) -> SkyConfig:
        """The body registry this sky was built from."""
        return self._config

    @property
    def observer(self) -> ObserverState:
        """The observing body (latitude and tilt)."""
        return self._config.observer

    @property
    def primary(self) -> str:
        """Registry key of the primary body."""
        return self._config.primary

    @property
    def time_value(self) -> float | None:
        """Clock value (hours since the epoch) of the last tick, or None before any."""
        return self._time_value

    @property
    def positions(self) -> Mapping[str, ComputedPosition]:
        """Read-only view of body name to current position, primary first."""
        return MappingProxyType(self._positions)

    def position(self, name: str) -> ComputedPosition:
        """Current position of body ``name``.

        Raises:
            KeyError: If no such body is registered.
        """
        return self._positions[name]

    def elements(self, name: str) -> OrbitalElements:
        """Orbital elements of body ``name``."""
        return self._config.bodies[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def tick(self, time_value: float | CalendarDateTime) -> None:
        """Recompute every body's position for ``time_value``.

        Equatorial coordinates are computed for every body, primary first; the
        horizontal coordinates follow, all referenced to the primary's freshly
        computed right ascension. Non-finite time values yield NaN positions.

        Parameters:
            time_value: Hours since the epoch, or a ``CalendarDateTime``.
        """
        if isinstance(time_value, CalendarDateTime):
            time_value = time_value.value
        d = time_value * _DAYS_PER_HOUR
        tilt = self.observer.tilt
        for name in self._order:
            update_equatorial(self._positions[name], self._config.bodies[name], d, tilt)

        hour, minute = time_of_day(time_value)
        primary_ra = self._positions[self.primary].right_ascension
        for name in self._order:
            update_horizontal(self._positions[name], self.observer, hour, minute, primary_ra)

        self._time_value = time_value
        logger.debug('tick %s: %d bodies, primary RA %.4f', time_value, len(self), primary_ra)
