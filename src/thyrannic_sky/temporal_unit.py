"""Calendar units and conversion factors between them."""

from __future__ import annotations

from enum import Enum

from thyrannic_sky.constants import (
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    WEEKS_PER_MONTH,
)

_MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY
_MINUTES_PER_WEEK = _MINUTES_PER_DAY * DAYS_PER_WEEK
_MINUTES_PER_MONTH = _MINUTES_PER_WEEK * WEEKS_PER_MONTH


class TemporalUnit(Enum):
    """Named calendar unit; the value is the unit's length in minutes.

    Units form a strict containment hierarchy: every unit is a whole number of
    each finer unit, so conversions compose exactly.
    """

    MINUTE = 1
    HOUR = MINUTES_PER_HOUR
    DAY = _MINUTES_PER_DAY
    WEEK = _MINUTES_PER_WEEK
    MONTH = _MINUTES_PER_MONTH
    YEAR = _MINUTES_PER_MONTH * MONTHS_PER_YEAR

    @property
    def minutes(self) -> int:
        """Length of one unit in minutes."""
        return self.value

    def as_unit(self, other: TemporalUnit) -> float:
        """Return how many ``other`` units equal one of this unit.

        ``TemporalUnit.DAY.as_unit(TemporalUnit.HOUR) == 24.0``
        """
        return self.minutes / other.minutes

    def convert(self, quantity: float, other: TemporalUnit) -> float:
        """Express ``quantity`` of this unit in ``other`` units.

        Multiplies before dividing so whole quantities convert exactly.
        """
        return quantity * self.minutes / other.minutes

    def whole(self, other: TemporalUnit) -> int:
        """Return ``as_unit(other)`` as an integer; ``other`` must be defined by this unit."""
        if not self.defines(other):
            raise ValueError(f'{self.name} is not a whole number of {other.name}')
        return self.minutes // other.minutes

    def defines(self, other: TemporalUnit) -> bool:
        """True if this unit is a whole multiple of ``other`` (itself included)."""
        return self.minutes % other.minutes == 0

    @classmethod
    def parse(cls, name: str) -> TemporalUnit:
        """Return the unit for a case-insensitive name, plural, or abbreviation.

        Parameters:
            name: e.g. 'hour', 'Hours', 'h', 'min', 'mo', 'yr'.

        Raises:
            ValueError: If the name is not a known unit.
        """
        key = name.strip().lower()
        unit = _UNIT_ALIASES.get(key)
        if unit is None and key.endswith('s'):
            unit = _UNIT_ALIASES.get(key[:-1])
        if unit is None:
            raise ValueError(
                f'Invalid time unit {name!r}; expected one of '
                + ', '.join(u.name.lower() for u in cls)
            )
        return unit


_UNIT_ALIASES: dict[str, TemporalUnit] = {
    'm': TemporalUnit.MINUTE,
    'min': TemporalUnit.MINUTE,
    'minute': TemporalUnit.MINUTE,
    'h': TemporalUnit.HOUR,
    'hr': TemporalUnit.HOUR,
    'hour': TemporalUnit.HOUR,
    'd': TemporalUnit.DAY,
    'day': TemporalUnit.DAY,
    'w': TemporalUnit.WEEK,
    'wk': TemporalUnit.WEEK,
    'week': TemporalUnit.WEEK,
    'mo': TemporalUnit.MONTH,
    'month': TemporalUnit.MONTH,
    'y': TemporalUnit.YEAR,
    'yr': TemporalUnit.YEAR,
    'year': TemporalUnit.YEAR,
}
