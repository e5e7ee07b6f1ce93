"""Calendar dates and date-times on the linear day axis.

A ``CalendarDate`` is a whole number of days since the epoch (day 1 of month 1
of year 1). A ``CalendarDateTime`` adds an hour and minute of day; its
``value`` (hours since the epoch) is the simulation clock used by
:mod:`thyrannic_sky.sky`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from thyrannic_sky.angle_utils import div_mod, mod
from thyrannic_sky.temporal_unit import TemporalUnit

_DAY = TemporalUnit.DAY
_HOUR = TemporalUnit.HOUR

_DAYS_PER_YEAR = TemporalUnit.YEAR.whole(_DAY)
_DAYS_PER_MONTH = TemporalUnit.MONTH.whole(_DAY)
_DAYS_PER_WEEK = TemporalUnit.WEEK.whole(_DAY)
_MONTHS_PER_YEAR = TemporalUnit.YEAR.whole(TemporalUnit.MONTH)
_HOURS_PER_DAY = _DAY.whole(_HOUR)
_MINUTES_PER_HOUR = _HOUR.whole(TemporalUnit.MINUTE)

# Decimal places kept on the minute of hour
_MINUTE_DIGITS = 6

_DATE_RE = re.compile(
    r'^\s*(-?\d+)-(\d{1,2})-(\d{1,2})(?:[ T]+(\d{1,2})(?::(\d{1,2}))?)?\s*$'
)


def _check_finite(seq: float) -> None:
    if not math.isfinite(seq):
        raise ValueError(f'Time value must be finite, got {seq!r}')


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable day on the calendar, stored as days since the epoch."""

    value: int

    @classmethod
    def from_value(cls, seq: float) -> CalendarDate:
        """Return the date ``seq`` days after the epoch (floored if fractional).

        Raises:
            ValueError: If ``seq`` is not finite.
        """
        _check_finite(seq)
        return cls(math.floor(seq))

    @classmethod
    def from_fields(cls, year: int, month: int, day: int) -> CalendarDate:
        """Build a date from 1-based year/month/day fields.

        Raises:
            ValueError: If month or day is outside the calendar's range.
        """
        if not 1 <= month <= _MONTHS_PER_YEAR:
            raise ValueError(f'month must be 1-{_MONTHS_PER_YEAR}, got {month}')
        if not 1 <= day <= _DAYS_PER_MONTH:
            raise ValueError(f'day must be 1-{_DAYS_PER_MONTH}, got {day}')
        return cls((year - 1) * _DAYS_PER_YEAR + (month - 1) * _DAYS_PER_MONTH + day - 1)

    def _year_split(self) -> tuple[int, int]:
        return div_mod(self.value, _DAYS_PER_YEAR)

    @property
    def year(self) -> int:
        """Year number; the epoch falls in year 1, the day before it in year 0."""
        return self._year_split()[0] + 1

    @property
    def day_of_year(self) -> int:
        """Day within the year, 1-based."""
        return self._year_split()[1] + 1

    @property
    def month(self) -> int:
        """Month within the year, 1-based."""
        return self._year_split()[1] // _DAYS_PER_MONTH + 1

    @property
    def day(self) -> int:
        """Day within the month, 1-based."""
        return self._year_split()[1] % _DAYS_PER_MONTH + 1

    @property
    def weekday(self) -> int:
        """Day within the week, 0-based; the epoch is weekday 0."""
        return mod(self.value, _DAYS_PER_WEEK)

    def add(
        self, quantity: float, unit: TemporalUnit = TemporalUnit.DAY
    ) -> CalendarDate | CalendarDateTime:
        """Return this date moved by ``quantity`` of ``unit``.

        A whole number of days gives a new ``CalendarDate``. Sub-day units, or
        a quantity that is not a whole number of days (1.5 days, 0.5 weeks),
        give a ``CalendarDateTime`` counted from midnight of this date, so the
        time of day is not lost.
        """
        if unit.defines(_DAY):
            days = unit.convert(quantity, _DAY)
            if float(days).is_integer():
                return CalendarDate(self.value + int(days))
        return CalendarDateTime(self).add(quantity, unit)

    def __str__(self) -> str:
        return f'{self.year:04d}-{self.month:02d}-{self.day:02d}'


@dataclass(frozen=True, order=True)
class CalendarDateTime:
    """Immutable (date, hour, minute) triple; ``value`` is hours since the epoch.

    ``hour`` is a whole hour of day. ``minute`` is the real-valued minute of
    the hour, in [0, 60), so sub-hour arithmetic is not lost.
    """

    date: CalendarDate
    hour: int = 0
    minute: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.hour, int) or not 0 <= self.hour < _HOURS_PER_DAY:
            raise ValueError(
                f'hour must be an integer 0-{_HOURS_PER_DAY - 1}, got {self.hour!r}'
            )
        if not 0.0 <= self.minute < _MINUTES_PER_HOUR:
            raise ValueError(f'minute must be in [0, {_MINUTES_PER_HOUR}), got {self.minute!r}')

    @classmethod
    def from_value(cls, seq: float) -> CalendarDateTime:
        """Inverse of ``value`` on whole hours: floors ``seq`` then splits it into day and hour.

        Raises:
            ValueError: If ``seq`` is not finite.
        """
        _check_finite(seq)
        day_seq, hour_seq = div_mod(math.floor(seq), _HOURS_PER_DAY)
        return cls(CalendarDate(day_seq), hour_seq)

    @classmethod
    def from_clock(cls, seq: float) -> CalendarDateTime:
        """Split a clock value (hours) into date, hour and minute without flooring.

        The minute is rounded to a microminute, so clock sums that differ only
        by float rounding give equal date-times.

        Raises:
            ValueError: If ``seq`` is not finite.
        """
        _check_finite(seq)
        total = round(seq * _MINUTES_PER_HOUR, _MINUTE_DIGITS)
        hour_seq, minute = div_mod(total, _MINUTES_PER_HOUR)
        minute = round(minute, _MINUTE_DIGITS)
        if minute >= _MINUTES_PER_HOUR:
            hour_seq += 1
            minute = 0.0
        day_seq, hour = div_mod(int(hour_seq), _HOURS_PER_DAY)
        return cls(CalendarDate(day_seq), hour, float(minute))

    @property
    def value(self) -> float:
        """Hours since the epoch, fractional when minutes are set; monotonic in (date, hour, minute)."""
        return self.date.value * _HOURS_PER_DAY + self.hour + self.minute / _MINUTES_PER_HOUR

    @property
    def days(self) -> float:
        """Fractional days since the epoch."""
        return self.value * _HOUR.as_unit(_DAY)

    def add(self, quantity: float, unit: TemporalUnit = TemporalUnit.HOUR) -> CalendarDateTime:
        """Return this date-time moved by ``quantity`` of ``unit``.

        Hours and finer units, and quantities that are not a whole number of
        days, shift the flat clock value. A whole number of days, weeks, months
        or years moves the date and keeps the time of day.
        """
        if not _HOUR.defines(unit):
            days = unit.convert(quantity, _DAY)
            if float(days).is_integer():
                return CalendarDateTime(
                    CalendarDate(self.date.value + int(days)), self.hour, self.minute
                )
        return CalendarDateTime.from_clock(self.value + unit.convert(quantity, _HOUR))

    def time_string(self) -> str:
        """12-hour clock text, e.g. '12 AM', '1 PM', '1:30 PM'."""
        display_hour = mod(self.hour - 1, 12) + 1
        am_pm = 'AM' if self.hour < 12 else 'PM'
        if self.minute:
            return f'{display_hour}:{int(self.minute):02d} {am_pm}'
        return f'{display_hour} {am_pm}'

    def __str__(self) -> str:
        return f'{self.time_string()}, {self.date}'


def parse_datetime(string: str) -> CalendarDateTime | None:
    """Parse calendar text or a clock value to a ``CalendarDateTime``.

    Accepts "YYYY-MM-DD", "YYYY-MM-DD HH" or "YYYY-MM-DD HH:MM", or a plain
    number taken as hours since the epoch (fractions become minutes).

    Parameters:
        string: Text to parse.

    Returns:
        The parsed date-time, or None on failure.
    """
    m = _DATE_RE.match(string)
    if m is None:
        try:
            seq = float(string)
        except ValueError:
            return None
        if not math.isfinite(seq):
            return None
        return CalendarDateTime.from_clock(seq)
    year, month, day, hour, minute = m.groups()
    try:
        date = CalendarDate.from_fields(int(year), int(month), int(day))
        return CalendarDateTime(
            date,
            int(hour) if hour is not None else 0,
            float(minute) if minute is not None else 0.0,
        )
    except ValueError:
        return None
