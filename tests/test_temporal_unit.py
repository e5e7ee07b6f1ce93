"""Tests for calendar unit conversions."""

from __future__ import annotations

import itertools

import pytest

from thyrannic_sky.temporal_unit import TemporalUnit


def test_unit_sizes() -> None:
    """The calendar's unit sizes."""
    assert TemporalUnit.HOUR.as_unit(TemporalUnit.MINUTE) == 60.0
    assert TemporalUnit.DAY.as_unit(TemporalUnit.HOUR) == 24.0
    assert TemporalUnit.WEEK.as_unit(TemporalUnit.DAY) == 6.0
    assert TemporalUnit.MONTH.as_unit(TemporalUnit.WEEK) == 5.0
    assert TemporalUnit.YEAR.as_unit(TemporalUnit.MONTH) == 12.0
    assert TemporalUnit.YEAR.as_unit(TemporalUnit.DAY) == 360.0


def test_conversions_compose() -> None:
    """Converting A to B to C equals converting A to C."""
    for a, b, c in itertools.product(TemporalUnit, repeat=3):
        assert a.as_unit(b) * b.as_unit(c) == pytest.approx(a.as_unit(c))


def test_defines_hierarchy() -> None:
    """Coarser units define finer ones and themselves, never the reverse."""
    assert TemporalUnit.HOUR.defines(TemporalUnit.HOUR)
    assert TemporalUnit.HOUR.defines(TemporalUnit.MINUTE)
    assert not TemporalUnit.HOUR.defines(TemporalUnit.DAY)
    assert TemporalUnit.YEAR.defines(TemporalUnit.WEEK)
    assert not TemporalUnit.DAY.defines(TemporalUnit.WEEK)


def test_whole_requires_definition() -> None:
    """whole() returns integer counts only for defined units."""
    assert TemporalUnit.MONTH.whole(TemporalUnit.DAY) == 30
    with pytest.raises(ValueError):
        TemporalUnit.DAY.whole(TemporalUnit.MONTH)


@pytest.mark.parametrize(
    ('name', 'unit'),
    [
        ('hour', TemporalUnit.HOUR),
        ('Hours', TemporalUnit.HOUR),
        ('h', TemporalUnit.HOUR),
        ('mins', TemporalUnit.MINUTE),
        ('day', TemporalUnit.DAY),
        ('weeks', TemporalUnit.WEEK),
        ('mo', TemporalUnit.MONTH),
        ('YEAR', TemporalUnit.YEAR),
    ],
)
def test_parse_names(name: str, unit: TemporalUnit) -> None:
    """Unit names, plurals, and abbreviations resolve case-insensitively."""
    assert TemporalUnit.parse(name) is unit


def test_parse_unknown() -> None:
    """Unknown unit names raise ValueError."""
    with pytest.raises(ValueError, match='Invalid time unit'):
        TemporalUnit.parse('fortnight')
