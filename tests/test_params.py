"""Tests for tool parameter parsing and time sampling."""

from __future__ import annotations

import numpy as np
import pytest

from thyrannic_sky.params import (
    BCOL_ALTITUDE,
    BCOL_RA,
    COL_DATETIME,
    COL_VALUE,
    EphemerisParams,
    TrackerParams,
    parse_body_column_spec,
    parse_column_spec,
    sample_times,
)


def test_params_defaults() -> None:
    """Parameter dataclasses have stable defaults."""
    p = EphemerisParams(start_time='0001-01-01', stop_time='0001-01-02')
    assert p.interval == 1.0
    assert p.time_unit == 'hour'
    assert p.bodies == []
    assert p.columns == []
    assert p.latitude_deg is None
    assert p.output is None
    t = TrackerParams(start_time='0', stop_time='10')
    assert t.title == ''


def test_parse_column_specs() -> None:
    """Column names and IDs resolve; unknown tokens are skipped."""
    assert parse_column_spec(['value', '3', 'bogus', '']) == [COL_VALUE, COL_DATETIME]
    assert parse_body_column_spec(['RA', 'alt', '99']) == [BCOL_RA, BCOL_ALTITUDE]


def test_sample_times_inclusive_grid() -> None:
    """Samples run from start to stop on a fixed hour step."""
    times = sample_times('0001-01-01', '0001-01-02', 6, 'hours')
    np.testing.assert_allclose(times, [0.0, 6.0, 12.0, 18.0, 24.0])


def test_sample_times_day_unit() -> None:
    """Day intervals step by 24 hours."""
    times = sample_times('0001-01-01 06', '0001-01-04 06', 1, 'day')
    np.testing.assert_allclose(times, [6.0, 30.0, 54.0, 78.0])


@pytest.mark.parametrize(
    ('start', 'stop', 'interval', 'unit', 'message'),
    [
        ('never', '10', 1.0, 'hour', 'Invalid start or stop'),
        ('0', '10', 0.0, 'hour', 'non-zero'),
        ('0', '10', 1.0, 'fortnight', 'Invalid time unit'),
        ('10', '0', 1.0, 'hour', 'too short'),
        ('0', '1000000', 1.0, 'hour', 'exceeds limit'),
    ],
)
def test_sample_times_errors(
    start: str, stop: str, interval: float, unit: str, message: str
) -> None:
    """Bad ranges raise ValueError with a reason."""
    with pytest.raises(ValueError, match=message):
        sample_times(start, stop, interval, unit)
