"""Tests for the ephemeris table generator."""

from __future__ import annotations

import io

import pytest

from thyrannic_sky.ephemeris import generate_ephemeris, sky_for
from thyrannic_sky.params import BCOL_DIST, COL_DAYS, COL_VALUE, EphemerisParams
from thyrannic_sky.sky import Sky


def test_generate_ephemeris_default_columns() -> None:
    """Header plus one row per sample, with every body by default."""
    buf = io.StringIO()
    params = EphemerisParams(
        start_time='0001-01-01',
        stop_time='0001-01-01 12',
        interval=6,
        time_unit='hour',
        latitude_deg=40.0,
        tilt_deg=23.44,
    )
    nrows = generate_ephemeris(params, buf)
    lines = buf.getvalue().splitlines()
    assert nrows == 3
    assert len(lines) == 4
    header = lines[0].split()
    assert header[:3] == ['hours', 'date', 'time']
    assert 'sun_ra' in header
    assert 'losit_alt' in header
    assert lines[1].split()[0] == '0.00'
    assert '12 AM, 0001-01-01' in lines[1]
    assert '12 PM, 0001-01-01' in lines[3]


def test_generate_ephemeris_values_match_sky() -> None:
    """Table values are the positions of a Sky ticked at the same instant."""
    buf = io.StringIO()
    params = EphemerisParams(
        start_time='100',
        stop_time='101',
        bodies=['losit'],
        columns=[COL_VALUE, COL_DAYS],
        bodycols=[BCOL_DIST],
        latitude_deg=10.0,
        tilt_deg=5.0,
    )
    generate_ephemeris(params, buf)
    rows = [line.split() for line in buf.getvalue().splitlines()[1:]]
    sky, _ = sky_for(10.0, 5.0, ['losit'])
    sky.tick(101.0)
    assert float(rows[1][0]) == 101.0
    assert float(rows[1][1]) == pytest.approx(101.0 / 24.0, abs=1e-5)
    assert float(rows[1][2]) == pytest.approx(sky.position('losit').distance, rel=1e-5)


def test_generate_ephemeris_uses_params_output() -> None:
    """params.output is used when no stream is given; None writes nothing."""
    buf = io.StringIO()
    params = EphemerisParams(start_time='0', stop_time='2', output=buf)
    assert generate_ephemeris(params) == 3
    assert buf.getvalue()
    assert generate_ephemeris(EphemerisParams(start_time='0', stop_time='2')) == 0


def test_generate_ephemeris_rejects_bad_bodies() -> None:
    """Selecting no known body is an error."""
    params = EphemerisParams(start_time='0', stop_time='2', bodies=['comet'])
    with pytest.raises(ValueError, match='No known bodies'):
        generate_ephemeris(params, io.StringIO())


def test_sky_for_overrides_observer() -> None:
    """Explicit latitude and tilt override the environment defaults."""
    sky, names = sky_for(-12.0, 3.0, [])
    assert isinstance(sky, Sky)
    assert sky.observer.latitude == -12.0
    assert sky.observer.tilt == 3.0
    assert names == ['sun', 'arukma', 'losit']
