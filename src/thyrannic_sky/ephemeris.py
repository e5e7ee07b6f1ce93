"""Ephemeris table generator: body positions sampled over a calendar range."""

from __future__ import annotations

import logging
from typing import TextIO

from thyrannic_sky.bodies import default_config, default_observer, parse_body_spec
from thyrannic_sky.calendar_date import CalendarDateTime
from thyrannic_sky.geometry import ComputedPosition
from thyrannic_sky.params import (
    BCOL_ALTITUDE,
    BCOL_DEC,
    BCOL_DIAMETER,
    BCOL_DIST,
    BCOL_HOURANGLE,
    BCOL_RA,
    BCOL_ZENITH,
    COL_DATETIME,
    COL_DAYS,
    COL_VALUE,
    DEFAULT_BODY_COLUMNS,
    DEFAULT_COLUMNS,
    EphemerisParams,
    sample_times,
)
from thyrannic_sky.sky import Sky
from thyrannic_sky.temporal_unit import TemporalUnit

logger = logging.getLogger(__name__)

_DAYS_PER_HOUR = TemporalUnit.HOUR.as_unit(TemporalUnit.DAY)

# Header text and width for each general column
_COLUMN_HEADERS: dict[int, tuple[str, int]] = {
    COL_VALUE: ('hours', 10),
    COL_DAYS: ('days', 12),
    COL_DATETIME: ('date time', 20),
}

# Header suffix and width for each body column
_BODY_HEADERS: dict[int, tuple[str, int]] = {
    BCOL_RA: ('ra', 9),
    BCOL_DEC: ('dec', 9),
    BCOL_DIST: ('dist', 12),
    BCOL_HOURANGLE: ('ha', 9),
    BCOL_ZENITH: ('zen', 9),
    BCOL_ALTITUDE: ('alt', 9),
    BCOL_DIAMETER: ('diam', 9),
}


def sky_for(
    latitude_deg: float | None, tilt_deg: float | None, body_tokens: list[str]
) -> tuple[Sky, list[str]]:
    """Build a default sky with optional observer overrides and resolve body names.

    Returns:
        (sky, selected registry keys in output order).
    """
    config = default_config(default_observer(latitude_deg, tilt_deg))
    names = parse_body_spec(config, body_tokens)
    if not names:
        raise ValueError('No known bodies selected')
    return Sky(config), names


def _general_field(col: int, value: float) -> str:
    if col == COL_VALUE:
        return f'{value:10.2f}'
    if col == COL_DAYS:
        return f'{value * _DAYS_PER_HOUR:12.5f}'
    return f'{str(CalendarDateTime.from_clock(value)):>20s}'


def _body_field(col: int, pos: ComputedPosition) -> str:
    if col == BCOL_RA:
        return f'{pos.right_ascension:9.4f}'
    if col == BCOL_DEC:
        return f'{pos.declination:9.4f}'
    if col == BCOL_DIST:
        return f'{pos.distance:12.5e}'
    if col == BCOL_HOURANGLE:
        return f'{pos.hour_angle:9.4f}'
    if col == BCOL_ZENITH:
        return f'{pos.zenith_angle:9.4f}'
    if col == BCOL_ALTITUDE:
        return f'{pos.altitude:9.4f}'
    return f'{pos.angular_diameter:9.4f}'


def _header(columns: list[int], bodycols: list[int], names: list[str]) -> str:
    parts = [f'{_COLUMN_HEADERS[c][0]:>{_COLUMN_HEADERS[c][1]}s}' for c in columns]
    for name in names:
        for c in bodycols:
            label, width = _BODY_HEADERS[c]
            parts.append(f'{name[:width - len(label) - 1] + "_" + label:>{width}s}')
    return ' '.join(parts)


def generate_ephemeris(params: EphemerisParams, output: TextIO | None = None) -> int:
    """Generate an ephemeris table and write it to ``output``.

    If output is None, uses params.output. If both are None, nothing is
    computed.

    Returns:
        Number of data rows written.

    Raises:
        ValueError: For invalid times, interval, or body selection.
    """
    out = output or params.output
    if out is None:
        return 0

    times = sample_times(params.start_time, params.stop_time, params.interval, params.time_unit)
    sky, names = sky_for(params.latitude_deg, params.tilt_deg, params.bodies)
    columns = params.columns or DEFAULT_COLUMNS
    bodycols = params.bodycols or DEFAULT_BODY_COLUMNS
    logger.info('Ephemeris: %d samples for %s', len(times), ', '.join(names))

    out.write(_header(columns, bodycols, names).rstrip() + '\n')
    for t in times:
        value = float(t)
        sky.tick(value)
        parts = [_general_field(c, value) for c in columns]
        for name in names:
            pos = sky.position(name)
            parts.extend(_body_field(c, pos) for c in bodycols)
        out.write(' '.join(parts).rstrip() + '\n')
    return len(times)
