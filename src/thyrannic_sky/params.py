"""Parameters for the ephemeris table and tracker tools (CLI and API)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

import numpy as np

from thyrannic_sky.calendar_date import parse_datetime
from thyrannic_sky.constants import DEFAULT_INTERVAL, DEFAULT_TIME_UNIT, MAX_TABLE_STEPS
from thyrannic_sky.temporal_unit import TemporalUnit

logger = logging.getLogger(__name__)

# General column IDs
COL_VALUE = 1
COL_DAYS = 2
COL_DATETIME = 3

# Per-body column IDs
BCOL_RA = 1
BCOL_DEC = 2
BCOL_DIST = 3
BCOL_HOURANGLE = 4
BCOL_ZENITH = 5
BCOL_ALTITUDE = 6
BCOL_DIAMETER = 7

COL_NAME_TO_ID: dict[str, int] = {
    'value': COL_VALUE,
    'hours': COL_VALUE,
    'days': COL_DAYS,
    'datetime': COL_DATETIME,
    'date': COL_DATETIME,
}

BCOL_NAME_TO_ID: dict[str, int] = {
    'ra': BCOL_RA,
    'dec': BCOL_DEC,
    'dist': BCOL_DIST,
    'distance': BCOL_DIST,
    'ha': BCOL_HOURANGLE,
    'hourangle': BCOL_HOURANGLE,
    'zenith': BCOL_ZENITH,
    'alt': BCOL_ALTITUDE,
    'altitude': BCOL_ALTITUDE,
    'diam': BCOL_DIAMETER,
    'diameter': BCOL_DIAMETER,
}

DEFAULT_COLUMNS = [COL_VALUE, COL_DATETIME]
DEFAULT_BODY_COLUMNS = [BCOL_RA, BCOL_DEC, BCOL_ALTITUDE, BCOL_HOURANGLE]


def _parse_ids(tokens: list[str], names: dict[str, int], valid: set[int], what: str) -> list[int]:
    out: list[int] = []
    for s in tokens:
        s = s.strip()
        if not s:
            continue
        try:
            num = int(s)
        except ValueError:
            num = names.get(s.lower(), 0)
        if num in valid:
            out.append(num)
        else:
            logger.warning('Unknown %s %r; use an ID or one of %s', what, s, ', '.join(names))
    return out


def parse_column_spec(tokens: list[str]) -> list[int]:
    """Convert column tokens to column IDs (COL_*).

    Parameters:
        tokens: Decimal IDs or case-insensitive names (e.g. value, datetime).

    Returns:
        List of column IDs; invalid tokens are skipped (logged).
    """
    return _parse_ids(tokens, COL_NAME_TO_ID, set(COL_NAME_TO_ID.values()), 'column')


def parse_body_column_spec(tokens: list[str]) -> list[int]:
    """Convert body column tokens to body column IDs (BCOL_*).

    Parameters:
        tokens: Decimal IDs or case-insensitive names (e.g. ra, alt).

    Returns:
        List of body column IDs; invalid tokens are skipped (logged).
    """
    return _parse_ids(tokens, BCOL_NAME_TO_ID, set(BCOL_NAME_TO_ID.values()), 'body column')


@dataclass
class EphemerisParams:
    """Parameters for ephemeris table generation."""

    start_time: str
    stop_time: str
    interval: float = DEFAULT_INTERVAL
    time_unit: str = DEFAULT_TIME_UNIT
    bodies: list[str] = field(default_factory=list)
    columns: list[int] = field(default_factory=list)
    bodycols: list[int] = field(default_factory=list)
    latitude_deg: float | None = None
    tilt_deg: float | None = None
    output: TextIO | None = None


@dataclass
class TrackerParams:
    """Parameters for the altitude tracker plot."""

    start_time: str
    stop_time: str
    interval: float = DEFAULT_INTERVAL
    time_unit: str = DEFAULT_TIME_UNIT
    bodies: list[str] = field(default_factory=list)
    latitude_deg: float | None = None
    tilt_deg: float | None = None
    title: str = ''


def sample_times(
    start_time: str,
    stop_time: str,
    interval: float,
    time_unit: str,
    *,
    max_steps: int = MAX_TABLE_STEPS,
) -> np.ndarray:
    """Return clock values (hours) from start to stop inclusive on a fixed step.

    Parameters:
        start_time, stop_time: Calendar text or clock values (see ``parse_datetime``).
        interval: Step size in ``time_unit``; sign is ignored.
        time_unit: Unit name accepted by ``TemporalUnit.parse``.
        max_steps: Upper limit on the number of samples.

    Raises:
        ValueError: On unparsable times or unit, an empty step, or a sample
            count below 2 or above ``max_steps``.
    """
    start = parse_datetime(start_time)
    stop = parse_datetime(stop_time)
    if start is None or stop is None:
        raise ValueError('Invalid start or stop time')
    unit = TemporalUnit.parse(time_unit)
    step = abs(interval) * unit.as_unit(TemporalUnit.HOUR)
    if step == 0.0:
        raise ValueError('Interval must be non-zero')
    ntimes = int((stop.value - start.value) / step) + 1
    if ntimes < 2:
        raise ValueError('Time range too short or interval too large')
    if ntimes > max_steps:
        raise ValueError(f'Number of time steps exceeds limit of {max_steps}')
    return start.value + step * np.arange(ntimes, dtype=np.float64)
