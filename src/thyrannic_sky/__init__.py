"""Sky positions of the Sun, Arukma, and Losit on the Thyrannic calendar.

This package computes where each body appears in the sky of the homeworld:
- Calendar: dates, date-times, and units of the Thyrannic calendar
- Orbits: mean/eccentric/true anomalies from Keplerian elements
- Sky: per-tick right ascension, declination, hour angle, and altitude

Tools built on the engine: an ephemeris table generator and an altitude
tracker plot, both reachable from the ``thyrannic-sky`` CLI.
"""

from thyrannic_sky.bodies import ObserverState, OrbitalElements, SkyConfig, default_config
from thyrannic_sky.calendar_date import CalendarDate, CalendarDateTime, parse_datetime
from thyrannic_sky.geometry import ComputedPosition
from thyrannic_sky.sky import Sky
from thyrannic_sky.temporal_unit import TemporalUnit

__all__: list[str] = [
    'CalendarDate',
    'CalendarDateTime',
    'ComputedPosition',
    'ObserverState',
    'OrbitalElements',
    'Sky',
    'SkyConfig',
    'TemporalUnit',
    'default_config',
    'parse_datetime',
]
