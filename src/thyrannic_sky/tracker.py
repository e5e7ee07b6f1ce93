"""Altitude tracker: body altitude against time, plotted with matplotlib."""

from __future__ import annotations

import logging

import numpy as np

from thyrannic_sky.calendar_date import CalendarDateTime
from thyrannic_sky.ephemeris import sky_for
from thyrannic_sky.params import TrackerParams, sample_times

logger = logging.getLogger(__name__)


def compute_tracks(params: TrackerParams) -> tuple[np.ndarray, dict[str, np.ndarray]]:
    """Sample every selected body's altitude over the requested range.

    Returns:
        (times, tracks): clock values in hours, and body display name to an
        altitude array (degrees) aligned with ``times``.

    Raises:
        ValueError: For invalid times, interval, or body selection.
    """
    times = sample_times(params.start_time, params.stop_time, params.interval, params.time_unit)
    sky, names = sky_for(params.latitude_deg, params.tilt_deg, params.bodies)
    altitudes = np.empty((len(names), len(times)), dtype=np.float64)
    for j, t in enumerate(times):
        sky.tick(float(t))
        for i, name in enumerate(names):
            altitudes[i, j] = sky.position(name).altitude
    tracks = {sky.elements(name).name: altitudes[i] for i, name in enumerate(names)}
    return times, tracks


def run_tracker(params: TrackerParams, output_path: str) -> None:
    """Render an altitude-vs-time plot for the selected bodies to ``output_path``.

    Raises:
        ValueError: For invalid times, interval, or body selection.
        ImportError: If matplotlib is not installed.
    """
    try:
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError('matplotlib is required for run_tracker') from None

    times, tracks = compute_tracks(params)
    start = CalendarDateTime.from_clock(float(times[0]))
    stop = CalendarDateTime.from_clock(float(times[-1]))

    fig, ax = plt.subplots(figsize=(10, 5))
    for name, alt in tracks.items():
        ax.plot(times, alt, label=name)
    ax.axhline(0.0, color='gray', linewidth=0.8, linestyle='--')
    ax.set_ylim(-90.0, 90.0)
    ax.set_xlabel('Hours since epoch')
    ax.set_ylabel('Altitude (deg)')
    ax.set_title(params.title or f'{start} to {stop}')
    ax.legend(loc='upper right')
    fig.savefig(output_path)
    plt.close(fig)
    logger.info('Tracker plot written to %s', output_path)
