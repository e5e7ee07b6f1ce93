"""Tests for the altitude tracker."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from thyrannic_sky.params import TrackerParams
from thyrannic_sky.tracker import compute_tracks, run_tracker


def test_compute_tracks_shapes() -> None:
    """One altitude array per body, aligned with the time grid."""
    params = TrackerParams(
        start_time='0001-01-01', stop_time='0001-01-03', interval=2, latitude_deg=40.0, tilt_deg=23.44
    )
    times, tracks = compute_tracks(params)
    assert times.shape == (25,)
    assert list(tracks) == ['Sun', 'Arukma', 'Losit']
    for alt in tracks.values():
        assert alt.shape == times.shape
        assert np.all(alt >= -90.0)
        assert np.all(alt <= 90.0)


def test_sun_rises_and_sets() -> None:
    """Over one day at mid latitude the sun is both above and below the horizon."""
    params = TrackerParams(
        start_time='0001-03-01',
        stop_time='0001-03-02',
        bodies=['sun'],
        latitude_deg=40.0,
        tilt_deg=23.44,
    )
    _, tracks = compute_tracks(params)
    sun = tracks['Sun']
    assert sun.max() > 0.0
    assert sun.min() < 0.0


def test_run_tracker_writes_image(tmp_path: Path) -> None:
    """The tracker saves a plot file."""
    out = tmp_path / 'track.png'
    params = TrackerParams(start_time='0', stop_time='48', bodies=['losit', 'sun'], title='Test')
    run_tracker(params, str(out))
    assert out.exists()
    assert out.stat().st_size > 0


def test_run_tracker_bad_range(tmp_path: Path) -> None:
    """Invalid ranges raise before anything is drawn."""
    out = tmp_path / 'track.png'
    with pytest.raises(ValueError):
        run_tracker(TrackerParams(start_time='5', stop_time='5'), str(out))
    assert not out.exists()
