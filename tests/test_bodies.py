"""Tests for the default body registry and observer configuration."""

from __future__ import annotations

import logging

import pytest

from thyrannic_sky.bodies import (
    ARUKMA,
    LOSIT,
    SUN,
    default_config,
    default_observer,
    parse_body_spec,
)
from thyrannic_sky.bodies.base import ObserverState, SkyConfig
from thyrannic_sky.bodies.losit import LOSIT_SYNODIC_PERIOD
from thyrannic_sky.config import get_log_level
from thyrannic_sky.constants import DEFAULT_LATITUDE, DEFAULT_TILT


def test_default_config_registry() -> None:
    """The default sky has the sun as primary plus two companions."""
    config = default_config(ObserverState(name='Thyra', latitude=40.0, tilt=23.44))
    assert config.primary == 'sun'
    assert config.primary_elements is SUN
    assert config.body_names() == ['sun', 'arukma', 'losit']
    assert config.bodies['losit'] is LOSIT


def test_companion_periods_are_sidereal() -> None:
    """Companion periods derive from their synodic periods and the year."""
    assert 1.0 / LOSIT.orbital_period == pytest.approx(
        1.0 / LOSIT_SYNODIC_PERIOD + 1.0 / SUN.orbital_period
    )
    assert ARUKMA.orbital_period < 29.530589
    assert SUN.orbital_period == 360.0


def test_companion_origin_offsets_from_sun() -> None:
    """Companion origin angles are offsets from the sun's."""
    assert LOSIT.origin_angle == pytest.approx(SUN.origin_angle + 321.7148)


def test_default_observer_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Latitude and tilt come from the environment when not given."""
    monkeypatch.setenv('THYRANNIC_SKY_LATITUDE', '-33.5')
    monkeypatch.setenv('THYRANNIC_SKY_TILT', '12')
    observer = default_observer()
    assert observer.latitude == -33.5
    assert observer.tilt == 12.0
    assert default_observer(latitude=5.0).latitude == 5.0


def test_default_observer_bad_environment(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Unparsable environment values fall back to defaults with a warning."""
    monkeypatch.setenv('THYRANNIC_SKY_LATITUDE', 'north')
    monkeypatch.delenv('THYRANNIC_SKY_TILT', raising=False)
    with caplog.at_level(logging.WARNING, logger='thyrannic_sky.config'):
        observer = default_observer()
    assert observer.latitude == DEFAULT_LATITUDE
    assert observer.tilt == DEFAULT_TILT
    assert 'THYRANNIC_SKY_LATITUDE' in caplog.text


def test_observer_rejects_bad_latitude() -> None:
    """Latitude outside [-90, 90] is a configuration error."""
    with pytest.raises(ValueError, match='latitude'):
        ObserverState(name='X', latitude=91.0, tilt=0.0)


def test_sky_config_requires_registered_primary() -> None:
    """The primary must be one of the registered bodies."""
    observer = ObserverState(name='X', latitude=0.0, tilt=0.0)
    with pytest.raises(ValueError, match='primary'):
        SkyConfig(observer=observer, primary='sun', bodies={'losit': LOSIT})


def test_parse_body_spec(caplog: pytest.LogCaptureFixture) -> None:
    """Body names resolve case-insensitively; unknown names are logged and skipped."""
    config = default_config(ObserverState(name='X', latitude=0.0, tilt=0.0))
    assert parse_body_spec(config, ['Losit', 'SUN', 'losit']) == ['losit', 'sun']
    assert parse_body_spec(config, ['all']) == ['sun', 'arukma', 'losit']
    assert parse_body_spec(config, []) == ['sun', 'arukma', 'losit']
    with caplog.at_level(logging.WARNING):
        assert parse_body_spec(config, ['comet', 'arukma']) == ['arukma']
    assert 'comet' in caplog.text


def test_get_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """THYRANNIC_SKY_LOG overrides the default level; junk is ignored."""
    monkeypatch.setenv('THYRANNIC_SKY_LOG', 'info')
    assert get_log_level() == logging.INFO
    monkeypatch.setenv('THYRANNIC_SKY_LOG', 'loud')
    assert get_log_level(logging.ERROR) == logging.ERROR
