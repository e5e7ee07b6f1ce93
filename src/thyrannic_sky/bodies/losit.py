"""Losit: the small red companion on an eccentric orbit."""

from __future__ import annotations

from thyrannic_sky.bodies.base import OrbitalElements
from thyrannic_sky.bodies.sun import SUN
from thyrannic_sky.orbits import synodic_to_sidereal_period

# Observed new-to-new period (days)
LOSIT_SYNODIC_PERIOD = 48.28098

LOSIT = OrbitalElements(
    name='Losit',
    inclination=10.1134,
    ascending_node_longitude=329.915,
    periapsis_argument=265.951,
    eccentricity=0.1361,
    origin_angle=SUN.origin_angle + 321.7148,
    orbital_period=synodic_to_sidereal_period(LOSIT_SYNODIC_PERIOD, SUN.orbital_period),
    mean_distance=512_000.0,
    radius=1_966.0,
)
