"""Arukma: the larger companion, a fast pale moon."""

from __future__ import annotations

from thyrannic_sky.bodies.base import OrbitalElements
from thyrannic_sky.bodies.sun import SUN
from thyrannic_sky.orbits import synodic_to_sidereal_period

# Observed new-to-new period (days)
ARUKMA_SYNODIC_PERIOD = 29.530589

ARUKMA = OrbitalElements(
    name='Arukma',
    inclination=5.1454,
    ascending_node_longitude=125.1228,
    periapsis_argument=318.0634,
    eccentricity=0.0549,
    origin_angle=SUN.origin_angle + 115.3654,
    orbital_period=synodic_to_sidereal_period(ARUKMA_SYNODIC_PERIOD, SUN.orbital_period),
    mean_distance=384_400.0,
    radius=1_737.4,
)
