"""Sun: the primary body; its apparent orbit defines the calendar year."""

from __future__ import annotations

from thyrannic_sky.bodies.base import OrbitalElements
from thyrannic_sky.constants import DAYS_PER_YEAR

SUN = OrbitalElements(
    name='Sun',
    inclination=0.0,
    ascending_node_longitude=0.0,
    periapsis_argument=282.9404,
    eccentricity=0.016709,
    origin_angle=280.4665,
    orbital_period=float(DAYS_PER_YEAR),
    mean_distance=149_598_000.0,
    radius=696_000.0,
)
