"""Orbital model: anomalies and longitudes as functions of time.

``d`` is always the time in fractional days since the epoch; angles are in
degrees.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from thyrannic_sky.angle_utils import cos, fix_angle, rad2deg, sin
from thyrannic_sky.constants import DEGREES_PER_CIRCLE

if TYPE_CHECKING:
    from thyrannic_sky.bodies.base import OrbitalElements


def mean_longitude(el: OrbitalElements, d: float) -> float:
    """Mean longitude: origin angle advanced uniformly over the orbital period."""
    return fix_angle(el.origin_angle + (DEGREES_PER_CIRCLE / el.orbital_period) * d)


def periapsis_longitude(el: OrbitalElements) -> float:
    """Longitude of periapsis (ascending node plus argument of periapsis)."""
    return fix_angle(el.ascending_node_longitude + el.periapsis_argument)


def mean_anomaly(el: OrbitalElements, d: float) -> float:
    """Mean anomaly: 0 at periapsis, increasing uniformly with time."""
    return fix_angle(mean_longitude(el, d) - periapsis_longitude(el))


def periapsis_epoch(el: OrbitalElements) -> float:
    """Epoch of periapsis in fractional days."""
    return (el.periapsis_argument - el.origin_angle) * (el.orbital_period / DEGREES_PER_CIRCLE)


def periapsis_time(el: OrbitalElements, d: float) -> float:
    """Time of periapsis relative to ``d``."""
    return periapsis_epoch(el) - (mean_anomaly(el, d) / DEGREES_PER_CIRCLE) / el.orbital_period


def synodic_to_sidereal_period(p: float, primary_period: float) -> float:
    """Convert a period seen against the primary's motion to one against the stars.

    Parameters:
        p: Synodic period (days), relative to the primary body.
        primary_period: Orbital period of the primary body (days).

    Returns:
        Sidereal period (days), whose inverse is ``1/p + 1/primary_period``.
    """
    return 1.0 / (1.0 / p + 1.0 / primary_period)


def eccentric_anomaly(m: float, e: float) -> float:
    """Eccentric anomaly from one term of the equation-of-center expansion.

    Not iterated; accurate enough for the small eccentricities in use.

    Parameters:
        m: Mean anomaly (degrees).
        e: Eccentricity.
    """
    return fix_angle(m + rad2deg(e * sin(m) * (1.0 + e * cos(m))))
