"""Orbital elements, observer, and sky configuration dataclasses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrbitalElements:
    """Constant orbital elements of one body (angles in degrees).

    The ecliptic plane is the plane of the homeworld's orbit; the orbital plane
    is the plane in which the body moves around the homeworld.

    Attributes:
        name: Display name of the body.
        inclination: Angle from the ecliptic plane to the orbital plane.
        ascending_node_longitude: Longitude where the orbital plane crosses the
            ecliptic going north.
        periapsis_argument: Angle from the ascending node to periapsis.
        eccentricity: 0 for a circle, (0, 1) for an ellipse.
        origin_angle: Mean longitude at the epoch.
        orbital_period: Sidereal period in fractional days.
        mean_distance: Semi-major axis (km).
        radius: Body radius (km).

    Raises:
        ValueError: If eccentricity is outside [0, 1) or the period is not a
            positive finite number.
    """

    name: str
    inclination: float
    ascending_node_longitude: float
    periapsis_argument: float
    eccentricity: float
    origin_angle: float
    orbital_period: float
    mean_distance: float
    radius: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.eccentricity < 1.0):
            raise ValueError(
                f'{self.name}: eccentricity must be in [0, 1), got {self.eccentricity!r}'
            )
        if not (math.isfinite(self.orbital_period) and self.orbital_period > 0.0):
            raise ValueError(
                f'{self.name}: orbital_period must be positive, got {self.orbital_period!r}'
            )


@dataclass(frozen=True)
class ObserverState:
    """The body the sky is seen from: fixed latitude and axial tilt (degrees)."""

    name: str
    latitude: float
    tilt: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.latitude <= 90.0):
            raise ValueError(f'{self.name}: latitude must be in [-90, 90], got {self.latitude!r}')


@dataclass(frozen=True)
class SkyConfig:
    """Registry of modeled bodies plus the designated observer and primary.

    ``bodies`` preserves insertion order; ``primary`` names the body whose
    right ascension is the rotation reference for all others.
    """

    observer: ObserverState
    primary: str
    bodies: dict[str, OrbitalElements] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.primary not in self.bodies:
            raise ValueError(f'primary body {self.primary!r} is not in the body registry')

    @property
    def primary_elements(self) -> OrbitalElements:
        """Orbital elements of the primary body."""
        return self.bodies[self.primary]

    def body_names(self) -> list[str]:
        """Body names with the primary first, then the rest in registry order."""
        return [self.primary] + [n for n in self.bodies if n != self.primary]
