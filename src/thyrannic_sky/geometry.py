"""Position pipeline: orbital elements and time to equatorial and horizontal coordinates.

Stage one (``equatorial_coordinates``) places a body on its orbit and projects
it into the observer's equatorial frame. Stage two (``update_horizontal``)
turns right ascension and declination into hour angle and zenith angle for an
observer whose sky rotates with the primary body's right ascension as the
reference. All angles are in degrees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from thyrannic_sky.angle_utils import (
    acos_deg,
    atan2_deg,
    cos,
    div_mod,
    fix_angle,
    fix_angle2,
    sin,
    sqrt,
)
from thyrannic_sky.constants import (
    DEGREES_PER_CIRCLE,
    HALF_CIRCLE_DEGREES,
    MINUTES_PER_HOUR,
    NOON_HOUR,
    RIGHT_ANGLE_DEGREES,
)
from thyrannic_sky.orbits import eccentric_anomaly, mean_anomaly
from thyrannic_sky.temporal_unit import TemporalUnit

if TYPE_CHECKING:
    from thyrannic_sky.bodies.base import ObserverState, OrbitalElements

_HOURS_PER_DAY = TemporalUnit.DAY.as_unit(TemporalUnit.HOUR)


@dataclass
class ComputedPosition:
    """Per-body position, overwritten in place on every tick.

    Attributes:
        right_ascension: Degrees in [0, 360).
        declination: Degrees in [0, 360) (not the signed [-90, 90] convention).
        distance: Centre-to-centre distance from the observer (km).
        hour_angle: Local hour angle, degrees in (-180, 180].
        zenith_angle: Angle from the zenith, degrees in [0, 180].
        angular_diameter: Apparent size on the sky, degrees.
    """

    right_ascension: float = 0.0
    declination: float = 0.0
    distance: float = 0.0
    hour_angle: float = 0.0
    zenith_angle: float = 0.0
    angular_diameter: float = 0.0

    @property
    def altitude(self) -> float:
        """Degrees above the horizon."""
        return RIGHT_ANGLE_DEGREES - self.zenith_angle

    @property
    def vertical_offset(self) -> float:
        """Vertical placement: -90 at the zenith, 0 on the horizon."""
        return self.zenith_angle - RIGHT_ANGLE_DEGREES

    @property
    def horizontal_offset(self) -> float:
        """Placement across the sky: 0 on the meridian, growing westward."""
        return self.hour_angle

    def reset(self) -> None:
        """Zero every field."""
        self.right_ascension = 0.0
        self.declination = 0.0
        self.distance = 0.0
        self.hour_angle = 0.0
        self.zenith_angle = 0.0
        self.angular_diameter = 0.0


def orbital_plane_position(el: OrbitalElements, d: float) -> tuple[float, float]:
    """Return (distance, true longitude) of a body in its orbital plane at day ``d``."""
    e = el.eccentricity
    big_e = eccentric_anomaly(mean_anomaly(el, d), e)
    xv = cos(big_e) - e
    yv = sqrt(1.0 - e**2) * sin(big_e)
    v = fix_angle(atan2_deg(yv, xv))
    distance = sqrt(xv**2 + yv**2) * el.mean_distance
    return distance, v + el.periapsis_argument


def equatorial_coordinates(
    el: OrbitalElements, d: float, tilt: float
) -> tuple[float, float, float]:
    """Right ascension, declination, and distance of a body at day ``d``.

    Only the observer's axial tilt rotates the orbit into the equatorial frame;
    the body's own inclination does not enter the projection.

    Parameters:
        el: Orbital elements of the body.
        d: Fractional days since the epoch.
        tilt: Observer axial tilt (degrees).

    Returns:
        (right_ascension, declination, distance); both angles in [0, 360).
    """
    distance, true_long = orbital_plane_position(el, d)
    xs = distance * cos(true_long)
    ys = distance * sin(true_long)

    xe = xs
    ye = ys * cos(tilt)
    ze = ys * sin(tilt)

    ra = fix_angle(atan2_deg(ye, xe))
    dec = fix_angle(atan2_deg(ze, sqrt(xe**2 + ye**2)))
    return ra, dec, distance


def time_of_day(time_value: float) -> tuple[float, float]:
    """Split an hour-based clock value into (hour of day, minute of hour)."""
    _, hour_of_day = div_mod(time_value, _HOURS_PER_DAY)
    hour, frac = div_mod(hour_of_day, 1.0)
    return hour, frac * MINUTES_PER_HOUR


def local_sidereal_angle(hour: float, minute: float, primary_ra: float) -> float:
    """Angle of the local meridian, referenced to the primary's right ascension.

    At noon the meridian points at the primary; six hours later it is 90
    degrees past it, and at midnight 180.
    """
    fractional_day = (NOON_HOUR + hour + minute / MINUTES_PER_HOUR) / _HOURS_PER_DAY
    return fix_angle2(fractional_day * DEGREES_PER_CIRCLE + primary_ra)


def hour_angle(lsa: float, ra: float) -> float:
    """Local hour angle of a body with right ascension ``ra``."""
    return fix_angle2(lsa - ra)


def zenith_angle(latitude: float, dec: float, ha: float) -> float:
    """Angle between the zenith and a body at declination ``dec`` and hour angle ``ha``."""
    return acos_deg(sin(latitude) * sin(dec) + cos(latitude) * cos(dec) * cos(ha))


def angular_diameter(radius: float, distance: float) -> float:
    """Apparent diameter (degrees) of a sphere of ``radius`` seen from ``distance``."""
    if distance == 0.0:
        return HALF_CIRCLE_DEGREES
    return acos_deg(1.0 - 2.0 * (radius / distance) ** 2)


def update_equatorial(
    position: ComputedPosition, el: OrbitalElements, d: float, tilt: float
) -> None:
    """Recompute right ascension, declination, distance, and angular size in place."""
    ra, dec, distance = equatorial_coordinates(el, d, tilt)
    position.right_ascension = ra
    position.declination = dec
    position.distance = distance
    position.angular_diameter = angular_diameter(el.radius, distance)


def update_horizontal(
    position: ComputedPosition,
    observer: ObserverState,
    hour: float,
    minute: float,
    primary_ra: float,
) -> None:
    """Recompute hour angle and zenith angle in place.

    ``primary_ra`` must already be current for the same instant.
    """
    lsa = local_sidereal_angle(hour, minute, primary_ra)
    position.hour_angle = hour_angle(lsa, position.right_ascension)
    position.zenith_angle = zenith_angle(
        observer.latitude, position.declination, position.hour_angle
    )
