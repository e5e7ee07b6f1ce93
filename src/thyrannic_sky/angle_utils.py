"""Degree-based trigonometry, angle normalization, and angle parsing/formatting.

Every numeric helper here is total: non-finite input yields a non-finite
result rather than an exception. The trig wrappers go through numpy because
the ``math`` module raises ``ValueError`` for ``sin(inf)`` or ``acos(1.0000001)``.
"""

from __future__ import annotations

import math
import re

import numpy as np

from thyrannic_sky.constants import (
    ARCMIN_PER_DEGREE,
    ARCSEC_PER_DEGREE,
    DEGREES_PER_CIRCLE,
    HALF_CIRCLE_DEGREES,
)

_DEG_PER_RAD = HALF_CIRCLE_DEGREES / math.pi
_RAD_PER_DEG = math.pi / HALF_CIRCLE_DEGREES


def rad2deg(x: float) -> float:
    """Convert radians to degrees."""
    return x * _DEG_PER_RAD


def deg2rad(x: float) -> float:
    """Convert degrees to radians."""
    return x * _RAD_PER_DEG


def fix_angle(x: float) -> float:
    """Normalize an angle in degrees to [0, 360)."""
    r = x % DEGREES_PER_CIRCLE
    # Tiny negative inputs round up to exactly 360.0
    if r == DEGREES_PER_CIRCLE:
        return 0.0
    return r


def fix_angle2(x: float) -> float:
    """Normalize an angle in degrees to (-180, 180]."""
    r = fix_angle(x)
    if r > HALF_CIRCLE_DEGREES:
        return r - DEGREES_PER_CIRCLE
    return r


def sin(x: float) -> float:
    """Sine of an angle in degrees."""
    with np.errstate(invalid='ignore'):
        return float(np.sin(deg2rad(x)))


def cos(x: float) -> float:
    """Cosine of an angle in degrees."""
    with np.errstate(invalid='ignore'):
        return float(np.cos(deg2rad(x)))


def atan2_deg(y: float, x: float) -> float:
    """Two-argument arctangent in degrees, in (-180, 180]."""
    return rad2deg(float(np.arctan2(y, x)))


def acos_deg(x: float) -> float:
    """Arccosine in degrees; finite arguments are clamped to [-1, 1]."""
    if math.isfinite(x):
        x = max(-1.0, min(1.0, x))
    with np.errstate(invalid='ignore'):
        return rad2deg(float(np.arccos(x)))


def sqrt(x: float) -> float:
    """Square root that returns NaN for negative or NaN input."""
    with np.errstate(invalid='ignore'):
        return float(np.sqrt(x))


def div_mod(a, b):
    """Return (floor(a / b), a mod b) with the remainder's sign following b.

    For positive b the remainder is non-negative even when a is negative, so
    ``div_mod(-1, 24) == (-1, 23)``. Integer arguments give integer results.
    """
    return a // b, a % b


def mod(a, b):
    """Remainder of floor division (non-negative for positive b)."""
    return a % b


def parse_angle(string: str) -> float | None:
    """Parse "deg [min [sec]]" text to degrees.

    Minutes and seconds must be non-negative; a leading minus applies to the
    whole angle.

    Parameters:
        string: Whitespace-separated numbers (e.g. "40 30" or "-5 30 15").

    Returns:
        Angle in degrees, or None on parse failure.
    """
    s = string.strip()
    if not s:
        return None
    parts = re.split(r'\s+', s)
    if len(parts) > 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = abs(values[0])
    for v, scale in zip(values[1:], (ARCMIN_PER_DEGREE, ARCSEC_PER_DEGREE)):
        angle += v / scale
    if s.startswith('-'):
        angle = -angle
    return angle


def dms_string(value: float, separator: str = 'dms', ndecimal: int = 1) -> str:
    """Format an angle in degrees as degrees, minutes, seconds.

    Parameters:
        value: Angle in degrees.
        separator: 3-character string of unit markers (e.g. 'dms' or ':: ').
        ndecimal: Decimal places for seconds.

    Returns:
        Formatted string (e.g. "-12d 30m 45.0s"). Non-finite values format as
        "nan" or "inf".
    """
    if not math.isfinite(value):
        return str(value)
    if len(separator) < 3:
        sep1 = sep2 = sep3 = ' '
    else:
        sep1, sep2, sep3 = separator[0], separator[1], separator[2]
    sign = '-' if value < 0 else ''
    scale = 10**ndecimal
    total = round(abs(value) * ARCSEC_PER_DEGREE * scale)
    whole_sec, frac = divmod(total, scale)
    minutes, sec = divmod(whole_sec, 60)
    deg, minutes = divmod(minutes, 60)
    sec_text = f'{sec:02d}'
    if ndecimal > 0:
        sec_text += f'.{frac:0{ndecimal}d}'
    return f'{sign}{deg}{sep1} {minutes:02d}{sep2} {sec_text}{sep3}'.rstrip()
