"""Sidereal ascendant (Lagna) from a UTC instant and a location.

All angles are in degrees; sidereal time is kept in degrees throughout
(east longitude positive).
"""
from __future__ import annotations

import math
from datetime import datetime

from .ayanamsa import ayanamsa_for, normalize360, to_sidereal
from .errors import ComputationDegenerate
from .inputs import POLAR_LATITUDE_LIMIT
from .timescale import J2000_JD, julian_centuries, julian_day

__all__ = [
    "gmst_degrees",
    "local_sidereal_time",
    "mean_obliquity",
    "tropical_ascendant",
    "sidereal_ascendant",
]


def gmst_degrees(jd: float) -> float:
    """Greenwich mean sidereal time for a UT Julian day."""
    t = julian_centuries(jd)
    gmst = (
        280.46061837
        + 360.98564736629 * (jd - J2000_JD)
        + 0.000387933 * t ** 2
        - t ** 3 / 38710000.0
    )
    return normalize360(gmst)


def local_sidereal_time(jd: float, longitude: float) -> float:
    return normalize360(gmst_degrees(jd) + longitude)


def mean_obliquity(t: float) -> float:
    return 23.439291 - 0.0130042 * t


def tropical_ascendant(lst: float, latitude: float, obliquity: float) -> float:
    """Ecliptic longitude rising on the eastern horizon."""
    if abs(latitude) > POLAR_LATITUDE_LIMIT:
        raise ComputationDegenerate(
            f"Ascendant undefined at latitude {latitude} (|lat| > {POLAR_LATITUDE_LIMIT})"
        )
    ramc = math.radians(lst)
    eps = math.radians(obliquity)
    phi = math.radians(latitude)
    asc = math.atan2(
        math.cos(ramc),
        -math.sin(ramc) * math.cos(eps) - math.tan(phi) * math.sin(eps),
    )
    return normalize360(math.degrees(asc))


def sidereal_ascendant(dt: datetime, latitude: float, longitude: float) -> float:
    jd = julian_day(dt)
    lst = local_sidereal_time(jd, longitude)
    tropical = tropical_ascendant(lst, latitude, mean_obliquity(julian_centuries(jd)))
    return to_sidereal(tropical, ayanamsa_for(dt))
