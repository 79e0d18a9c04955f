"""Lahiri ayanamsa and tropical -> sidereal conversion.

A single linear model is used everywhere in the package:

    ayanamsa = 22.46 + (year - 1900) * 50.26 / 3600

where ``year`` is the calendar year of the UTC birth instant.
"""
from __future__ import annotations

from datetime import datetime

__all__ = [
    "AYANAMSA_1900",
    "PRECESSION_ARCSEC_PER_YEAR",
    "lahiri_ayanamsa",
    "ayanamsa_for",
    "normalize360",
    "to_sidereal",
]

AYANAMSA_1900 = 22.46
PRECESSION_ARCSEC_PER_YEAR = 50.26


def lahiri_ayanamsa(year: int) -> float:
    return AYANAMSA_1900 + (year - 1900) * PRECESSION_ARCSEC_PER_YEAR / 3600.0


def ayanamsa_for(dt_utc: datetime) -> float:
    return lahiri_ayanamsa(dt_utc.year)


def normalize360(angle: float) -> float:
    """Map any finite angle into [0, 360)."""
    value = angle % 360.0
    # -1e-20 % 360.0 rounds to 360.0
    if value >= 360.0:
        value -= 360.0
    return value


def to_sidereal(tropical_longitude: float, ayanamsa: float) -> float:
    return normalize360(tropical_longitude - ayanamsa)
