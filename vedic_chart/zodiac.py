"""Rashi / Nakshatra / pada lookup for a sidereal longitude."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .ayanamsa import normalize360
from .tables import NAKSHATRAS, RASHIS, Nakshatra, Rashi

__all__ = [
    "SIGN_SPAN",
    "NAKSHATRA_SPAN",
    "PADA_SPAN",
    "NakshatraPlacement",
    "rashi_number",
    "rashi_for",
    "degree_in_sign",
    "arc_minutes",
    "nakshatra_for",
    "format_dms",
]

SIGN_SPAN = 30.0
NAKSHATRA_SPAN = 360.0 / 27.0  # 13°20'
PADA_SPAN = NAKSHATRA_SPAN / 4.0  # 3°20'
MINUTES_PER_PADA = 200
# float rounding at exact boundaries such as 800 / 60
_MINUTE_EPSILON = 1e-9


@dataclass(frozen=True)
class NakshatraPlacement:
    nakshatra: Nakshatra
    pada: int


def rashi_number(longitude: float) -> int:
    """1-based sign number; contiguous 30° bands starting at 0° Aries."""
    lon = normalize360(longitude)
    return min(int(math.floor(lon / SIGN_SPAN)), 11) + 1


def rashi_for(longitude: float) -> Rashi:
    return RASHIS[rashi_number(longitude) - 1]


def degree_in_sign(longitude: float) -> float:
    return normalize360(longitude) % SIGN_SPAN


def arc_minutes(longitude: float) -> int:
    """Whole arc-minutes from 0° Aries, 0..21599."""
    return min(int(math.floor(normalize360(longitude) * 60.0 + _MINUTE_EPSILON)), 21599)


def nakshatra_for(longitude: float) -> NakshatraPlacement:
    """Nakshatra and pada from one quarter index, so both always agree."""
    quarter = arc_minutes(longitude) // MINUTES_PER_PADA
    index = min(quarter // 4, 26)
    return NakshatraPlacement(NAKSHATRAS[index], quarter % 4 + 1)


def format_dms(degree: float) -> str:
    """``12.5`` -> ``12°30'0"``; each component is truncated."""
    deg = int(math.floor(degree))
    minutes_float = (degree - deg) * 60.0
    minutes = int(math.floor(minutes_float))
    seconds = int(math.floor((minutes_float - minutes) * 60.0))
    return f"{deg}°{minutes}'{seconds}\""
