"""Ninth-harmonic (D9) division of a sidereal longitude.

Arithmetic is done on whole arc-minutes so that segment boundaries
(multiples of 200') always fall into the later segment. Each sign holds
nine 3°20' navamsas; the first one starts at the sign given by
``NAVAMSA_START_SIGN`` (movable signs at themselves, fixed signs at the 9th,
dual signs at the 5th).
"""
from __future__ import annotations

from .ayanamsa import normalize360
from .schemas import NavamsaPosition
from .tables import NAVAMSA_START_SIGN, RASHIS
from .zodiac import arc_minutes

__all__ = [
    "MINUTES_PER_SIGN",
    "MINUTES_PER_NAVAMSA",
    "navamsa_sign_index",
    "navamsa_position",
    "is_vargottama",
]

MINUTES_PER_SIGN = 1800
MINUTES_PER_NAVAMSA = 200


def _split(longitude: float):
    total_minutes = arc_minutes(longitude)
    rasi = min(total_minutes // MINUTES_PER_SIGN, 11)
    minutes_in_rasi = total_minutes - rasi * MINUTES_PER_SIGN
    index = min(8, minutes_in_rasi // MINUTES_PER_NAVAMSA)
    return rasi, minutes_in_rasi, index


def navamsa_sign_index(longitude: float) -> int:
    """0-based D9 sign (0 = Aries)."""
    rasi, _minutes, index = _split(longitude)
    return (NAVAMSA_START_SIGN[rasi] + index) % 12


def navamsa_position(longitude: float) -> NavamsaPosition:
    rasi, minutes_in_rasi, index = _split(longitude)
    sign = (NAVAMSA_START_SIGN[rasi] + index) % 12
    degree_in_navamsa = (minutes_in_rasi % MINUTES_PER_NAVAMSA) / MINUTES_PER_NAVAMSA * 30.0
    return NavamsaPosition(
        longitude=normalize360(longitude),
        rasi_sign=rasi,
        rasi_sign_name=RASHIS[rasi].name,
        rasi_lord=RASHIS[rasi].lord,
        degree_in_rasi=minutes_in_rasi / 60.0,
        navamsa_index=index,
        navamsa_number=index + 1,
        navamsa_sign=sign,
        navamsa_sign_name=RASHIS[sign].name,
        navamsa_lord=RASHIS[sign].lord,
        degree_in_navamsa=degree_in_navamsa,
    )


def is_vargottama(longitude: float) -> bool:
    rasi, _minutes, _index = _split(longitude)
    return navamsa_sign_index(longitude) == rasi
