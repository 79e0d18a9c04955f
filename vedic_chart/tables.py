"""Static reference tables: signs, lunar mansions and planetary dignities.

Everything here is read-only process-wide data (tuples, frozen dataclasses and
``MappingProxyType`` views). Sign indices in the ``*_SIGN*`` maps are
1-based Rashi numbers unless a name says otherwise.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from .bodies import Graha

__all__ = [
    "Element",
    "Modality",
    "Rashi",
    "Nakshatra",
    "Moolatrikona",
    "Friendship",
    "RASHIS",
    "NAKSHATRAS",
    "SIGN_LORDS",
    "NAVAMSA_START_SIGN",
    "EXALTATION_SIGN",
    "DEBILITATION_SIGN",
    "OWN_SIGNS",
    "MOOLATRIKONA",
    "FRIENDSHIPS",
    "rashi_by_number",
]


class Element(str, Enum):
    FIRE = "Fire"
    EARTH = "Earth"
    AIR = "Air"
    WATER = "Water"


class Modality(str, Enum):
    MOVABLE = "Movable"  # chara
    FIXED = "Fixed"  # sthira
    DUAL = "Dual"  # dwiswabhava


@dataclass(frozen=True)
class Rashi:
    number: int
    name: str
    english: str
    lord: Graha
    element: Element
    modality: Modality


@dataclass(frozen=True)
class Nakshatra:
    number: int
    name: str
    lord: Graha
    deity: str


@dataclass(frozen=True)
class Moolatrikona:
    sign: int
    start_deg: float
    end_deg: float


@dataclass(frozen=True)
class Friendship:
    friends: Tuple[Graha, ...]
    neutrals: Tuple[Graha, ...]
    enemies: Tuple[Graha, ...]


_G = Graha
_E = Element
_M = Modality

RASHIS: Tuple[Rashi, ...] = (
    Rashi(1, "Mesha", "Aries", _G.MARS, _E.FIRE, _M.MOVABLE),
    Rashi(2, "Vrishabha", "Taurus", _G.VENUS, _E.EARTH, _M.FIXED),
    Rashi(3, "Mithuna", "Gemini", _G.MERCURY, _E.AIR, _M.DUAL),
    Rashi(4, "Karka", "Cancer", _G.MOON, _E.WATER, _M.MOVABLE),
    Rashi(5, "Simha", "Leo", _G.SUN, _E.FIRE, _M.FIXED),
    Rashi(6, "Kanya", "Virgo", _G.MERCURY, _E.EARTH, _M.DUAL),
    Rashi(7, "Tula", "Libra", _G.VENUS, _E.AIR, _M.MOVABLE),
    Rashi(8, "Vrishchika", "Scorpio", _G.MARS, _E.WATER, _M.FIXED),
    Rashi(9, "Dhanu", "Sagittarius", _G.JUPITER, _E.FIRE, _M.DUAL),
    Rashi(10, "Makara", "Capricorn", _G.SATURN, _E.EARTH, _M.MOVABLE),
    Rashi(11, "Kumbha", "Aquarius", _G.SATURN, _E.AIR, _M.FIXED),
    Rashi(12, "Meena", "Pisces", _G.JUPITER, _E.WATER, _M.DUAL),
)

NAKSHATRAS: Tuple[Nakshatra, ...] = (
    Nakshatra(1, "Ashwini", _G.KETU, "Ashwini Kumaras"),
    Nakshatra(2, "Bharani", _G.VENUS, "Yama"),
    Nakshatra(3, "Krittika", _G.SUN, "Agni"),
    Nakshatra(4, "Rohini", _G.MOON, "Brahma"),
    Nakshatra(5, "Mrigashira", _G.MARS, "Soma"),
    Nakshatra(6, "Ardra", _G.RAHU, "Rudra"),
    Nakshatra(7, "Punarvasu", _G.JUPITER, "Aditi"),
    Nakshatra(8, "Pushya", _G.SATURN, "Brihaspati"),
    Nakshatra(9, "Ashlesha", _G.MERCURY, "Sarpa"),
    Nakshatra(10, "Magha", _G.KETU, "Pitrs"),
    Nakshatra(11, "Purva Phalguni", _G.VENUS, "Bhaga"),
    Nakshatra(12, "Uttara Phalguni", _G.SUN, "Aryaman"),
    Nakshatra(13, "Hasta", _G.MOON, "Savitar"),
    Nakshatra(14, "Chitra", _G.MARS, "Vishvakarma"),
    Nakshatra(15, "Swati", _G.RAHU, "Vayu"),
    Nakshatra(16, "Vishakha", _G.JUPITER, "Indra-Agni"),
    Nakshatra(17, "Anuradha", _G.SATURN, "Mitra"),
    Nakshatra(18, "Jyeshtha", _G.MERCURY, "Indra"),
    Nakshatra(19, "Mula", _G.KETU, "Nirriti"),
    Nakshatra(20, "Purva Ashadha", _G.VENUS, "Apas"),
    Nakshatra(21, "Uttara Ashadha", _G.SUN, "Vishve Devah"),
    Nakshatra(22, "Shravana", _G.MOON, "Vishnu"),
    Nakshatra(23, "Dhanishta", _G.MARS, "Vasu"),
    Nakshatra(24, "Shatabhisha", _G.RAHU, "Varuna"),
    Nakshatra(25, "Purva Bhadrapada", _G.JUPITER, "Aja Ekapada"),
    Nakshatra(26, "Uttara Bhadrapada", _G.SATURN, "Ahir Budhnya"),
    Nakshatra(27, "Revati", _G.MERCURY, "Pushan"),
)

SIGN_LORDS: Mapping[int, Graha] = MappingProxyType({r.number: r.lord for r in RASHIS})

# 0-based sign -> 0-based sign of the first navamsa. Movable signs start from
# themselves, fixed signs from their 9th, dual signs from their 5th.
NAVAMSA_START_SIGN: Tuple[int, ...] = (0, 9, 6, 3, 0, 9, 6, 3, 0, 9, 6, 3)

EXALTATION_SIGN: Mapping[Graha, int] = MappingProxyType({
    _G.SUN: 1,
    _G.MOON: 2,
    _G.MARS: 10,
    _G.MERCURY: 6,
    _G.JUPITER: 4,
    _G.VENUS: 12,
    _G.SATURN: 7,
    _G.RAHU: 2,
    _G.KETU: 8,
})

# Always the sign opposite the exaltation sign.
DEBILITATION_SIGN: Mapping[Graha, int] = MappingProxyType({
    planet: (sign + 5) % 12 + 1 for planet, sign in EXALTATION_SIGN.items()
})

OWN_SIGNS: Mapping[Graha, Tuple[int, ...]] = MappingProxyType({
    _G.SUN: (5,),
    _G.MOON: (4,),
    _G.MARS: (1, 8),
    _G.MERCURY: (3, 6),
    _G.JUPITER: (9, 12),
    _G.VENUS: (2, 7),
    _G.SATURN: (10, 11),
    _G.RAHU: (),
    _G.KETU: (),
})

# Inclusive degree windows inside the sign.
MOOLATRIKONA: Mapping[Graha, Moolatrikona] = MappingProxyType({
    _G.SUN: Moolatrikona(5, 0.0, 20.0),
    _G.MOON: Moolatrikona(4, 4.0, 30.0),
    _G.MARS: Moolatrikona(1, 0.0, 12.0),
    _G.MERCURY: Moolatrikona(6, 16.0, 20.0),
    _G.JUPITER: Moolatrikona(9, 0.0, 10.0),
    _G.VENUS: Moolatrikona(7, 0.0, 15.0),
    _G.SATURN: Moolatrikona(11, 0.0, 20.0),
})

FRIENDSHIPS: Mapping[Graha, Friendship] = MappingProxyType({
    _G.SUN: Friendship(
        friends=(_G.MOON, _G.MARS, _G.JUPITER),
        neutrals=(_G.MERCURY,),
        enemies=(_G.VENUS, _G.SATURN),
    ),
    _G.MOON: Friendship(
        friends=(_G.SUN, _G.MERCURY),
        neutrals=(_G.MARS, _G.JUPITER, _G.VENUS, _G.SATURN),
        enemies=(),
    ),
    _G.MARS: Friendship(
        friends=(_G.SUN, _G.MOON, _G.JUPITER),
        neutrals=(_G.VENUS, _G.SATURN),
        enemies=(_G.MERCURY,),
    ),
    _G.MERCURY: Friendship(
        friends=(_G.SUN, _G.VENUS),
        neutrals=(_G.MARS, _G.JUPITER, _G.SATURN),
        enemies=(_G.MOON,),
    ),
    _G.JUPITER: Friendship(
        friends=(_G.SUN, _G.MOON, _G.MARS),
        neutrals=(_G.SATURN,),
        enemies=(_G.MERCURY, _G.VENUS),
    ),
    _G.VENUS: Friendship(
        friends=(_G.MERCURY, _G.SATURN),
        neutrals=(_G.MARS, _G.JUPITER),
        enemies=(_G.SUN, _G.MOON),
    ),
    _G.SATURN: Friendship(
        friends=(_G.MERCURY, _G.VENUS),
        neutrals=(_G.JUPITER,),
        enemies=(_G.SUN, _G.MOON, _G.MARS),
    ),
    _G.RAHU: Friendship(
        friends=(_G.VENUS, _G.SATURN),
        neutrals=(_G.MERCURY, _G.JUPITER),
        enemies=(_G.SUN, _G.MOON, _G.MARS),
    ),
    _G.KETU: Friendship(
        friends=(_G.MARS, _G.JUPITER),
        neutrals=(_G.VENUS, _G.SATURN),
        enemies=(_G.SUN, _G.MOON, _G.MERCURY),
    ),
})


def rashi_by_number(number: int) -> Rashi:
    if not 1 <= number <= 12:
        raise ValueError(f"Rashi number out of range: {number}")
    return RASHIS[number - 1]
