"""Dignity tier and sign-lord relationship of a graha.

The tier is resolved in priority order Exalted > Debilitated > OwnSign >
Moolatrikona > Normal at whole-sign granularity (moolatrikona also checks the
degree window). The relationship is independent: it compares the graha with
the lord of the sign it occupies. Lagna and shadow points get
``NOT_APPLICABLE`` for both.
"""
from __future__ import annotations

from enum import Enum

from .bodies import Body, Graha
from .tables import (
    DEBILITATION_SIGN,
    EXALTATION_SIGN,
    FRIENDSHIPS,
    MOOLATRIKONA,
    OWN_SIGNS,
    SIGN_LORDS,
)

__all__ = [
    "Dignity",
    "Relationship",
    "HouseStrength",
    "is_exalted",
    "is_debilitated",
    "is_own_sign",
    "is_moolatrikona",
    "classify_dignity",
    "relationship_to",
    "relationship_in_sign",
]


class Dignity(str, Enum):
    EXALTED = "Exalted"
    DEBILITATED = "Debilitated"
    OWN_SIGN = "Own Sign"
    MOOLATRIKONA = "Moolatrikona"
    NORMAL = "Normal"
    NOT_APPLICABLE = "Not Applicable"


class Relationship(str, Enum):
    FRIEND = "Friend"
    ENEMY = "Enemy"
    NEUTRAL = "Neutral"
    NOT_APPLICABLE = "Not Applicable"


class HouseStrength(str, Enum):
    STRONG = "Strong"
    WEAK = "Weak"
    MODERATE = "Moderate"
    NEUTRAL = "Neutral"


def is_exalted(planet: Graha, sign: int) -> bool:
    return EXALTATION_SIGN.get(planet) == sign


def is_debilitated(planet: Graha, sign: int) -> bool:
    return DEBILITATION_SIGN.get(planet) == sign


def is_own_sign(planet: Graha, sign: int) -> bool:
    return sign in OWN_SIGNS.get(planet, ())


def is_moolatrikona(planet: Graha, sign: int, degree: float) -> bool:
    window = MOOLATRIKONA.get(planet)
    if window is None or window.sign != sign:
        return False
    return window.start_deg <= degree <= window.end_deg


def classify_dignity(body: Body, sign: int, degree: float) -> Dignity:
    if not isinstance(body, Graha):
        return Dignity.NOT_APPLICABLE
    if is_exalted(body, sign):
        return Dignity.EXALTED
    if is_debilitated(body, sign):
        return Dignity.DEBILITATED
    if is_own_sign(body, sign):
        return Dignity.OWN_SIGN
    if is_moolatrikona(body, sign, degree):
        return Dignity.MOOLATRIKONA
    return Dignity.NORMAL


def relationship_to(body: Body, lord: Graha) -> Relationship:
    if not isinstance(body, Graha):
        return Relationship.NOT_APPLICABLE
    table = FRIENDSHIPS[body]
    if lord in table.friends:
        return Relationship.FRIEND
    if lord in table.enemies:
        return Relationship.ENEMY
    return Relationship.NEUTRAL


def relationship_in_sign(body: Body, sign: int) -> Relationship:
    return relationship_to(body, SIGN_LORDS[sign])
