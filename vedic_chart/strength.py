"""Basic planetary strength and D9 house strength.

The planet score starts at 50 and moves with dignity and retrogression;
the percentage clamps it to 0..100 and the scale maps that onto 0..5 in
steps of 20. A navamsa house is strong when its exalted and own-sign
occupants outnumber the debilitated ones.
"""
from __future__ import annotations

import math
from typing import Iterable

from .bodies import Graha
from .dignity import Dignity, HouseStrength, is_debilitated, is_exalted, is_own_sign
from .schemas import PlanetStrength

__all__ = [
    "BASE_STRENGTH",
    "basic_strength",
    "house_strength",
]

BASE_STRENGTH = 50
EXALTATION_BONUS = 50
DEBILITATION_PENALTY = 80
OWN_SIGN_BONUS = 30
RETROGRADE_BONUS = 20

# The luminaries never retrogress, so no bonus for them.
_LUMINARIES = (Graha.SUN, Graha.MOON)


def basic_strength(planet: Graha, sign: int, retrograde: bool = False) -> PlanetStrength:
    total = BASE_STRENGTH
    if is_exalted(planet, sign):
        total += EXALTATION_BONUS
    if is_debilitated(planet, sign):
        total -= DEBILITATION_PENALTY
    if is_own_sign(planet, sign):
        total += OWN_SIGN_BONUS
    if retrograde and planet not in _LUMINARIES:
        total += RETROGRADE_BONUS
    percentage = max(0, min(100, total))
    return PlanetStrength(total=total, percentage=percentage, scale=math.ceil(percentage / 20))


def house_strength(dignities: Iterable[Dignity]) -> HouseStrength:
    dignities = list(dignities)
    if not dignities:
        return HouseStrength.NEUTRAL
    strong = sum(1 for d in dignities if d in (Dignity.EXALTED, Dignity.OWN_SIGN))
    weak = sum(1 for d in dignities if d is Dignity.DEBILITATED)
    if strong > weak:
        return HouseStrength.STRONG
    if weak > strong:
        return HouseStrength.WEAK
    return HouseStrength.MODERATE
