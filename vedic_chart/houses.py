"""Whole-sign houses anchored on the ascendant's sign."""
from __future__ import annotations

from typing import Dict, List, Mapping, Tuple, TypeVar

__all__ = ["house_signs", "house_for_sign", "assign_houses"]

K = TypeVar("K")


def _check_sign(sign: int) -> None:
    if not 1 <= sign <= 12:
        raise ValueError(f"Rashi number out of range: {sign}")


def house_signs(ascendant_rashi: int) -> Tuple[int, ...]:
    """Sign number of houses 1..12; house 1 is the ascendant's sign."""
    _check_sign(ascendant_rashi)
    return tuple(((ascendant_rashi + k - 2) % 12) + 1 for k in range(1, 13))


def house_for_sign(sign: int, ascendant_rashi: int) -> int:
    _check_sign(sign)
    _check_sign(ascendant_rashi)
    return ((sign - ascendant_rashi) % 12) + 1


def assign_houses(ascendant_rashi: int, signs: Mapping[K, int]) -> Dict[int, List[K]]:
    """Group bodies by house; insertion order of ``signs`` is preserved."""
    occupants: Dict[int, List[K]] = {house: [] for house in range(1, 13)}
    for body, sign in signs.items():
        occupants[house_for_sign(sign, ascendant_rashi)].append(body)
    return occupants
