"""Vedic drishti: which houses a graha aspects from its own house.

Offsets count houses forward from the occupied one (6 -> the 7th house).
Every graha aspects its 7th; Mars adds the 4th and 8th, Jupiter the 5th and
9th, Saturn the 3rd and 10th. Lagna and shadow points cast no aspect.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from .bodies import Body, Graha

__all__ = ["SEVENTH_OFFSET", "SPECIAL_ASPECT_OFFSETS", "aspect_offsets", "aspected_houses", "aspecting_map"]

SEVENTH_OFFSET = 6

SPECIAL_ASPECT_OFFSETS: Mapping[Graha, Tuple[int, ...]] = MappingProxyType({
    Graha.MARS: (3, 7),
    Graha.JUPITER: (4, 8),
    Graha.SATURN: (2, 9),
})


def aspect_offsets(body: Body) -> Tuple[int, ...]:
    if not isinstance(body, Graha):
        return ()
    return (SEVENTH_OFFSET,) + SPECIAL_ASPECT_OFFSETS.get(body, ())


def aspected_houses(body: Body, house: int) -> Tuple[int, ...]:
    if not 1 <= house <= 12:
        raise ValueError(f"House out of range: {house}")
    return tuple(((house + offset - 1) % 12) + 1 for offset in aspect_offsets(body))


def aspecting_map(placements: Iterable[Tuple[Body, int]]) -> Dict[int, List[Body]]:
    """house -> grahas aspecting it, in placement order."""
    result: Dict[int, List[Body]] = {house: [] for house in range(1, 13)}
    for body, house in placements:
        for target in aspected_houses(body, house):
            result[target].append(body)
    return result
