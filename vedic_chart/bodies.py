"""Closed set of chart bodies.

Grahas are the nine classical planets (lunar nodes included). Lagna and the
upagraha shadow points are chart points: they are placed in houses and in the
navamsa, but they never cast aspects and have no dignity.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple, Union

__all__ = [
    "Graha",
    "SpecialPoint",
    "Body",
    "CLASSICAL_GRAHAS",
    "LUNAR_NODES",
    "ALL_GRAHAS",
    "PLANET_ABBR",
    "body_from_name",
    "is_graha",
]


class Graha(str, Enum):
    SUN = "Sun"
    MOON = "Moon"
    MARS = "Mars"
    MERCURY = "Mercury"
    JUPITER = "Jupiter"
    VENUS = "Venus"
    SATURN = "Saturn"
    RAHU = "Rahu"
    KETU = "Ketu"


class SpecialPoint(str, Enum):
    LAGNA = "Lagna"
    MAANDHI = "Maandhi"


Body = Union[Graha, SpecialPoint]

# Bodies whose positions come from the ephemeris provider.
CLASSICAL_GRAHAS: Tuple[Graha, ...] = (
    Graha.SUN,
    Graha.MOON,
    Graha.MARS,
    Graha.MERCURY,
    Graha.JUPITER,
    Graha.VENUS,
    Graha.SATURN,
)
LUNAR_NODES: Tuple[Graha, ...] = (Graha.RAHU, Graha.KETU)
ALL_GRAHAS: Tuple[Graha, ...] = CLASSICAL_GRAHAS + LUNAR_NODES

PLANET_ABBR = {
    Graha.SUN: "Su",
    Graha.MOON: "Mo",
    Graha.MARS: "Ma",
    Graha.MERCURY: "Me",
    Graha.JUPITER: "Ju",
    Graha.VENUS: "Ve",
    Graha.SATURN: "Sa",
    Graha.RAHU: "Ra",
    Graha.KETU: "Ke",
    SpecialPoint.LAGNA: "La",
    SpecialPoint.MAANDHI: "Md",
}


def body_from_name(name: str) -> Body:
    """Resolve ``"Sun"``, ``"Ketu"``, ``"Lagna"`` ... to the enum member."""
    for enum_cls in (Graha, SpecialPoint):
        try:
            return enum_cls(name)
        except ValueError:
            continue
    raise ValueError(f"Unknown body: {name!r}")


def is_graha(body: Body) -> bool:
    return isinstance(body, Graha)
