"""Sidereal (Lahiri) Vedic birth charts: D1 houses, navamsa, dignities and aspects."""

from .errors import (
    ChartError,
    ComputationDegenerate,
    EphemerisUnavailable,
    InvalidCoordinate,
    InvalidInstant,
)
from .jyotish import assemble_chart, compute_chart
from .schemas import BirthChart, ChartRequest, NavamsaChart, VedicChart

__all__ = [
    "ChartError",
    "ComputationDegenerate",
    "EphemerisUnavailable",
    "InvalidCoordinate",
    "InvalidInstant",
    "assemble_chart",
    "compute_chart",
    "BirthChart",
    "ChartRequest",
    "NavamsaChart",
    "VedicChart",
]
