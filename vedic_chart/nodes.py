"""Calculate lunar node (Rahu/Ketu) positions.

Rahu is the mean ascending node corrected by the principal periodic terms
of the lunar orbit and by nutation in longitude; Ketu is always exactly
opposite. When the corrected series is disabled or yields a non-finite
value the mean node alone is used and the result is flagged approximate.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from .ayanamsa import ayanamsa_for, normalize360
from .timescale import julian_centuries, julian_day

logger = logging.getLogger(__name__)

__all__ = [
    "NODE_DAILY_MOTION",
    "NodePositions",
    "mean_node_longitude",
    "fundamental_arguments",
    "periodic_correction",
    "nutation_in_longitude",
    "true_node_longitude",
    "calculate_nodes",
]

# Mean regression of the node, degrees per day.
NODE_DAILY_MOTION = -0.05295779

# Periodic terms in arcseconds; multipliers of (D, M, M', F).
_PERIODIC_COEFFS = np.array(
    [-1.274, 0.658, -0.186, -0.059, -0.057, 0.053, 0.046, 0.041, -0.035, -0.031]
)
_PERIODIC_ARGS = np.array(
    [
        [-2, 0, 1, 0],
        [-2, 0, 0, 0],
        [0, 1, 0, 0],
        [-2, 0, 2, 0],
        [-2, 1, 1, 0],
        [2, 0, 1, 0],
        [2, -1, 0, 0],
        [0, -1, 1, 0],
        [1, 0, 0, 0],
        [0, 1, 1, 0],
    ],
    dtype=float,
)

# Nutation in longitude, units of 0.0001"; multipliers of (D, M, M', F, Omega).
_NUTATION_COEFFS = np.array(
    [-171996, -13187, -2274, 2062, 1426, 712, -517, -386, -301], dtype=float
)
_NUTATION_ARGS = np.array(
    [
        [0, 0, 0, 0, 1],
        [-2, 0, 0, 2, 2],
        [0, 0, 0, 2, 2],
        [0, 0, 0, 0, 2],
        [0, 1, 0, 0, 0],
        [0, 0, 2, -2, 2],
        [-2, 1, 0, 2, 2],
        [0, 0, 2, 0, 2],
        [0, 0, 1, 0, 0],
    ],
    dtype=float,
)


@dataclass(frozen=True)
class NodePositions:
    rahu: float
    ketu: float
    approximate: bool = False
    speed: float = NODE_DAILY_MOTION


def mean_node_longitude(t: float) -> float:
    """Tropical mean ascending node in degrees (not normalized)."""
    return (
        125.0445479
        - 1934.1362891 * t
        + 0.0020754 * t ** 2
        + t ** 3 / 467441.0
        - t ** 4 / 60616000.0
    )


def fundamental_arguments(t: float) -> np.ndarray:
    """Mean elongation D, solar anomaly M, lunar anomaly M' and argument F."""
    d = 297.8501921 + 445267.1114034 * t - 0.0018819 * t ** 2 + t ** 3 / 545868.0 - t ** 4 / 113065000.0
    m = 357.5291092 + 35999.0502909 * t - 0.0001536 * t ** 2 + t ** 3 / 24490000.0
    mp = 134.9633964 + 477198.8675055 * t + 0.0087414 * t ** 2 + t ** 3 / 69699.0 - t ** 4 / 14712000.0
    f = 93.2720950 + 483202.0175233 * t - 0.0036539 * t ** 2 - t ** 3 / 3526000.0 + t ** 4 / 863310000.0
    return np.array([d, m, mp, f])


def periodic_correction(t: float) -> float:
    """Sum of the periodic node terms, degrees."""
    args = np.radians(_PERIODIC_ARGS @ fundamental_arguments(t))
    return float(np.sum(_PERIODIC_COEFFS * np.sin(args))) / 3600.0


def nutation_in_longitude(t: float) -> float:
    """Nutation in longitude, degrees (low-precision linear arguments)."""
    d = 297.8501921 + 445267.1114034 * t
    m = 357.5291092 + 35999.0502909 * t
    mp = 134.9633964 + 477198.8675055 * t
    f = 93.2720950 + 483202.0175233 * t
    omega = 125.04452 - 1934.136261 * t
    args = np.radians(_NUTATION_ARGS @ np.array([d, m, mp, f, omega]))
    return float(np.sum(_NUTATION_COEFFS * np.sin(args))) * 0.0001 / 3600.0


def true_node_longitude(t: float) -> float:
    """Tropical node longitude with periodic and nutation corrections."""
    return normalize360(mean_node_longitude(t) + periodic_correction(t) + nutation_in_longitude(t))


def _opposite(rahu: float) -> float:
    return normalize360(rahu + 180.0)


def calculate_nodes(dt: datetime, periodic_terms: bool = True) -> NodePositions:
    """Calculate sidereal Rahu and Ketu for a UTC datetime."""
    t = julian_centuries(julian_day(dt))
    ayanamsa = ayanamsa_for(dt)

    approximate = not periodic_terms
    tropical = true_node_longitude(t) if periodic_terms else float("nan")
    if not math.isfinite(tropical):
        if periodic_terms:
            logger.warning("Node periodic terms not finite at %s; using mean node", dt.isoformat())
        approximate = True
        tropical = normalize360(mean_node_longitude(t))

    rahu = normalize360(tropical - ayanamsa)
    return NodePositions(rahu=rahu, ketu=_opposite(rahu), approximate=approximate)
