"""Julian day arithmetic on UTC instants."""
from __future__ import annotations

import warnings
from datetime import datetime, timezone

from astropy.time import Time
from erfa import ErfaWarning

__all__ = ["J2000_JD", "DAYS_PER_CENTURY", "julian_day", "julian_centuries"]

J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return dt.astimezone(timezone.utc)


def julian_day(dt: datetime) -> float:
    """Julian Day (UTC scale) of an aware datetime."""
    with warnings.catch_warnings():
        # dtf2d flags pre-1960 and far-future UTC as "dubious year"; the
        # civil JD is still exact for our purposes.
        warnings.simplefilter("ignore", ErfaWarning)
        t = Time(_as_utc(dt), scale="utc")
        return float(t.jd1) + float(t.jd2)


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - J2000_JD) / DAYS_PER_CENTURY

