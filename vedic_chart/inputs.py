"""Validation of the two chart inputs: the UTC birth instant and the location."""
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Union

from .errors import InvalidCoordinate, InvalidInstant

__all__ = ["parse_instant", "validate_coordinate", "POLAR_LATITUDE_LIMIT"]

# Beyond this latitude the ascendant formula is numerically unstable.
POLAR_LATITUDE_LIMIT = 89.9


def parse_instant(
    value: Union[str, datetime],
    min_year: int = 1900,
    max_year: int = 2100,
) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Strings are ISO-8601 and must carry an offset or a trailing ``Z``; naive
    values are rejected because civil-time resolution happens upstream.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidInstant(f"Unparsable instant: {value!r}") from exc
    elif isinstance(value, datetime):
        dt = value
    else:
        raise InvalidInstant(f"Unsupported instant type: {type(value).__name__}")

    if dt.tzinfo is None or dt.utcoffset() is None:
        raise InvalidInstant(f"Instant must carry a UTC offset: {value!r}")
    dt = dt.astimezone(timezone.utc)
    if not min_year <= dt.year <= max_year:
        raise InvalidInstant(
            f"Year {dt.year} outside supported range {min_year}..{max_year}"
        )
    return dt


def validate_coordinate(latitude: float, longitude: float) -> None:
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinate(latitude, longitude, "not a number") from exc
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidCoordinate(latitude, longitude, "not finite")
    if not -90.0 <= lat <= 90.0:
        raise InvalidCoordinate(latitude, longitude, "latitude must be within [-90, 90]")
    if not -180.0 <= lon <= 180.0:
        raise InvalidCoordinate(latitude, longitude, "longitude must be within [-180, 180]")
