"""Maandhi (Gulika): the rising degree at the midpoint of Saturn's segment.

Daytime (sunrise..sunset) and night (sunset..next sunrise) are each split
into eight equal segments. Which segment belongs to Maandhi depends on the
weekday of the local date on which the day or night began.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Dict, Optional, Tuple

import pytz

from .ascendant import sidereal_ascendant
from .errors import EphemerisUnavailable, InvalidInstant

logger = logging.getLogger(__name__)

__all__ = [
    "DAY_SEGMENT_BY_WEEKDAY",
    "NIGHT_SHIFT",
    "MaandhiPosition",
    "sunday_based_weekday",
    "segment_index",
    "segment_midpoint",
    "local_date",
    "calculate_maandhi",
]

# Sunday .. Saturday
DAY_SEGMENT_BY_WEEKDAY = (7, 6, 5, 4, 3, 2, 1)
NIGHT_SHIFT = 4
SEGMENTS = 8

SunTimes = Callable[[datetime, datetime, float, float], Tuple[Optional[datetime], Optional[datetime]]]


@dataclass(frozen=True)
class MaandhiPosition:
    instant: datetime
    longitude: float
    is_night: bool
    segment: int
    approximate: bool = False


def sunday_based_weekday(day: date) -> int:
    """0 = Sunday .. 6 = Saturday."""
    return (day.weekday() + 1) % 7


def segment_index(day: date, night: bool = False) -> int:
    index = DAY_SEGMENT_BY_WEEKDAY[sunday_based_weekday(day)]
    if night:
        index = ((index + NIGHT_SHIFT - 1) % SEGMENTS) + 1
    return index


def segment_midpoint(start: datetime, end: datetime, index: int) -> datetime:
    return start + (end - start) * ((index - 0.5) / SEGMENTS)


def _zone(tz_name: Optional[str], longitude: float = 0.0):
    """Named zone, or local mean time (longitude / 15 hours) when none is given."""
    if not tz_name:
        return pytz.FixedOffset(int(round(longitude * 4.0)))
    try:
        return pytz.timezone(tz_name)
    except pytz.exceptions.UnknownTimeZoneError as exc:
        raise InvalidInstant(f"Unknown time zone: {tz_name!r}") from exc


def local_date(instant: datetime, tz_name: Optional[str] = None, longitude: float = 0.0) -> date:
    return instant.astimezone(_zone(tz_name, longitude)).date()


class _SunCalendar:
    """Sunrise/sunset per local date, with the polar 06:00/18:00 UTC fallback."""

    def __init__(self, sun_times: Optional[SunTimes], zone, latitude: float, longitude: float):
        self.sun_times = sun_times
        self.zone = zone
        self.latitude = latitude
        self.longitude = longitude
        self.approximate = False
        self._cache: Dict[date, Tuple[datetime, datetime]] = {}

    def _window(self, day: date) -> Tuple[datetime, datetime]:
        start = self.zone.localize(datetime.combine(day, time()))
        end = self.zone.localize(datetime.combine(day + timedelta(days=1), time()))
        return start.astimezone(timezone.utc), end.astimezone(timezone.utc)

    def __call__(self, day: date) -> Tuple[datetime, datetime]:
        if day in self._cache:
            return self._cache[day]
        sunrise = sunset = None
        if self.sun_times is not None:
            try:
                sunrise, sunset = self.sun_times(*self._window(day), self.latitude, self.longitude)
            except EphemerisUnavailable as exc:
                logger.warning("Sun times unavailable for %s: %s", day.isoformat(), exc)
        if sunrise is None or sunset is None:
            logger.warning("No sunrise/sunset on %s at (%s, %s); using 06:00/18:00 UTC",
                           day.isoformat(), self.latitude, self.longitude)
            self.approximate = True
            if sunrise is None:
                sunrise = datetime.combine(day, time(6), tzinfo=timezone.utc)
            if sunset is None:
                sunset = datetime.combine(day, time(18), tzinfo=timezone.utc)
        self._cache[day] = (sunrise, sunset)
        return sunrise, sunset


def calculate_maandhi(
    instant: datetime,
    latitude: float,
    longitude: float,
    sun_times: Optional[SunTimes] = None,
    tz_name: Optional[str] = None,
) -> MaandhiPosition:
    """Locate Maandhi for a UTC birth instant.

    ``sun_times(start, end, lat, lon)`` returns the first sunrise and sunset
    inside the UTC window of one local day (None for a missing event). The
    local day follows ``tz_name``, or local mean time at ``longitude`` when no
    zone is given. Without ``sun_times``, or when it raises
    ``EphemerisUnavailable``, the day uses the 06:00/18:00 UTC approximation.
    """
    zone = _zone(tz_name, longitude)
    calendar = _SunCalendar(sun_times, zone, latitude, longitude)
    today = instant.astimezone(zone).date()
    sunrise, sunset = calendar(today)

    if sunrise <= instant < sunset:
        start, end, night, anchor = sunrise, sunset, False, today
    elif instant >= sunset:
        tomorrow = today + timedelta(days=1)
        start, end, night, anchor = sunset, calendar(tomorrow)[0], True, today
    else:
        yesterday = today - timedelta(days=1)
        start, end, night, anchor = calendar(yesterday)[1], sunrise, True, yesterday

    index = segment_index(anchor, night)
    moment = segment_midpoint(start, end, index)
    logger.debug("Maandhi segment %d of %s (%s) -> %s", index,
                 "night" if night else "day", anchor.isoformat(), moment.isoformat())
    return MaandhiPosition(
        instant=moment,
        longitude=sidereal_ascendant(moment, latitude, longitude),
        is_night=night,
        segment=index,
        approximate=calendar.approximate,
    )
