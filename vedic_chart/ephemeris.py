"""Tropical ecliptic positions of the seven classical grahas.

``SkyfieldEphemeris`` reads a JPL kernel through skyfield and reports the
apparent geocentric position on the ecliptic of date. ``MeanMotionEphemeris``
is the deterministic stand-in used for a body whose lookup failed.
"""
from __future__ import annotations

import logging
import math
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Iterable, Optional, Protocol, Tuple

from skyfield import almanac
from skyfield.api import Loader, wgs84

from .ayanamsa import normalize360
from .bodies import CLASSICAL_GRAHAS, Graha
from .errors import EphemerisUnavailable
from .resource_paths import get_resource_root, resource_path
from .timescale import J2000_JD, julian_day

logger = logging.getLogger(__name__)

__all__ = [
    "EclipticPosition",
    "PositionProvider",
    "SkyfieldEphemeris",
    "MeanMotionEphemeris",
    "MEAN_ELEMENTS",
    "fetch_positions",
]

_KERNEL_NAMES = {
    Graha.SUN: "sun",
    Graha.MOON: "moon",
    Graha.MERCURY: "mercury",
    Graha.VENUS: "venus",
    Graha.MARS: "mars",
    Graha.JUPITER: "jupiter barycenter",
    Graha.SATURN: "saturn barycenter",
}

# J2000 mean longitude (deg) and mean daily motion (deg/day).
MEAN_ELEMENTS: Dict[Graha, Tuple[float, float]] = {
    Graha.SUN: (280.46646, 0.98564736),
    Graha.MOON: (218.3164477, 13.17639648),
    Graha.MERCURY: (252.250906, 4.0923388),
    Graha.VENUS: (181.979801, 1.6021305),
    Graha.MARS: (355.433, 0.5240328),
    Graha.JUPITER: (34.351519, 0.0830912),
    Graha.SATURN: (50.077444, 0.0334597),
}

_SPEED_STEP = timedelta(hours=1)


@dataclass(frozen=True)
class EclipticPosition:
    longitude: float  # tropical, [0, 360)
    latitude: float = 0.0
    speed: float = 0.0  # deg/day

    @property
    def is_retrograde(self) -> bool:
        return self.speed < 0


class PositionProvider(Protocol):
    def get_position(self, body: Graha, instant: datetime) -> EclipticPosition:
        """Tropical position of ``body`` at the aware UTC ``instant``.

        Raises:
            EphemerisUnavailable: when the body or instant is not covered.
        """


def _signed_delta(later: float, earlier: float) -> float:
    return (later - earlier + 180.0) % 360.0 - 180.0


class SkyfieldEphemeris:
    """Apparent geocentric positions from a JPL kernel (DE421 by default)."""

    def __init__(self, ephemeris_file: str = "de421.bsp", data_dir: Optional[str] = None):
        self.ephemeris_file = ephemeris_file
        self.data_dir = data_dir or str(get_resource_root())
        self._lock = threading.Lock()
        self._eph = None
        self._ts = None

    def _load(self):
        with self._lock:
            if self._eph is None:
                loader = Loader(self.data_dir)
                self._ts = loader.timescale()
                self._eph = loader(str(resource_path(self.ephemeris_file)))
        return self._eph, self._ts

    def _longitude_latitude(self, key: str, instant: datetime) -> Tuple[float, float]:
        eph, ts = self._load()
        t = ts.from_datetime(instant)
        apparent = eph["earth"].at(t).observe(eph[key]).apparent()
        lat, lon, _distance = apparent.ecliptic_latlon(epoch="date")
        return normalize360(float(lon.degrees)), float(lat.degrees)

    def get_position(self, body: Graha, instant: datetime) -> EclipticPosition:
        key = _KERNEL_NAMES.get(body)
        if key is None:
            raise EphemerisUnavailable(body.value, "not an ephemeris body")
        try:
            lon, lat = self._longitude_latitude(key, instant)
            before, _ = self._longitude_latitude(key, instant - _SPEED_STEP)
            after, _ = self._longitude_latitude(key, instant + _SPEED_STEP)
        except (OSError, KeyError, ValueError) as exc:
            raise EphemerisUnavailable(body.value, str(exc)) from exc
        speed = _signed_delta(after, before) / (2 * _SPEED_STEP / timedelta(days=1))
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise EphemerisUnavailable(body.value, "non-finite position")
        return EclipticPosition(longitude=lon, latitude=lat, speed=speed)

    def sun_times(
        self, start: datetime, end: datetime, latitude: float, longitude: float
    ) -> Tuple[Optional[datetime], Optional[datetime]]:
        """First sunrise and first sunset within [start, end); None when absent."""
        try:
            eph, ts = self._load()
            rising = almanac.sunrise_sunset(eph, wgs84.latlon(latitude, longitude))
            times, events = almanac.find_discrete(ts.from_datetime(start), ts.from_datetime(end), rising)
        except (OSError, KeyError, ValueError) as exc:
            raise EphemerisUnavailable("Sun", str(exc)) from exc
        sunrise = sunset = None
        for t, is_up in zip(times, events):
            if is_up and sunrise is None:
                sunrise = t.utc_datetime()
            elif not is_up and sunset is None:
                sunset = t.utc_datetime()
        return sunrise, sunset


class MeanMotionEphemeris:
    """Linear mean-longitude model; latitude is taken as zero."""

    def get_position(self, body: Graha, instant: datetime) -> EclipticPosition:
        try:
            l0, rate = MEAN_ELEMENTS[body]
        except KeyError:
            raise EphemerisUnavailable(body.value, "no mean elements") from None
        days = julian_day(instant) - J2000_JD
        return EclipticPosition(longitude=normalize360(l0 + rate * days), latitude=0.0, speed=rate)


_FALLBACK = MeanMotionEphemeris()


def _position_or_fallback(
    provider: PositionProvider, body: Graha, instant: datetime
) -> Tuple[EclipticPosition, bool]:
    try:
        return provider.get_position(body, instant), False
    except EphemerisUnavailable as exc:
        logger.warning("%s at %s; using mean motion", exc, instant.isoformat())
        return _FALLBACK.get_position(body, instant), True


def fetch_positions(
    provider: PositionProvider,
    instant: datetime,
    bodies: Iterable[Graha] = CLASSICAL_GRAHAS,
    workers: int = 1,
) -> Dict[Graha, Tuple[EclipticPosition, bool]]:
    """Look every body up independently; the flag marks a fallback position.

    The result keeps the order of ``bodies`` whatever the worker count.
    """
    bodies = tuple(bodies)
    if workers <= 1 or len(bodies) <= 1:
        results = [_position_or_fallback(provider, body, instant) for body in bodies]
    else:
        with ThreadPoolExecutor(max_workers=min(workers, len(bodies))) as pool:
            results = list(pool.map(lambda b: _position_or_fallback(provider, b, instant), bodies))
    return dict(zip(bodies, results))
