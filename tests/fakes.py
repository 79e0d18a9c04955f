"""Deterministic stand-ins for the JPL-kernel ephemeris."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, Iterable, Optional, Tuple

from vedic_chart.bodies import Graha
from vedic_chart.ephemeris import EclipticPosition
from vedic_chart.errors import EphemerisUnavailable

# Tropical longitudes, degrees.
DEFAULT_LONGITUDES: Dict[Graha, float] = {
    Graha.SUN: 54.0,
    Graha.MOON: 312.5,
    Graha.MARS: 338.25,
    Graha.MERCURY: 41.0,
    Graha.JUPITER: 96.4,
    Graha.VENUS: 16.75,
    Graha.SATURN: 294.1,
}

DEFAULT_SPEEDS: Dict[Graha, float] = {
    Graha.SUN: 0.9647,
    Graha.MOON: 13.1,
    Graha.MARS: 0.71,
    Graha.MERCURY: -0.35,
    Graha.JUPITER: 0.22,
    Graha.VENUS: 1.18,
    Graha.SATURN: -0.01,
}


class FixedEphemeris:
    """Same tropical position at every instant; ``unavailable`` bodies fail."""

    def __init__(
        self,
        longitudes: Optional[Dict[Graha, float]] = None,
        unavailable: Iterable[Graha] = (),
    ):
        self.longitudes = dict(DEFAULT_LONGITUDES)
        if longitudes:
            self.longitudes.update(longitudes)
        self.unavailable = set(unavailable)
        self.calls = []

    def get_position(self, body: Graha, instant: datetime) -> EclipticPosition:
        self.calls.append(body)
        if body in self.unavailable or body not in self.longitudes:
            raise EphemerisUnavailable(body.value, "not in fixture")
        return EclipticPosition(
            longitude=self.longitudes[body],
            latitude=0.5,
            speed=DEFAULT_SPEEDS.get(body, 0.0),
        )


class UnavailableEphemeris:
    def get_position(self, body: Graha, instant: datetime) -> EclipticPosition:
        raise EphemerisUnavailable(body.value, "offline")


class FixedSunEphemeris(FixedEphemeris):
    """Sunrise and sunset at fixed offsets from the start of each local day."""

    def __init__(self, sunrise_hours: float = 6.0, sunset_hours: float = 18.0, **kwargs):
        super().__init__(**kwargs)
        self.sunrise_hours = sunrise_hours
        self.sunset_hours = sunset_hours

    def sun_times(
        self, start: datetime, end: datetime, latitude: float, longitude: float
    ) -> Tuple[Optional[datetime], Optional[datetime]]:
        return (
            start + timedelta(hours=self.sunrise_hours),
            start + timedelta(hours=self.sunset_hours),
        )


class OfflineSunEphemeris(FixedEphemeris):
    """Planet positions work; the sunrise/sunset search cannot load its kernel."""

    def sun_times(self, start: datetime, end: datetime, latitude: float, longitude: float):
        raise EphemerisUnavailable("Sun", "kernel download failed")
