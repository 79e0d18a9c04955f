"""Error kinds raised by the chart engine."""
from __future__ import annotations

__all__ = [
    "ChartError",
    "InvalidCoordinate",
    "InvalidInstant",
    "EphemerisUnavailable",
    "ComputationDegenerate",
]


class ChartError(Exception):
    """Base class for every error raised while computing a chart."""


class InvalidCoordinate(ChartError):
    """Latitude or longitude is not finite or lies outside its range."""

    def __init__(self, latitude: float, longitude: float, reason: str):
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(f"Invalid coordinate ({latitude}, {longitude}): {reason}")


class InvalidInstant(ChartError):
    """Birth instant is naive, unparsable or outside the supported window."""


class EphemerisUnavailable(ChartError):
    """The ephemeris provider cannot produce a position for ``body``.

    Recovered locally by the assembler, which switches the body to the
    mean-motion model and flags it as approximate.
    """

    def __init__(self, body: str, reason: str = ""):
        self.body = body
        self.reason = reason
        message = f"Ephemeris unavailable for {body}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ComputationDegenerate(ChartError):
    """The requested quantity has no stable value for these inputs."""
