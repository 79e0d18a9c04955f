"""Environment-driven settings for the chart engine and its runner."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

__all__ = ["Settings", "get_settings"]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return bool(int(raw))
    except ValueError as exc:
        raise ValueError(f"{name} must be 0 or 1, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    ephemeris_file: str = "de421.bsp"
    ephemeris_workers: int = 1
    min_year: int = 1900
    max_year: int = 2100
    node_periodic_terms: bool = True
    include_maandhi: bool = False
    backend_host: str = "127.0.0.1"
    backend_port: int = 8000
    backend_log: str = "warning"

    @classmethod
    def from_env(cls) -> "Settings":
        settings = cls(
            ephemeris_file=os.getenv("VEDIC_EPHEMERIS_FILE", cls.ephemeris_file),
            ephemeris_workers=_env_int("VEDIC_EPHEMERIS_WORKERS", cls.ephemeris_workers),
            min_year=_env_int("VEDIC_MIN_YEAR", cls.min_year),
            max_year=_env_int("VEDIC_MAX_YEAR", cls.max_year),
            node_periodic_terms=_env_flag("VEDIC_NODE_PERIODIC_TERMS", cls.node_periodic_terms),
            include_maandhi=_env_flag("VEDIC_INCLUDE_MAANDHI", cls.include_maandhi),
            backend_host=os.getenv("VEDIC_BACKEND_HOST", cls.backend_host),
            backend_port=_env_int("VEDIC_BACKEND_PORT", cls.backend_port),
            backend_log=os.getenv("VEDIC_BACKEND_LOG", cls.backend_log),
        )
        if settings.ephemeris_workers < 1:
            raise ValueError("VEDIC_EPHEMERIS_WORKERS must be >= 1")
        if settings.min_year > settings.max_year:
            raise ValueError("VEDIC_MIN_YEAR must not exceed VEDIC_MAX_YEAR")
        return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
