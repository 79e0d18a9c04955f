import os
import sys
from datetime import datetime, timezone

import pytest

# Ensure the project root is on sys.path so that `vedic_chart` resolves when
# running tests from a checkout without installing the package.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from vedic_chart.config import Settings, get_settings  # noqa: E402
from vedic_chart.schemas import ChartRequest  # noqa: E402

from tests.fakes import FixedEphemeris  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def birth_instant() -> datetime:
    return datetime(1990, 5, 15, 4, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_ephemeris() -> FixedEphemeris:
    return FixedEphemeris()


@pytest.fixture
def chennai_request() -> ChartRequest:
    return ChartRequest(datetime_iso="1990-05-15T04:30:00Z", latitude=13.0827, longitude=80.2707)
