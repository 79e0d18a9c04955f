from datetime import datetime, timezone

import pytest

from vedic_chart.ascendant import (
    gmst_degrees,
    local_sidereal_time,
    mean_obliquity,
    sidereal_ascendant,
    tropical_ascendant,
)
from vedic_chart.errors import ComputationDegenerate
from vedic_chart.timescale import J2000_JD

EPS = 23.439291


def test_gmst_at_j2000():
    assert gmst_degrees(J2000_JD) == pytest.approx(280.46061837)


def test_gmst_advances_one_sidereal_day():
    # 360.9856...° per solar day
    assert (gmst_degrees(J2000_JD + 1) - gmst_degrees(J2000_JD)) % 360 == pytest.approx(0.98564736629, abs=1e-6)


def test_local_sidereal_time_adds_east_longitude():
    assert local_sidereal_time(J2000_JD, 30.0) == pytest.approx(310.46061837)
    assert local_sidereal_time(J2000_JD, -90.0) == pytest.approx(190.46061837)


def test_obliquity_at_j2000():
    assert mean_obliquity(0.0) == pytest.approx(EPS)


@pytest.mark.parametrize(
    "lst, expected",
    [(0.0, 90.0), (90.0, 180.0), (180.0, 270.0)],
)
def test_equator_ascendant(lst, expected):
    assert tropical_ascendant(lst, 0.0, EPS) == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize("latitude", [89.95, -89.95, 90.0])
def test_polar_latitude_is_degenerate(latitude):
    with pytest.raises(ComputationDegenerate):
        tropical_ascendant(0.0, latitude, EPS)


def test_limit_latitude_still_computed():
    value = tropical_ascendant(45.0, 89.9, EPS)
    assert 0.0 <= value < 360.0


def test_sidereal_ascendant_range_and_determinism():
    dt = datetime(1990, 5, 15, 4, 30, tzinfo=timezone.utc)
    for lat in (-66.0, -33.9, 0.0, 13.08, 51.5, 66.0):
        for lon in (-180.0, -73.9, 0.0, 80.27, 180.0):
            value = sidereal_ascendant(dt, lat, lon)
            assert 0.0 <= value < 360.0
            assert value == sidereal_ascendant(dt, lat, lon)


def test_sidereal_ascendant_polar_raises():
    dt = datetime(1990, 5, 15, 4, 30, tzinfo=timezone.utc)
    with pytest.raises(ComputationDegenerate):
        sidereal_ascendant(dt, 89.95, 10.0)
