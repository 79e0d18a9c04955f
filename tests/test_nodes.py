import logging
import math
from datetime import datetime, timedelta, timezone

import pytest

from vedic_chart import nodes
from vedic_chart.ayanamsa import lahiri_ayanamsa, normalize360
from vedic_chart.nodes import (
    NODE_DAILY_MOTION,
    calculate_nodes,
    mean_node_longitude,
    nutation_in_longitude,
    periodic_correction,
)

J2000 = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)


def _instants():
    start = datetime(1900, 1, 1, tzinfo=timezone.utc)
    for step in range(0, 200 * 365, 997):
        yield start + timedelta(days=step, hours=step % 24)


def test_mean_node_at_j2000():
    assert mean_node_longitude(0.0) == pytest.approx(125.0445479)


def test_corrections_are_small():
    for t in (-1.0, -0.5, 0.0, 0.25, 1.0):
        assert abs(periodic_correction(t)) <= 2.45 / 3600
        assert abs(nutation_in_longitude(t)) <= 19.4 / 3600


def test_sidereal_rahu_at_j2000():
    result = calculate_nodes(J2000)
    expected = 125.0445479 - lahiri_ayanamsa(2000)
    assert result.rahu == pytest.approx(expected, abs=0.01)
    assert not result.approximate


def test_ketu_exactly_opposite():
    for dt in _instants():
        result = calculate_nodes(dt)
        assert result.ketu == (result.rahu + 180.0) % 360.0
        assert 0.0 <= result.rahu < 360.0
        assert 0.0 <= result.ketu < 360.0


def test_node_regresses():
    earlier = calculate_nodes(datetime(2020, 1, 1, tzinfo=timezone.utc), periodic_terms=False)
    later = calculate_nodes(datetime(2020, 1, 31, tzinfo=timezone.utc), periodic_terms=False)
    delta = (later.rahu - earlier.rahu + 180.0) % 360.0 - 180.0
    assert delta == pytest.approx(30 * NODE_DAILY_MOTION, abs=0.01)
    assert earlier.speed < 0


def test_mean_only_path_is_flagged():
    result = calculate_nodes(J2000, periodic_terms=False)
    assert result.approximate
    assert result.rahu == normalize360(mean_node_longitude(0.0) - lahiri_ayanamsa(2000))
    assert result.ketu == (result.rahu + 180.0) % 360.0


def test_non_finite_series_falls_back(monkeypatch, caplog):
    monkeypatch.setattr(nodes, "true_node_longitude", lambda t: math.nan)
    with caplog.at_level(logging.WARNING, logger="vedic_chart.nodes"):
        result = calculate_nodes(J2000)
    assert result.approximate
    assert math.isfinite(result.rahu)
    assert "mean node" in caplog.text


def test_deterministic():
    assert calculate_nodes(J2000) == calculate_nodes(J2000)
