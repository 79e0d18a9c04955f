import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from vedic_chart.ascendant import sidereal_ascendant
from vedic_chart.errors import EphemerisUnavailable, InvalidInstant
from vedic_chart.maandhi import (
    calculate_maandhi,
    local_date,
    segment_index,
    segment_midpoint,
    sunday_based_weekday,
)

from tests.fakes import FixedSunEphemeris

SUNDAY = date(2024, 1, 7)
# Greenwich meridian: local mean time equals UTC
LAT, LON = 51.4779, 0.0


def test_sunday_based_weekday():
    assert sunday_based_weekday(SUNDAY) == 0
    assert sunday_based_weekday(SUNDAY + timedelta(days=6)) == 6


@pytest.mark.parametrize(
    "offset, day_index, night_index",
    [(0, 7, 3), (1, 6, 2), (2, 5, 1), (3, 4, 8), (4, 3, 7), (5, 2, 6), (6, 1, 5)],
)
def test_segment_index_by_weekday(offset, day_index, night_index):
    day = SUNDAY + timedelta(days=offset)
    assert segment_index(day) == day_index
    assert segment_index(day, night=True) == night_index


def test_segment_midpoint():
    start = datetime(2024, 1, 7, 6, tzinfo=timezone.utc)
    end = start + timedelta(hours=8)
    assert segment_midpoint(start, end, 1) == start + timedelta(minutes=30)
    assert segment_midpoint(start, end, 8) == start + timedelta(hours=7, minutes=30)


def test_day_birth():
    sun = FixedSunEphemeris()
    birth = datetime(2024, 1, 7, 10, tzinfo=timezone.utc)
    result = calculate_maandhi(birth, LAT, LON, sun_times=sun.sun_times)
    assert not result.is_night
    assert result.segment == 7
    # 06:00 + 12h * 6.5 / 8
    assert result.instant == datetime(2024, 1, 7, 15, 45, tzinfo=timezone.utc)
    assert result.longitude == sidereal_ascendant(result.instant, LAT, LON)
    assert not result.approximate


def test_night_birth_before_and_after_midnight_share_a_night():
    sun = FixedSunEphemeris()
    evening = calculate_maandhi(datetime(2024, 1, 7, 20, tzinfo=timezone.utc), LAT, LON, sun.sun_times)
    morning = calculate_maandhi(datetime(2024, 1, 8, 3, tzinfo=timezone.utc), LAT, LON, sun.sun_times)
    assert evening.is_night and morning.is_night
    assert evening.segment == morning.segment == 3
    # 18:00 + 12h * 2.5 / 8
    assert evening.instant == morning.instant == datetime(2024, 1, 7, 21, 45, tzinfo=timezone.utc)


def test_missing_sun_events_use_fixed_hours(caplog):
    birth = datetime(2024, 1, 7, 10, tzinfo=timezone.utc)
    with caplog.at_level(logging.WARNING, logger="vedic_chart.maandhi"):
        polar = calculate_maandhi(birth, 78.2, 15.6, sun_times=lambda *args: (None, None))
    assert polar.approximate
    assert polar.instant == datetime(2024, 1, 7, 15, 45, tzinfo=timezone.utc)
    assert "06:00/18:00" in caplog.text


def test_no_sun_source_is_approximate():
    result = calculate_maandhi(datetime(2024, 1, 7, 10, tzinfo=timezone.utc), LAT, LON)
    assert result.approximate
    assert 0.0 <= result.longitude < 360.0


def test_local_date_uses_zone():
    instant = datetime(2024, 1, 7, 20, tzinfo=timezone.utc)
    assert local_date(instant) == date(2024, 1, 7)
    assert local_date(instant, "Asia/Kolkata") == date(2024, 1, 8)
    assert local_date(instant, "America/New_York") == date(2024, 1, 7)


def test_zone_shifts_the_day_window():
    sun = FixedSunEphemeris()
    # 20:00 UTC is 01:30 on Monday in Kolkata: before local sunrise (00:30 UTC)
    result = calculate_maandhi(
        datetime(2024, 1, 7, 20, tzinfo=timezone.utc), LAT, LON, sun.sun_times, tz_name="Asia/Kolkata"
    )
    assert result.is_night
    assert result.segment == 3


def test_unknown_zone():
    with pytest.raises(InvalidInstant):
        local_date(datetime(2024, 1, 7, tzinfo=timezone.utc), "Mars/Olympus_Mons")


def test_local_date_follows_mean_time_without_zone():
    instant = datetime(2024, 1, 7, 20, tzinfo=timezone.utc)
    assert local_date(instant, longitude=80.27) == date(2024, 1, 8)
    assert local_date(datetime(2024, 1, 7, 3, tzinfo=timezone.utc), longitude=-118.24) == date(2024, 1, 6)


def test_western_longitude_noon_is_daytime():
    # Los Angeles: mean time is UTC-7:53, so local noon is about 20:00 UTC
    sun = FixedSunEphemeris(sunrise_hours=7.0, sunset_hours=17.0)
    birth = datetime(2024, 1, 10, 20, tzinfo=timezone.utc)
    result = calculate_maandhi(birth, 34.05, -118.24, sun_times=sun.sun_times)
    assert not result.is_night
    # Wednesday day segment
    assert result.segment == 4
    # sunrise 14:53 UTC + 10h * 3.5 / 8
    assert result.instant == datetime(2024, 1, 10, 19, 15, 30, tzinfo=timezone.utc)


def test_failing_sun_source_falls_back_to_fixed_hours(caplog):
    def offline(*args):
        raise EphemerisUnavailable("Sun", "kernel download failed")

    birth = datetime(2024, 1, 7, 10, tzinfo=timezone.utc)
    with caplog.at_level(logging.WARNING, logger="vedic_chart.maandhi"):
        result = calculate_maandhi(birth, LAT, LON, sun_times=offline)
    assert result.approximate
    assert not result.is_night
    assert result.instant == datetime(2024, 1, 7, 15, 45, tzinfo=timezone.utc)
    assert "kernel download failed" in caplog.text
