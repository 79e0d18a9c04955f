import pytest

from vedic_chart.aspects import aspected_houses, aspecting_map
from vedic_chart.bodies import Graha, SpecialPoint


@pytest.mark.parametrize(
    "body",
    [Graha.SUN, Graha.MOON, Graha.MERCURY, Graha.VENUS, Graha.RAHU, Graha.KETU],
)
def test_seventh_only(body):
    assert aspected_houses(body, 1) == (7,)
    assert aspected_houses(body, 8) == (2,)


def test_special_aspects_from_first_house():
    assert aspected_houses(Graha.JUPITER, 1) == (7, 5, 9)
    assert aspected_houses(Graha.MARS, 1) == (7, 4, 8)
    assert aspected_houses(Graha.SATURN, 1) == (7, 3, 10)


def test_special_aspects_wrap():
    assert aspected_houses(Graha.SATURN, 10) == (4, 12, 7)
    assert aspected_houses(Graha.JUPITER, 12) == (6, 4, 8)


@pytest.mark.parametrize("point", [SpecialPoint.LAGNA, SpecialPoint.MAANDHI])
def test_points_never_aspect(point):
    assert aspected_houses(point, 1) == ()


def test_house_out_of_range():
    with pytest.raises(ValueError):
        aspected_houses(Graha.SUN, 0)


def test_aspecting_map():
    result = aspecting_map([(Graha.MARS, 1), (Graha.SUN, 1), (SpecialPoint.LAGNA, 1)])
    assert result[7] == [Graha.MARS, Graha.SUN]
    assert result[4] == [Graha.MARS]
    assert result[1] == []
