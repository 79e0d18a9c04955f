import pytest

from vedic_chart.navamsa import is_vargottama, navamsa_position, navamsa_sign_index


def test_movable_sign_starts_from_itself():
    pos = navamsa_position(15.0)
    assert pos.rasi_sign_name == "Mesha"
    assert pos.navamsa_sign == 4  # Leo
    assert pos.navamsa_index == 4
    assert pos.navamsa_number == 5


def test_fixed_sign_starts_from_ninth():
    pos = navamsa_position(35.0)
    assert pos.rasi_sign == 1  # Taurus
    assert pos.navamsa_sign == 10  # Aquarius
    assert pos.navamsa_number == 2
    assert pos.degree_in_rasi == pytest.approx(5.0)


def test_cancer_ten_degrees_is_libra():
    pos = navamsa_position(100.0)
    assert pos.rasi_sign == 3  # Cancer
    assert pos.navamsa_sign == 6  # Libra, not Virgo
    assert pos.navamsa_sign_name == "Tula"
    assert pos.navamsa_number == 4


def test_dual_sign_starts_from_fifth():
    # 2° Gemini: first navamsa of Gemini is Libra
    pos = navamsa_position(62.0)
    assert pos.rasi_sign == 2
    assert pos.navamsa_index == 0
    assert pos.navamsa_sign == 6


@pytest.mark.parametrize(
    "longitude, index",
    [(10.0, 3), (20.0, 6), (3.5, 1), (29.99, 8), (30.0, 0)],
)
def test_segment_boundaries_floor(longitude, index):
    assert navamsa_position(longitude).navamsa_index == index


def test_degree_in_navamsa():
    # 210 arc-minutes: 10' into the second navamsa
    assert navamsa_position(3.5).degree_in_navamsa == pytest.approx(1.5)
    assert navamsa_position(10.0).degree_in_navamsa == pytest.approx(0.0)
    assert navamsa_position(29.99).degree_in_navamsa == pytest.approx(29.85)


def test_invariants_over_the_circle():
    for step in range(0, 7200):
        pos = navamsa_position(step * 0.05)
        assert 0 <= pos.navamsa_index <= 8
        assert pos.navamsa_number == pos.navamsa_index + 1
        assert 0.0 <= pos.degree_in_navamsa < 30.0
        assert 0 <= pos.navamsa_sign <= 11
        assert 0 <= pos.rasi_sign <= 11


def test_full_circle_wraps():
    assert navamsa_position(360.0) == navamsa_position(0.0)


def test_lords_follow_signs():
    pos = navamsa_position(100.0)
    assert pos.rasi_lord.value == "Moon"
    assert pos.navamsa_lord.value == "Venus"


@pytest.mark.parametrize("longitude", [1.0, 45.0, 88.0])
def test_vargottama_in_each_modality(longitude):
    # first navamsa of Aries, fifth of Taurus, ninth of Gemini
    assert is_vargottama(longitude)


@pytest.mark.parametrize("longitude", [15.0, 35.0, 100.0])
def test_not_vargottama(longitude):
    assert not is_vargottama(longitude)
    assert navamsa_sign_index(longitude) != navamsa_position(longitude).rasi_sign
