# Core Jyotish chart assembly
# Uses: skyfield (via ephemeris), numpy (via nodes), astropy (via timescale)
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Dict, List, Optional

from .ascendant import sidereal_ascendant
from .aspects import aspected_houses, aspecting_map
from .ayanamsa import ayanamsa_for, normalize360, to_sidereal
from .bodies import ALL_GRAHAS, Body, Graha, SpecialPoint, is_graha
from .config import Settings, get_settings
from .dignity import (
    Relationship,
    classify_dignity,
    is_moolatrikona,
    relationship_in_sign,
)
from .ephemeris import PositionProvider, SkyfieldEphemeris, fetch_positions
from .houses import assign_houses, house_for_sign, house_signs
from .inputs import parse_instant, validate_coordinate
from .maandhi import calculate_maandhi
from .navamsa import navamsa_position
from .nodes import calculate_nodes
from .schemas import (
    BirthChart,
    ChartRequest,
    GeoCoordinate,
    HouseDetail,
    NavamsaChart,
    NavamsaHouse,
    NavamsaPlanet,
    NavamsaPosition,
    PlanetDetail,
    RasiPosition,
    VedicChart,
)
from .strength import basic_strength, house_strength
from .tables import rashi_by_number
from .zodiac import degree_in_sign, format_dms, nakshatra_for, rashi_for

logger = logging.getLogger(__name__)

__all__ = [
    "Placement",
    "planet_detail",
    "build_birth_chart",
    "build_navamsa_chart",
    "assemble_chart",
    "compute_chart",
    "default_ephemeris",
]


@dataclass(frozen=True)
class Placement:
    """Sidereal position of one chart body."""

    body: Body
    longitude: float
    latitude: float = 0.0
    speed: float = 0.0
    approximate: bool = False


def planet_detail(placement: Placement, ascendant_rashi: int) -> PlanetDetail:
    body = placement.body
    rashi = rashi_for(placement.longitude)
    degree = degree_in_sign(placement.longitude)
    star = nakshatra_for(placement.longitude)
    if body is SpecialPoint.LAGNA:
        house = 1
    else:
        house = house_for_sign(rashi.number, ascendant_rashi)
    graha = is_graha(body)
    return PlanetDetail(
        name=body.value,
        longitude=placement.longitude,
        latitude=placement.latitude,
        speed=placement.speed,
        is_retrograde=graha and placement.speed < 0,
        sign=rashi.name,
        sign_english=rashi.english,
        sign_number=rashi.number,
        sign_lord=rashi.lord,
        element=rashi.element,
        modality=rashi.modality,
        house=house,
        degree=degree,
        degree_dms=format_dms(degree),
        nakshatra=star.nakshatra.name,
        nakshatra_number=star.nakshatra.number,
        nakshatra_lord=star.nakshatra.lord,
        pada=star.pada,
        dignity=classify_dignity(body, rashi.number, degree),
        relationship=relationship_in_sign(body, rashi.number) if graha else Relationship.NOT_APPLICABLE,
        is_moolatrikona=graha and is_moolatrikona(body, rashi.number, degree),
        aspected_houses=list(aspected_houses(body, house)),
        strength=basic_strength(body, rashi.number, placement.speed < 0) if graha else None,
        approximate=placement.approximate,
    )


def build_birth_chart(placements: List[Placement]) -> BirthChart:
    lagna = next(p for p in placements if p.body is SpecialPoint.LAGNA)
    asc_rashi = rashi_for(lagna.longitude).number
    planets = {p.body.value: planet_detail(p, asc_rashi) for p in placements}

    occupants: Dict[int, List[str]] = {house: [] for house in range(1, 13)}
    for detail in planets.values():
        occupants[detail.house].append(detail.name)
    aspecting = aspecting_map((p.body, planets[p.body.value].house) for p in placements)

    houses = []
    for number, sign in enumerate(house_signs(asc_rashi), start=1):
        rashi = rashi_by_number(sign)
        houses.append(HouseDetail(
            house=number,
            sign=rashi.name,
            sign_number=sign,
            lord=rashi.lord,
            element=rashi.element,
            modality=rashi.modality,
            planets=occupants[number],
            aspecting_planets=[b.value for b in aspecting[number]],
        ))
    return BirthChart(houses=houses, planets=planets)


def build_navamsa_chart(placements: List[Placement]) -> NavamsaChart:
    positions: Dict[str, NavamsaPosition] = {}
    rasi: Dict[str, RasiPosition] = {}
    for p in placements:
        nav = navamsa_position(p.longitude)
        positions[p.body.value] = nav
        rasi[p.body.value] = RasiPosition(
            longitude=nav.longitude,
            sign=nav.rasi_sign,
            sign_name=nav.rasi_sign_name,
            degree=nav.degree_in_rasi,
        )

    d9_lagna = positions[SpecialPoint.LAGNA.value].navamsa_sign + 1
    signs = {p.body: positions[p.body.value].navamsa_sign + 1 for p in placements}
    by_house = assign_houses(d9_lagna, signs)

    houses = []
    for number, sign in enumerate(house_signs(d9_lagna), start=1):
        rashi = rashi_by_number(sign)
        members = []
        for body in by_house[number]:
            nav = positions[body.value]
            members.append(NavamsaPlanet(
                name=body.value,
                degree=nav.degree_in_navamsa,
                navamsa_number=nav.navamsa_number,
                dignity=classify_dignity(body, sign, nav.degree_in_navamsa),
            ))
        houses.append(NavamsaHouse(
            house=number,
            sign=rashi.name,
            sign_number=sign,
            lord=rashi.lord,
            element=rashi.element,
            modality=rashi.modality,
            planets=members,
            strength=house_strength(m.dignity for m in members),
        ))

    vargottama = [name for name, nav in positions.items() if nav.navamsa_sign == nav.rasi_sign]
    return NavamsaChart(
        houses=houses,
        rasi_positions=rasi,
        navamsa_positions=positions,
        vargottama=vargottama,
    )


def _paksha(sun: float, moon: float) -> str:
    return "Shukla Paksha" if normalize360(moon - sun) < 180.0 else "Krishna Paksha"


def assemble_chart(
    instant: datetime,
    coordinate: GeoCoordinate,
    provider: PositionProvider,
    settings: Optional[Settings] = None,
    tz_name: Optional[str] = None,
    include_maandhi: bool = False,
) -> VedicChart:
    """Compose the D1 and D9 charts for an already-validated UTC instant."""
    settings = settings or get_settings()
    lat, lon = coordinate.latitude, coordinate.longitude
    validate_coordinate(lat, lon)

    ayanamsa = ayanamsa_for(instant)
    ascendant = sidereal_ascendant(instant, lat, lon)
    placements = [Placement(SpecialPoint.LAGNA, ascendant)]

    fetched = fetch_positions(provider, instant, workers=settings.ephemeris_workers)
    nodes = calculate_nodes(instant, periodic_terms=settings.node_periodic_terms)
    for graha in ALL_GRAHAS:
        if graha is Graha.RAHU:
            placements.append(Placement(graha, nodes.rahu, 0.0, nodes.speed, nodes.approximate))
        elif graha is Graha.KETU:
            placements.append(Placement(graha, nodes.ketu, 0.0, nodes.speed, nodes.approximate))
        else:
            position, approximate = fetched[graha]
            placements.append(Placement(
                graha,
                to_sidereal(position.longitude, ayanamsa),
                position.latitude,
                position.speed,
                approximate,
            ))

    if include_maandhi:
        maandhi = calculate_maandhi(
            instant, lat, lon,
            sun_times=getattr(provider, "sun_times", None),
            tz_name=tz_name,
        )
        placements.append(Placement(SpecialPoint.MAANDHI, maandhi.longitude, approximate=maandhi.approximate))

    birth_chart = build_birth_chart(placements)
    navamsa_chart = build_navamsa_chart(placements)
    approximate_bodies = [p.body.value for p in placements if p.approximate]

    by_body = {p.body: p for p in placements}
    moon = birth_chart.planets[Graha.MOON.value]
    logger.debug(
        "Chart at %s (%s, %s): lagna %s, approximate=%s",
        instant.isoformat(), lat, lon, birth_chart.planets[SpecialPoint.LAGNA.value].sign, approximate_bodies,
    )
    return VedicChart(
        datetime_utc=instant.isoformat(),
        coordinate=coordinate,
        ayanamsa=ayanamsa,
        ascendant_longitude=ascendant,
        lagna_rashi=birth_chart.planets[SpecialPoint.LAGNA.value].sign,
        janma_rashi=moon.sign,
        janma_nakshatra=moon.nakshatra,
        janma_pada=moon.pada,
        sun_rashi=birth_chart.planets[Graha.SUN.value].sign,
        paksha=_paksha(by_body[Graha.SUN].longitude, by_body[Graha.MOON].longitude),
        birth_chart=birth_chart,
        navamsa_chart=navamsa_chart,
        approximate_bodies=approximate_bodies,
        approximate=bool(approximate_bodies),
    )


@lru_cache(maxsize=4)
def default_ephemeris(ephemeris_file: str = "de421.bsp") -> SkyfieldEphemeris:
    return SkyfieldEphemeris(ephemeris_file)


# Main chart computation
def compute_chart(
    data: ChartRequest,
    provider: Optional[PositionProvider] = None,
    settings: Optional[Settings] = None,
) -> VedicChart:
    settings = settings or get_settings()
    instant = parse_instant(data.datetime_iso, settings.min_year, settings.max_year)
    validate_coordinate(data.latitude, data.longitude)
    include_maandhi = settings.include_maandhi if data.include_maandhi is None else data.include_maandhi
    return assemble_chart(
        instant,
        GeoCoordinate(latitude=float(data.latitude), longitude=float(data.longitude)),
        provider or default_ephemeris(settings.ephemeris_file),
        settings=settings,
        tz_name=data.timezone,
        include_maandhi=include_maandhi,
    )
