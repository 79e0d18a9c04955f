from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from .bodies import Graha
from .dignity import Dignity, HouseStrength, Relationship
from .tables import Element, Modality


class ChartModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ChartRequest(ChartModel):
    # ISO-8601 with an explicit offset or trailing Z; civil-time resolution is the caller's job
    datetime_iso: str
    latitude: float
    longitude: float
    # IANA zone, only used to pick the local weekday for Maandhi
    timezone: Optional[str] = None
    # None -> VEDIC_INCLUDE_MAANDHI
    include_maandhi: Optional[bool] = None


class GeoCoordinate(ChartModel):
    latitude: float
    longitude: float


class PlanetStrength(ChartModel):
    total: int
    percentage: int  # total clamped to 0..100
    scale: int  # 0..5


class PlanetDetail(ChartModel):
    name: str
    longitude: float
    latitude: float = 0.0
    speed: float = 0.0
    is_retrograde: bool = False
    sign: str
    sign_english: str
    sign_number: int
    sign_lord: Graha
    element: Element
    modality: Modality
    house: int
    degree: float
    degree_dms: str
    nakshatra: str
    nakshatra_number: int
    nakshatra_lord: Graha
    pada: int
    dignity: Dignity
    relationship: Relationship
    is_moolatrikona: bool = False
    aspected_houses: List[int] = Field(default_factory=list)
    # None for Lagna and Maandhi
    strength: Optional[PlanetStrength] = None
    approximate: bool = False


class HouseDetail(ChartModel):
    house: int
    sign: str
    sign_number: int
    lord: Graha
    element: Element
    modality: Modality
    planets: List[str] = Field(default_factory=list)
    aspecting_planets: List[str] = Field(default_factory=list)


class BirthChart(ChartModel):
    houses: List[HouseDetail]
    planets: Dict[str, PlanetDetail]


class RasiPosition(ChartModel):
    longitude: float
    sign: int  # 0 = Aries
    sign_name: str
    degree: float


class NavamsaPosition(ChartModel):
    longitude: float
    rasi_sign: int  # 0 = Aries
    rasi_sign_name: str
    rasi_lord: Graha
    degree_in_rasi: float
    navamsa_index: int  # 0..8
    navamsa_number: int  # 1..9
    navamsa_sign: int  # 0 = Aries
    navamsa_sign_name: str
    navamsa_lord: Graha
    degree_in_navamsa: float


class NavamsaPlanet(ChartModel):
    name: str
    degree: float
    navamsa_number: int
    dignity: Dignity


class NavamsaHouse(ChartModel):
    house: int
    sign: str
    sign_number: int
    lord: Graha
    element: Element
    modality: Modality
    planets: List[NavamsaPlanet] = Field(default_factory=list)
    strength: HouseStrength = HouseStrength.NEUTRAL


class NavamsaChart(ChartModel):
    houses: List[NavamsaHouse]
    rasi_positions: Dict[str, RasiPosition]
    navamsa_positions: Dict[str, NavamsaPosition]
    vargottama: List[str] = Field(default_factory=list)


class VedicChart(ChartModel):
    datetime_utc: str
    coordinate: GeoCoordinate
    ayanamsa: float
    ascendant_longitude: float
    lagna_rashi: str
    janma_rashi: str
    janma_nakshatra: str
    janma_pada: int
    sun_rashi: str
    paksha: str
    birth_chart: BirthChart
    navamsa_chart: NavamsaChart
    approximate_bodies: List[str] = Field(default_factory=list)
    approximate: bool = False
