"""CLI for computing a sidereal chart from a UTC instant and a location."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .bodies import PLANET_ABBR, body_from_name
from .errors import ChartError
from .jyotish import compute_chart
from .logging_setup import configure_logging
from .schemas import ChartRequest, VedicChart


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute a sidereal (Lahiri) Vedic chart")
    parser.add_argument(
        "--utc",
        required=True,
        help="UTC datetime in ISO format, e.g. 1990-05-15T04:30:00Z",
    )
    parser.add_argument("--lat", type=float, required=True, help="Latitude, degrees north")
    parser.add_argument("--lon", type=float, required=True, help="Longitude, degrees east")
    parser.add_argument("--tz", default=None, help="IANA zone of the birthplace (Maandhi weekday)")
    parser.add_argument("--maandhi", action="store_true", help="Include Maandhi (Gulika)")
    parser.add_argument("--json", action="store_true", help="Print the full chart as JSON")
    parser.add_argument("--log-level", default="warning")
    return parser


def _abbr(names: List[str]) -> str:
    return " ".join(PLANET_ABBR[body_from_name(name)] for name in names) or "-"


def render_table(chart: VedicChart) -> str:
    lines = [
        f"Ayanamsa {chart.ayanamsa:.4f}  Lagna {chart.lagna_rashi}  "
        f"Moon {chart.janma_rashi} / {chart.janma_nakshatra} pada {chart.janma_pada}",
        "",
        "house\tsign\tplanets\taspected by",
    ]
    for house in chart.birth_chart.houses:
        lines.append(
            f"{house.house}\t{house.sign}\t{_abbr(house.planets)}\t{_abbr(house.aspecting_planets)}"
        )
    lines.append("")
    lines.append("body\tsign\tdegree\tnakshatra\tpada\tdignity\tD9")
    for name, planet in chart.birth_chart.planets.items():
        nav = chart.navamsa_chart.navamsa_positions[name]
        mark = "*" if planet.approximate else ""
        lines.append(
            f"{name}{mark}\t{planet.sign}\t{planet.degree_dms}\t{planet.nakshatra}\t"
            f"{planet.pada}\t{planet.dignity.value}\t{nav.navamsa_sign_name}"
        )
    if chart.navamsa_chart.vargottama:
        lines.append("")
        lines.append("Vargottama: " + ", ".join(chart.navamsa_chart.vargottama))
    if chart.approximate:
        lines.append("* approximate position")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    request = ChartRequest(
        datetime_iso=args.utc,
        latitude=args.lat,
        longitude=args.lon,
        timezone=args.tz,
        include_maandhi=True if args.maandhi else None,
    )
    try:
        chart = compute_chart(request)
    except ChartError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.json:
        print(chart.model_dump_json(indent=2))
    else:
        print(render_table(chart))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
