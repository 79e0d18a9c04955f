import sys
import json
from pathlib import Path

# ensure project root is importable
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from vedic_chart.jyotish import compute_chart
from vedic_chart.schemas import ChartRequest

def main():
    # Chennai, 1990-05-15 10:00 IST
    req = ChartRequest(datetime_iso="1990-05-15T04:30:00Z", latitude=13.0827, longitude=80.2707,
                       timezone="Asia/Kolkata", include_maandhi=True)
    chart = compute_chart(req)

    out = {
        'ayanamsa': chart.ayanamsa,
        'ascendant': {
            'lon_sidereal': chart.ascendant_longitude,
            'sign': chart.lagna_rashi,
        },
        'planets': [],
        'houses': [(h.house, h.sign, h.planets) for h in chart.birth_chart.houses],
        'navamsa_houses': [(h.house, h.sign, [p.name for p in h.planets]) for h in chart.navamsa_chart.houses],
        'vargottama': chart.navamsa_chart.vargottama,
        'approximate': chart.approximate_bodies,
    }

    for name, p in chart.birth_chart.planets.items():
        out['planets'].append({
            'name': name,
            'lon_sidereal': p.longitude,
            'sign': p.sign,
            'house': p.house,
            'nakshatra': f"{p.nakshatra} {p.pada}",
            'dignity': p.dignity.value,
            'is_retrograde': p.is_retrograde,
            'speed': p.speed,
        })

    print(json.dumps(out, ensure_ascii=False, indent=2))

if __name__ == '__main__':
    main()
