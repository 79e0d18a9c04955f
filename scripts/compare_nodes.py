import sys
from datetime import datetime, timezone
from pathlib import Path

# Ensure project root is on sys.path so `vedic_chart` imports work when running
# this script directly.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from vedic_chart.nodes import calculate_nodes

# Difference between the corrected node and the mean-only fallback over the supported range
for year in range(1900, 2101, 10):
    dt = datetime(year, 1, 1, tzinfo=timezone.utc)
    true_nodes = calculate_nodes(dt)
    mean_nodes = calculate_nodes(dt, periodic_terms=False)
    delta = (true_nodes.rahu - mean_nodes.rahu + 180.0) % 360.0 - 180.0
    print(f"{year}: rahu={true_nodes.rahu:9.4f} mean={mean_nodes.rahu:9.4f} delta={delta * 3600:8.1f}\" ketu={true_nodes.ketu:9.4f}")
