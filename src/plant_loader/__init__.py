"""Plant loader: parse EIA-923 rows and aggregate them by state."""

from src.plant_loader.aggregator import StateStats, accumulate
from src.plant_loader.loader import load, load_source
from src.plant_loader.parser import parse_number, parse_row

__all__ = [
    "StateStats",
    "accumulate",
    "load",
    "load_source",
    "parse_number",
    "parse_row",
]
