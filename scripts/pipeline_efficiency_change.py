"""
Pipeline: Year-over-year fossil-fuel efficiency change per state (EIA-923).

Loads two EIA-923 plant-level exports (defined in src/configs/sources.py),
aggregates fuel consumption and net generation by state, computes
efficiency = fuel / generation for each year, and ranks states by the
absolute change.

Output: top-N table on stdout and the full ranked table as CSV
(data/processed_data/efficiency_changes.csv by default).
"""

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from src.configs.sources import get_source
from src.efficiency import compare, format_top_table, rank, write_csv
from src.plant_loader import load_source

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

DEFAULT_YEAR_A = "eia923_2019"
DEFAULT_YEAR_B = "eia923_2020"
DEFAULT_OUTPUT = "data/processed_data/efficiency_changes.csv"
DEFAULT_TOP = 10


def run(
    source_a: str,
    source_b: str,
    base_path: Path,
    output: Path,
    input_a: str | None = None,
    input_b: str | None = None,
    skiprows: int | None = None,
    top_n: int = DEFAULT_TOP,
) -> int:
    """Run the comparison end to end. Returns the number of states written."""
    year_a = get_source(source_a).get("vintage", source_a)
    year_b = get_source(source_b).get("vintage", source_b)

    print(f"Loading {year_a} data...")
    stats_a, _, _ = load_source(source_a, base_path, path=input_a, skiprows=skiprows)

    print(f"Loading {year_b} data...")
    stats_b, _, _ = load_source(source_b, base_path, path=input_b, skiprows=skiprows)

    print("Computing efficiency changes...")
    changes = rank(compare(stats_a, stats_b))
    dropped = len(stats_a.keys() | stats_b.keys()) - len(changes)
    if dropped:
        logger.info(f"{dropped} states not comparable (missing from one year or zero generation)")

    print(f"\nTop {top_n} States by Change in Fossil Fuel Efficiency:\n")
    print(format_top_table(changes, year_a, year_b, n=top_n))

    out_path = write_csv(changes, output, year_a, year_b)
    print(f"\nSaved {len(changes)} rows to {out_path}")
    return len(changes)


def main():
    parser = argparse.ArgumentParser(
        description="Rank states by year-over-year change in fossil fuel efficiency (EIA-923)."
    )
    parser.add_argument(
        "--year-a",
        type=str,
        default=DEFAULT_YEAR_A,
        help=f"Source name for the base year (default: {DEFAULT_YEAR_A})",
    )
    parser.add_argument(
        "--year-b",
        type=str,
        default=DEFAULT_YEAR_B,
        help=f"Source name for the comparison year (default: {DEFAULT_YEAR_B})",
    )
    parser.add_argument("--input-a", type=str, default=None, help="Override path for the base year file")
    parser.add_argument("--input-b", type=str, default=None, help="Override path for the comparison year file")
    parser.add_argument(
        "--skiprows",
        type=int,
        default=None,
        help="Preamble lines ahead of the header (default: from source config)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP,
        help=f"Number of states shown on the console (default: {DEFAULT_TOP})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=DEFAULT_OUTPUT,
        help=f"Output CSV (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--base-path",
        type=str,
        default=None,
        help="Project root for data paths (default: project root)",
    )
    args = parser.parse_args()

    base = Path(args.base_path) if args.base_path else project_root
    output = Path(args.output)
    if not output.is_absolute():
        output = base / output

    try:
        run(
            args.year_a,
            args.year_b,
            base,
            output,
            input_a=args.input_a,
            input_b=args.input_b,
            skiprows=args.skiprows,
            top_n=args.top,
        )
    except (FileNotFoundError, KeyError, ValueError, pd.errors.EmptyDataError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
    sys.exit(0)
