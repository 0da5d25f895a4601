"""Output helpers: full CSV export and the console top-N table."""

from pathlib import Path

from src.efficiency.comparator import StateEfficiency, to_frame
from src.efficiency.ranker import top


def write_csv(results: list[StateEfficiency], path, year_a, year_b) -> Path:
    """Write one row per state with values at 6 decimal places."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    to_frame(results, year_a, year_b).to_csv(out_path, index=False, float_format="%.6f")
    return out_path


def format_top_table(results: list[StateEfficiency], year_a, year_b, n: int = 10) -> str:
    """Fixed-width table of the first n results at 3 decimal places."""
    lines = [
        f"{'State':<10} {f'Eff_{year_a}':>15} {f'Eff_{year_b}':>15} {'Change':>15} {'Abs Change':>15}",
        "-" * 75,
    ]
    for r in top(results, n):
        lines.append(
            f"{r.state:<10} {r.eff_year_a:>15.3f} {r.eff_year_b:>15.3f} {r.delta:>15.3f} {r.abs_delta:>15.3f}"
        )
    return "\n".join(lines)
