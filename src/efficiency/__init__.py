"""Efficiency: compare per-state totals across two years and rank the changes."""

from src.efficiency.comparator import StateEfficiency, compare, to_frame
from src.efficiency.ranker import rank, top
from src.efficiency.report import format_top_table, write_csv

__all__ = [
    "StateEfficiency",
    "compare",
    "to_frame",
    "rank",
    "top",
    "format_top_table",
    "write_csv",
]
