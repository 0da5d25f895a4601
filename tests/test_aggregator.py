"""Tests for src.plant_loader.aggregator."""

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from src.plant_loader.aggregator import StateStats, accumulate


def test_state_stats_defaults_to_zero():
    s = StateStats()
    assert s.total_fuel == 0.0
    assert s.total_gen == 0.0


def test_accumulate_creates_entry():
    stats = {}
    accumulate(stats, "TX", 100.0, 10.0)
    assert stats == {"TX": StateStats(total_fuel=100.0, total_gen=10.0)}


def test_accumulate_sums_per_state():
    stats = {}
    accumulate(stats, "TX", 100.0, 10.0)
    accumulate(stats, "TX", 50.0, 5.0)
    accumulate(stats, "CA", 7.0, 1.0)
    assert stats["TX"].total_fuel == 150.0
    assert stats["TX"].total_gen == 15.0
    assert stats["CA"].total_fuel == 7.0
    assert len(stats) == 2


def test_accumulate_same_row_twice_double_counts():
    stats = {}
    accumulate(stats, "NY", 10.0, 2.0)
    accumulate(stats, "NY", 10.0, 2.0)
    assert stats["NY"].total_fuel == 20.0
    assert stats["NY"].total_gen == 4.0
