"""Tests for src.efficiency.ranker."""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from src.efficiency.comparator import StateEfficiency
from src.efficiency.ranker import rank, top


def _result(state, delta):
    return StateEfficiency(state, 1.0, 1.0 + delta, delta, abs(delta))


def test_rank_sorted_by_abs_delta_desc():
    results = [_result("A", 0.5), _result("B", -3.0), _result("C", 1.0)]
    ranked = rank(results)
    assert [r.state for r in ranked] == ["B", "C", "A"]
    assert all(ranked[i].abs_delta >= ranked[i + 1].abs_delta for i in range(len(ranked) - 1))


def test_rank_ties_broken_by_state():
    results = [_result("TX", 2.0), _result("CA", -2.0), _result("AL", 2.0)]
    assert [r.state for r in rank(results)] == ["AL", "CA", "TX"]


def test_rank_does_not_mutate_input():
    results = [_result("A", 0.5), _result("B", 3.0)]
    rank(results)
    assert [r.state for r in results] == ["A", "B"]


def test_top_is_prefix():
    ranked = rank([_result(s, d) for s, d in [("A", 1.0), ("B", 2.0), ("C", 3.0)]])
    assert top(ranked, 2) == ranked[:2]
    assert top(ranked, 10) == ranked
    assert top(ranked, 0) == []


def test_top_negative_raises():
    with pytest.raises(ValueError, match="non-negative"):
        top([], -1)
