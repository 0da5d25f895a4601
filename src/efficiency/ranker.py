"""Ranking of per-state efficiency changes by magnitude."""

from src.efficiency.comparator import StateEfficiency


def rank(results: list[StateEfficiency]) -> list[StateEfficiency]:
    """Sort by absolute change, largest first; equal changes ordered by state code."""
    return sorted(results, key=lambda r: (-r.abs_delta, r.state))


def top(results: list[StateEfficiency], n: int) -> list[StateEfficiency]:
    """First n entries of an already ranked list."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return results[:n]
