"""Per-state running totals of fuel consumed and net generation."""

from dataclasses import dataclass


@dataclass
class StateStats:
    """Running fuel and generation totals for one state in one dataset."""

    total_fuel: float = 0.0
    total_gen: float = 0.0


def accumulate(stats: dict[str, StateStats], state: str, fuel: float, generation: float) -> StateStats:
    """Add one accepted row to the state's totals, creating the entry on first use."""
    entry = stats.setdefault(state, StateStats())
    entry.total_fuel += fuel
    entry.total_gen += generation
    return entry
