"""
Year-over-year efficiency comparison.

Efficiency is fuel consumed per unit of net generation (MMBtu / MWh);
delta = year B efficiency - year A efficiency.
"""

from dataclasses import dataclass

import pandas as pd

from src.plant_loader.aggregator import StateStats


@dataclass(frozen=True)
class StateEfficiency:
    state: str
    eff_year_a: float
    eff_year_b: float
    delta: float
    abs_delta: float


def compare(
    stats_a: dict[str, StateStats],
    stats_b: dict[str, StateStats],
) -> list[StateEfficiency]:
    """Compute efficiency change for states present in both years.

    States missing from either mapping, or with zero total generation in
    either year, are left out.
    """
    output = []
    for state, stat_a in stats_a.items():
        stat_b = stats_b.get(state)
        if stat_b is None:
            continue
        if stat_a.total_gen == 0.0 or stat_b.total_gen == 0.0:
            continue

        eff_a = stat_a.total_fuel / stat_a.total_gen
        eff_b = stat_b.total_fuel / stat_b.total_gen
        delta = eff_b - eff_a
        output.append(
            StateEfficiency(
                state=state,
                eff_year_a=eff_a,
                eff_year_b=eff_b,
                delta=delta,
                abs_delta=abs(delta),
            )
        )
    return output


def column_names(year_a, year_b) -> list[str]:
    return ["State", f"Efficiency_{year_a}", f"Efficiency_{year_b}", "Delta_Efficiency", "Abs_Change"]


def to_frame(results: list[StateEfficiency], year_a, year_b) -> pd.DataFrame:
    """Results as a DataFrame, one row per state, in the given order."""
    columns = column_names(year_a, year_b)
    rows = [(r.state, r.eff_year_a, r.eff_year_b, r.delta, r.abs_delta) for r in results]
    return pd.DataFrame(rows, columns=columns)
