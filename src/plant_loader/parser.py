"""Row parsing: turn one raw EIA-923 record into a typed (state, fuel, generation) triple."""

import math

import pandas as pd


def parse_number(text) -> float | None:
    """Parse a numeric cell, dropping grouping commas ("1,234" -> 1234.0).

    Returns None for missing, empty, non-numeric or non-finite values.
    """
    if text is None or (isinstance(text, float) and math.isnan(text)):
        return None
    cleaned = str(text).strip().replace(",", "")
    # float() would accept "1_000"; underscores are not grouping separators here
    if not cleaned or "_" in cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_row(state, fuel_text, generation_text) -> tuple[str, float, float] | None:
    """Parse one record. Returns None when the row must be skipped."""
    if state is None or pd.isna(state):
        return None
    fuel = parse_number(fuel_text)
    if fuel is None:
        return None
    generation = parse_number(generation_text)
    if generation is None or generation == 0.0:
        return None
    return str(state), fuel, generation
