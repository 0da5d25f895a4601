"""
Source configuration for the EIA-923 plant-level datasets.

Canonical columns (aligned across years):
- state: 2-letter plant state code
- fuel: total fuel consumption (MMBtu)
- generation: net generation (MWh)

EIA-923 "Page 1 Generation and Fuel Data" exports carry a 5-line preamble
before the header row. Header names embed line breaks
("Net Generation\\n(Megawatthours)"); names here are whitespace-collapsed.
"""

DEFAULT_SKIPROWS = 5

EIA923_KEYS = {"state": "Plant State"}

EIA923_VALUE_COLUMNS = {
    "fuel": "Total Fuel Consumption MMBtu",
    "generation": "Net Generation (Megawatthours)",
}

SOURCES = {
    "eia923_2019": {
        "vintage": 2019,
        "path": "data/raw_data/eia923/2019.csv",
        "format": "csv",
        "skiprows": DEFAULT_SKIPROWS,
        "keys": EIA923_KEYS,
        "value_columns": EIA923_VALUE_COLUMNS,
    },
    "eia923_2020": {
        "vintage": 2020,
        "path": "data/raw_data/eia923/2020.csv",
        "format": "csv",
        "skiprows": DEFAULT_SKIPROWS,
        "keys": EIA923_KEYS,
        "value_columns": EIA923_VALUE_COLUMNS,
    },
    # Workbook as published by EIA (same preamble on the first sheet)
    "eia923_2020_xlsx": {
        "vintage": 2020,
        "path": "data/raw_data/eia923/EIA923_Schedules_2_3_4_5_M_12_2020_Final.xlsx",
        "format": "xlsx",
        "sheet": "Page 1 Generation and Fuel Data",
        "skiprows": DEFAULT_SKIPROWS,
        "keys": EIA923_KEYS,
        "value_columns": EIA923_VALUE_COLUMNS,
    },
}


def get_source(name: str) -> dict:
    """Return the config for a dataset name."""
    if name not in SOURCES:
        raise KeyError(f"Unknown source '{name}'. Available: {list(SOURCES)}")
    return SOURCES[name]


def list_sources() -> list[str]:
    """Return all available dataset names."""
    return list(SOURCES)
