"""
Dataset loader: read one EIA-923 export and reduce it to per-state totals.

Handles format (csv/xlsx), the fixed-length preamble ahead of the header,
header-name normalization, and row-level rejection counting.
"""

import io
import logging
from pathlib import Path

import pandas as pd

from src.configs.sources import DEFAULT_SKIPROWS, EIA923_KEYS, EIA923_VALUE_COLUMNS, get_source
from src.plant_loader.aggregator import StateStats, accumulate
from src.plant_loader.parser import parse_row

logger = logging.getLogger(__name__)


def _resolve_path(path_str: str, base_path: Path | None) -> Path:
    p = Path(path_str)
    if not p.is_absolute() and base_path is not None:
        return base_path / p
    return p


def _normalize_header(name) -> str:
    """Collapse embedded line breaks and repeated spaces in a column name."""
    return " ".join(str(name).split())


def _decode(raw: bytes) -> str:
    """Decode the whole file up front (utf-8, else latin-1) so the preamble can be dropped by line."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def _read_csv(path: Path, skiprows: int, on_bad_line) -> pd.DataFrame:
    """Drop the preamble lines, then parse the rest as CSV with a header row.

    The header is read as an ordinary row (header=None) so the column count
    comes from the header line; a wider first data row is a bad line rather
    than an implicit index.
    """
    buf = io.StringIO(_decode(path.read_bytes()))
    for _ in range(skiprows):
        buf.readline()
    raw = pd.read_csv(
        buf,
        header=None,
        dtype=str,
        keep_default_na=False,
        engine="python",
        on_bad_lines=on_bad_line,
    )
    df = raw.iloc[1:].reset_index(drop=True)
    df.columns = list(raw.iloc[0])
    return df


def _read_xlsx(path: Path, skiprows: int, sheet) -> pd.DataFrame:
    return pd.read_excel(
        path,
        sheet_name=sheet if sheet is not None else 0,
        skiprows=skiprows,
        dtype=str,
        engine="openpyxl",
    )


def load(
    path,
    skiprows: int = DEFAULT_SKIPROWS,
    keys: dict | None = None,
    value_columns: dict | None = None,
    fmt: str = "csv",
    sheet=None,
) -> tuple[dict[str, StateStats], int, int]:
    """Load one dataset into per-state totals.

    Args:
        path: File to read.
        skiprows: Number of non-tabular lines ahead of the header.
        keys: {"state": raw column name}. Default: EIA-923 names.
        value_columns: {"fuel": raw name, "generation": raw name}. Default: EIA-923 names.
        fmt: "csv" or "xlsx".
        sheet: Worksheet name for xlsx (default: first sheet).

    Returns:
        (stats by state, valid row count, skipped row count)

    Raises:
        FileNotFoundError: path does not exist.
        ValueError: unsupported format, or the header lacks an expected column.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data not found: {path}")
    keys = keys or EIA923_KEYS
    value_columns = value_columns or EIA923_VALUE_COLUMNS

    bad_lines = []

    def _on_bad_line(fields):
        bad_lines.append(fields)
        return None

    fmt = fmt.lower()
    if fmt == "csv":
        df = _read_csv(path, skiprows, _on_bad_line)
    elif fmt == "xlsx":
        df = _read_xlsx(path, skiprows, sheet)
    else:
        raise ValueError(f"Unsupported format: {fmt}")

    df.columns = [_normalize_header(c) for c in df.columns]
    wanted = [
        _normalize_header(keys["state"]),
        _normalize_header(value_columns["fuel"]),
        _normalize_header(value_columns["generation"]),
    ]
    missing = [c for c in wanted if c not in df.columns]
    if missing:
        raise ValueError(f"Missing expected columns {missing} in {path}. Found: {list(df.columns)}")

    stats: dict[str, StateStats] = {}
    valid_rows = 0
    skipped_rows = len(bad_lines)
    for state, fuel_text, gen_text in df[wanted].itertuples(index=False, name=None):
        parsed = parse_row(state, fuel_text, gen_text)
        if parsed is None:
            skipped_rows += 1
            continue
        accumulate(stats, *parsed)
        valid_rows += 1

    logger.info(f"Parsed {valid_rows} valid rows | Skipped {skipped_rows} rows ({path.name})")
    return stats, valid_rows, skipped_rows


def load_source(
    name: str,
    base_path: Path | None = None,
    path: str | None = None,
    skiprows: int | None = None,
) -> tuple[dict[str, StateStats], int, int]:
    """Load a dataset defined in SOURCES. `path` and `skiprows` override the config."""
    spec = get_source(name)
    resolved = _resolve_path(path or spec["path"], base_path)
    return load(
        resolved,
        skiprows=spec.get("skiprows", DEFAULT_SKIPROWS) if skiprows is None else skiprows,
        keys=spec.get("keys"),
        value_columns=spec.get("value_columns"),
        fmt=spec.get("format", "csv"),
        sheet=spec.get("sheet"),
    )
