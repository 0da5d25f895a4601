"""Tests for src.plant_loader.parser."""

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from src.plant_loader.parser import parse_number, parse_row


# --- parse_number ---


def test_parse_number_strips_grouping_commas():
    assert parse_number("1,234") == 1234.0


def test_parse_number_large_with_decimals():
    assert parse_number("12,345,678.5") == 12345678.5


def test_parse_number_whitespace():
    assert parse_number("  42 ") == 42.0


def test_parse_number_negative():
    assert parse_number("-1,500") == -1500.0


def test_parse_number_non_numeric():
    assert parse_number(".") is None
    assert parse_number("abc") is None


def test_parse_number_empty_and_missing():
    assert parse_number("") is None
    assert parse_number(None) is None
    assert parse_number(float("nan")) is None


def test_parse_number_underscore_rejected():
    assert parse_number("1_000") is None
    assert parse_row("TX", "1_000", "100") is None


def test_parse_number_non_finite_rejected():
    assert parse_number("nan") is None
    assert parse_number("inf") is None


# --- parse_row ---


def test_parse_row_valid():
    assert parse_row("TX", "1,000", "100") == ("TX", 1000.0, 100.0)


def test_parse_row_zero_generation_rejected():
    assert parse_row("TX", "1,000", "0") is None
    assert parse_row("TX", "1,000", "0.0") is None


def test_parse_row_bad_fuel_rejected():
    assert parse_row("TX", "n/a", "100") is None


def test_parse_row_bad_generation_rejected():
    assert parse_row("TX", "1000", "") is None


def test_parse_row_missing_state_rejected():
    assert parse_row(None, "1000", "100") is None
    assert parse_row(float("nan"), "1000", "100") is None


def test_parse_row_zero_fuel_accepted():
    assert parse_row("CA", "0", "50") == ("CA", 0.0, 50.0)
