"""Tests for reference range and synonym tables."""

import pytest
from medtext_extractor.schemas.reference_ranges import (
    ANALYTES,
    REFERENCE_RANGES,
    VITALS,
    lookup_reference,
    resolve_category,
)


def test_lookup_glucose():
    """Glucose lookup returns its band and critical bounds."""
    band = lookup_reference("Glucose")
    assert band.low == 70
    assert band.high == 100
    assert band.critical_low == 54
    assert band.critical_high == 180


def test_lookup_case_insensitive_and_partial():
    """Lookup is case-insensitive and accepts partial names."""
    assert lookup_reference("GLUCOSE") == lookup_reference("glucose")
    assert lookup_reference("Fasting Glucose") == REFERENCE_RANGES["glucose"]
    assert lookup_reference("platelet") == REFERENCE_RANGES["platelets"]


def test_lookup_unknown_returns_none():
    """Unknown name returns None (no exception)."""
    assert lookup_reference("NONEXISTENT_TEST_XYZ") is None


def test_lookup_empty_string():
    """Empty string returns None gracefully."""
    assert lookup_reference("") is None


def test_cholesterol_has_no_low_state():
    """Cholesterol band is open below."""
    band = REFERENCE_RANGES["cholesterol"]
    assert band.low is None
    assert band.critical_low is None
    assert band.high_at_bound is True


@pytest.mark.parametrize("key,spec", list({**ANALYTES, **VITALS}.items()))
def test_tables_are_consistent(key, spec):
    """Spellings are lowercase and classified entries have a band."""
    assert spec.terms and spec.units
    assert all(t == t.lower() for t in spec.terms)
    assert all(u == u.lower() for u in spec.units)
    if spec.category is not None:
        assert spec.category in REFERENCE_RANGES
        assert spec.normal_range


def test_synonym_priority_order():
    """Synonyms and units keep their declared order."""
    assert ANALYTES["hemoglobin"].terms == ("hemoglobin", "hgb", "hb")
    assert ANALYTES["glucose"].units[0] == "mg/dl"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("WBC", "white blood cells"),
        ("redBloodCells", "red blood cells"),
        ("  Heart   Rate ", "heart rate"),
        ("temp", "temperature"),
        ("PLT count", "platelets"),
        ("sodium", None),
    ],
)
def test_resolve_category(name, expected):
    """Abbreviations, camelCase keys and padded spellings map to a category."""
    assert resolve_category(name) == expected
