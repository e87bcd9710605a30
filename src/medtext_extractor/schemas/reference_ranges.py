from __future__ import annotations
from pydantic import BaseModel, ConfigDict


class ThresholdBand(BaseModel):
    """Normal band plus the bounds past which a value is critical.

    ``low``/``high`` of None mean the scale is open on that side.
    ``high_at_bound`` makes the upper bounds inclusive: a value equal to
    ``high`` is already high and one equal to ``critical_high`` is critical.
    """

    model_config = ConfigDict(frozen=True)

    low: float | None = None
    high: float | None = None
    critical_low: float | None = None
    critical_high: float | None = None
    high_at_bound: bool = False


class AnalyteSpec(BaseModel):
    """Synonyms and accepted unit spellings, both in priority order."""

    model_config = ConfigDict(frozen=True)

    terms: tuple[str, ...]
    units: tuple[str, ...]
    category: str | None = None  # key into REFERENCE_RANGES; None = unclassified
    normal_range: str | None = None


REFERENCE_RANGES = {
    "glucose": ThresholdBand(low=70.0, high=100.0, critical_low=54.0, critical_high=180.0),
    "hemoglobin": ThresholdBand(low=12.0, high=16.0, critical_low=8.0, critical_high=20.0),
    "cholesterol": ThresholdBand(high=200.0, critical_high=240.0, high_at_bound=True),
    "white blood cells": ThresholdBand(
        low=4000.0, high=11000.0, critical_low=2000.0, critical_high=20000.0
    ),
    "red blood cells": ThresholdBand(low=4.2, high=5.4, critical_low=3.0, critical_high=6.5),
    "platelets": ThresholdBand(
        low=150000.0, high=450000.0, critical_low=50000.0, critical_high=1000000.0
    ),
    "heart rate": ThresholdBand(low=60.0, high=100.0, critical_low=40.0, critical_high=150.0),
    # Fahrenheit
    "temperature": ThresholdBand(low=97.0, high=100.4, critical_low=95.0, critical_high=104.0),
}

# Analyte keys are the serialized BloodTestResults keys.
ANALYTES = {
    "glucose": AnalyteSpec(
        terms=("glucose", "blood glucose", "fasting glucose"),
        units=("mg/dl", "mg/l", "mmol/l"),
        category="glucose",
        normal_range="70-100 mg/dL",
    ),
    "hemoglobin": AnalyteSpec(
        terms=("hemoglobin", "hgb", "hb"),
        units=("g/dl", "g/l"),
        category="hemoglobin",
        normal_range="12-16 g/dL",
    ),
    "cholesterol": AnalyteSpec(
        terms=("cholesterol", "total cholesterol"),
        units=("mg/dl", "mg/l", "mmol/l"),
        category="cholesterol",
        normal_range="<200 mg/dL",
    ),
    "whiteBloodCells": AnalyteSpec(
        terms=("white blood cells", "wbc", "leukocytes"),
        units=("/μl", "/ul", "k/ul", "x10³/μl"),
        category="white blood cells",
        normal_range="4,000-11,000/μL",
    ),
    "redBloodCells": AnalyteSpec(
        terms=("red blood cells", "rbc", "erythrocytes"),
        units=("million/μl", "m/ul", "x10⁶/μl"),
        category="red blood cells",
        normal_range="4.2-5.4 million/μL",
    ),
    "platelets": AnalyteSpec(
        terms=("platelets", "plt"),
        units=("/μl", "/ul", "k/ul", "x10³/μl"),
        category="platelets",
        normal_range="150,000-450,000/μL",
    ),
}

VITALS = {
    "heartRate": AnalyteSpec(
        terms=("heart rate", "pulse", "hr"),
        units=("bpm", "beats/min"),
        category="heart rate",
        normal_range="60-100 bpm",
    ),
    "temperature": AnalyteSpec(
        terms=("temperature", "temp"),
        units=("°f", "°c", "f", "c"),
        category="temperature",
        normal_range="98.6°F (37°C)",
    ),
    "weight": AnalyteSpec(terms=("weight", "wt"), units=("kg", "lbs", "lb", "pounds")),
    "height": AnalyteSpec(
        terms=("height", "ht"), units=("cm", "in", "inches", "ft", "feet")
    ),
}


# Abbreviations and camelCase result keys that name a category.
CATEGORY_ALIASES = {
    "wbc": "white blood cells",
    "whitebloodcells": "white blood cells",
    "rbc": "red blood cells",
    "redbloodcells": "red blood cells",
    "plt": "platelets",
    "hgb": "hemoglobin",
    "heartrate": "heart rate",
    "pulse": "heart rate",
    "temp": "temperature",
}


def resolve_category(name: str) -> str | None:
    """Category key for a spelling such as "WBC" or "Fasting Glucose".

    Exact category names win; otherwise a category or alias contained in the
    name (or containing it) is used. None when nothing fits.
    """
    key = " ".join((name or "").lower().split())
    if not key:
        return None

    key = CATEGORY_ALIASES.get(key, key)
    if key in REFERENCE_RANGES:
        return key

    for candidate in list(REFERENCE_RANGES) + list(CATEGORY_ALIASES):
        if candidate in key or key in candidate:
            return CATEGORY_ALIASES.get(candidate, candidate)
    return None


def lookup_reference(name: str) -> ThresholdBand | None:
    category = resolve_category(name)
    return REFERENCE_RANGES[category] if category else None
