from __future__ import annotations

import logging

from medtext_extractor.schemas.medical_data import Status
from medtext_extractor.schemas.reference_ranges import (
    ThresholdBand,
    lookup_reference,
    resolve_category,
)

logger = logging.getLogger(__name__)

MMOL_TO_MG_DL = {
    "glucose": 18.016,
    "cholesterol": 38.67,
}

THOUSANDS_UNITS = {"k/ul", "k/μl", "x10³/μl", "x10³/ul"}


def to_reference_unit(category: str, value: float, unit: str = "") -> float:
    """Convert ``value`` into the unit the category's band is expressed in.

    An empty unit means the value is already in reference units.
    """
    unit = unit.lower().strip()
    if not unit:
        return value

    if category == "temperature":
        return value * 9 / 5 + 32 if "c" in unit else value
    if category in MMOL_TO_MG_DL:
        if unit == "mmol/l":
            return value * MMOL_TO_MG_DL[category]
        if unit == "mg/l":
            return value / 10
    if category == "hemoglobin" and unit == "g/l":
        return value / 10
    if category in ("white blood cells", "platelets") and unit in THOUSANDS_UNITS:
        return value * 1000
    return value


def status_for_band(band: ThresholdBand, value: float) -> Status:
    if band.low is not None and value < band.low:
        if band.critical_low is not None and value < band.critical_low:
            return "critical"
        return "low"

    if band.high is not None:
        above = value >= band.high if band.high_at_bound else value > band.high
        if above:
            if band.critical_high is not None and (
                value >= band.critical_high
                if band.high_at_bound
                else value > band.critical_high
            ):
                return "critical"
            return "high"

    return "normal"


def classify(category: str, value: float, unit: str = "") -> Status:
    """Map a numeric value of a clinical category to its status.

    ``category`` may be any spelling ``lookup_reference`` understands.
    Raises KeyError for a category without a reference band.
    """
    band = lookup_reference(category)
    if band is None:
        raise KeyError(category)
    reference_value = to_reference_unit(resolve_category(category), value, unit)
    status = status_for_band(band, reference_value)
    logger.debug(
        "classify: %s=%s %s -> %.2f: %s", category, value, unit, reference_value, status
    )
    return status
