from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable, Mapping

from medtext_extractor.pipeline.classify import classify
from medtext_extractor.schemas.medical_data import (
    BloodTestResults,
    MedicalValue,
    VitalsData,
)
from medtext_extractor.schemas.reference_ranges import ANALYTES, VITALS, AnalyteSpec

logger = logging.getLogger(__name__)

NUMBER = r"\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?"

BLOOD_PRESSURE = re.compile(r"blood pressure:?\s*(\d+/\d+)", re.IGNORECASE)


@lru_cache(maxsize=512)
def _value_pattern(term: str, unit: str, longer_units: tuple[str, ...] = ()) -> re.Pattern[str]:
    # "term: 95 unit", "term 95unit", "term 95 unit"
    # A unit is refused only where a longer accepted unit continues it ("in" vs "inches").
    guard = ""
    if longer_units:
        guard = "(?!" + "|".join(re.escape(u[len(unit):]) for u in longer_units) + ")"
    return re.compile(
        rf"(?<![a-z]){re.escape(term)}:?\s*({NUMBER})\s*{re.escape(unit)}{guard}",
        re.IGNORECASE,
    )


def extract_value_with_unit(
    text: str, terms: Iterable[str], units: Iterable[str]
) -> MedicalValue | None:
    """Find the first ``term [:] number unit`` occurrence.

    Synonyms are tried in order, and for each synonym the units in order, so
    an earlier synonym wins over a later one regardless of where either sits
    in the text. The stored unit is the accepted spelling from ``units``.
    Returns None when no pair matches.
    """
    text_lower = text.lower()
    units = tuple(units)
    spellings = tuple(unit.lower() for unit in units)
    for term in terms:
        for unit, spelling in zip(units, spellings):
            longer = tuple(
                other for other in spellings if other != spelling and other.startswith(spelling)
            )
            match = _value_pattern(term.lower(), spelling, longer).search(text_lower)
            if match is None:
                continue
            try:
                value = float(match.group(1).replace(",", ""))
            except ValueError:
                continue
            return MedicalValue(value=value, unit=unit)
    return None


def extract_measurement(text: str, spec: AnalyteSpec) -> MedicalValue | None:
    """Extract one analyte/vital and attach its reference text and status."""
    found = extract_value_with_unit(text, spec.terms, spec.units)
    if found is None or spec.category is None:
        return found
    return found.model_copy(
        update={
            "normal_range": spec.normal_range,
            "status": classify(spec.category, found.value, found.unit),
        }
    )


def _extract_all(text: str, specs: Mapping[str, AnalyteSpec]) -> dict[str, MedicalValue]:
    results: dict[str, MedicalValue] = {}
    for key, spec in specs.items():
        found = extract_measurement(text, spec)
        if found is not None:
            results[key] = found
    return results


def parse_blood_test(
    text: str, analytes: Mapping[str, AnalyteSpec] = ANALYTES
) -> BloodTestResults:
    results = _extract_all(text, analytes)
    logger.info("extract: %d lab values found", len(results))
    return BloodTestResults(**results)


def extract_blood_pressure(text: str) -> str | None:
    match = BLOOD_PRESSURE.search(text)
    return match.group(1) if match else None


def parse_vitals(text: str, vitals: Mapping[str, AnalyteSpec] = VITALS) -> VitalsData:
    results: dict[str, object] = dict(_extract_all(text, vitals))
    blood_pressure = extract_blood_pressure(text)
    if blood_pressure is not None:
        results["bloodPressure"] = blood_pressure
    logger.info("extract: %d vitals found", len(results))
    return VitalsData(**results)
