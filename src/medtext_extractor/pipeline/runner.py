from __future__ import annotations

import logging
from enum import Enum

from medtext_extractor.pipeline.extract import parse_blood_test, parse_vitals
from medtext_extractor.pipeline.normalize import normalize_text
from medtext_extractor.pipeline.prescription import parse_prescription
from medtext_extractor.schemas.config import ParserConfig
from medtext_extractor.schemas.medical_data import ParsedMedicalData, ReportCategory

logger = logging.getLogger(__name__)

LAB_CATEGORIES = {ReportCategory.BLOOD_TEST.value, ReportCategory.LABORATORY.value}


def parse_medical_text(
    text: str,
    category: str | None = None,
    config: ParserConfig | None = None,
) -> ParsedMedicalData:
    """Extract structured medical data from OCR text.

    ``blood_test``/``laboratory`` run only the lab extractor, ``prescription``
    only the prescription extractor. Any other hint, or none, runs all three
    and attaches every result.
    """
    config = config or ParserConfig()
    if isinstance(category, Enum):
        category = category.value
    text = text or ""
    flat = normalize_text(text)

    if category in LAB_CATEGORIES:
        logger.info("runner: lab extraction (category=%s)", category)
        return ParsedMedicalData(blood_test=parse_blood_test(flat))

    # Prescription records are line-structured, so it gets the raw text.
    if category == ReportCategory.PRESCRIPTION.value:
        logger.info("runner: prescription extraction")
        return ParsedMedicalData(
            prescription=parse_prescription(text, config.default_frequency)
        )

    logger.info("runner: category=%s, trying all extractors", category)
    return ParsedMedicalData(
        blood_test=parse_blood_test(flat),
        prescription=parse_prescription(text, config.default_frequency),
        vitals=parse_vitals(flat),
    )
