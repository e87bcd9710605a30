from __future__ import annotations

import logging

from medtext_extractor.schemas.config import ParserConfig
from medtext_extractor.schemas.document import TextValidation

logger = logging.getLogger(__name__)


def validate_medical_text(text: str, config: ParserConfig | None = None) -> TextValidation:
    """Estimate whether raw OCR text is a medical document.

    Confidence is the share of the fixed medical vocabulary present in the
    text. Works on the whole raw text, independently of the extractors.
    """
    config = config or ParserConfig()
    text_lower = (text or "").lower()
    keywords = config.medical_keywords

    found = [keyword for keyword in keywords if keyword in text_lower]
    confidence = len(found) / len(keywords) if keywords else 0.0

    suggestions: list[str] = []
    if confidence < config.low_confidence_threshold:
        suggestions.append(
            "This may not be a medical document. Please verify the image quality."
        )
    if "patient" not in text_lower and "name" not in text_lower:
        suggestions.append("Patient name may be missing or unclear.")
    if "date" not in text_lower:
        suggestions.append("Date information may be missing.")

    logger.info(
        "validate: %d/%d medical keywords (%.0f%%)",
        len(found),
        len(keywords),
        confidence * 100,
    )

    return TextValidation(
        is_valid=confidence > config.validity_threshold,
        confidence=confidence,
        suggestions=suggestions,
        found_keywords=found,
    )
