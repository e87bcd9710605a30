from __future__ import annotations

import logging
import re

from medtext_extractor.pipeline.normalize import normalize_lines
from medtext_extractor.schemas.medical_data import Medication, PrescriptionData

logger = logging.getLogger(__name__)

DEFAULT_FREQUENCY = "As directed"

# Header fields: first pattern that matches anywhere in the text wins.
DOCTOR_PATTERNS = (
    re.compile(r"\bdr\.?[^\S\n]+([a-z][a-z ]*)", re.IGNORECASE),
    re.compile(r"\bdoctor:?[^\S\n]*([a-z][a-z ]*)", re.IGNORECASE),
    re.compile(r"\bphysician:?[^\S\n]*([a-z][a-z ]*)", re.IGNORECASE),
)
CLINIC_PATTERNS = (
    re.compile(r"\bclinic:?[^\S\n]*([a-z][a-z ]*)", re.IGNORECASE),
    re.compile(r"\bhospital:?[^\S\n]*([a-z][a-z ]*)", re.IGNORECASE),
    re.compile(r"\bmedical center:?[^\S\n]*([a-z][a-z ]*)", re.IGNORECASE),
)
INSTRUCTION_PATTERNS = (
    re.compile(r"\binstructions?:?[^\S\n]*([^\n]+)", re.IGNORECASE),
    re.compile(r"\bdirections?:?[^\S\n]*([^\n]+)", re.IGNORECASE),
    re.compile(r"\bnotes?:?[^\S\n]*([^\n]+)", re.IGNORECASE),
)

_INDEX = r"(?:\d+\.?\s*)?"
_NAME = r"([a-z][a-z ]*?)"
_DOSAGE = r"(\d+(?:\.\d+)?\s*(?:mcg|mg|ml|μg|g|units?)\b)"

# Most specific shape first.
MEDICATION_PATTERNS = (
    # 1. Metformin 500mg - Take twice daily
    re.compile(rf"^{_INDEX}{_NAME}\s+{_DOSAGE}\s*-\s*(.+)$", re.IGNORECASE),
    # Metformin: 500mg, Take twice daily
    re.compile(rf"^{_INDEX}{_NAME}:\s*{_DOSAGE}(?:,\s*|\s+)(.+)$", re.IGNORECASE),
    # Metformin 500mg twice daily
    re.compile(rf"^{_INDEX}{_NAME}\s+{_DOSAGE}\s+(.+)$", re.IGNORECASE),
)

FREQUENCY_PATTERNS = (
    (re.compile(r"\b(?:once\s+(?:a\s+)?daily|once\s+a\s+day|1x\s*daily|qd)\b", re.I), "Once daily"),
    (re.compile(r"\b(?:twice\s+(?:a\s+)?daily|twice\s+a\s+day|2x\s*daily|bid)\b", re.I), "Twice daily"),
    (re.compile(r"\b(?:three\s+times?\s+(?:a\s+)?daily|three\s+times\s+a\s+day|3x\s*daily|tid)\b", re.I), "Three times daily"),
    (re.compile(r"\b(?:four\s+times?\s+(?:a\s+)?daily|four\s+times\s+a\s+day|4x\s*daily|qid)\b", re.I), "Four times daily"),
    (re.compile(r"\bevery\s+(\d+)\s+hours?\b", re.I), "Every {0} hours"),
    (re.compile(r"\b(?:as\s+needed|prn)\b", re.I), "As needed"),
    # bare "daily" only after every qualified form had its chance
    (re.compile(r"\bdaily\b", re.I), "Once daily"),
)

DURATION_PATTERNS = (
    re.compile(r"\bfor\s+\d+\s+days?\b", re.I),
    re.compile(r"\bfor\s+\d+\s+weeks?\b", re.I),
    re.compile(r"\bfor\s+\d+\s+months?\b", re.I),
    re.compile(r"\b\d+\s+days?\b", re.I),
    re.compile(r"\b\d+\s+weeks?\b", re.I),
    re.compile(r"\b\d+\s+months?\b", re.I),
)


def _first_capture(
    patterns: tuple[re.Pattern[str], ...], text: str, strip: str = " ."
) -> str:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1).strip(strip)
    return ""


def parse_frequency(text: str, default: str = DEFAULT_FREQUENCY) -> str:
    for pattern, label in FREQUENCY_PATTERNS:
        match = pattern.search(text)
        if match:
            return label.format(*match.groups())
    return default


def parse_duration(text: str) -> str | None:
    for pattern in DURATION_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return None


def parse_instructions(
    text: str, default_frequency: str = DEFAULT_FREQUENCY
) -> tuple[str, str | None, str]:
    """Return (frequency, duration, instructions); the text is kept verbatim."""
    return parse_frequency(text, default_frequency), parse_duration(text), text


def parse_medication_line(
    line: str, default_frequency: str = DEFAULT_FREQUENCY
) -> Medication | None:
    line = line.strip()
    for pattern in MEDICATION_PATTERNS:
        match = pattern.match(line)
        if match is None:
            continue
        name = match.group(1).strip()
        # stray list markers and numbers are not drug names
        if len(name) < 3 or name.isdigit():
            continue
        frequency, duration, instructions = parse_instructions(
            match.group(3).strip(), default_frequency
        )
        return Medication(
            name=name,
            dosage=match.group(2).strip(),
            frequency=frequency,
            duration=duration,
            instructions=instructions,
        )
    return None


def parse_prescription(
    text: str, default_frequency: str = DEFAULT_FREQUENCY
) -> PrescriptionData:
    lines = normalize_lines(text)
    joined = "\n".join(lines)

    medications = []
    for line in lines:
        medication = parse_medication_line(line, default_frequency)
        if medication is not None:
            medications.append(medication)

    prescription = PrescriptionData(
        medications=tuple(medications),
        doctor=_first_capture(DOCTOR_PATTERNS, joined),
        clinic=_first_capture(CLINIC_PATTERNS, joined),
        instructions=_first_capture(INSTRUCTION_PATTERNS, joined, strip=" "),
    )
    logger.info(
        "prescription: %d medications, doctor=%r",
        len(prescription.medications),
        prescription.doctor,
    )
    return prescription
