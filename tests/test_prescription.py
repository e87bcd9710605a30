"""Tests for prescription parsing."""

import pytest
from medtext_extractor.pipeline.prescription import (
    parse_duration,
    parse_frequency,
    parse_instructions,
    parse_medication_line,
    parse_prescription,
)


def test_numbered_dash_line():
    """Numbered "name dosage - instructions" line."""
    med = parse_medication_line("1. Metformin 500mg - Take twice daily with meals")
    assert med.name == "Metformin"
    assert med.dosage == "500mg"
    assert med.frequency == "Twice daily"
    assert med.duration is None
    assert med.instructions == "Take twice daily with meals"


def test_colon_comma_line():
    """"name: dosage, instructions" line."""
    med = parse_medication_line("Amoxicillin: 250mg, every 8 hours for 7 days")
    assert med.name == "Amoxicillin"
    assert med.dosage == "250mg"
    assert med.frequency == "Every 8 hours"
    assert med.duration == "for 7 days"
    assert med.instructions == "every 8 hours for 7 days"


def test_unseparated_line():
    """"name dosage instructions" line without separator."""
    med = parse_medication_line("Ibuprofen 400 mg as needed for pain")
    assert med.name == "Ibuprofen"
    assert med.dosage == "400 mg"
    assert med.frequency == "As needed"


def test_multiword_name_and_units():
    """Multi-word drug names and "units" dosages."""
    med = parse_medication_line("Vitamin D 1000 units - daily")
    assert med.name == "Vitamin D"
    assert med.dosage == "1000 units"
    assert med.frequency == "Once daily"


@pytest.mark.parametrize(
    "line",
    [
        "12. 500mg - take daily",  # no name at all
        "Ab 5mg - daily",  # too short to be a drug name
        "Glucose: 95 mg/dL",  # lab value, not a medication
        "Follow-up: 3 months",
        "",
    ],
)
def test_rejected_lines(line):
    """Lines without a plausible drug name are not medications."""
    assert parse_medication_line(line) is None


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Take once daily in morning", "Once daily"),
        ("take twice daily with meals", "Twice daily"),
        ("1 tab BID", "Twice daily"),
        ("three times daily after food", "Three times daily"),
        ("tid", "Three times daily"),
        ("4x daily", "Four times daily"),
        ("every 6 hours", "Every 6 hours"),
        ("PRN for headache", "As needed"),
        ("daily at bedtime", "Once daily"),
        ("with plenty of water", "As directed"),
    ],
)
def test_frequency(text, expected):
    """Frequency phrases map to canonical labels, first match wins."""
    assert parse_frequency(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("for 10 days then 2 weeks", "for 10 days"),
        ("Take for 2 weeks", "for 2 weeks"),
        ("for 3 months", "for 3 months"),
        ("continue 5 days", "5 days"),
        ("twice daily", None),
    ],
)
def test_duration(text, expected):
    """Duration patterns with "for" are tried before bare ones."""
    assert parse_duration(text) == expected


def test_instructions_kept_verbatim():
    """Instruction text is returned unchanged next to derived fields."""
    text = "Take 1 tablet twice daily for 5 days, avoid alcohol"
    assert parse_instructions(text) == ("Twice daily", "for 5 days", text)


def test_reparsing_instructions_is_stable(prescription_text):
    """Re-parsing stored instructions yields the same frequency and duration."""
    for med in parse_prescription(prescription_text).medications:
        assert parse_instructions(med.instructions) == (
            med.frequency,
            med.duration,
            med.instructions,
        )


def test_parse_prescription_document(prescription_text):
    """Medications are kept in document order."""
    data = parse_prescription(prescription_text)
    assert [m.name for m in data.medications] == ["Metformin", "Lisinopril", "Atorvastatin"]
    assert [m.frequency for m in data.medications] == [
        "Twice daily",
        "Once daily",
        "Once daily",
    ]
    assert data.doctor == "Johnson"
    assert data.clinic == ""
    assert data.instructions == ""


def test_header_fields_first_pattern_wins():
    """Doctor, clinic and instructions use their pattern priority."""
    text = (
        "Physician: Jane Doe\n"
        "Dr. Alan Grant\n"
        "Hospital: General Hospital\n"
        "Clinic: Riverside Clinic\n"
        "Notes: Avoid alcohol.\n"
        "Directions: Take with water"
    )
    data = parse_prescription(text)
    assert data.doctor == "Alan Grant"
    assert data.clinic == "Riverside Clinic"
    assert data.instructions == "Take with water"
    assert data.medications == ()


def test_lab_report_has_no_medications(lab_report_text):
    """Lab lines are not mistaken for medications."""
    data = parse_prescription(lab_report_text)
    assert data.medications == ()
    assert data.doctor == "Smith"
    assert data.clinic == "City Medical Center"


def test_empty_text():
    """Empty text gives an empty prescription."""
    data = parse_prescription("")
    assert data.medications == ()
    assert data.doctor == ""


def test_header_capture_stops_at_period():
    """A period ends the doctor name instead of running into the next field."""
    data = parse_prescription("Dr. Sarah Lee. Clinic: Riverside Family Practice")
    assert data.doctor == "Sarah Lee"
    assert data.clinic == "Riverside Family Practice"
