"""Shared pytest fixtures for medtext_extractor tests."""

import pytest
from medtext_extractor.schemas.config import ParserConfig


@pytest.fixture
def lab_report_text() -> str:
    """OCR text of a typical laboratory report."""
    return (
        "LABORATORY REPORT\n"
        "Patient Name: John Doe\n"
        "Date: 2024-01-15\n"
        "Test Results:\n"
        "- Glucose: 95 mg/dL (Normal: 70-100)\n"
        "- Hemoglobin: 14.2 g/dL (Normal: 12-16)\n"
        "- Cholesterol: 180 mg/dL (Normal: <200)\n"
        "- White Blood Cells: 7,500/μL (Normal: 4,000-11,000)\n"
        "- Red Blood Cells: 4.8 million/μL (Normal: 4.2-5.4)\n"
        "Doctor: Dr. Smith\n"
        "Clinic: City Medical Center"
    )


@pytest.fixture
def prescription_text() -> str:
    """OCR text of a prescription with three numbered medications."""
    return (
        "PRESCRIPTION\n"
        "Patient: Jane Smith\n"
        "Date: 2024-01-16\n"
        "Medications:\n"
        "1. Metformin 500mg - Take twice daily with meals\n"
        "2. Lisinopril 10mg – Take once daily in morning\n"
        "3. Atorvastatin 20mg - Take once daily at bedtime\n"
        "Follow-up: 3 months\n"
        "Dr. Johnson\n"
        "Internal Medicine"
    )


@pytest.fixture
def xray_text() -> str:
    """OCR text of a radiology report with no extractable values."""
    return (
        "X-RAY REPORT\n"
        "Patient: Mike Wilson\n"
        "Examination: Chest X-Ray\n"
        "Findings:\n"
        "- Lungs are clear bilaterally\n"
        "- No acute abnormalities\n"
        "Impression: Normal chest X-ray"
    )


@pytest.fixture
def default_config() -> ParserConfig:
    return ParserConfig()
