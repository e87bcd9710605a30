"""Schema definitions for medical text extraction."""
from medtext_extractor.schemas.medical_data import (
    MedicalValue, BloodTestResults, Medication, PrescriptionData, VitalsData,
    ParsedMedicalData, ReportCategory, Status,
)
from medtext_extractor.schemas.document import DocumentResult, TextValidation
from medtext_extractor.schemas.config import ParserConfig

__all__ = [
    "MedicalValue", "BloodTestResults", "Medication", "PrescriptionData",
    "VitalsData", "ParsedMedicalData", "ReportCategory", "Status",
    "DocumentResult", "TextValidation", "ParserConfig",
]
