from __future__ import annotations
from pydantic import BaseModel
from medtext_extractor.schemas.medical_data import ParsedMedicalData


class TextValidation(BaseModel):
    is_valid: bool
    confidence: float
    suggestions: list[str] = []
    found_keywords: list[str] = []


class DocumentResult(BaseModel):
    source_path: str
    category: str | None = None
    parsed: ParsedMedicalData
    validation: TextValidation | None = None
    success: bool
    error: str | None = None
