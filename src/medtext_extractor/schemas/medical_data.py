from __future__ import annotations
from enum import Enum
from typing import Literal, Any
from pydantic import BaseModel, ConfigDict, Field

Status = Literal["normal", "high", "low", "critical"]


class ReportCategory(str, Enum):
    BLOOD_TEST = "blood_test"
    PRESCRIPTION = "prescription"
    DIAGNOSTIC = "diagnostic"
    XRAY = "xray"
    MRI = "mri"
    CT_SCAN = "ct_scan"
    LABORATORY = "laboratory"
    VACCINATION = "vaccination"
    CONSULTATION = "consultation"
    OTHER = "other"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MedicalValue(_Record):
    value: float | str  # str when only a raw token was kept for display
    unit: str
    normal_range: str | None = Field(default=None, alias="normalRange")
    status: Status | None = None


class BloodTestResults(_Record):
    """Analyte name -> value. Analytes beyond the named ones are extra keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    glucose: MedicalValue | None = None
    hemoglobin: MedicalValue | None = None
    cholesterol: MedicalValue | None = None
    white_blood_cells: MedicalValue | None = Field(default=None, alias="whiteBloodCells")
    red_blood_cells: MedicalValue | None = Field(default=None, alias="redBloodCells")
    platelets: MedicalValue | None = None


class Medication(_Record):
    name: str
    dosage: str
    frequency: str
    duration: str | None = None
    instructions: str = ""


class PrescriptionData(_Record):
    medications: tuple[Medication, ...] = ()
    doctor: str = ""
    clinic: str = ""
    instructions: str = ""


class VitalsData(_Record):
    """Vital signs. Measurements beyond the named ones are extra keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    blood_pressure: str | None = Field(default=None, alias="bloodPressure")
    heart_rate: MedicalValue | None = Field(default=None, alias="heartRate")
    temperature: MedicalValue | None = None
    weight: MedicalValue | None = None
    height: MedicalValue | None = None


class ParsedMedicalData(_Record):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    blood_test: BloodTestResults | None = Field(default=None, alias="bloodTest")
    prescription: PrescriptionData | None = None
    vitals: VitalsData | None = None

    def to_dict(self) -> dict[str, Any]:
        """Nested plain-map form with camelCase keys, unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def is_empty(self) -> bool:
        for key, section in self.to_dict().items():
            if key == "prescription":
                if section.get("medications") or any(
                    section.get(name) for name in ("doctor", "clinic", "instructions")
                ):
                    return False
            elif section:
                return False
        return True
