from dataclasses import dataclass, field

MEDICAL_KEYWORDS = (
    "patient", "doctor", "test", "result", "blood", "glucose", "hemoglobin",
    "cholesterol", "pressure", "medication", "prescription", "diagnosis",
    "laboratory", "clinic", "hospital", "mg/dl", "mmol/l", "normal", "abnormal",
)


@dataclass
class ParserConfig:
    validity_threshold: float = 0.1  # keyword density above which text counts as medical
    low_confidence_threshold: float = 0.3
    medical_keywords: tuple[str, ...] = field(default=MEDICAL_KEYWORDS)
    default_frequency: str = "As directed"
