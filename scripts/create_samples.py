#!/usr/bin/env python3
"""Generate sample OCR text documents for trying the CLI."""

from pathlib import Path

# Lab values for variety: (name, value, unit, reference)
LAB_VALUES = [
    [
        ("Glucose", "95", "mg/dL", "70-100"),
        ("Hemoglobin", "14.2", "g/dL", "12-16"),
        ("Cholesterol", "180", "mg/dL", "<200"),
        ("White Blood Cells", "7,500", "/μL", "4,000-11,000"),
        ("Red Blood Cells", "4.8", "million/μL", "4.2-5.4"),
    ],
    [
        ("Fasting Glucose", "132", "mg/dL", "70-100"),
        ("Hgb", "10.9", "g/dL", "12-16"),
        ("Platelets", "95,000", "/μL", "150,000-450,000"),
        ("WBC", "12.4", "K/uL", "4,000-11,000"),
    ],
    [
        ("Total Cholesterol", "6.4", "mmol/L", "<200 mg/dL"),
        ("Blood Glucose", "3.1", "mmol/L", "70-100 mg/dL"),
        ("RBC", "2.8", "M/uL", "4.2-5.4"),
    ],
]

PATIENT_INFO = [
    ("John Doe", "2024-01-15", "Dr. Smith", "City Medical Center"),
    ("Jane Smith", "2024-01-16", "Dr. Patel", "Riverside Clinic"),
    ("Ahmed Hassan", "2024-01-19", "Dr. Brown", "General Hospital"),
]

PRESCRIPTIONS = [
    [
        "1. Metformin 500mg - Take twice daily with meals",
        "2. Lisinopril 10mg - Take once daily in morning",
        "3. Atorvastatin 20mg - Take once daily at bedtime",
    ],
    [
        "Amoxicillin: 250mg, every 8 hours for 7 days",
        "Ibuprofen 400 mg as needed for pain",
    ],
]

VITALS = [
    "Blood Pressure: 128/84\nHeart Rate: 72 bpm\nTemperature: 98.6 °F\nWeight: 70 kg\nHeight: 175 cm",
    "Blood Pressure: 150/95\nPulse 118 bpm\nTemp 39.2 °C\nWt 82 kg",
]


def create_lab_report(index: int) -> str:
    patient, date, doctor, clinic = PATIENT_INFO[index % len(PATIENT_INFO)]
    lines = [
        "LABORATORY REPORT",
        f"Patient Name: {patient}",
        f"Date: {date}",
        "Test Results:",
    ]
    for name, value, unit, reference in LAB_VALUES[index]:
        lines.append(f"- {name}: {value} {unit} (Normal: {reference})")
    lines.append(f"Doctor: {doctor}")
    lines.append(f"Clinic: {clinic}")
    return "\n".join(lines)


def create_prescription(index: int) -> str:
    patient, date, doctor, clinic = PATIENT_INFO[index % len(PATIENT_INFO)]
    lines = ["PRESCRIPTION", f"Patient: {patient}", f"Date: {date}", "Medications:"]
    lines.extend(PRESCRIPTIONS[index])
    lines.append("Instructions: Follow-up in 3 months")
    lines.append(doctor)
    lines.append(f"Hospital: {clinic}")
    return "\n".join(lines)


def create_checkup(index: int) -> str:
    patient, date, doctor, _ = PATIENT_INFO[index % len(PATIENT_INFO)]
    return f"VITALS\nPatient: {patient}\nDate: {date}\n{VITALS[index]}\nPhysician: {doctor[4:]}"


def main() -> None:
    output_dir = Path("data/samples")
    output_dir.mkdir(parents=True, exist_ok=True)

    documents = {}
    for i in range(len(LAB_VALUES)):
        documents[f"lab_{i + 1:03d}.txt"] = create_lab_report(i)
    for i in range(len(PRESCRIPTIONS)):
        documents[f"prescription_{i + 1:03d}.txt"] = create_prescription(i)
    for i in range(len(VITALS)):
        documents[f"vitals_{i + 1:03d}.txt"] = create_checkup(i)

    for name, text in documents.items():
        path = output_dir / name
        path.write_text(text + "\n", encoding="utf-8")
        print(f"Created {path}")

    print(f"\nGenerated {len(documents)} sample documents in {output_dir}")


if __name__ == "__main__":
    main()
