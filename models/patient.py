"""
models/patient.py
-----------------
Domain models for the clinic catalog: patients and their prescriptions.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Patient:
    """
    A registered patient.

    Attributes:
        id: Unique patient number.
        name: Full name.
        age: Age in years.
        gender: Free-text gender.
    """
    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return f"Patient {{ Id={self.id}, Name={self.name}, Age={self.age}, Gender={self.gender} }}"


@dataclass(frozen=True)
class Prescription:
    """
    A medication issued to a patient.

    `patient_id` refers to a `Patient.id`; nothing enforces that the
    patient exists.
    """
    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __str__(self) -> str:
        return (
            f"Prescription {{ Id={self.id}, PatientId={self.patient_id}, "
            f"Medication={self.medication_name}, DateIssued={self.date_issued} }}"
        )
