"""
services/health_service.py
--------------------------
Business logic for the clinic catalog: patients, prescriptions, and the
patient -> prescriptions lookup.
"""

from typing import Optional

from models.patient import Patient, Prescription
from models.result import Result
from repositories.repository import Repository
from utils.logger import get_logger

logger = get_logger(__name__)


class HealthService:
    """Keeps patients and prescriptions and groups prescriptions by patient."""

    def __init__(self):
        self.patients: Repository[Patient] = Repository(name="patients")
        self.prescriptions: Repository[Prescription] = Repository(name="prescriptions")
        self._prescription_map: dict[int, list[Prescription]] = {}

    def add_patient(self, patient: Patient) -> Result[None]:
        return self.patients.add(patient)

    def add_prescription(self, prescription: Prescription) -> Result[None]:
        return self.prescriptions.add(prescription)

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        """
        Group the current prescriptions by `patient_id`.
        Prescriptions keep their insertion order within each group.

        Returns:
            The rebuilt mapping.
        """
        grouped: dict[int, list[Prescription]] = {}
        for p in self.prescriptions.get_all():
            grouped.setdefault(p.patient_id, []).append(p)
        self._prescription_map = grouped
        logger.info(f"Built prescription map for {len(grouped)} patients")
        return grouped

    def get_prescriptions_for_patient(self, patient_id: int) -> list[Prescription]:
        """Prescriptions for one patient as of the last `build_prescription_map()`."""
        return list(self._prescription_map.get(patient_id, []))

    def find_patient_by_name(self, name: str) -> Optional[Patient]:
        """Case-insensitive exact match on the patient's name."""
        wanted = name.strip().lower()
        return self.patients.find(lambda p: p.name.lower() == wanted)

    def format_patients(self) -> str:
        lines = ["=== All Patients ==="]
        lines.extend(str(p) for p in self.patients.get_all())
        return "\n".join(lines)

    def format_prescriptions(self, patient_id: int) -> str:
        lines = [f"=== Prescriptions for PatientId={patient_id} ==="]
        prescriptions = self.get_prescriptions_for_patient(patient_id)
        if not prescriptions:
            lines.append("(none)")
        lines.extend(str(p) for p in prescriptions)
        return "\n".join(lines)
