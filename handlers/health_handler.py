"""
handlers/health_handler.py
--------------------------
Clinic demo: seed patients and prescriptions, then show all patients and
the prescriptions of one of them.
Delegates all logic to HealthService.
"""

from datetime import date, timedelta

from handlers.common import check
from models.patient import Patient, Prescription
from services.health_service import HealthService
from utils.logger import get_logger

logger = get_logger(__name__)


def seed_health(service: HealthService) -> None:
    """Populate the service with sample patients and prescriptions."""
    today = date.today()
    patients = [
        Patient(1, "Kingsford Asante", 28, "Male"),
        Patient(2, "Kofi Mensah", 43, "Male"),
        Patient(3, "Cynthia Agyei", 35, "Female"),
    ]
    prescriptions = [
        Prescription(100, 1, "Amoxicillin 400mg", today - timedelta(days=10)),
        Prescription(101, 1, "Ibuprofen 200mg", today - timedelta(days=5)),
        Prescription(102, 2, "Metformin 500mg", today - timedelta(days=2)),
        Prescription(103, 3, "Loratadine 20mg", today - timedelta(days=1)),
        Prescription(104, 2, "Atorvastatin 10mg", today),
    ]
    for p in patients:
        check(service.add_patient(p), logger, f"Seed patient #{p.id}")
    for rx in prescriptions:
        check(service.add_prescription(rx), logger, f"Seed prescription #{rx.id}")


def run_health(patient_id: int = 2) -> HealthService:
    """Run the clinic demo and return the populated service."""
    service = HealthService()
    seed_health(service)
    service.build_prescription_map()

    print(service.format_patients())
    print(service.format_prescriptions(patient_id))
    return service
