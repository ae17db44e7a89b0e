"""
Services Layer for the Clinic Visit Billing Service.

Exports the visit fee calculator, doctor registry and visit history helpers.
"""

from src.services.doctor_registry import (
    DEFAULT_DOCTORS,
    DoctorRegistry,
    get_doctor_registry,
)
from src.services.visit_fee_calculator import (
    VisitFeeCalculator,
    calculate_doctor_change_fee,
    calculate_elapsed_days,
    calculate_revisit_fee,
    calculate_total_visit_fee,
    get_visit_fee_calculator,
)
from src.services.visit_history import get_last_visit, is_revisit

__all__ = [
    # Fee calculation
    "VisitFeeCalculator",
    "calculate_doctor_change_fee",
    "calculate_elapsed_days",
    "calculate_revisit_fee",
    "calculate_total_visit_fee",
    "get_visit_fee_calculator",
    # Doctors
    "DEFAULT_DOCTORS",
    "DoctorRegistry",
    "get_doctor_registry",
    # Visit history
    "get_last_visit",
    "is_revisit",
]
