"""
Doctor Registry.

In-memory roster of doctors and their standard consultation fees. The fee
calculator asks the registry for a doctor's default fee when the caller
does not supply one.

Source: Design Document Section 6 - External Interfaces
Verified: 2026-10-19
"""

from decimal import Decimal
from typing import Iterable, Optional

from src.core.config import FeePolicySettings, get_fee_settings
from src.schemas.doctor import Doctor
from src.utils.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_DOCTOR_NAME = "Unknown Doctor"

DEFAULT_DOCTORS: tuple[Doctor, ...] = (
    Doctor(
        id="manoj-singh",
        name="Dr. Manoj Singh",
        specialty="ENT Specialist",
        default_fee=Decimal("500"),
    ),
    Doctor(
        id="sikha-gaud",
        name="Dr. Sikha Gaud",
        specialty="Dental Specialist",
        default_fee=Decimal("500"),
    ),
)


class DoctorRegistry:
    """Lookup of doctors by identifier."""

    def __init__(
        self,
        doctors: Optional[Iterable[Doctor]] = None,
        settings: Optional[FeePolicySettings] = None,
    ):
        self.settings = settings or get_fee_settings()
        roster = DEFAULT_DOCTORS if doctors is None else doctors
        self._doctors: dict[str, Doctor] = {doctor.id: doctor for doctor in roster}

    def list_doctors(self) -> list[Doctor]:
        """Return the roster in registration order."""
        return list(self._doctors.values())

    def get_doctor(self, doctor_id: Optional[str]) -> Optional[Doctor]:
        """Return the doctor for an id, or None when unknown or absent."""
        if not doctor_id:
            return None
        return self._doctors.get(doctor_id)

    def get_doctor_name(self, doctor_id: Optional[str]) -> str:
        doctor = self.get_doctor(doctor_id)
        return doctor.name if doctor else UNKNOWN_DOCTOR_NAME

    def get_default_doctor_fee(self, doctor_id: Optional[str]) -> Decimal:
        """
        Standard consultation fee for a doctor.

        Unknown or missing ids, and doctors listed without a fee (zero), fall
        back to the policy-wide default fee.
        """
        doctor = self.get_doctor(doctor_id)
        if doctor is None:
            if doctor_id:
                logger.warning(f"Unknown doctor '{doctor_id}', using policy default fee")
            return self.settings.DEFAULT_DOCTOR_FEE
        return doctor.default_fee or self.settings.DEFAULT_DOCTOR_FEE


# =============================================================================
# Singleton Instance
# =============================================================================


_doctor_registry: Optional[DoctorRegistry] = None


def get_doctor_registry() -> DoctorRegistry:
    """Get singleton doctor registry instance."""
    global _doctor_registry
    if _doctor_registry is None:
        _doctor_registry = DoctorRegistry()
    return _doctor_registry
