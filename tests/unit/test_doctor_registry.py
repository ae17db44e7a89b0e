"""
Doctor Registry Tests.
"""

from decimal import Decimal

import pytest
from loguru import logger

from src.core.config import FeePolicySettings
from src.schemas.doctor import Doctor
from src.services.doctor_registry import (
    DEFAULT_DOCTORS,
    UNKNOWN_DOCTOR_NAME,
    DoctorRegistry,
    get_doctor_registry,
)


@pytest.mark.unit
class TestDoctorRegistry:
    """Tests for doctor lookups and default fees."""

    def test_default_roster(self, registry):
        ids = [doctor.id for doctor in registry.list_doctors()]
        assert ids == ["manoj-singh", "sikha-gaud"]

    def test_get_doctor(self, registry):
        doctor = registry.get_doctor("sikha-gaud")
        assert doctor.name == "Dr. Sikha Gaud"
        assert doctor.specialty == "Dental Specialist"

    @pytest.mark.parametrize("doctor_id", ["nobody", "", None])
    def test_get_unknown_doctor(self, registry, doctor_id):
        assert registry.get_doctor(doctor_id) is None

    def test_doctor_name(self, registry):
        assert registry.get_doctor_name("manoj-singh") == "Dr. Manoj Singh"

    def test_unknown_doctor_name(self, registry):
        assert registry.get_doctor_name("nobody") == UNKNOWN_DOCTOR_NAME

    def test_default_fee(self, registry):
        assert registry.get_default_doctor_fee("manoj-singh") == Decimal("500")

    @pytest.mark.parametrize("doctor_id", ["nobody", None])
    def test_unknown_doctor_uses_policy_default(self, doctor_id):
        settings = FeePolicySettings(_env_file=None, DEFAULT_DOCTOR_FEE=Decimal("450"))
        registry = DoctorRegistry(settings=settings)
        assert registry.get_default_doctor_fee(doctor_id) == Decimal("450")

    def test_custom_roster(self, fee_settings):
        doctor = Doctor(id="dr-rao", name="Dr. Rao", specialty="ENT", default_fee=Decimal("650"))
        registry = DoctorRegistry(doctors=[doctor], settings=fee_settings)

        assert registry.list_doctors() == [doctor]
        assert registry.get_default_doctor_fee("dr-rao") == Decimal("650")
        assert registry.get_doctor("manoj-singh") is None

    def test_zero_fee_doctor_uses_policy_default(self, fee_settings):
        doctor = Doctor(id="dr-rao", name="Dr. Rao", specialty="ENT", default_fee=Decimal("0"))
        registry = DoctorRegistry(doctors=[doctor], settings=fee_settings)
        assert registry.get_default_doctor_fee("dr-rao") == Decimal("500")

        settings = FeePolicySettings(_env_file=None, DEFAULT_DOCTOR_FEE=Decimal("450"))
        registry = DoctorRegistry(doctors=[doctor], settings=settings)
        assert registry.get_default_doctor_fee("dr-rao") == Decimal("450")

    def test_unknown_doctor_logs_warning(self, registry):
        messages = []
        handler_id = logger.add(messages.append, level="WARNING", format="{message}")
        try:
            registry.get_default_doctor_fee("nobody")
            registry.get_default_doctor_fee(None)
        finally:
            logger.remove(handler_id)

        assert len(messages) == 1
        assert "Unknown doctor 'nobody'" in messages[0]

    def test_empty_roster(self, fee_settings):
        registry = DoctorRegistry(doctors=[], settings=fee_settings)
        assert registry.list_doctors() == []

    def test_singleton(self):
        assert get_doctor_registry() is get_doctor_registry()
        assert len(get_doctor_registry().list_doctors()) == len(DEFAULT_DOCTORS)
