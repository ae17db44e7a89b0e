"""
Unit Tests for Pydantic Schemas
Tests validation logic for fee and doctor schemas
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.enums import VisitFeeTier
from src.schemas.doctor import Doctor
from src.schemas.visit_fee import (
    FeeQuoteRequest,
    FeeQuoteResult,
    PatientFeeQuoteRequest,
    PatientVisit,
)


@pytest.mark.unit
class TestFeeQuoteRequestSchema:
    """Test FeeQuoteRequest parsing"""

    def test_all_fields_optional(self):
        request = FeeQuoteRequest()
        assert request.base_doctor_fee is None
        assert request.last_visit_date is None
        assert request.current_visit_date is None

    def test_parses_iso_timestamps(self):
        request = FeeQuoteRequest(
            base_doctor_fee="500",
            last_visit_date="2024-03-05T10:00:00Z",
            current_visit_date="2024-03-15T10:00:00+05:30",
        )
        assert request.base_doctor_fee == Decimal("500")
        assert request.last_visit_date == datetime(2024, 3, 5, 10, 0, tzinfo=timezone.utc)
        assert request.current_visit_date.utcoffset().total_seconds() == 5.5 * 3600

    def test_negative_base_fee_accepted(self):
        """Negative fees are passed through to the calculator untouched"""
        assert FeeQuoteRequest(base_doctor_fee=-10).base_doctor_fee == Decimal("-10")

    def test_invalid_date_rejected(self):
        with pytest.raises(ValidationError):
            FeeQuoteRequest(last_visit_date="yesterday-ish")


@pytest.mark.unit
class TestFeeQuoteResultSchema:
    """Test FeeQuoteResult behaviour"""

    def test_calculate_total(self):
        result = FeeQuoteResult(
            doctor_fee=Decimal("500"),
            revisit_fee=Decimal("0"),
            doctor_change_fee=Decimal("200"),
            tier=VisitFeeTier.FULL_CONSULTATION,
            elapsed_days=45,
        )
        result.calculate_total()
        assert result.total_fee == Decimal("700")

    def test_calculate_total_keeps_every_digit(self):
        result = FeeQuoteResult(
            doctor_fee=Decimal("123456789012345678901234567890.55"),
            revisit_fee=Decimal("100"),
            doctor_change_fee=Decimal("0.05"),
            tier=VisitFeeTier.REVISIT,
        )
        result.calculate_total()
        assert result.total_fee == Decimal("123456789012345678901234567990.60")

    def test_defaults_are_zero(self):
        result = FeeQuoteResult(tier=VisitFeeTier.FREE_FOLLOW_UP)
        assert result.to_visit_record() == {
            "doctor_fee": 0,
            "revisit_fee": 0,
            "doctor_change_fee": 0,
            "total_fee": 0,
        }

    def test_tier_required(self):
        with pytest.raises(ValidationError):
            FeeQuoteResult()


@pytest.mark.unit
class TestPatientVisitSchema:
    """Test visit history rows"""

    def test_minimal_visit(self):
        visit = PatientVisit(id="v1", visit_date="2024-03-05T10:00:00Z")
        assert visit.doctor_id is None
        assert visit.doctor_fee is None

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            PatientVisit(id="", visit_date="2024-03-05T10:00:00Z")

    def test_patient_quote_request_defaults(self):
        request = PatientFeeQuoteRequest()
        assert request.visits == []
        assert request.current_visit_id is None


@pytest.mark.unit
class TestDoctorSchema:
    """Test Doctor validation"""

    def test_negative_default_fee_rejected(self):
        with pytest.raises(ValidationError):
            Doctor(id="x", name="Dr. X", default_fee=Decimal("-1"))

    def test_doctor_is_immutable(self):
        doctor = Doctor(id="x", name="Dr. X", default_fee=Decimal("300"))
        with pytest.raises(ValidationError):
            doctor.default_fee = Decimal("1")
