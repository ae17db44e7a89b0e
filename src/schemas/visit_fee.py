"""
Pydantic Schemas for Visit Fee Calculation.
Source: Design Document Section 3 - Data Model
Verified: 2026-10-19
"""

from datetime import datetime
from decimal import Decimal, localcontext
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.core.enums import FeeComponent, VisitFeeTier


# =============================================================================
# Visit History Schemas
# =============================================================================


class PatientVisit(BaseModel):
    """Minimal visit-history row consumed from storage."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., min_length=1, description="Visit identifier")
    visit_date: datetime = Field(..., description="When the visit took place")
    doctor_id: Optional[str] = Field(None, description="Doctor seen on this visit")
    doctor_fee: Optional[Decimal] = Field(None, description="Doctor fee billed on this visit")
    created_at: Optional[datetime] = Field(None, description="Row creation timestamp")


# =============================================================================
# Fee Quote Schemas
# =============================================================================


class FeeQuoteRequest(BaseModel):
    """Inputs for a single fee computation."""

    base_doctor_fee: Optional[Decimal] = Field(
        None,
        description="Consultation fee; defaults to the current doctor's standard fee",
    )
    last_visit_date: Optional[datetime] = Field(
        None, description="Previous visit timestamp (absent on a first visit)"
    )
    current_visit_date: Optional[datetime] = Field(
        None, description="Visit being billed; defaults to now"
    )
    last_doctor_id: Optional[str] = Field(None, description="Doctor seen on the previous visit")
    current_doctor_id: Optional[str] = Field(None, description="Doctor assigned to this visit")


class PatientFeeQuoteRequest(BaseModel):
    """Fee computation driven by a patient's visit history."""

    visits: list[PatientVisit] = Field(
        default_factory=list, description="Patient's recorded visits, any order"
    )
    current_visit_id: Optional[str] = Field(
        None, description="Visit being edited; excluded from the history lookup"
    )
    base_doctor_fee: Optional[Decimal] = Field(
        None,
        description="Consultation fee; defaults to the current doctor's standard fee",
    )
    current_visit_date: Optional[datetime] = Field(None, description="Defaults to now")
    current_doctor_id: Optional[str] = Field(None, description="Doctor assigned to this visit")


class FeeQuoteResult(BaseModel):
    """Fee breakdown for one visit."""

    doctor_fee: Decimal = Decimal("0")
    revisit_fee: Decimal = Decimal("0")
    doctor_change_fee: Decimal = Decimal("0")
    total_fee: Decimal = Decimal("0")

    tier: VisitFeeTier
    elapsed_days: Optional[int] = Field(
        None, description="Whole days since the last visit; None on a first visit"
    )

    def calculate_total(self) -> None:
        """Set total_fee to the exact sum of the three components."""
        amounts = (self.doctor_fee, self.revisit_fee, self.doctor_change_fee)
        finite = [amount for amount in amounts if amount.is_finite()]
        with localcontext() as ctx:
            # Widen precision so large amounts are summed without rounding
            if finite:
                span = (
                    max(amount.adjusted() for amount in finite)
                    - min(amount.as_tuple().exponent for amount in finite)
                    + 2
                )
                ctx.prec = max(ctx.prec, span)
            self.total_fee = self.doctor_fee + self.revisit_fee + self.doctor_change_fee

    def to_visit_record(self) -> dict[str, Decimal]:
        """Fields written verbatim onto the persisted visit record."""
        return {
            FeeComponent.DOCTOR_FEE.value: self.doctor_fee,
            FeeComponent.REVISIT_FEE.value: self.revisit_fee,
            FeeComponent.DOCTOR_CHANGE_FEE.value: self.doctor_change_fee,
            FeeComponent.TOTAL_FEE.value: self.total_fee,
        }


class FeeExplanation(BaseModel):
    """Human-readable notes shown next to each fee field."""

    doctor_fee_note: str
    revisit_fee_note: str
    doctor_change_fee_note: str
    total_fee_note: str


class FeePolicyResponse(BaseModel):
    """Active fee policy constants."""

    default_doctor_fee: Decimal
    revisit_fee: Decimal
    doctor_change_fee: Decimal
    revisit_window_days: int
    full_fee_after_days: int
    currency_code: str
