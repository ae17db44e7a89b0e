"""
Visit Fee API Endpoints.

Source: Design Document Section 6 - External Interfaces
Verified: 2026-10-19

Provides:
- Fee quote from explicit last-visit facts
- Fee quote from a patient's visit history
- Active fee policy
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.schemas.visit_fee import (
    FeeExplanation,
    FeePolicyResponse,
    FeeQuoteRequest,
    FeeQuoteResult,
    PatientFeeQuoteRequest,
)
from src.services.doctor_registry import DoctorRegistry, get_doctor_registry
from src.services.visit_fee_calculator import VisitFeeCalculator, get_visit_fee_calculator
from src.services.visit_history import is_revisit
from src.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/visit-fees",
    tags=["visit-fees"],
)


# =============================================================================
# Response Schemas
# =============================================================================


class FeeQuoteResponse(BaseModel):
    """Fee breakdown with display notes."""

    result: FeeQuoteResult
    explanation: FeeExplanation


class PatientFeeQuoteResponse(FeeQuoteResponse):
    """Fee breakdown plus the history facts it was based on."""

    is_revisit: bool
    last_visit_id: Optional[str] = None
    last_doctor_id: Optional[str] = None


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/policy", response_model=FeePolicyResponse)
async def get_fee_policy(
    calculator: VisitFeeCalculator = Depends(get_visit_fee_calculator),
) -> FeePolicyResponse:
    """Return the fee constants currently in force."""
    policy = calculator.settings
    return FeePolicyResponse(
        default_doctor_fee=policy.DEFAULT_DOCTOR_FEE,
        revisit_fee=policy.REVISIT_FEE,
        doctor_change_fee=policy.DOCTOR_CHANGE_FEE,
        revisit_window_days=policy.REVISIT_WINDOW_DAYS,
        full_fee_after_days=policy.FULL_FEE_AFTER_DAYS,
        currency_code=policy.CURRENCY_CODE,
    )


@router.post("/quote", response_model=FeeQuoteResponse)
async def quote_visit_fee(
    request: FeeQuoteRequest,
    calculator: VisitFeeCalculator = Depends(get_visit_fee_calculator),
    registry: DoctorRegistry = Depends(get_doctor_registry),
) -> FeeQuoteResponse:
    """Compute the fee breakdown for a visit from explicit last-visit facts."""
    base_fee = request.base_doctor_fee
    if base_fee is None:
        base_fee = registry.get_default_doctor_fee(request.current_doctor_id)

    result = calculator.calculate_total_visit_fee(
        base_fee,
        last_visit_date=request.last_visit_date,
        current_visit_date=request.current_visit_date,
        last_doctor_id=request.last_doctor_id,
        current_doctor_id=request.current_doctor_id,
    )
    logger.info(
        f"Visit fee quoted: doctor={request.current_doctor_id}, "
        f"tier={result.tier.value}, total={result.total_fee}"
    )
    return FeeQuoteResponse(result=result, explanation=calculator.explain(result))


@router.post("/patient-quote", response_model=PatientFeeQuoteResponse)
async def quote_patient_visit_fee(
    request: PatientFeeQuoteRequest,
    calculator: VisitFeeCalculator = Depends(get_visit_fee_calculator),
    registry: DoctorRegistry = Depends(get_doctor_registry),
) -> PatientFeeQuoteResponse:
    """Compute the fee breakdown for a visit from the patient's visit history."""
    base_fee = request.base_doctor_fee
    if base_fee is None:
        base_fee = registry.get_default_doctor_fee(request.current_doctor_id)

    result, last_visit = calculator.quote_for_patient(
        request.visits,
        base_fee,
        current_visit_date=request.current_visit_date,
        current_doctor_id=request.current_doctor_id,
        current_visit_id=request.current_visit_id,
    )
    logger.info(
        f"Patient visit fee quoted: history={len(request.visits)}, "
        f"tier={result.tier.value}, total={result.total_fee}"
    )
    return PatientFeeQuoteResponse(
        result=result,
        explanation=calculator.explain(result),
        is_revisit=is_revisit(request.visits, request.current_visit_id),
        last_visit_id=last_visit.id if last_visit else None,
        last_doctor_id=last_visit.doctor_id if last_visit else None,
    )
