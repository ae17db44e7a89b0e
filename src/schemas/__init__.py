"""
Pydantic Schemas for the Clinic Visit Billing Service.

This module exports all request/response schemas for the API.
"""

from src.schemas.doctor import Doctor, DoctorListResponse
from src.schemas.visit_fee import (
    FeeExplanation,
    FeePolicyResponse,
    FeeQuoteRequest,
    FeeQuoteResult,
    PatientFeeQuoteRequest,
    PatientVisit,
)

__all__ = [
    "Doctor",
    "DoctorListResponse",
    "FeeExplanation",
    "FeePolicyResponse",
    "FeeQuoteRequest",
    "FeeQuoteResult",
    "PatientFeeQuoteRequest",
    "PatientVisit",
]
