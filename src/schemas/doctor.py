"""
Pydantic Schemas for Doctors.
Source: Design Document Section 6 - External Interfaces (doctor registry)
Verified: 2026-10-19
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Doctor(BaseModel):
    """A doctor who can be assigned to visits."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Stable doctor identifier (slug)")
    name: str = Field(..., description="Display name")
    specialty: str = Field(default="", description="Clinical specialty")
    default_fee: Decimal = Field(..., ge=0, description="Standard consultation fee")


class DoctorListResponse(BaseModel):
    """Doctor roster."""

    items: list[Doctor]
    total: int
