"""
Core Enumerations for the Clinic Visit Billing Service.
Source: Design Document Section 4 - Visit Fee Calculator
Verified: 2026-10-19
"""

from enum import Enum


# =============================================================================
# Billing Enums
# =============================================================================


class VisitFeeTier(str, Enum):
    """
    Billing tier selected for a visit.

    The three non-first tiers are mutually exclusive bands of elapsed
    whole days since the patient's previous visit.
    """

    FIRST_VISIT = "first_visit"  # No prior visit: full doctor fee
    FREE_FOLLOW_UP = "free_follow_up"  # Under 7 days: no charge
    REVISIT = "revisit"  # 7 to 29 days: flat revisit fee only
    FULL_CONSULTATION = "full_consultation"  # 30+ days: full doctor fee

    @property
    def charges_doctor_fee(self) -> bool:
        """Whether the base doctor fee is billed in this tier."""
        return self in (VisitFeeTier.FIRST_VISIT, VisitFeeTier.FULL_CONSULTATION)


class FeeComponent(str, Enum):
    """Persisted fee columns on a visit record."""

    DOCTOR_FEE = "doctor_fee"
    REVISIT_FEE = "revisit_fee"
    DOCTOR_CHANGE_FEE = "doctor_change_fee"
    TOTAL_FEE = "total_fee"
