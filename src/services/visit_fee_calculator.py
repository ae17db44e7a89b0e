"""
Visit Fee Calculation Engine.

Computes the consultation bill for a clinic visit:
- Revisit tiering by whole days since the previous visit
- Doctor-change surcharge
- Composition into a doctor / revisit / change / total breakdown

Every operation is pure and never raises for missing or out-of-order
inputs; unknown situations fall back to "no extra charge".

Source: Design Document Section 4 - Component Design
Verified: 2026-10-19
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Optional, Sequence

from src.core.config import FeePolicySettings, get_fee_settings
from src.core.enums import VisitFeeTier
from src.schemas.visit_fee import FeeExplanation, FeeQuoteResult, PatientVisit
from src.services.visit_history import get_last_visit, to_aware_datetime
from src.utils.logging import get_logger

logger = get_logger(__name__, component="billing")

ZERO = Decimal("0")
ONE_DAY = timedelta(days=1)


def to_amount(value: Any) -> Decimal:
    """Coerce a monetary input to Decimal without float artefacts."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_elapsed_days(last_visit_date: date, current_visit_date: date) -> int:
    """
    Whole days between two visits, floored.

    Time of day counts: 6 days 23 hours is 6. The result is negative when
    the current visit precedes the last one.
    """
    elapsed = to_aware_datetime(current_visit_date) - to_aware_datetime(last_visit_date)
    return elapsed // ONE_DAY


class VisitFeeCalculator:
    """
    Visit fee calculator.

    Holds only the (immutable) fee policy, so one instance can serve any
    number of concurrent callers.
    """

    def __init__(self, settings: Optional[FeePolicySettings] = None):
        self.settings = settings or get_fee_settings()

    def classify_tier(self, elapsed_days: Optional[int]) -> VisitFeeTier:
        """Map elapsed days (None for a first visit) to a billing tier."""
        if elapsed_days is None:
            return VisitFeeTier.FIRST_VISIT
        # Negative elapsed days (current before last) land here as well
        if elapsed_days < self.settings.REVISIT_WINDOW_DAYS:
            return VisitFeeTier.FREE_FOLLOW_UP
        if elapsed_days < self.settings.FULL_FEE_AFTER_DAYS:
            return VisitFeeTier.REVISIT
        return VisitFeeTier.FULL_CONSULTATION

    def calculate_revisit_fee(
        self,
        last_visit_date: Optional[date],
        current_visit_date: Optional[date] = None,
    ) -> Decimal:
        """
        Revisit fee for the elapsed time alone.

        Only ever returns zero or the configured revisit fee; whether the
        doctor fee is also waived is decided by calculate_total_visit_fee.
        """
        if last_visit_date is None:
            return ZERO
        current_visit_date = current_visit_date or datetime.now(timezone.utc)

        elapsed_days = calculate_elapsed_days(last_visit_date, current_visit_date)
        if self.classify_tier(elapsed_days) is VisitFeeTier.REVISIT:
            return self.settings.REVISIT_FEE
        return ZERO

    def calculate_doctor_change_fee(
        self,
        last_doctor_id: Optional[str],
        current_doctor_id: Optional[str],
    ) -> Decimal:
        """Flat surcharge when both doctors are known and differ."""
        if last_doctor_id and current_doctor_id and last_doctor_id != current_doctor_id:
            return self.settings.DOCTOR_CHANGE_FEE
        return ZERO

    def calculate_total_visit_fee(
        self,
        base_doctor_fee: Any,
        last_visit_date: Optional[date] = None,
        current_visit_date: Optional[date] = None,
        last_doctor_id: Optional[str] = None,
        current_doctor_id: Optional[str] = None,
    ) -> FeeQuoteResult:
        """
        Full fee breakdown for a visit.

        Args:
            base_doctor_fee: Consultation fee (negative values pass through)
            last_visit_date: Previous visit, None on a first visit
            current_visit_date: Visit being billed, defaults to now
            last_doctor_id: Doctor seen on the previous visit
            current_doctor_id: Doctor assigned to this visit

        Returns:
            FeeQuoteResult with total_fee equal to the sum of its parts
        """
        base_fee = to_amount(base_doctor_fee)

        # First visit: full fee, and no change fee since there is no prior doctor
        if last_visit_date is None:
            result = FeeQuoteResult(doctor_fee=base_fee, tier=VisitFeeTier.FIRST_VISIT)
            result.calculate_total()
            logger.debug(f"Fee quote: tier=first_visit, total={result.total_fee}")
            return result

        current_visit_date = current_visit_date or datetime.now(timezone.utc)
        elapsed_days = calculate_elapsed_days(last_visit_date, current_visit_date)
        tier = self.classify_tier(elapsed_days)

        result = FeeQuoteResult(tier=tier, elapsed_days=elapsed_days)
        if tier is VisitFeeTier.REVISIT:
            result.revisit_fee = self.settings.REVISIT_FEE
        if tier.charges_doctor_fee:
            result.doctor_fee = base_fee

        result.doctor_change_fee = self.calculate_doctor_change_fee(
            last_doctor_id, current_doctor_id
        )
        result.calculate_total()

        logger.debug(
            f"Fee quote: tier={tier.value}, elapsed_days={elapsed_days}, "
            f"doctor={result.doctor_fee}, revisit={result.revisit_fee}, "
            f"change={result.doctor_change_fee}, total={result.total_fee}"
        )
        return result

    def quote_for_patient(
        self,
        visits: Sequence[PatientVisit],
        base_doctor_fee: Any,
        current_visit_date: Optional[date] = None,
        current_doctor_id: Optional[str] = None,
        current_visit_id: Optional[str] = None,
    ) -> tuple[FeeQuoteResult, Optional[PatientVisit]]:
        """
        Quote a visit from the patient's recorded history.

        The visit being edited (current_visit_id) is ignored when looking
        for the previous visit.

        Returns:
            (fee breakdown, previous visit or None)
        """
        last_visit = get_last_visit(visits, current_visit_id)
        if last_visit is None:
            result = self.calculate_total_visit_fee(
                base_doctor_fee,
                current_visit_date=current_visit_date,
                current_doctor_id=current_doctor_id,
            )
        else:
            result = self.calculate_total_visit_fee(
                base_doctor_fee,
                last_visit_date=last_visit.visit_date,
                current_visit_date=current_visit_date,
                last_doctor_id=last_visit.doctor_id,
                current_doctor_id=current_doctor_id,
            )
        return result, last_visit

    def explain(self, result: FeeQuoteResult) -> FeeExplanation:
        """Build the read-only hints shown beside each fee field."""
        fmt = self.settings.format_amount
        window = self.settings.REVISIT_WINDOW_DAYS
        full_after = self.settings.FULL_FEE_AFTER_DAYS

        if result.tier is VisitFeeTier.FIRST_VISIT:
            doctor_note = "First visit: consultation fee applies"
            revisit_note = "No fee (first visit)"
        elif result.tier is VisitFeeTier.FREE_FOLLOW_UP:
            doctor_note = f"Waived: follow-up within {window} days"
            revisit_note = f"No fee (< {window} days)"
        elif result.tier is VisitFeeTier.REVISIT:
            doctor_note = f"Waived: revisit within {full_after} days"
            revisit_note = f"Auto-calculated: {window}+ days revisit ({fmt(result.revisit_fee)} only)"
        else:
            doctor_note = f"{full_after}+ days since last visit: consultation fee applies"
            revisit_note = (
                f"Auto-calculated: {full_after}+ days revisit "
                f"({fmt(result.doctor_fee)} doctor fee only)"
            )

        if result.doctor_change_fee > 0:
            change_note = f"Auto-calculated: Doctor changed ({fmt(result.doctor_change_fee)})"
        else:
            change_note = "No doctor change fee"

        return FeeExplanation(
            doctor_fee_note=doctor_note,
            revisit_fee_note=revisit_note,
            doctor_change_fee_note=change_note,
            total_fee_note="Doctor + Revisit + Change fees",
        )


# =============================================================================
# Singleton Instance
# =============================================================================


_visit_fee_calculator: Optional[VisitFeeCalculator] = None


def get_visit_fee_calculator() -> VisitFeeCalculator:
    """Get singleton visit fee calculator instance."""
    global _visit_fee_calculator
    if _visit_fee_calculator is None:
        _visit_fee_calculator = VisitFeeCalculator()
    return _visit_fee_calculator


# =============================================================================
# Convenience Functions
# =============================================================================


def calculate_revisit_fee(
    last_visit_date: Optional[date],
    current_visit_date: Optional[date] = None,
) -> Decimal:
    """Revisit fee under the active policy."""
    return get_visit_fee_calculator().calculate_revisit_fee(last_visit_date, current_visit_date)


def calculate_doctor_change_fee(
    last_doctor_id: Optional[str],
    current_doctor_id: Optional[str],
) -> Decimal:
    """Doctor-change surcharge under the active policy."""
    return get_visit_fee_calculator().calculate_doctor_change_fee(last_doctor_id, current_doctor_id)


def calculate_total_visit_fee(
    base_doctor_fee: Any,
    last_visit_date: Optional[date] = None,
    current_visit_date: Optional[date] = None,
    last_doctor_id: Optional[str] = None,
    current_doctor_id: Optional[str] = None,
) -> FeeQuoteResult:
    """Full fee breakdown under the active policy."""
    return get_visit_fee_calculator().calculate_total_visit_fee(
        base_doctor_fee,
        last_visit_date=last_visit_date,
        current_visit_date=current_visit_date,
        last_doctor_id=last_doctor_id,
        current_doctor_id=current_doctor_id,
    )
