"""
Visit History Helpers.

Answers the two questions the fee calculator needs from a patient's
recorded visits: is this a revisit, and which visit came last.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Sequence

from src.schemas.visit_fee import PatientVisit


def to_aware_datetime(value: date) -> datetime:
    """
    Normalize a date or datetime to a timezone-aware datetime.

    Plain dates become midnight; naive datetimes are taken to be UTC.
    """
    if isinstance(value, datetime):
        moment = value
    else:
        moment = datetime.combine(value, time.min)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def _prior_visits(
    visits: Sequence[PatientVisit],
    current_visit_id: Optional[str],
) -> list[PatientVisit]:
    if not current_visit_id:
        return list(visits)
    return [visit for visit in visits if visit.id != current_visit_id]


def is_revisit(
    visits: Sequence[PatientVisit],
    current_visit_id: Optional[str] = None,
) -> bool:
    """True when the patient has at least one visit besides the current one."""
    return len(_prior_visits(visits, current_visit_id)) > 0


def get_last_visit(
    visits: Sequence[PatientVisit],
    current_visit_id: Optional[str] = None,
) -> Optional[PatientVisit]:
    """
    Most recent visit by visit_date, excluding the visit being edited.

    Ties go to the visit listed first.
    """
    prior = _prior_visits(visits, current_visit_id)
    if not prior:
        return None
    return max(prior, key=lambda visit: to_aware_datetime(visit.visit_date))
