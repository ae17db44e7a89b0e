"""
Pytest Configuration and Fixtures.
Shared test fixtures for all test modules.
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.core.config import FeePolicySettings
from src.schemas.visit_fee import PatientVisit
from src.services.doctor_registry import DoctorRegistry
from src.services.visit_fee_calculator import VisitFeeCalculator


# Visit being billed in most tests: 15 March 2024, 10:00 UTC
VISIT_TIME = datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def visit_time() -> datetime:
    """Timestamp of the visit being billed."""
    return VISIT_TIME


@pytest.fixture
def days_before():
    """Build a timestamp a whole number of days before VISIT_TIME."""

    def _days_before(days: int, hours: int = 0) -> datetime:
        return VISIT_TIME - timedelta(days=days, hours=hours)

    return _days_before


@pytest.fixture
def fee_settings() -> FeePolicySettings:
    """Default fee policy, isolated from any local .env file."""
    return FeePolicySettings(_env_file=None)


@pytest.fixture
def calculator(fee_settings) -> VisitFeeCalculator:
    """Calculator using the default fee policy."""
    return VisitFeeCalculator(settings=fee_settings)


@pytest.fixture
def registry(fee_settings) -> DoctorRegistry:
    """Registry with the built-in doctor roster."""
    return DoctorRegistry(settings=fee_settings)


@pytest.fixture
def patient_visits() -> list[PatientVisit]:
    """Three prior visits, deliberately out of chronological order."""
    return [
        PatientVisit(
            id="visit-2",
            visit_date=VISIT_TIME - timedelta(days=10),
            doctor_id="manoj-singh",
        ),
        PatientVisit(
            id="visit-1",
            visit_date=VISIT_TIME - timedelta(days=60),
            doctor_id="sikha-gaud",
        ),
        PatientVisit(
            id="visit-3",
            visit_date=VISIT_TIME - timedelta(days=2),
            doctor_id="sikha-gaud",
        ),
    ]


# Configure pytest markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "api: mark test as an API test"
    )
