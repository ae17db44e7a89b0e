"""
Doctor Registry API Endpoints.

Provides:
- Doctor roster listing
- Doctor lookup (with standard consultation fee)
"""

from fastapi import APIRouter, Depends

from src.schemas.doctor import Doctor, DoctorListResponse
from src.services.doctor_registry import DoctorRegistry, get_doctor_registry
from src.utils.errors import DoctorNotFoundError
from src.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/v1/doctors",
    tags=["doctors"],
)


@router.get("", response_model=DoctorListResponse)
async def list_doctors(
    registry: DoctorRegistry = Depends(get_doctor_registry),
) -> DoctorListResponse:
    """List doctors that can be assigned to a visit."""
    doctors = registry.list_doctors()
    return DoctorListResponse(items=doctors, total=len(doctors))


@router.get("/{doctor_id}", response_model=Doctor)
async def get_doctor(
    doctor_id: str,
    registry: DoctorRegistry = Depends(get_doctor_registry),
) -> Doctor:
    """Get a single doctor by id."""
    doctor = registry.get_doctor(doctor_id)
    if doctor is None:
        logger.info(f"Doctor lookup miss: {doctor_id}")
        raise DoctorNotFoundError(doctor_id)
    return doctor
