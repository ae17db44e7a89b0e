"""
Custom Exceptions
HTTP-facing error types for the billing API.
Source: https://fastapi.tiangolo.com/tutorial/handling-errors/
Verified: 2026-10-19

The fee calculator never raises; these are only used by the route layer.
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """Raised when resource not found"""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class DoctorNotFoundError(NotFoundError):
    """Raised when a doctor id is not in the registry"""

    def __init__(self, doctor_id: str):
        self.doctor_id = doctor_id
        super().__init__(detail=f"Doctor '{doctor_id}' not found")
