"""
Health Check Routes
Service health monitoring endpoints
Source: https://microservices.io/patterns/observability/health-check-api.html
Verified: 2026-10-19
"""

from typing import Any

from fastapi import APIRouter
from pydantic import ValidationError

from src.core.config import FeePolicySettings
from src.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])

SERVICE_NAME = "clinic-visit-billing-api"


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Basic health check endpoint for load balancers."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
    }


@router.get("/health/detailed")
async def detailed_health_check() -> dict[str, Any]:
    """
    Detailed health check.

    The service has no backing store; the only dependency worth checking is
    that the fee policy in the current environment still validates. It is
    re-read here rather than taken from the cached singleton.
    """
    try:
        FeePolicySettings()
        policy_healthy = True
    except ValidationError as exc:
        logger.error(f"Fee policy failed to load: {exc}")
        policy_healthy = False

    return {
        "status": "healthy" if policy_healthy else "unhealthy",
        "service": SERVICE_NAME,
        "checks": {
            "fee_policy": "healthy" if policy_healthy else "unhealthy",
        },
    }
