"""
Health check route for Payload Guard.

This endpoint is PUBLIC and provides a simple status check for load balancers,
monitoring, and deployment verification.
"""

from fastapi import APIRouter

from payload_guard.schemas.health import HealthResponse
from payload_guard.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Returns:
        HealthResponse: Simple status object with "ok" status
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
