"""Health endpoints"""

from fastapi import APIRouter

from socialhub.core.config import settings
from socialhub.shared.schemas import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for load balancer."""
    return HealthResponse.healthy(version=settings.app.version)


@router.get("/live")
async def liveness_check() -> dict[str, bool]:
    """Liveness check endpoint."""
    return {"alive": True}
