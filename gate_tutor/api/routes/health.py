"""Health check route."""

from fastapi import APIRouter

from gate_tutor.schemas.health import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness only; does not touch the database."""
    return HealthResponse(message="Backend is online")
