"""Health check endpoint."""

from fastapi import APIRouter

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Report liveness along with the service and skill being served."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "skill": settings.skill_name,
        "environment": settings.environment,
    }
