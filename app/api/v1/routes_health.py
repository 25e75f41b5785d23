# app/api/v1/routes_health.py
from fastapi import APIRouter
from app.api.v1.routes_navigation import route_state
from app.core.config import settings

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("/", summary="Health check")
async def health_check():
    """
    Simple health check endpoint to verify that the API is running
    and report the size of the shared route.
    """
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "waypoints": len(route_state),
    }
