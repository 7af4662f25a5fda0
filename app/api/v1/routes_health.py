# app/api/v1/routes_health.py
from fastapi import APIRouter
from app.core.config import settings

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("/", summary="Health check")
async def health_check():
    """
    Health check endpoint; also reports which routing providers are
    configured (keyed providers need their API key set).
    """
    providers = [
        name
        for name in ("GraphHopper", "OSRM", "OpenRouteService")
        if name == "OSRM" or settings.provider_config(name).api_key
    ]
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "providers": providers,
    }
