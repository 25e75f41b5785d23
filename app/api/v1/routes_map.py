# app/api/v1/routes_map.py
from fastapi import APIRouter

from app.core.config import settings
from app.models.navigation import MapConfig

router = APIRouter(
    prefix="/map-config",
    tags=["map"],
)


@router.get("/", response_model=MapConfig, summary="Map start-up configuration")
async def get_map_config() -> MapConfig:
    """
    Initial view, tile source and marker icons for the Leaflet frontend.
    """
    return MapConfig(
        center=[settings.MAP_CENTER_LAT, settings.MAP_CENTER_LNG],
        zoom=settings.MAP_ZOOM,
        tile_url=settings.TILE_URL,
        tile_attribution=settings.TILE_ATTRIBUTION,
        start_icon_url=settings.START_ICON_URL,
        waypoint_icon_url=settings.WAYPOINT_ICON_URL,
        default_speed_knots=settings.DEFAULT_SPEED_KNOTS,
        geolocation_timeout_ms=settings.GEOLOCATION_TIMEOUT_MS,
    )
