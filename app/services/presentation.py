# app/services/presentation.py
import math
from typing import Optional, Sequence

from app.core.config import Settings
from app.core.errors import InvalidCoordinate
from app.models.navigation import (
    Coordinate,
    Marker,
    MarkerRole,
    NavigationDisplay,
    NavigationResult,
    RenderData,
    SegmentDisplay,
)
from app.services.geo_math import round_half_up


def _fmt2(value: float) -> str:
    return f"{round_half_up(value, 2):.2f}"


def _fmt_bearing(value: float) -> str:
    # 359.996 rounds to 360.00, which is north again
    return f"{round_half_up(value, 2) % 360.0:.2f}"


def _parse_value(text: str, field: str) -> float:
    stripped = (text or "").strip()
    if not stripped:
        raise InvalidCoordinate(f"{field} is empty", field=field)
    try:
        value = float(stripped)
    except ValueError:
        raise InvalidCoordinate(f"{field} is not a number: {text!r}", field=field) from None
    if not math.isfinite(value):
        raise InvalidCoordinate(f"{field} must be a finite number", field=field)
    return value


def parse_coordinate(lat_text: str, lng_text: str, suffix: str = "") -> Coordinate:
    """
    Parse latitude/longitude text from the manual entry form.

    suffix is appended to the field names used in error messages
    (e.g. "_a" gives "lat_a").
    """
    return Coordinate(
        lat=_parse_value(lat_text, f"lat{suffix}"),
        lng=_parse_value(lng_text, f"lng{suffix}"),
    )


def format_result(result: Optional[NavigationResult]) -> Optional[NavigationDisplay]:
    """
    Format a NavigationResult for the info panel.

    Missing values stay None so the panel hides them instead of showing 0.
    """
    if result is None:
        return None

    return NavigationDisplay(
        total_distance_km=_fmt2(result.total_distance_km),
        total_distance_nm=_fmt2(result.total_distance_nm),
        segments=[
            SegmentDisplay(
                km=_fmt2(s.km),
                nm=_fmt2(s.nm),
                bearing_deg=_fmt_bearing(s.bearing_deg),
            )
            for s in result.segments
        ],
        heading_deg=None if result.heading_deg is None else _fmt_bearing(result.heading_deg),
        estimated_time=result.estimated_time,
    )


def build_render(waypoints: Sequence[Coordinate], settings: Settings) -> RenderData:
    """
    Markers for every waypoint (the first one styled as the start) and the
    polyline through them once there are at least two.
    """
    markers = [
        Marker(
            index=i,
            lat=c.lat,
            lng=c.lng,
            role=MarkerRole.START if i == 0 else MarkerRole.WAYPOINT,
            icon_url=settings.START_ICON_URL if i == 0 else settings.WAYPOINT_ICON_URL,
        )
        for i, c in enumerate(waypoints)
    ]
    polyline = [[c.lat, c.lng] for c in waypoints] if len(waypoints) >= 2 else []
    return RenderData(markers=markers, polyline=polyline)
