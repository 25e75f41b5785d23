# app/api/v1/routes_navigation.py
from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.core.errors import IndexOutOfRange, InvalidCoordinate
from app.models.navigation import (
    Coordinate,
    ManualPairRequest,
    PositionRequest,
    RouteSnapshot,
    SpeedRequest,
)
from app.services.presentation import build_render, format_result, parse_coordinate
from app.services.route_state import RouteState

router = APIRouter(
    prefix="/navigation",
    tags=["navigation"],
)

# Single shared route for the session
route_state = RouteState(speed_knots=settings.DEFAULT_SPEED_KNOTS)


def build_snapshot(state: RouteState) -> RouteSnapshot:
    waypoints = state.waypoints
    result = state.result
    return RouteSnapshot(
        waypoints=list(waypoints),
        speed_knots=state.speed_knots,
        phase=state.phase,
        result=result,
        display=format_result(result),
        render=build_render(waypoints, settings),
    )


@router.get("/", response_model=RouteSnapshot, summary="Current route and navigation data")
async def get_route() -> RouteSnapshot:
    return build_snapshot(route_state)


@router.post("/waypoints", response_model=RouteSnapshot, summary="Add a waypoint (map click)")
async def add_waypoint(request: PositionRequest) -> RouteSnapshot:
    route_state.add_waypoint(Coordinate(lat=request.lat, lng=request.lng))
    return build_snapshot(route_state)


@router.delete(
    "/waypoints/{index}",
    response_model=RouteSnapshot,
    summary="Remove a waypoint by its position in the route",
)
async def remove_waypoint(index: int) -> RouteSnapshot:
    """
    Remove the waypoint at index; later waypoints move down by one.
    """
    try:
        route_state.remove_waypoint(index)
    except IndexOutOfRange as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return build_snapshot(route_state)


@router.delete("/waypoints", response_model=RouteSnapshot, summary="Clear the route")
async def clear_route() -> RouteSnapshot:
    route_state.clear()
    return build_snapshot(route_state)


@router.post(
    "/geolocation",
    response_model=RouteSnapshot,
    summary="Replace the route with the device position",
)
async def set_from_geolocation(request: PositionRequest) -> RouteSnapshot:
    route_state.set_from_geolocation(Coordinate(lat=request.lat, lng=request.lng))
    return build_snapshot(route_state)


@router.post(
    "/manual",
    response_model=RouteSnapshot,
    summary="Append two manually entered coordinates",
)
async def submit_manual_pair(request: ManualPairRequest) -> RouteSnapshot:
    """
    Parse the four text fields and append both points.

    - Any empty or non-numeric field rejects the whole submission (422).
    - On rejection the route is left unchanged.
    """
    try:
        a = parse_coordinate(request.lat_a, request.lng_a, suffix="_a")
        b = parse_coordinate(request.lat_b, request.lng_b, suffix="_b")
        route_state.submit_manual_pair(a, b)
    except InvalidCoordinate as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return build_snapshot(route_state)


@router.put("/speed", response_model=RouteSnapshot, summary="Set the cruising speed in knots")
async def set_speed(request: SpeedRequest) -> RouteSnapshot:
    route_state.set_speed(request.speed_knots)
    return build_snapshot(route_state)
