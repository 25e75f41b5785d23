# app/models/navigation.py

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """
    Immutable latitude/longitude pair in degrees.

    No range checks here: the geo functions accept any value and callers
    are responsible for passing real positions.
    """
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class DistanceBearing(BaseModel):
    """
    Great-circle distance and initial bearing between two coordinates.
    """
    model_config = ConfigDict(frozen=True)

    km: float
    nm: float
    bearing_deg: float


class Segment(BaseModel):
    """
    One leg between two consecutive waypoints.
    """
    model_config = ConfigDict(frozen=True)

    km: float
    nm: float
    bearing_deg: float
    # Running route total up to and including this leg
    cumulative_nm: float


class EstimatedTime(BaseModel):
    model_config = ConfigDict(frozen=True)

    hours: int
    minutes: int


class NavigationResult(BaseModel):
    """
    Derived navigation data for a route with at least two waypoints.

    Replaced wholesale on every recomputation, never edited in place.
    """
    model_config = ConfigDict(frozen=True)

    total_distance_km: float
    total_distance_nm: float
    segments: Tuple[Segment, ...]
    # Only defined for a route of exactly two waypoints
    heading_deg: Optional[float] = None
    # None when speed <= 0
    estimated_time: Optional[EstimatedTime] = None


class RoutePhase(str, Enum):
    EMPTY = "empty"
    SINGLE = "single"
    MULTI = "multi"


# ---------------------------------------------------------------------- #
# Presentation
# ---------------------------------------------------------------------- #


class SegmentDisplay(BaseModel):
    km: str
    nm: str
    bearing_deg: str


class NavigationDisplay(BaseModel):
    """
    NavigationResult formatted for the info panel.

    Distances and bearing are 2-decimal strings. Sections that have no
    value are None so the frontend can hide them.
    """
    total_distance_km: str
    total_distance_nm: str
    segments: List[SegmentDisplay]
    heading_deg: Optional[str] = None
    estimated_time: Optional[EstimatedTime] = None


class MarkerRole(str, Enum):
    START = "start"
    WAYPOINT = "waypoint"


class Marker(BaseModel):
    index: int
    lat: float
    lng: float
    role: MarkerRole
    icon_url: str


class RenderData(BaseModel):
    """
    What the map layer draws.

    polyline is a list of [lat, lng] pairs and is empty for fewer than
    two waypoints.
    """
    markers: List[Marker]
    polyline: List[List[float]]


class RouteSnapshot(BaseModel):
    """
    Response body for every /navigation endpoint.
    """
    waypoints: List[Coordinate]
    speed_knots: float
    phase: RoutePhase
    result: Optional[NavigationResult] = None
    display: Optional[NavigationDisplay] = None
    render: RenderData


# ---------------------------------------------------------------------- #
# Requests
# ---------------------------------------------------------------------- #


class PositionRequest(BaseModel):
    """
    Request body for map clicks and geolocation fixes.
    """
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class ManualPairRequest(BaseModel):
    """
    Raw text from the manual entry form.

    Values are parsed server-side so non-numeric input is rejected with
    a message naming the field.
    """
    lat_a: str
    lng_a: str
    lat_b: str
    lng_b: str


class SpeedRequest(BaseModel):
    speed_knots: float = Field(..., allow_inf_nan=False)


class MapConfig(BaseModel):
    """
    Start-up configuration for the Leaflet frontend.
    """
    center: List[float]
    zoom: int
    tile_url: str
    tile_attribution: str
    start_icon_url: str
    waypoint_icon_url: str
    default_speed_knots: float
    geolocation_timeout_ms: int
