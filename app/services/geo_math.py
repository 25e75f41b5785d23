# app/services/geo_math.py
"""
Great-circle navigation maths.

Pure functions with no shared state. Distances use the spherical law of
cosines on a sphere of radius EARTH_RADIUS_KM; nautical miles are derived
from kilometres with the fixed KM_TO_NM multiplier.
"""

import math

from app.core.errors import DivisionUndefined
from app.models.navigation import Coordinate, DistanceBearing, EstimatedTime

EARTH_RADIUS_KM = 6371.0
KM_TO_NM = 0.539956803


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves away from zero, like the browser's Math.round/toFixed.

    Python's round() rounds halves to even, which would put 0.5 min on
    the wrong side of an ETA.
    """
    factor = 10 ** digits
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def distance_and_bearing(a: Coordinate, b: Coordinate) -> DistanceBearing:
    """
    Distance (km and nm) and initial bearing from a to b.

    Inputs are not range-checked; out-of-range coordinates give a
    mathematically defined but meaningless answer. Identical points give
    zero distance and a 0° bearing.
    """
    lat_a = math.radians(a.lat)
    lat_b = math.radians(b.lat)
    dlng = math.radians(b.lng - a.lng)

    cos_angle = (
        math.sin(lat_a) * math.sin(lat_b)
        + math.cos(lat_a) * math.cos(lat_b) * math.cos(dlng)
    )
    # Float error can push the argument just past ±1 for (near) identical points;
    # NaN inputs are left alone so they surface as NaN rather than 0 km
    if math.isfinite(cos_angle):
        cos_angle = max(-1.0, min(1.0, cos_angle))
    km = EARTH_RADIUS_KM * math.acos(cos_angle)

    if km == 0.0:
        return DistanceBearing(km=0.0, nm=0.0, bearing_deg=0.0)

    x = math.sin(dlng) * math.cos(lat_b)
    y = math.cos(lat_a) * math.sin(lat_b) - math.sin(lat_a) * math.cos(lat_b) * math.cos(dlng)
    bearing = math.degrees(math.atan2(x, y))
    if bearing < 0:
        bearing += 360.0
    # -1e-15 + 360 rounds to 360.0
    if bearing >= 360.0:
        bearing -= 360.0

    return DistanceBearing(km=km, nm=km * KM_TO_NM, bearing_deg=bearing)


def estimated_time(distance_nm: float, speed_knots: float) -> EstimatedTime:
    """
    Whole hours and minutes needed to cover distance_nm at speed_knots.

    Raises DivisionUndefined for a speed that is not a positive number.
    An infinite speed takes no time.
    """
    if math.isnan(speed_knots) or speed_knots <= 0:
        raise DivisionUndefined(f"Cannot estimate time at speed {speed_knots!r} kn")

    duration_h = distance_nm / speed_knots
    hours = math.floor(duration_h)
    minutes = int(round_half_up((duration_h - hours) * 60))
    if minutes >= 60:
        hours += 1
        minutes -= 60

    return EstimatedTime(hours=int(hours), minutes=minutes)
