# app/services/route_state.py
import math
from threading import Lock
from typing import List, Optional, Tuple

from app.core.errors import IndexOutOfRange, InvalidCoordinate
from app.core.logger import logger
from app.models.navigation import (
    Coordinate,
    NavigationResult,
    RoutePhase,
    Segment,
)
from app.services import geo_math


class RouteState:
    """
    Authoritative waypoint route and its derived navigation data.

    - keeps waypoints in insertion order; removal shifts later indices down
    - recomputes the NavigationResult before every mutator returns
    - result is None until the route has at least two waypoints
    """

    DEFAULT_SPEED_KNOTS: float = 5.0

    def __init__(self, speed_knots: Optional[float] = None) -> None:
        self._waypoints: List[Coordinate] = []
        self._speed_knots: float = (
            self.DEFAULT_SPEED_KNOTS if speed_knots is None else float(speed_knots)
        )
        self._result: Optional[NavigationResult] = None
        # Serializes mutation + recompute when handlers run on a thread pool
        self._lock = Lock()
        logger.info(f"RouteState initialised (speed={self._speed_knots} kn).")

    # ------------------------------------------------------------------ #
    # Read access
    # ------------------------------------------------------------------ #

    @property
    def waypoints(self) -> Tuple[Coordinate, ...]:
        return tuple(self._waypoints)

    @property
    def speed_knots(self) -> float:
        return self._speed_knots

    @property
    def result(self) -> Optional[NavigationResult]:
        return self._result

    @property
    def phase(self) -> RoutePhase:
        if not self._waypoints:
            return RoutePhase.EMPTY
        if len(self._waypoints) == 1:
            return RoutePhase.SINGLE
        return RoutePhase.MULTI

    def __len__(self) -> int:
        return len(self._waypoints)

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #

    def add_waypoint(self, c: Coordinate) -> None:
        self._check_finite(c)
        with self._lock:
            self._waypoints.append(c)
            self._recompute()
            count = len(self._waypoints)
        logger.info(f"Waypoint added at ({c.lat:.6f}, {c.lng:.6f}); {count} waypoints")

    def remove_waypoint(self, index: int) -> Coordinate:
        """
        Remove and return the waypoint at index.

        Negative indices are rejected rather than counted from the end.
        """
        with self._lock:
            length = len(self._waypoints)
            if not 0 <= index < length:
                logger.error(f"Refusing to remove waypoint {index}: route has {length} waypoints")
                raise IndexOutOfRange(index, length)
            removed = self._waypoints.pop(index)
            self._recompute()
            count = len(self._waypoints)
        logger.info(f"Waypoint {index} removed; {count} waypoints")
        return removed

    def clear(self) -> None:
        with self._lock:
            self._waypoints.clear()
            self._recompute()
        logger.info("Route cleared")

    def set_speed(self, speed_knots: float) -> None:
        """
        Set the cruising speed. Values <= 0 are accepted and simply leave
        the estimated time undefined.
        """
        speed = float(speed_knots)
        with self._lock:
            self._speed_knots = speed
            self._recompute()
        logger.info(f"Speed set to {speed} kn")

    def set_from_geolocation(self, c: Coordinate) -> None:
        """
        Replace the whole route with the device position.
        """
        self._check_finite(c)
        with self._lock:
            self._waypoints = [c]
            self._recompute()
        logger.info(f"Route reset to geolocation fix ({c.lat:.6f}, {c.lng:.6f})")

    def submit_manual_pair(self, a: Coordinate, b: Coordinate) -> None:
        """
        Append a then b. Either both are added or, if any value is not a
        finite number, neither is.
        """
        self._check_finite(a, suffix="_a")
        self._check_finite(b, suffix="_b")

        with self._lock:
            self._waypoints.extend((a, b))
            self._recompute()
            count = len(self._waypoints)
        logger.info(f"Manual pair added; {count} waypoints")

    def recompute(self) -> Optional[NavigationResult]:
        with self._lock:
            return self._recompute()

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _check_finite(c: Coordinate, suffix: str = "") -> None:
        """
        Raise InvalidCoordinate if lat or lng is not a finite number.
        """
        for name in ("lat", "lng"):
            value = getattr(c, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                field = f"{name}{suffix}"
                logger.warning(f"Coordinate rejected: {field}={value!r} is not a finite number")
                raise InvalidCoordinate(f"{field} must be a finite number", field=field)

    def _recompute(self) -> Optional[NavigationResult]:
        """
        Rebuild the NavigationResult from the waypoints and speed.

        Caller must hold self._lock.
        """
        if len(self._waypoints) < 2:
            self._result = None
            return None

        segments: List[Segment] = []
        total_km = 0.0
        total_nm = 0.0

        for a, b in zip(self._waypoints[:-1], self._waypoints[1:]):
            leg = geo_math.distance_and_bearing(a, b)
            total_km += leg.km
            total_nm += leg.nm
            segments.append(
                Segment(
                    km=leg.km,
                    nm=leg.nm,
                    bearing_deg=leg.bearing_deg,
                    cumulative_nm=total_nm,
                )
            )

        # Heading only for a two-waypoint route, taken from the first leg
        heading = segments[0].bearing_deg if len(self._waypoints) == 2 else None

        eta = None
        # NaN compares false, so only positive speeds (including +inf) give an ETA
        if self._speed_knots > 0:
            eta = geo_math.estimated_time(total_nm, self._speed_knots)

        self._result = NavigationResult(
            total_distance_km=total_km,
            total_distance_nm=total_nm,
            segments=tuple(segments),
            heading_deg=heading,
            estimated_time=eta,
        )

        logger.debug(
            f"Route recomputed: {len(segments)} legs, {total_nm:.2f} nm, "
            f"heading={heading}, eta={eta}"
        )
        return self._result
