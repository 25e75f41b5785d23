# app/core/errors.py
from typing import Optional


class NavigationError(Exception):
    """
    Base class for errors raised by the navigation core.
    """


class InvalidCoordinate(NavigationError, ValueError):
    """
    A coordinate value is not a finite number (e.g. unparseable manual input).
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class IndexOutOfRange(NavigationError, IndexError):
    """
    A waypoint index does not exist in the current route.

    The UI and the route must always agree on indices, so this signals a
    programming error rather than bad user input.
    """

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Waypoint index {index} out of range for route of length {length}")
        self.index = index
        self.length = length


class DivisionUndefined(NavigationError, ZeroDivisionError):
    """
    Time estimation requested with a non-positive speed.
    """
