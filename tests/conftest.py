# tests/conftest.py
import os
import sys

import pytest

# Add the project root directory to sys.path so that "import app" works
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(autouse=True)
def reset_shared_route():
    """
    The API keeps one route per process; start every test from an empty one.
    """
    from app.api.v1.routes_navigation import route_state
    from app.core.config import settings

    route_state.clear()
    route_state.set_speed(settings.DEFAULT_SPEED_KNOTS)
    yield
    route_state.clear()
