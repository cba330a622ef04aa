import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from snapcircle import config
from snapcircle.geometry import Circle, Rect
from snapcircle.scene import Scene


@pytest.fixture
def zones():
    return [Rect(0, 0, 200, 200), Rect(300, 0, 200, 200)]


@pytest.fixture
def make_scene(zones):
    def _make(variant="pluck", pluck=None):
        home = zones[0]
        circle = Circle(*home.center, config.CIRCLE_RADIUS)
        return Scene(zones, circle, home, config.get_variant(variant), pluck)

    return _make


@pytest.fixture
def scene(make_scene):
    return make_scene()
