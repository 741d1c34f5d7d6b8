import math

import pytest


@pytest.fixture
def square():
    # counter-clockwise in y-up coordinates
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


@pytest.fixture
def square_cw(square):
    return list(reversed(square))


@pytest.fixture
def pentagon():
    return [(100.0, 100.0), (400.0, 150.0), (400.0, 350.0), (300.0, 200.0), (120.0, 150.0)]


@pytest.fixture
def hexagon():
    return [(50.0 * math.cos(k * math.pi / 3), 50.0 * math.sin(k * math.pi / 3)) for k in range(6)]
