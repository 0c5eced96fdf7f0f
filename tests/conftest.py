"""Pytest configuration and fixtures for shapekit tests."""

from __future__ import annotations

import numpy as np
import pytest

from shapekit import Circle, Cube, Hexagon, Pentagon, Rectangle, SolidAdapter, Sphere


# =============================================================================
# REFERENCE VALUES
# =============================================================================

# Closed-form area/perimeter per 2D kind, keyed by the display name.
AREA_FORMULAS = {
    "Circle": lambda r: np.pi * r**2,
    "Pentagon": lambda s: 5 * s**2 / (4 * np.tan(np.pi / 5)),
    "Hexagon": lambda s: 3 * np.sqrt(3) / 2 * s**2,
}

PERIMETER_FORMULAS = {
    "Circle": lambda r: 2 * np.pi * r,
    "Pentagon": lambda s: 5 * s,
    "Hexagon": lambda s: 6 * s,
}

POSITIVE_VALUES = [1e-3, 0.5, 1, 3, 4.25, 1e4]

# Values every constructor must reject.
INVALID_VALUES = [
    0,
    0.0,
    -1,
    -2.5,
    float("nan"),
    float("inf"),
    float("-inf"),
    True,
    "5",
    None,
    complex(1, 1),
    [3],
]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def circle() -> Circle:
    """Circle of radius 5."""
    return Circle(5)


@pytest.fixture
def rectangle() -> Rectangle:
    """2 x 3 rectangle."""
    return Rectangle(2, 3)


@pytest.fixture
def pentagon() -> Pentagon:
    """Pentagon of side 4."""
    return Pentagon(4)


@pytest.fixture
def hexagon() -> Hexagon:
    """Hexagon of side 6."""
    return Hexagon(6)


@pytest.fixture
def cube_adapter() -> SolidAdapter:
    """Cube of side 3 seen through the 2D contract."""
    return SolidAdapter(Cube(3))


@pytest.fixture
def sphere_adapter() -> SolidAdapter:
    """Sphere of radius 4 seen through the 2D contract."""
    return SolidAdapter(Sphere(4))
