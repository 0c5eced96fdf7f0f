"""2D shapes: the abstract Shape contract and its concrete kinds.

Every shape exposes area, perimeter, a fixed ASCII rendering, a one-line
description and a unique identity. Parameters are validated before any
attribute is assigned, so an instance only exists if all of them are
positive, finite reals.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

import numpy as np

from ._config import DisplayParams
from ._similarity import SimilarityStrategy, TypeSimilarity
from ._validation import validate_number


class Shape(ABC):
    """Abstract 2D shape."""

    def __init__(self, name: str):
        self._name = name
        self._id = uuid.uuid4().hex

    @property
    def name(self) -> str:
        """Display name of the kind, e.g. "Circle"."""
        return self._name

    @property
    def id(self) -> str:
        """Opaque identity generated at construction."""
        return self._id

    @abstractmethod
    def compute_area(self) -> float:
        raise NotImplementedError(
            f"compute_area must be implemented by {type(self).__name__}"
        )

    @abstractmethod
    def compute_perimeter(self) -> float:
        raise NotImplementedError(
            f"compute_perimeter must be implemented by {type(self).__name__}"
        )

    def render_ascii(self) -> str:
        return f"[Not implemented for {self._name}]"

    def describe(self, params: DisplayParams | None = None) -> str:
        """One-line summary with area and perimeter."""
        d = (params or DisplayParams()).decimals
        return (
            f"{self._name} - Area: {self.compute_area():.{d}f}, "
            f"Perimeter: {self.compute_perimeter():.{d}f}"
        )

    def compare_similarity(
        self,
        other: Shape,
        strategy: SimilarityStrategy | None = None,
    ) -> bool:
        """Compare this shape with another one.

        Args:
            other: Shape to compare against.
            strategy: Comparison policy. If None, uses TypeSimilarity.

        Returns:
            True if the strategy considers both shapes similar.
        """
        strategy = strategy or TypeSimilarity()
        return strategy.are_similar(self, other)

    def _params_repr(self) -> str:
        return ""

    def __repr__(self) -> str:
        params = self._params_repr()
        prefix = f"{params}, " if params else ""
        return f"{type(self).__name__}({prefix}id={self._id!r})"


# =============================================================================
# ASCII ART
# =============================================================================

CIRCLE_ART = """
   ***
 *     *
 *     *
   ***
"""

RECTANGLE_ART = """
+-----------+
|           |
|           |
+-----------+
"""

PENTAGON_ART = r"""
   /\
  /  \
 /____\
 \    /
  \__/
"""

HEXAGON_ART = r"""
  ____
 /    \
/      \
\      /
 \____/
"""


# =============================================================================
# CONCRETE SHAPES
# =============================================================================


class Circle(Shape):
    """Circle with radius r."""

    def __init__(self, radius: float):
        validate_number(radius, "radius")
        super().__init__("Circle")
        self._radius = float(radius)

    @property
    def radius(self) -> float:
        return self._radius

    def compute_area(self) -> float:
        return float(np.pi * self._radius**2)

    def compute_perimeter(self) -> float:
        return float(2 * np.pi * self._radius)

    def render_ascii(self) -> str:
        return CIRCLE_ART

    def _params_repr(self) -> str:
        return f"radius={self._radius!r}"


class Rectangle(Shape):
    """Axis-aligned rectangle with width w and height h."""

    def __init__(self, width: float, height: float):
        validate_number(width, "width")
        validate_number(height, "height")
        super().__init__("Rectangle")
        self._width = float(width)
        self._height = float(height)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def compute_area(self) -> float:
        return float(self._width * self._height)

    def compute_perimeter(self) -> float:
        return float(2 * (self._width + self._height))

    def render_ascii(self) -> str:
        return RECTANGLE_ART

    def _params_repr(self) -> str:
        return f"width={self._width!r}, height={self._height!r}"


class Pentagon(Shape):
    """Regular pentagon with side s."""

    def __init__(self, side: float):
        validate_number(side, "side")
        super().__init__("Pentagon")
        self._side = float(side)

    @property
    def side(self) -> float:
        return self._side

    def compute_area(self) -> float:
        return float(5 * self._side**2 / (4 * np.tan(np.pi / 5)))

    def compute_perimeter(self) -> float:
        return float(5 * self._side)

    def render_ascii(self) -> str:
        return PENTAGON_ART

    def _params_repr(self) -> str:
        return f"side={self._side!r}"


class Hexagon(Shape):
    """Regular hexagon with side s."""

    def __init__(self, side: float):
        validate_number(side, "side")
        super().__init__("Hexagon")
        self._side = float(side)

    @property
    def side(self) -> float:
        return self._side

    def compute_area(self) -> float:
        return float(3 * np.sqrt(3) / 2 * self._side**2)

    def compute_perimeter(self) -> float:
        return float(6 * self._side)

    def render_ascii(self) -> str:
        return HEXAGON_ART

    def _params_repr(self) -> str:
        return f"side={self._side!r}"
