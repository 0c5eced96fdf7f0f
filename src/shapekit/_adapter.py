"""Adapter presenting a 3D solid through the 2D Shape contract.

The adapter lets solids flow through code written against Shape (collections,
similarity comparison) without branching on dimensionality. Its area and
perimeter are compatibility values only:

    area      = volume ** (2/3)   (dimensional projection, not surface area)
    perimeter = 0                 (not applicable to a solid)
"""

from __future__ import annotations

from ._config import DisplayParams
from ._shapes import Shape
from ._solids import Solid


class SolidAdapter(Shape):
    """Wraps a Solid so it can be used wherever a Shape is expected."""

    def __init__(self, solid: Solid):
        if not isinstance(solid, Solid):
            raise TypeError(f"Expected a Solid, got {type(solid).__name__}")
        super().__init__(solid.name)
        self._solid = solid

    @property
    def solid(self) -> Solid:
        """The wrapped solid."""
        return self._solid

    def compute_volume(self) -> float:
        return self._solid.compute_volume()

    def compute_area(self) -> float:
        return self._solid.compute_volume() ** (2 / 3)

    def compute_perimeter(self) -> float:
        return 0.0

    def describe(self, params: DisplayParams | None = None) -> str:
        d = (params or DisplayParams()).decimals
        return f"{self._name} (3D) - Volume: {self._solid.compute_volume():.{d}f}"

    def render_ascii(self) -> str:
        return self._solid.render_ascii()

    def __repr__(self) -> str:
        return f"SolidAdapter({self._solid!r}, id={self._id!r})"
