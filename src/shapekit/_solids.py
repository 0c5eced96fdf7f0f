"""3D solids. These expose volume and rendering only, not the Shape contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ._validation import validate_number


CUBE_ART = """
+------+
|      |
+------+
|      |
+------+
"""

SPHERE_ART = """
   .-'''-.
  / .:::. \\
 | ::::::: |
  \\ ':::' /
   '-...-'
"""


class Solid(ABC):
    """Abstract 3D solid."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def compute_volume(self) -> float:
        raise NotImplementedError(
            f"compute_volume must be implemented by {type(self).__name__}"
        )

    @abstractmethod
    def render_ascii(self) -> str:
        raise NotImplementedError(
            f"render_ascii must be implemented by {type(self).__name__}"
        )


class Cube(Solid):
    """Cube with side s."""

    def __init__(self, side: float):
        validate_number(side, "side")
        super().__init__("Cube")
        self._side = float(side)

    @property
    def side(self) -> float:
        return self._side

    def compute_volume(self) -> float:
        return float(self._side**3)

    def render_ascii(self) -> str:
        return CUBE_ART

    def __repr__(self) -> str:
        return f"Cube(side={self._side!r})"


class Sphere(Solid):
    """Sphere with radius r."""

    def __init__(self, radius: float):
        validate_number(radius, "radius")
        super().__init__("Sphere")
        self._radius = float(radius)

    @property
    def radius(self) -> float:
        return self._radius

    def compute_volume(self) -> float:
        return float(4 / 3 * np.pi * self._radius**3)

    def render_ascii(self) -> str:
        return SPHERE_ART

    def __repr__(self) -> str:
        return f"Sphere(radius={self._radius!r})"
