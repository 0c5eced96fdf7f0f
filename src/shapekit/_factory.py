"""Construction of shapes from a kind tag and a parameter mapping."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping

from loguru import logger

from ._adapter import SolidAdapter
from ._errors import UnknownKindError
from ._shapes import Circle, Hexagon, Pentagon, Rectangle, Shape
from ._solids import Cube, Sphere


class ShapeKind(Enum):
    """Kinds the factory can build.

    CUBE and SPHERE are solids and come back wrapped in a SolidAdapter.
    """

    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    CUBE = "cube"
    SPHERE = "sphere"


# Missing fields are passed as None and rejected by the constructor.
_BUILDERS: dict[ShapeKind, Callable[[Mapping[str, Any]], Shape]] = {
    ShapeKind.CIRCLE: lambda p: Circle(p.get("radius")),
    ShapeKind.RECTANGLE: lambda p: Rectangle(p.get("width"), p.get("height")),
    ShapeKind.PENTAGON: lambda p: Pentagon(p.get("side")),
    ShapeKind.HEXAGON: lambda p: Hexagon(p.get("side")),
    ShapeKind.CUBE: lambda p: SolidAdapter(Cube(p.get("side"))),
    ShapeKind.SPHERE: lambda p: SolidAdapter(Sphere(p.get("radius"))),
}


def create_shape(kind: ShapeKind | str, params: Mapping[str, Any]) -> Shape:
    """
    Build a shape from a kind tag and named parameters.

    Args:
        kind: A ShapeKind or its string value ("circle", "rectangle",
            "pentagon", "hexagon", "cube", "sphere").
        params: Named numeric fields. circle/sphere take "radius",
            rectangle takes "width" and "height", pentagon/hexagon/cube
            take "side". Extra fields are ignored.

    Returns:
        A Shape. Solids are returned wrapped in a SolidAdapter.

    Raises:
        UnknownKindError: If kind is not recognised.
        InvalidParameterError: If a required field is missing or invalid.
    """
    try:
        shape_kind = ShapeKind(kind)
    except ValueError:
        raise UnknownKindError(kind, tuple(k.value for k in ShapeKind)) from None

    shape = _BUILDERS[shape_kind](params)
    logger.debug(f"Created {shape_kind.value}: {shape!r}")
    return shape
