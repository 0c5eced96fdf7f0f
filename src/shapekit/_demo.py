"""End-to-end demonstration of shapes, solids, similarity and the factory."""

from __future__ import annotations

from loguru import logger

from ._collection import ShapeCollection
from ._config import ShapekitConfig
from ._factory import create_shape
from ._similarity import AreaSimilarity

BANNER = "SHAPEKIT - extended shape system"


def run_demo(config: ShapekitConfig | None = None) -> None:
    """Print the collection listing, two similarity checks and some ASCII art.

    Args:
        config: Display and similarity settings. If None, uses defaults.
    """
    cfg = config or ShapekitConfig()

    print(f"\n{BANNER}\n")

    collection = ShapeCollection(display=cfg.display)

    circle = create_shape("circle", {"radius": 5})
    pentagon = create_shape("pentagon", {"side": 4})
    hexagon = create_shape("hexagon", {"side": 6})
    cube = create_shape("cube", {"side": 3})
    sphere = create_shape("sphere", {"radius": 4})

    for shape in (circle, pentagon, hexagon, cube, sphere):
        collection.add(shape)
    logger.info(f"Collection holds {len(collection)} shapes")

    collection.list()

    print("\nSimilarity:")
    print(f"Circle ~ Pentagon (type): {circle.compare_similarity(pentagon)}")
    print(
        "Pentagon ~ Hexagon (area): "
        f"{pentagon.compare_similarity(hexagon, AreaSimilarity(cfg.similarity))}"
    )

    print("\nASCII art:")
    print(circle.render_ascii())
    print(hexagon.render_ascii())
    print(sphere.render_ascii())

    print("\nDone.")
