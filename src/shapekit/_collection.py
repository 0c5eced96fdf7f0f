"""Ordered collection of shapes."""

from __future__ import annotations

from typing import Iterator

from loguru import logger

from ._config import DisplayParams
from ._shapes import Shape

LIST_HEADER = "=== FIGURAS ==="


class ShapeCollection:
    """Append-only, insertion-ordered group of shapes.

    Members are shared, not copied: the same shape may live in several
    collections.
    """

    def __init__(self, display: DisplayParams | None = None):
        self._shapes: list[Shape] = []
        self._display = display or DisplayParams()

    def add(self, shape: Shape) -> None:
        self._shapes.append(shape)
        logger.debug(f"Added {shape.name} ({shape.id}) at position {len(self._shapes) - 1}")

    def describe_all(self) -> list[str]:
        """Descriptions of every member, in insertion order."""
        return [shape.describe(self._display) for shape in self._shapes]

    def list(self) -> None:
        """Print the header followed by one description per member."""
        print(LIST_HEADER)
        for line in self.describe_all():
            print(line)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)
