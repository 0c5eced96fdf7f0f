"""Pluggable similarity policies for comparing two shapes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ._config import SimilarityParams

if TYPE_CHECKING:
    from ._shapes import Shape


class SimilarityStrategy(ABC):
    """Policy deciding whether two shapes are similar."""

    @abstractmethod
    def are_similar(self, shape_a: "Shape", shape_b: "Shape") -> bool:
        raise NotImplementedError(
            f"are_similar must be implemented by {type(self).__name__}"
        )

    def __call__(self, shape_a: "Shape", shape_b: "Shape") -> bool:
        return self.are_similar(shape_a, shape_b)


class TypeSimilarity(SimilarityStrategy):
    """Similar iff both shapes have the same display name (case-sensitive)."""

    def are_similar(self, shape_a: "Shape", shape_b: "Shape") -> bool:
        return shape_a.name == shape_b.name


class AreaSimilarity(SimilarityStrategy):
    """Similar iff area_a / area_b lies strictly inside (lower, upper).

    The ratio is taken in argument order, so swapping the shapes can flip the
    result right at the boundaries.
    """

    def __init__(self, params: SimilarityParams | None = None):
        self._params = params or SimilarityParams()

    @property
    def params(self) -> SimilarityParams:
        return self._params

    def are_similar(self, shape_a: "Shape", shape_b: "Shape") -> bool:
        area_b = shape_b.compute_area()
        if area_b == 0:
            return False
        ratio = shape_a.compute_area() / area_b
        return self._params.lower_ratio < ratio < self._params.upper_ratio
