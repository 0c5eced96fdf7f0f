"""Configuration for shape display and similarity comparison."""

from __future__ import annotations

import jax_dataclasses as jdc


@jdc.pytree_dataclass
class SimilarityParams:
    """Thresholds for area-based similarity."""

    lower_ratio: float = 0.8
    """Exclusive lower bound on area_a / area_b."""

    upper_ratio: float = 1.2
    """Exclusive upper bound on area_a / area_b."""


@jdc.pytree_dataclass
class DisplayParams:
    """Parameters for textual descriptions."""

    decimals: int = 2
    """Digits after the decimal point in describe() output."""


@jdc.pytree_dataclass
class ShapekitConfig:
    """Unified configuration for shapekit.

    Usage:
        # Defaults (2 decimals, +/-20% area tolerance)
        config = ShapekitConfig()

        # Customize a single field
        config = jdc.replace(config, display=DisplayParams(decimals=4))

        # Fully custom
        config = ShapekitConfig(
            similarity=SimilarityParams(lower_ratio=0.9, upper_ratio=1.1),
            display=DisplayParams(decimals=3),
        )
    """

    similarity: SimilarityParams = jdc.field(default_factory=SimilarityParams)
    """Parameters for AreaSimilarity."""

    display: DisplayParams = jdc.field(default_factory=DisplayParams)
    """Parameters for describe()."""
