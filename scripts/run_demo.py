"""Run the shapekit demonstration."""

from __future__ import annotations

import sys

import tyro
from loguru import logger

from shapekit import DisplayParams, ShapekitConfig, SimilarityParams, run_demo


def main(
    decimals: int = 2,
    lower_ratio: float = 0.8,
    upper_ratio: float = 1.2,
    verbose: bool = False,
) -> None:
    """Print shape descriptions, similarity checks and ASCII art.

    Args:
        decimals: Digits after the decimal point in shape descriptions.
        lower_ratio: Exclusive lower bound on the area ratio for area similarity.
        upper_ratio: Exclusive upper bound on the area ratio for area similarity.
        verbose: If True, log shape construction at DEBUG level.

    Examples:
        python scripts/run_demo.py
        python scripts/run_demo.py --decimals 4 --verbose
        python scripts/run_demo.py --lower-ratio 0.2 --upper-ratio 5.0
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")

    config = ShapekitConfig(
        similarity=SimilarityParams(lower_ratio=lower_ratio, upper_ratio=upper_ratio),
        display=DisplayParams(decimals=decimals),
    )
    run_demo(config)


if __name__ == "__main__":
    tyro.cli(main)
