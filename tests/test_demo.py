"""Tests for the end-to-end demonstration output."""

from __future__ import annotations

import jax_dataclasses as jdc

from shapekit import ShapekitConfig, SimilarityParams, run_demo
from shapekit._shapes import CIRCLE_ART, HEXAGON_ART
from shapekit._solids import SPHERE_ART


class TestRunDemo:
    """Test run_demo output."""

    def test_section_order(self, capsys):
        """Banner, listing, similarity, art and done appear in order."""
        run_demo()
        out = capsys.readouterr().out

        markers = [
            "SHAPEKIT",
            "=== FIGURAS ===",
            "Similarity:",
            "ASCII art:",
            "Done.",
        ]
        positions = [out.index(m) for m in markers]
        assert positions == sorted(positions)

    def test_listing(self, capsys):
        """The five demo shapes are listed in insertion order."""
        run_demo()
        lines = capsys.readouterr().out.splitlines()
        start = lines.index("=== FIGURAS ===") + 1
        assert lines[start : start + 5] == [
            "Circle - Area: 78.54, Perimeter: 31.42",
            "Pentagon - Area: 27.53, Perimeter: 20.00",
            "Hexagon - Area: 93.53, Perimeter: 36.00",
            "Cube (3D) - Volume: 27.00",
            "Sphere (3D) - Volume: 268.08",
        ]

    def test_similarity_results(self, capsys):
        """Both default comparisons come out False."""
        run_demo()
        out = capsys.readouterr().out
        assert "Circle ~ Pentagon (type): False" in out
        assert "Pentagon ~ Hexagon (area): False" in out

    def test_ascii_art_in_order(self, capsys):
        """Circle, hexagon and sphere art follow each other."""
        run_demo()
        out = capsys.readouterr().out
        art_section = out[out.index("ASCII art:") :]
        positions = [
            art_section.index(CIRCLE_ART),
            art_section.index(HEXAGON_ART),
            art_section.index(SPHERE_ART),
        ]
        assert positions == sorted(positions)

    def test_config_is_applied(self, capsys):
        """Looser area bounds flip the pentagon/hexagon result."""
        config = jdc.replace(
            ShapekitConfig(),
            similarity=SimilarityParams(lower_ratio=0.2, upper_ratio=5.0),
        )
        run_demo(config)
        assert "Pentagon ~ Hexagon (area): True" in capsys.readouterr().out
