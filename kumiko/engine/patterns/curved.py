"""Curved motifs built from arcs and quadratic curves."""

from __future__ import annotations

from kumiko.engine.grid import Triangle
from kumiko.engine.patterns.base import dist, join, lerp, mid
from kumiko.svg.primitives import arc, line, quad

# Petal control point sits 25% of the way from vertex to centroid
_PETAL_PULL = 0.25


def shippo(triangle: Triangle, stroke_width: float) -> str:
    """Seven treasures: an arc along each edge; neighbours read as overlapping circles."""
    a, b, c = triangle.vertices
    radius = dist(a, b) * 0.5
    return join([
        arc(a, b, radius, stroke_width),
        arc(b, c, radius, stroke_width),
        arc(c, a, radius, stroke_width),
    ])


def sakura(triangle: Triangle, stroke_width: float) -> str:
    a, b, c = triangle.vertices
    cen = triangle.centroid
    mid_ab = mid(a, b)
    mid_bc = mid(b, c)
    mid_ca = mid(c, a)
    return join([
        quad(mid_ca, lerp(a, cen, _PETAL_PULL), mid_ab, stroke_width),
        quad(mid_ab, lerp(b, cen, _PETAL_PULL), mid_bc, stroke_width),
        quad(mid_bc, lerp(c, cen, _PETAL_PULL), mid_ca, stroke_width),
        line(cen, mid_ab, stroke_width),
        line(cen, mid_bc, stroke_width),
        line(cen, mid_ca, stroke_width),
    ])
