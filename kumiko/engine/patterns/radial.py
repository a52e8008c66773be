"""Radial motifs: straight spokes between vertices, edge midpoints and the centroid."""

from __future__ import annotations

from kumiko.engine.grid import Triangle
from kumiko.engine.patterns.base import join, mid
from kumiko.svg.primitives import line


def asanoha(triangle: Triangle, stroke_width: float) -> str:
    """Hemp leaf: vertex → centroid. Mirrored neighbours form six-point stars."""
    a, b, c = triangle.vertices
    cen = triangle.centroid
    return join([
        line(a, cen, stroke_width),
        line(b, cen, stroke_width),
        line(c, cen, stroke_width),
    ])


def mitsukude(triangle: Triangle, stroke_width: float) -> str:
    """Three-pronged: edge midpoint → centroid, a Y in each cell."""
    a, b, c = triangle.vertices
    cen = triangle.centroid
    return join([
        line(mid(a, b), cen, stroke_width),
        line(mid(b, c), cen, stroke_width),
        line(mid(c, a), cen, stroke_width),
    ])


def goma(triangle: Triangle, stroke_width: float) -> str:
    """Sesame: each vertex to the midpoint of the opposite edge."""
    a, b, c = triangle.vertices
    return join([
        line(a, mid(b, c), stroke_width),
        line(b, mid(c, a), stroke_width),
        line(c, mid(a, b), stroke_width),
    ])


def yae_asanoha(triangle: Triangle, stroke_width: float) -> str:
    """Double hemp leaf: all six spokes, vertices first then midpoints."""
    a, b, c = triangle.vertices
    cen = triangle.centroid
    return join([
        line(a, cen, stroke_width),
        line(b, cen, stroke_width),
        line(c, cen, stroke_width),
        line(mid(a, b), cen, stroke_width),
        line(mid(b, c), cen, stroke_width),
        line(mid(c, a), cen, stroke_width),
    ])
