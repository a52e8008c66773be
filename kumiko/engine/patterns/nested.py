"""Nested-triangle motifs: scaled copies of the cell joined by radials."""

from __future__ import annotations

from kumiko.engine.grid import Point, Triangle
from kumiko.engine.patterns.base import join, lerp, mid
from kumiko.svg.primitives import line

# Fractions of the centroid → vertex distance
_KIKKO_INNER = 0.4
_BISHAMON_INNER = 0.35
_IZUTSU_MID = 0.65
_IZUTSU_INNER = 0.3


def _scaled(triangle: Triangle, t: float) -> tuple[Point, Point, Point]:
    cen = triangle.centroid
    a, b, c = triangle.vertices
    return lerp(cen, a, t), lerp(cen, b, t), lerp(cen, c, t)


def _outline(pts: tuple[Point, Point, Point], stroke_width: float) -> list[str]:
    p, q, r = pts
    return [
        line(p, q, stroke_width),
        line(q, r, stroke_width),
        line(r, p, stroke_width),
    ]


def kikko(triangle: Triangle, stroke_width: float) -> str:
    """Tortoise shell: inner triangle plus outer → inner vertex links."""
    a, b, c = triangle.vertices
    ia, ib, ic = inner = _scaled(triangle, _KIKKO_INNER)
    return join([
        *_outline(inner, stroke_width),
        line(a, ia, stroke_width),
        line(b, ib, stroke_width),
        line(c, ic, stroke_width),
    ])


def bishamon(triangle: Triangle, stroke_width: float) -> str:
    """Bishamon kikko: inner triangle, vertex → centroid, inner vertex → opposite midpoint."""
    a, b, c = triangle.vertices
    cen = triangle.centroid
    ia, ib, ic = inner = _scaled(triangle, _BISHAMON_INNER)
    return join([
        *_outline(inner, stroke_width),
        line(a, cen, stroke_width),
        line(b, cen, stroke_width),
        line(c, cen, stroke_width),
        line(ia, mid(b, c), stroke_width),
        line(ib, mid(c, a), stroke_width),
        line(ic, mid(a, b), stroke_width),
    ])


def izutsu(triangle: Triangle, stroke_width: float) -> str:
    """Well frame: two concentric triangles with radials across all three levels."""
    a, b, c = triangle.vertices
    ma, mb, mc = middle = _scaled(triangle, _IZUTSU_MID)
    ia, ib, ic = inner = _scaled(triangle, _IZUTSU_INNER)
    return join([
        *_outline(middle, stroke_width),
        *_outline(inner, stroke_width),
        line(a, ma, stroke_width),
        line(b, mb, stroke_width),
        line(c, mc, stroke_width),
        line(ma, ia, stroke_width),
        line(mb, ib, stroke_width),
        line(mc, ic, stroke_width),
    ])
