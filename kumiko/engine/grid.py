"""Equilateral triangle grid covering a square canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass

_SQRT3_2 = math.sqrt(3) / 2


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Triangle:
    """One grid cell. Vertices are ordered as the pattern functions expect."""

    vertices: tuple[Point, Point, Point]
    centroid: Point
    index: int
    is_upward: bool


def compute_centroid(a: Point, b: Point, c: Point) -> Point:
    return Point((a.x + b.x + c.x) / 3, (a.y + b.y + c.y) / 3)


def generate_grid(canvas_size: float, divisions: int) -> list[Triangle]:
    """Tile a ``canvas_size`` square with up/down triangles, row-major.

    ``divisions`` is the number of upward triangles per row. One extra row is
    added so the bottom edge is always covered. Downward triangles sit
    between two upward ones, so the last column has none. An empty canvas or
    zero divisions gives no triangles.
    """
    if canvas_size <= 0 or divisions <= 0:
        return []

    col_width = canvas_size / divisions
    row_height = col_width * _SQRT3_2
    rows = math.ceil(canvas_size / row_height) + 1

    triangles: list[Triangle] = []
    index = 0
    for row in range(rows):
        y = row * row_height
        for col in range(divisions):
            x = col * col_width

            up_a = Point(x, y + row_height)
            up_b = Point(x + col_width, y + row_height)
            up_c = Point(x + col_width / 2, y)
            triangles.append(
                Triangle(
                    vertices=(up_a, up_b, up_c),
                    centroid=compute_centroid(up_a, up_b, up_c),
                    index=index,
                    is_upward=True,
                )
            )
            index += 1

            if col < divisions - 1:
                down_a = Point(x + col_width / 2, y)
                down_b = Point(x + col_width, y + row_height)
                down_c = Point(x + col_width * 1.5, y)
                triangles.append(
                    Triangle(
                        vertices=(down_a, down_b, down_c),
                        centroid=compute_centroid(down_a, down_b, down_c),
                        index=index,
                        is_upward=False,
                    )
                )
                index += 1

    return triangles
