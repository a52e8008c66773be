"""Point helpers shared by the pattern functions."""

from __future__ import annotations

import math
from typing import Callable

from kumiko.engine.grid import Point, Triangle

PatternFn = Callable[[Triangle, float], str]


def mid(p1: Point, p2: Point) -> Point:
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def lerp(start: Point, end: Point, t: float) -> Point:
    """Point ``t`` of the way from ``start`` to ``end``."""
    return Point(start.x + (end.x - start.x) * t, start.y + (end.y - start.y) * t)


def dist(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def join(elements: list[str]) -> str:
    return "\n".join(elements)
