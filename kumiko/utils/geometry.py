"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height

    def padded(self, amount: float) -> Rect:
        """Grow by ``amount`` on every side."""
        return Rect(self.x - amount, self.y - amount, self.width + 2 * amount, self.height + 2 * amount)

    def corners(self) -> NDArray[np.float64]:
        return np.array([
            [self.x, self.y],
            [self.x_max, self.y],
            [self.x, self.y_max],
            [self.x_max, self.y_max],
        ])


@dataclass(frozen=True)
class GroupTransform:
    """SVG ``translate(dx,dy) rotate(angle,cx,cy)``: rotate about (cx, cy), then translate."""

    dx: float
    dy: float
    angle: float
    cx: float
    cy: float

    def apply(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Map an Nx2 array of local coordinates to document coordinates."""
        rad = math.radians(self.angle)
        cos_a, sin_a = math.cos(rad), math.sin(rad)
        rotation = np.array([[cos_a, -sin_a], [sin_a, cos_a]])
        center = np.array([self.cx, self.cy])
        rotated = (np.asarray(points, dtype=np.float64) - center) @ rotation.T + center
        return rotated + np.array([self.dx, self.dy])


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bbox_intersects_rect(points: NDArray[np.float64], rect: Rect, expand_by: float = 0.0) -> bool:
    """Bounding box of ``points`` grown by ``expand_by`` overlaps ``rect`` (edges touching count)."""
    xmin, ymin, xmax, ymax = bbox(points)
    return (
        xmax + expand_by >= rect.x
        and xmin - expand_by <= rect.x_max
        and ymax + expand_by >= rect.y
        and ymin - expand_by <= rect.y_max
    )


def segment_intersects_rect(p1: NDArray[np.float64], p2: NDArray[np.float64], rect: Rect) -> bool:
    """Separating-axis test of segment p1→p2 against an axis-aligned rect.

    Axes: x, y, and the segment's normal. On the normal axis the segment is
    separated only when all four corners lie strictly on one side of the
    infinite line through it.
    """
    x1, y1 = float(p1[0]), float(p1[1])
    x2, y2 = float(p2[0]), float(p2[1])

    if max(x1, x2) < rect.x or min(x1, x2) > rect.x_max:
        return False
    if max(y1, y2) < rect.y or min(y1, y2) > rect.y_max:
        return False

    corners = rect.corners()
    side = (y2 - y1) * (corners[:, 0] - x1) - (x2 - x1) * (corners[:, 1] - y1)
    if np.all(side > 0) or np.all(side < 0):
        return False
    return True
