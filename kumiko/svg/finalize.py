"""Finalize — drop primitives that cannot be seen inside the viewBox.

A single pass over the document text. Each ``<g transform="translate(...)
rotate(...)">`` group is buffered; its children are mapped through the
group's transform and tested against the viewBox grown by a 5% margin (stroke
width and curvature can reach slightly past the geometric bounds). Groups
left without children are removed entirely. Everything outside transform
groups passes through untouched, and kept lines are emitted byte-for-byte.

Works on the exact shape written by ``kumiko.svg.serializer``; it is not a
general SVG optimizer.
"""

from __future__ import annotations

import logging
import math
import re

import numpy as np

from kumiko.utils.geometry import GroupTransform, Rect, bbox_intersects_rect, segment_intersects_rect

logger = logging.getLogger(__name__)

# Margin around the viewBox, as a fraction of its larger side
DEFAULT_PADDING = 0.05

_VIEWBOX_RE = re.compile(r'viewBox="([^"]+)"')
_GROUP_TRANSFORM_RE = re.compile(
    r'^<g\s+transform="translate\(([^,]+),([^)]+)\)\s+rotate\(([^,]+),([^,]+),([^)]+)\)"'
)
_GROUP_CLOSE = "</g>"
_LINE_RE = re.compile(r'^<line\s+x1="([^"]+)"\s+y1="([^"]+)"\s+x2="([^"]+)"\s+y2="([^"]+)"')
_QUAD_RE = re.compile(
    r'^<path\s+d="M\s+(\S+)\s+(\S+)\s+Q\s+(\S+)\s+(\S+)\s+(\S+)\s+([^\s"]+)"'
)
_ARC_RE = re.compile(
    r'^<path\s+d="M\s+(\S+)\s+(\S+)\s+A\s+(\S+)\s+(\S+)\s+\d+\s+\d+\s+\d+\s+(\S+)\s+([^\s"]+)"'
)


def finalize_svg(svg_text: str, padding: float = DEFAULT_PADDING) -> str:
    """Remove primitives (and emptied groups) lying entirely outside the viewBox.

    Returns the input unchanged when it has no usable viewBox.
    """
    viewbox = parse_viewbox(svg_text)
    if viewbox is None:
        return svg_text

    visible = viewbox.padded(max(viewbox.width, viewbox.height) * padding)

    result: list[str] = []
    transform: GroupTransform | None = None
    header = ""
    kept: list[str] = []
    total = 0
    dropped_groups = 0

    for line in svg_text.split("\n"):
        stripped = line.strip()

        match = _GROUP_TRANSFORM_RE.match(stripped)
        if match:
            parsed = _parse_transform(match)
            if parsed is not None:
                transform = parsed
                header = line
                kept = []
                continue

        if transform is not None and stripped == _GROUP_CLOSE:
            if kept:
                result.append(header)
                result.extend(kept)
                result.append(line)
            else:
                dropped_groups += 1
            transform = None
            continue

        if transform is not None:
            if not stripped:
                continue
            total += 1
            if is_element_visible(stripped, transform, visible):
                kept.append(line)
            continue

        result.append(line)

    if transform is not None:
        # Unterminated group: flush what survived
        logger.warning("finalize: transform group never closed; emitting %d buffered elements", len(kept))
        result.append(header)
        result.extend(kept)

    logger.debug(
        "finalize: %d primitives tested, %d groups dropped, %d → %d bytes",
        total,
        dropped_groups,
        len(svg_text),
        sum(len(s) + 1 for s in result) - 1,
    )
    return "\n".join(result)


def parse_viewbox(svg_text: str) -> Rect | None:
    """Read ``viewBox="x y w h"``; ``None`` when absent or not four finite numbers."""
    match = _VIEWBOX_RE.search(svg_text)
    if not match:
        return None
    parts = match.group(1).split()
    if len(parts) != 4:
        return None
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in (x, y, w, h)):
        return None
    return Rect(x, y, w, h)


def is_element_visible(element: str, transform: GroupTransform, rect: Rect) -> bool:
    """Whether one primitive, after ``transform``, can touch ``rect``.

    Lines get an exact segment test; quadratic curves and arcs get a
    conservative bounding-box test. Anything unrecognized is kept.
    """
    try:
        match = _LINE_RE.match(element)
        if match:
            points = transform.apply(np.array(_floats(match, 1, 2, 3, 4)).reshape(2, 2))
            return segment_intersects_rect(points[0], points[1], rect)

        match = _QUAD_RE.match(element)
        if match:
            # A quadratic curve stays inside the hull of its three control points
            points = transform.apply(np.array(_floats(match, 1, 2, 3, 4, 5, 6)).reshape(3, 2))
            return bbox_intersects_rect(points, rect)

        match = _ARC_RE.match(element)
        if match:
            # The arc bulges at most one radius away from its endpoints
            radius = float(match.group(3))
            points = transform.apply(np.array(_floats(match, 1, 2, 5, 6)).reshape(2, 2))
            return bbox_intersects_rect(points, rect, expand_by=radius)
    except ValueError:
        return True

    return True


def _parse_transform(match: re.Match[str]) -> GroupTransform | None:
    try:
        dx, dy, angle, cx, cy = _floats(match, 1, 2, 3, 4, 5)
    except ValueError:
        return None
    return GroupTransform(dx=dx, dy=dy, angle=angle, cx=cx, cy=cy)


def _floats(match: re.Match[str], *groups: int) -> list[float]:
    values = [float(match.group(g)) for g in groups]
    if not all(math.isfinite(v) for v in values):
        raise ValueError(f"non-finite coordinate in {match.group(0)!r}")
    return values


def count_primitives(svg_text: str) -> int:
    """Number of ``<line>`` and ``<path>`` elements in a document."""
    return len(re.findall(r"<(?:line|path)\s", svg_text))


# Public alias used by the package surface
finalize = finalize_svg
