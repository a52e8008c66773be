"""SVG markup for the three primitive kinds: line, circular arc, quadratic curve.

The exact attribute order and 2-decimal formatting are relied on by
``kumiko.svg.finalize``; keep the two in sync.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kumiko.engine.grid import Point


def fmt(value: float) -> str:
    """Format a coordinate to 2 decimal places."""
    text = f"{value:.2f}"
    # "-0.00" would otherwise leak from tiny negative rounding noise
    return "0.00" if text == "-0.00" else text


def fmt_number(value: float) -> str:
    """Shortest form of a number: ``2`` for 2.0, ``1.5`` for 1.5."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def line(start: Point, end: Point, stroke_width: float) -> str:
    return (
        f'<line x1="{fmt(start.x)}" y1="{fmt(start.y)}" '
        f'x2="{fmt(end.x)}" y2="{fmt(end.y)}" '
        f'stroke-width="{fmt_number(stroke_width)}"/>'
    )


def arc(start: Point, end: Point, radius: float, stroke_width: float) -> str:
    """Clockwise minor arc of ``radius`` from ``start`` to ``end``."""
    return (
        f'<path d="M {fmt(start.x)} {fmt(start.y)} '
        f"A {fmt(radius)} {fmt(radius)} 0 0 1 {fmt(end.x)} {fmt(end.y)}\" "
        f'fill="none" stroke-width="{fmt_number(stroke_width)}"/>'
    )


def quad(start: Point, ctrl: Point, end: Point, stroke_width: float) -> str:
    return (
        f'<path d="M {fmt(start.x)} {fmt(start.y)} '
        f"Q {fmt(ctrl.x)} {fmt(ctrl.y)} {fmt(end.x)} {fmt(end.y)}\" "
        f'fill="none" stroke-width="{fmt_number(stroke_width)}"/>'
    )
