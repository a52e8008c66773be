"""Write the kumiko SVG document: root, background, layer groups."""

from __future__ import annotations

from kumiko.svg.primitives import fmt, fmt_number

_INDENT = "  "


def group_open(dx: float, dy: float, angle: float, cx: float, cy: float, stroke: str) -> str:
    """Opening tag of one layer copy; ``kumiko.svg.finalize`` matches this shape."""
    return (
        f'<g transform="translate({fmt(dx)},{fmt(dy)}) '
        f'rotate({fmt(angle)},{fmt(cx)},{fmt(cy)})" '
        f'stroke="{stroke}" stroke-linecap="square" stroke-linejoin="bevel">'
    )


def serialize_group(header: str, elements: list[str]) -> list[str]:
    """One transform group as lines, children indented one level."""
    lines = [header]
    for elem in elements:
        lines.extend(f"{_INDENT}{part}" for part in elem.split("\n"))
    lines.append("</g>")
    return lines


def serialize_svg(
    groups: list[list[str]],
    size: float,
    canvas_size: float,
    zoom: float = 1.0,
    background: str = "#2d2d2d",
) -> str:
    """Assemble the document.

    The viewBox shows ``size / zoom`` units centered on the canvas, so zooming
    in crops toward the middle of the pattern.
    """
    view_size = size / zoom
    view_offset = (canvas_size - view_size) / 2

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="{fmt(view_offset)} {fmt(view_offset)} {fmt(view_size)} {fmt(view_size)}" '
        f'width="{fmt_number(size)}" height="{fmt_number(size)}">',
        f'{_INDENT}<rect x="0" y="0" width="{fmt_number(canvas_size)}" '
        f'height="{fmt_number(canvas_size)}" fill="{background}"/>',
        f'{_INDENT}<g fill="none">',
    ]
    for group in groups:
        lines.extend(f"{_INDENT * 2}{line}" for line in group)
    lines.append(f"{_INDENT}</g>")
    lines.append("</svg>")
    return "\n".join(lines)
