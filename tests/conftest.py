"""Shared test fixtures."""

from __future__ import annotations

import pytest


IDENTITY_TRANSFORM = "translate(0.00,0.00) rotate(0.00,200.00,200.00)"

LINE_INSIDE = '<line x1="150.00" y1="150.00" x2="250.00" y2="250.00" stroke-width="2"/>'
LINE_OUTSIDE = '<line x1="0.00" y1="0.00" x2="10.00" y2="10.00" stroke-width="2"/>'
QUAD_INSIDE = '<path d="M 150.00 150.00 Q 200.00 200.00 250.00 250.00" fill="none" stroke-width="2"/>'
QUAD_OUTSIDE = '<path d="M 0.00 0.00 Q 5.00 5.00 10.00 10.00" fill="none" stroke-width="2"/>'
ARC_INSIDE = '<path d="M 150.00 150.00 A 50.00 50.00 0 0 1 250.00 250.00" fill="none" stroke-width="2"/>'
ARC_OUTSIDE = '<path d="M 0.00 0.00 A 5.00 5.00 0 0 1 10.00 10.00" fill="none" stroke-width="2"/>'

NO_VIEWBOX_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><rect/></svg>'

# A plain red square, for rasterizer checks
RED_SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100" width="100" height="100">
  <rect x="0" y="0" width="100" height="100" fill="#ff0000"/>
</svg>'''


def build_test_svg(viewbox: str, groups: list[tuple[str, list[str]]]) -> str:
    """A document shaped like generator output: one transform group per (transform, elements)."""
    group_lines: list[str] = []
    for transform, elements in groups:
        group_lines.append(
            f'    <g transform="{transform}" stroke="#fff" stroke-linecap="square" stroke-linejoin="bevel">'
        )
        group_lines.extend(f"      {el}" for el in elements)
        group_lines.append("    </g>")
    return "\n".join([
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{viewbox}" width="400" height="400">',
        '  <rect x="0" y="0" width="400" height="400" fill="#000"/>',
        '  <g fill="none">',
        *group_lines,
        "  </g>",
        "</svg>",
    ])


def count_groups(svg: str) -> int:
    return svg.count('<g transform="translate(')


@pytest.fixture
def red_square_svg() -> str:
    return RED_SQUARE_SVG
