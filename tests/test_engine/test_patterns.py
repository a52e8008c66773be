"""Tests for the pattern registry and motif functions."""

from __future__ import annotations

import math
import re

import pytest

from kumiko.engine.grid import generate_grid
from kumiko.engine.patterns import PATTERN_NAMES, PATTERN_REGISTRY, get_pattern
from kumiko.engine.patterns.base import dist, lerp, mid
from kumiko.engine.grid import Point


EXPECTED_PRIMITIVES = {
    "asanoha": 3,
    "mitsukude": 3,
    "goma": 3,
    "shippo": 3,
    "yae-asanoha": 6,
    "kikko": 6,
    "sakura": 6,
    "bishamon": 9,
    "izutsu": 12,
}


def _count(markup: str) -> int:
    return len(re.findall(r"<(?:line|path)\s", markup))


def test_registry_order():
    assert PATTERN_NAMES == (
        "asanoha",
        "mitsukude",
        "goma",
        "shippo",
        "yae-asanoha",
        "kikko",
        "sakura",
        "bishamon",
        "izutsu",
    )


@pytest.mark.parametrize("entry", PATTERN_REGISTRY, ids=lambda e: e.name)
def test_primitive_counts(entry):
    up, down = generate_grid(400, 4)[:2]
    for tri in (up, down):
        markup = entry.fn(tri, 1.5)
        assert _count(markup) == EXPECTED_PRIMITIVES[entry.name]
        assert markup.count("\n") == EXPECTED_PRIMITIVES[entry.name] - 1
        assert 'stroke-width="1.5"' in markup


def test_shippo_uses_arcs_with_half_edge_radius():
    tri = generate_grid(400, 4)[0]
    markup = get_pattern("shippo").fn(tri, 2)
    assert markup.count(" A 50.00 50.00 0 0 1 ") == 3


def test_sakura_has_three_petals_and_three_spokes():
    tri = generate_grid(400, 4)[0]
    markup = get_pattern("sakura").fn(tri, 1)
    assert markup.count(" Q ") == 3
    assert markup.count("<line ") == 3


def test_get_pattern_unknown():
    with pytest.raises(KeyError):
        get_pattern("seigaiha")


def test_point_helpers():
    a, b = Point(0, 0), Point(10, 20)
    assert mid(a, b) == Point(5, 10)
    assert lerp(a, b, 0.25) == Point(2.5, 5)
    assert dist(Point(0, 0), Point(3, 4)) == 5
    p, q = Point(12.5, -3.25), Point(-7.75, 41.5)
    assert dist(p, q) == math.sqrt((p.x - q.x) * (p.x - q.x) + (p.y - q.y) * (p.y - q.y))
