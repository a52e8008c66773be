"""Pattern library — the fixed, ordered registry of kumiko motifs.

A layer's ``pattern_index`` is a position in ``PATTERN_REGISTRY``. Append new
motifs at the end; never reorder or remove entries.
"""

from __future__ import annotations

from dataclasses import dataclass

from kumiko.engine.patterns.base import PatternFn
from kumiko.engine.patterns.curved import sakura, shippo
from kumiko.engine.patterns.nested import bishamon, izutsu, kikko
from kumiko.engine.patterns.radial import asanoha, goma, mitsukude, yae_asanoha


@dataclass(frozen=True)
class PatternEntry:
    name: str
    fn: PatternFn


PATTERN_REGISTRY: tuple[PatternEntry, ...] = (
    PatternEntry("asanoha", asanoha),
    PatternEntry("mitsukude", mitsukude),
    PatternEntry("goma", goma),
    PatternEntry("shippo", shippo),
    PatternEntry("yae-asanoha", yae_asanoha),
    PatternEntry("kikko", kikko),
    PatternEntry("sakura", sakura),
    PatternEntry("bishamon", bishamon),
    PatternEntry("izutsu", izutsu),
)

PATTERN_NAMES: tuple[str, ...] = tuple(entry.name for entry in PATTERN_REGISTRY)


def get_pattern(name: str) -> PatternEntry:
    for entry in PATTERN_REGISTRY:
        if entry.name == name:
            return entry
    raise KeyError(name)


__all__ = [
    "PATTERN_NAMES",
    "PATTERN_REGISTRY",
    "PatternEntry",
    "PatternFn",
    "get_pattern",
]
