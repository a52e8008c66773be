"""Kumiko generation engine."""

from kumiko.engine.color_schemes import (
    COLOR_SCHEMES,
    ColorScheme,
    color_schemes_by_key,
    get_color_scheme,
    get_color_scheme_names,
    normalize_scheme_key,
)
from kumiko.engine.config import DEFAULT_CONFIG, GeneratorConfig
from kumiko.engine.generator import (
    KumikoOptions,
    KumikoResult,
    LayerInfo,
    LayerOverride,
    generate,
    generate_detailed,
)
from kumiko.engine.grid import Point, Triangle, generate_grid
from kumiko.engine.hashing import hash_string
from kumiko.engine.patterns import PATTERN_NAMES, PATTERN_REGISTRY, PatternEntry
from kumiko.engine.seeded_random import SeededRandom, create_random

__all__ = [
    "COLOR_SCHEMES",
    "ColorScheme",
    "DEFAULT_CONFIG",
    "GeneratorConfig",
    "KumikoOptions",
    "KumikoResult",
    "LayerInfo",
    "LayerOverride",
    "PATTERN_NAMES",
    "PATTERN_REGISTRY",
    "PatternEntry",
    "Point",
    "SeededRandom",
    "Triangle",
    "color_schemes_by_key",
    "create_random",
    "generate",
    "generate_detailed",
    "generate_grid",
    "get_color_scheme",
    "get_color_scheme_names",
    "hash_string",
    "normalize_scheme_key",
]
