"""Kumiko — deterministic kumiko-style line art from a text slug."""

__version__ = "0.1.0"

from kumiko.engine import (
    COLOR_SCHEMES,
    KumikoOptions,
    KumikoResult,
    LayerInfo,
    LayerOverride,
    color_schemes_by_key,
    generate,
    generate_detailed,
    get_color_scheme,
    get_color_scheme_names,
    normalize_scheme_key,
)
from kumiko.errors import KumikoError, RasterizationError, UnknownColorSchemeError
from kumiko.svg.finalize import finalize, finalize_svg
from kumiko.utils.rasterizer import svg_to_png

__all__ = [
    "COLOR_SCHEMES",
    "KumikoError",
    "KumikoOptions",
    "KumikoResult",
    "LayerInfo",
    "LayerOverride",
    "RasterizationError",
    "UnknownColorSchemeError",
    "color_schemes_by_key",
    "finalize",
    "finalize_svg",
    "generate",
    "generate_detailed",
    "get_color_scheme",
    "get_color_scheme_names",
    "normalize_scheme_key",
    "svg_to_png",
]
