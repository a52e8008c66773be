"""Kumiko generator — slug → deterministic multi-layer triangle-grid SVG.

Every random decision is drawn from a single ``SeededRandom`` cursor in a
fixed order. Overrides replace the *result* of a decision but still spend its
draw, so overriding one layer never shifts the values drawn for any other.

Draw order:
    layer count → shuffle → color roll per layer → overlaps per layer
    → [divisions, unless given]
    → per layer: angle, dx, dy, then per overlap: stroke width
      (+ dx, dy, angle jitter for copies after the first)
    → [scheme pick, only for color_scheme="random"]

Color rolls are mapped onto the palette only after the last draw, so a
"random" scheme changes colors and nothing else.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from kumiko.engine.color_schemes import COLOR_SCHEMES, ColorScheme, get_color_scheme, normalize_scheme_key
from kumiko.engine.config import DEFAULT_CONFIG, GeneratorConfig
from kumiko.engine.grid import generate_grid
from kumiko.engine.hashing import hash_string
from kumiko.engine.patterns import PATTERN_REGISTRY, PatternEntry
from kumiko.engine.seeded_random import SeededRandom, create_random
from kumiko.svg.finalize import finalize_svg
from kumiko.svg.serializer import group_open, serialize_group, serialize_svg

logger = logging.getLogger(__name__)

RANDOM_SCHEME = "random"


@dataclass(frozen=True)
class LayerOverride:
    """Per-layer replacement for the drawn color and/or stroke width."""

    fg: str | None = None
    stroke_width: float | None = None


@dataclass(frozen=True)
class KumikoOptions:
    size: int = DEFAULT_CONFIG.default_size
    divisions: int | None = None
    zoom: float = 1.0
    fg: str | None = None
    bg: str | None = None
    stroke_width: float | None = None
    finalize: bool = False
    # Sparse: position i overrides layer i; None entries are ignored
    layers: Sequence[LayerOverride | Mapping[str, Any] | None] = ()
    # >1 draws the pattern over a larger canvas than the viewBox so rotated
    # and shifted layers still reach the edges
    overflow: float = 1.0
    color_scheme: str | None = None


@dataclass(frozen=True)
class LayerInfo:
    pattern_index: int
    pattern_name: str
    fg: str
    stroke_width: float
    overlaps: int


@dataclass
class KumikoResult:
    svg: str
    layers: list[LayerInfo] = field(default_factory=list)
    color_scheme_name: str | None = None


@dataclass(frozen=True)
class _LayerCopy:
    dx: float
    dy: float
    angle: float
    stroke_width: float


def generate_detailed(
    slug: str,
    options: KumikoOptions | None = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
    **overrides: Any,
) -> KumikoResult:
    """Generate the pattern for ``slug`` along with per-layer metadata.

    Options may be passed as a ``KumikoOptions`` instance, as keyword
    arguments, or both (keywords win).

    Raises:
        UnknownColorSchemeError: ``color_scheme`` names no known scheme.
    """
    opts = _coerce_options(options, overrides)
    rand = create_random(hash_string(slug))

    # Named schemes fail before any draw; "random" is picked after all of them
    random_scheme = opts.color_scheme is not None and normalize_scheme_key(opts.color_scheme) == RANDOM_SCHEME
    scheme: ColorScheme | None = None
    if opts.color_scheme is not None and not random_scheme:
        scheme = get_color_scheme(opts.color_scheme)

    canvas_size = _round_half_up(opts.size * opts.overflow)

    layer_count = _pick_by_thresholds(rand(), config.layer_thresholds, (2, 3, 4))
    entries = _shuffled_registry(rand)[:layer_count]

    # Kept as rolls so the palette can be chosen once all draws are spent
    color_rolls = [rand() for _ in range(layer_count)]

    overlaps = [
        _pick_by_thresholds(rand(), config.overlap_thresholds, (1, 2, 3))
        for _ in range(layer_count)
    ]
    total_density = sum(overlaps)
    stroke_widths = config.stroke_widths_by_density[min(total_density, config.max_density_key)]

    if opts.divisions is not None:
        divisions = opts.divisions
    else:
        divisions = config.division_choices[rand.choice_index(len(config.division_choices))]

    plans: list[list[_LayerCopy]] = []
    for li in range(layer_count):
        override = _layer_override(opts, li)
        plans.append(
            _plan_layer(
                rand,
                overlap_count=overlaps[li],
                stroke_widths=stroke_widths,
                stroke_override=override.stroke_width if override.stroke_width is not None else opts.stroke_width,
                size=opts.size,
                canvas_size=canvas_size,
                config=config,
            )
        )

    if random_scheme:
        scheme = COLOR_SCHEMES[rand.choice_index(len(COLOR_SCHEMES))]
    palette = scheme.line_colors if scheme else config.foreground_colors
    background = opts.bg or (scheme.background if scheme else config.default_background)

    triangles = generate_grid(canvas_size, divisions)
    center = canvas_size / 2

    groups: list[list[str]] = []
    layers: list[LayerInfo] = []
    for li, entry in enumerate(entries):
        override = _layer_override(opts, li)
        color = override.fg or opts.fg or palette[int(color_rolls[li] * len(palette))]
        for copy in plans[li]:
            elements = [entry.fn(tri, copy.stroke_width) for tri in triangles]
            header = group_open(copy.dx, copy.dy, copy.angle, center, center, color)
            groups.append(serialize_group(header, elements))
        layers.append(
            LayerInfo(
                pattern_index=PATTERN_REGISTRY.index(entry),
                pattern_name=entry.name,
                fg=color,
                stroke_width=plans[li][0].stroke_width,
                overlaps=overlaps[li],
            )
        )
        logger.debug(
            "Layer %d: %s ×%d fg=%s sw=%s", li, entry.name, overlaps[li], color, plans[li][0].stroke_width
        )

    svg = serialize_svg(groups, size=opts.size, canvas_size=canvas_size, zoom=opts.zoom, background=background)
    if opts.finalize:
        svg = finalize_svg(svg, padding=config.finalize_padding)

    logger.debug(
        "Generated %r: %d layers, %d divisions, density %d, %d draws",
        slug,
        layer_count,
        divisions,
        total_density,
        rand.draws,
    )
    return KumikoResult(svg=svg, layers=layers, color_scheme_name=scheme.name if scheme else None)


def generate(
    slug: str,
    options: KumikoOptions | None = None,
    config: GeneratorConfig = DEFAULT_CONFIG,
    **overrides: Any,
) -> str:
    """Generate the pattern SVG for ``slug``; same text as ``generate_detailed(...).svg``."""
    return generate_detailed(slug, options, config, **overrides).svg


def _plan_layer(
    rand: SeededRandom,
    *,
    overlap_count: int,
    stroke_widths: tuple[float, ...],
    stroke_override: float | None,
    size: float,
    canvas_size: float,
    config: GeneratorConfig,
) -> list[_LayerCopy]:
    """Draw the transform and stroke width of every overlap copy of one layer."""
    # Offsets scale with size, not canvas_size, so overflow does not move layers
    angle = rand() * 360
    dx = (rand() - 0.5) * size * config.translate_spread
    dy = (rand() - 0.5) * size * config.translate_spread

    copies: list[_LayerCopy] = []
    for oi in range(overlap_count):
        # Spent even when overridden, so overrides never shift later draws
        drawn = stroke_widths[rand.choice_index(len(stroke_widths))]
        stroke_width = stroke_override if stroke_override is not None else drawn

        if oi == 0:
            extra_dx = extra_dy = extra_angle = 0.0
        else:
            extra_dx = (rand() - 0.5) * canvas_size * config.overlap_offset_spread
            extra_dy = (rand() - 0.5) * canvas_size * config.overlap_offset_spread
            extra_angle = (rand() - 0.5) * config.overlap_angle_spread

        copies.append(_LayerCopy(dx + extra_dx, dy + extra_dy, angle + extra_angle, stroke_width))
    return copies


def _coerce_options(options: KumikoOptions | None, overrides: Mapping[str, Any]) -> KumikoOptions:
    if options is None:
        return KumikoOptions(**overrides)
    if overrides:
        return dataclasses.replace(options, **overrides)
    return options


def _layer_override(opts: KumikoOptions, index: int) -> LayerOverride:
    if index >= len(opts.layers):
        return LayerOverride()
    raw = opts.layers[index]
    if raw is None:
        return LayerOverride()
    if isinstance(raw, LayerOverride):
        return raw
    return LayerOverride(fg=raw.get("fg"), stroke_width=raw.get("stroke_width"))


def _shuffled_registry(rand: SeededRandom) -> list[PatternEntry]:
    """Fisher–Yates over the whole registry, one draw per swap."""
    shuffled = list(PATTERN_REGISTRY)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rand.choice_index(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def _pick_by_thresholds(roll: float, thresholds: Sequence[float], values: Sequence[int]) -> int:
    for threshold, value in zip(thresholds, values):
        if roll < threshold:
            return value
    return values[len(thresholds)]


def _round_half_up(value: float) -> int:
    """Round half up, unlike Python's round-half-even."""
    return math.floor(value + 0.5)
