"""Generator configuration — the fixed constants behind every seeded decision."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GeneratorConfig:
    """Constants consumed by the generation pipeline.

    Changing any of these changes the output for every slug.
    """

    # Document
    default_size: int = 800
    default_background: str = "#2d2d2d"

    # Built-in line colors used when no color scheme is requested
    foreground_colors: tuple[str, ...] = (
        "#4a4a4a",  # dark gray
        "#b5524a",  # brick red
        "#5ea85e",  # green
        "#c8a64e",  # gold
        "#737d8e",  # slate blue
        "#a87a96",  # mauve
        "#5a8a8e",  # teal
        "#d5d5d5",  # light gray
    )

    # 40% two layers, 40% three, 20% four
    layer_thresholds: tuple[float, float] = (0.4, 0.8)
    # 50% single copy, 30% double, 20% triple
    overlap_thresholds: tuple[float, float] = (0.5, 0.8)

    # Stroke widths keyed by min(total overlap density, 5); denser → thinner
    stroke_widths_by_density: dict[int, tuple[float, ...]] = field(
        default_factory=lambda: {
            1: (1.0, 1.5, 2.0, 3.0, 4.0),
            2: (0.5, 1.0, 1.5, 2.0, 3.0),
            3: (0.5, 1.0, 1.5, 2.0),
            4: (0.5, 0.75, 1.0, 1.5),
            5: (0.5, 0.75, 1.0),
        }
    )
    max_density_key: int = 5

    division_choices: tuple[int, ...] = (6, 8, 10)

    # Layer offset spans ±20% of size
    translate_spread: float = 0.4
    # Overlap copies jitter by ±1.5% of canvas and ±4°
    overlap_offset_spread: float = 0.03
    overlap_angle_spread: float = 8.0

    # Finalize keeps anything within 5% of max(viewBox w, h) of the viewport
    finalize_padding: float = 0.05


DEFAULT_CONFIG = GeneratorConfig()
