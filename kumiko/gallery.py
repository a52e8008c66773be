"""Example gallery — one HTML page of generated patterns at several zoom levels."""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from pathlib import Path

from kumiko.engine.generator import generate

logger = logging.getLogger(__name__)

_CELL_SIZE = 200


@dataclass(frozen=True)
class GallerySection:
    title: str
    description: str
    zoom: float
    finalize: bool = True


DEFAULT_SECTIONS: tuple[GallerySection, ...] = (
    GallerySection("Zoom 1×", "Full canvas.", 1.0, finalize=False),
    GallerySection("Zoom 2×", "Center quarter of the canvas, finalized.", 2.0),
    GallerySection("Zoom 4×", "Center sixteenth of the canvas, finalized.", 4.0),
)


def example_slugs(count: int) -> list[str]:
    return [f"example-article-{i:03d}" for i in range(1, count + 1)]


def _section_html(section: GallerySection, slugs: list[str]) -> str:
    cells = []
    for slug in slugs:
        svg = generate(slug, size=_CELL_SIZE, zoom=section.zoom, finalize=section.finalize)
        cells.append(f'    <figure title="{html.escape(slug)}">{svg}</figure>')
    return "\n".join([
        f"  <h2>{html.escape(section.title)}</h2>",
        f"  <p>{html.escape(section.description)}</p>",
        '  <div class="grid">',
        *cells,
        "  </div>",
    ])


def build_example_page(count: int = 100, sections: tuple[GallerySection, ...] = DEFAULT_SECTIONS) -> str:
    slugs = example_slugs(count)
    body = "\n".join(_section_html(section, slugs) for section in sections)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Kumiko Pattern Examples</title>
  <style>
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{ font-family: system-ui, sans-serif; padding: 24px; background: #1c1b1a; color: #ccc; }}
    h1 {{ font-size: 24px; margin-bottom: 8px; }}
    h2 {{ font-size: 20px; margin-top: 40px; margin-bottom: 4px; }}
    p {{ color: #666; margin-bottom: 16px; }}
    .grid {{ display: grid; grid-template-columns: repeat(auto-fill, minmax({_CELL_SIZE}px, 1fr)); gap: 16px; }}
    figure svg {{ width: 100%; height: auto; display: block; }}
  </style>
</head>
<body>
  <h1>Kumiko Pattern Examples</h1>
  <p>{count} patterns generated from different slugs. Each pattern is deterministic in its slug.</p>
{body}
</body>
</html>
"""


def write_example_page(path: str | Path, count: int = 100) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_example_page(count), encoding="utf-8")
    logger.info("Wrote example page with %d slugs to %s", count, path)
    return path
