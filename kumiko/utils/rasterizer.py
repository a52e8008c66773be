"""Rasterization — square SVG → center-cropped PNG.

The SVG is rendered at ``width × width`` and the middle ``height`` rows are
kept, which turns a square pattern into a landscape card image.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image

from kumiko.config import settings
from kumiko.errors import RasterizationError

logger = logging.getLogger(__name__)


def crop_box(width: int, height: int) -> tuple[int, int, int, int]:
    """(left, top, right, bottom) of the centered ``width × height`` strip of a square render."""
    top = int((width - height) / 2 + 0.5)
    return (0, top, width, top + height)


def render_svg(svg: str | bytes, size: int, dpi: int | None = None) -> Image.Image:
    """Render SVG to an RGBA image of ``size × size`` pixels using CairoSVG."""
    import cairosvg

    raw = svg.encode("utf-8") if isinstance(svg, str) else svg
    try:
        png_data = cairosvg.svg2png(
            bytestring=raw,
            output_width=size,
            output_height=size,
            dpi=dpi or settings.raster_dpi,
        )
    except Exception as e:
        logger.warning("Failed to render SVG: %s", e)
        raise RasterizationError(f"SVG rendering failed: {e}") from e
    return Image.open(io.BytesIO(png_data)).convert("RGBA")


def svg_to_png(svg: str | bytes, width: int | None = None, height: int | None = None) -> bytes:
    """Convert a square SVG to PNG bytes of exactly ``width × height``.

    Args:
        svg: SVG document text or bytes. Assumed square.
        width: Output width in pixels (default from settings, 1200).
        height: Output height in pixels (default from settings, 630). A height
            larger than the width is clamped to the width.

    Returns:
        PNG-encoded bytes.
    """
    width = width or settings.raster_width
    height = min(height or settings.raster_height, width)

    image = render_svg(svg, width)
    if image.size != (width, width):
        image = image.resize((width, width), Image.Resampling.LANCZOS)
    cropped = image.crop(crop_box(width, height))

    buf = io.BytesIO()
    cropped.save(buf, format="PNG")
    return buf.getvalue()


def svg_file_to_png(path: str | Path, width: int | None = None, height: int | None = None) -> bytes:
    """Read an SVG file and convert it with ``svg_to_png``."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"SVG file not found: {path}")
    return svg_to_png(path.read_bytes(), width=width, height=height)
