"""Command-line entry points: kumiko-gen, svg-to-png, kumiko-examples."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from kumiko.config import settings
from kumiko.engine.color_schemes import COLOR_SCHEMES
from kumiko.engine.generator import KumikoOptions, generate
from kumiko.errors import KumikoError

_MAX_SIZE = 10000


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'must be an integer, got "{value}"') from None
    if n <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return n


def _positive_float(value: str) -> float:
    try:
        n = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'must be a number, got "{value}"') from None
    if not n > 0:
        raise argparse.ArgumentTypeError("must be positive")
    return n


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.kumiko_log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(name)s %(levelname)s %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kumiko-gen",
        description="Generate a deterministic kumiko pattern SVG from a slug",
    )
    parser.add_argument("slug", nargs="?", help="Seed text, e.g. an article slug")
    parser.add_argument("--size", type=_positive_int, default=settings.default_size, help="Width/height in pixels")
    parser.add_argument("--zoom", type=_positive_float, default=1.0, help="Magnification toward the center")
    parser.add_argument("--fg", help="Line color for all layers")
    parser.add_argument("--bg", help="Background color")
    parser.add_argument("--stroke-width", type=_positive_float, help="Stroke width for all layers")
    parser.add_argument("--divisions", type=_positive_int, help="Upward triangles per row")
    parser.add_argument("--overflow", type=_positive_float, default=1.0, help="Canvas size relative to the viewBox")
    parser.add_argument("--color-scheme", help='Named color scheme, or "random"')
    parser.add_argument("--finalize", action="store_true", help="Drop primitives outside the viewBox")
    out = parser.add_mutually_exclusive_group()
    out.add_argument("--out", help="Output SVG path")
    out.add_argument("--out-dir", help="Output directory (file is named <slug>.svg)")
    parser.add_argument("--png", action="store_true", help="Also write a PNG next to the SVG")
    parser.add_argument("--width", type=_positive_int, help="PNG width in pixels")
    parser.add_argument("--height", type=_positive_int, help="PNG height in pixels")
    parser.add_argument("--list-schemes", action="store_true", help="Print color scheme names and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_schemes:
        for scheme in COLOR_SCHEMES:
            print(f"{scheme.key:24} {scheme.name}")
        return 0

    if not args.slug:
        parser.error("the slug argument is required")
    if args.size > _MAX_SIZE:
        parser.error(f"--size must be between 1 and {_MAX_SIZE}")

    _setup_logging(args.verbose)

    options = KumikoOptions(
        size=args.size,
        divisions=args.divisions,
        zoom=args.zoom,
        fg=args.fg,
        bg=args.bg,
        stroke_width=args.stroke_width,
        finalize=args.finalize,
        overflow=args.overflow,
        color_scheme=args.color_scheme,
    )

    try:
        svg = generate(args.slug, options)
    except KumikoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_path = Path(args.out) if args.out else Path(args.out_dir or ".") / f"{args.slug}.svg"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(svg, encoding="utf-8")
    print(f"Generated: {output_path}")

    if args.png:
        from kumiko.utils.rasterizer import svg_to_png

        png_path = output_path.with_suffix(".png")
        try:
            png_path.write_bytes(svg_to_png(svg, width=args.width, height=args.height))
        except KumikoError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Generated: {png_path}")

    return 0


def svg_to_png_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="svg-to-png",
        description="Render a square SVG and center-crop it to a PNG",
    )
    parser.add_argument("input", help="Input SVG file")
    parser.add_argument("--out", help="Output PNG path (default: next to the input)")
    parser.add_argument("--width", type=_positive_int, default=settings.raster_width, help="Output width")
    parser.add_argument("--height", type=_positive_int, default=settings.raster_height, help="Output height")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    from kumiko.utils.rasterizer import svg_file_to_png

    input_path = Path(args.input).resolve()
    output_path = Path(args.out).resolve() if args.out else input_path.with_suffix(".png")

    try:
        png = svg_file_to_png(input_path, width=args.width, height=args.height)
    except (FileNotFoundError, KumikoError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(png)
    print(f"Generated: {output_path}")
    return 0


def examples_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kumiko-examples", description="Write the example gallery page")
    parser.add_argument("--out", default="examples.html", help="Output HTML path")
    parser.add_argument("--count", type=_positive_int, default=100, help="Number of slugs per section")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    from kumiko.gallery import write_example_page

    path = write_example_page(args.out, count=args.count)
    print(f"Generated example page: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
