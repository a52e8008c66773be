"""Tests for the command-line entry points."""

from __future__ import annotations

import pytest

from kumiko.cli import examples_main, main, svg_to_png_main
from kumiko.engine.generator import generate
from tests.conftest import RED_SQUARE_SVG


def _has_cairo() -> bool:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


def test_generate_to_out_dir(tmp_path, capsys):
    assert main(["my-slug", "--out-dir", str(tmp_path)]) == 0
    path = tmp_path / "my-slug.svg"
    assert path.read_text(encoding="utf-8") == generate("my-slug")
    assert f"Generated: {path}" in capsys.readouterr().out


def test_generate_with_options(tmp_path):
    out = tmp_path / "nested" / "card.svg"
    argv = [
        "my-slug",
        "--out", str(out),
        "--size", "400",
        "--zoom", "2",
        "--fg", "#ff0000",
        "--bg", "#00ff00",
        "--stroke-width", "1.5",
        "--divisions", "6",
        "--finalize",
    ]
    assert main(argv) == 0
    expected = generate(
        "my-slug", size=400, zoom=2, fg="#ff0000", bg="#00ff00", stroke_width=1.5, divisions=6, finalize=True
    )
    assert out.read_text(encoding="utf-8") == expected


def test_color_scheme(tmp_path):
    out = tmp_path / "x.svg"
    assert main(["my-slug", "--out", str(out), "--color-scheme", "Dracula"]) == 0
    assert 'fill="#282a36"' in out.read_text(encoding="utf-8")


def test_unknown_color_scheme(tmp_path, capsys):
    assert main(["my-slug", "--out-dir", str(tmp_path), "--color-scheme", "nope"]) == 1
    assert 'Error: Unknown color scheme: "nope"' in capsys.readouterr().err
    assert not (tmp_path / "my-slug.svg").exists()


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["slug", "--size", "0"],
        ["slug", "--size", "20000"],
        ["slug", "--size", "abc"],
        ["slug", "--zoom", "-2"],
        ["slug", "--stroke-width", "0"],
        ["slug", "--out", "a.svg", "--out-dir", "b"],
    ],
)
def test_invalid_arguments_exit_2(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_list_schemes(capsys):
    assert main(["--list-schemes"]) == 0
    out = capsys.readouterr().out
    assert "default" in out
    assert "Catppuccin Mocha" in out


def test_svg_to_png_missing_file(tmp_path, capsys):
    assert svg_to_png_main([str(tmp_path / "missing.svg")]) == 1
    assert "SVG file not found" in capsys.readouterr().err


@pytest.mark.skipif(not _has_cairo(), reason="cairo not available")
def test_svg_to_png_writes_next_to_input(tmp_path):
    from PIL import Image

    src = tmp_path / "red.svg"
    src.write_text(RED_SQUARE_SVG)
    assert svg_to_png_main([str(src), "--width", "200", "--height", "100"]) == 0
    with Image.open(tmp_path / "red.png") as image:
        assert image.size == (200, 100)


def test_examples_page(tmp_path, capsys):
    out = tmp_path / "examples.html"
    assert examples_main(["--out", str(out), "--count", "2"]) == 0
    html = out.read_text(encoding="utf-8")
    assert "example-article-002" in html
    assert "Generated example page" in capsys.readouterr().out
