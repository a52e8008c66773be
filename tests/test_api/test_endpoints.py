"""Tests for API endpoints."""

from __future__ import annotations

import io

import pytest
from fastapi.testclient import TestClient

from kumiko.engine.generator import generate
from kumiko.main import app
from kumiko.svg.finalize import finalize_svg


client = TestClient(app)


def _has_cairo() -> bool:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"
    assert data["patterns_registered"] == 9


def test_patterns():
    data = client.get("/api/patterns").json()
    assert len(data) == 9
    assert data[0] == {"index": 0, "name": "asanoha"}
    assert data[-1]["name"] == "izutsu"


def test_color_schemes():
    data = client.get("/api/color-schemes").json()
    assert data[0]["name"] == "Default"
    assert data[0]["key"] == "default"
    assert len(data[0]["palette"]) == 8
    assert "tokyonight-storm" in {s["key"] for s in data}


def test_generate_matches_engine():
    response = client.post("/api/generate", json={"slug": "test-slug"})
    assert response.status_code == 200
    data = response.json()
    assert data["svg"] == generate("test-slug")
    assert 2 <= len(data["layers"]) <= 4
    assert data["color_scheme_name"] is None
    layer = data["layers"][0]
    assert set(layer) == {"pattern_index", "pattern_name", "fg", "stroke_width", "overlaps"}


def test_generate_with_options():
    response = client.post(
        "/api/generate",
        json={
            "slug": "test-slug",
            "size": 400,
            "zoom": 2,
            "finalize": True,
            "color_scheme": "nord",
            "layers": [None, {"fg": "#ff00ff"}],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert 'viewBox="100.00 100.00 200.00 200.00"' in data["svg"]
    assert data["color_scheme_name"] == "Nord"
    assert data["layers"][1]["fg"] == "#ff00ff"


def test_generate_empty_canvas():
    # size * overflow rounds to 0
    response = client.post("/api/generate", json={"slug": "edge", "size": 4, "overflow": 0.1})
    assert response.status_code == 200
    data = response.json()
    assert data["svg"] == generate("edge", size=4, overflow=0.1)
    assert 'width="0"' in data["svg"]


def test_generate_unknown_scheme():
    response = client.post("/api/generate", json={"slug": "x", "color_scheme": "nonexistent-scheme"})
    assert response.status_code == 422
    assert response.json()["detail"] == 'Unknown color scheme: "nonexistent-scheme"'


@pytest.mark.parametrize(
    "body",
    [
        {"slug": ""},
        {"slug": "x", "size": 0},
        {"slug": "x", "size": 20000},
        {"slug": "x", "zoom": -1},
        {"slug": "x", "stroke_width": 0},
    ],
)
def test_generate_rejects_invalid_input(body):
    assert client.post("/api/generate", json=body).status_code == 422


def test_finalize():
    svg = generate("test-slug", zoom=8)
    response = client.post("/api/finalize", json={"svg": svg})
    assert response.status_code == 200
    data = response.json()
    assert data["svg"] == finalize_svg(svg)
    assert data["primitives_after"] < data["primitives_before"]


@pytest.mark.skipif(not _has_cairo(), reason="cairo not available")
def test_render_png():
    from PIL import Image

    response = client.post("/api/render", json={"slug": "test-slug", "width": 300, "height": 150})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert Image.open(io.BytesIO(response.content)).size == (300, 150)
