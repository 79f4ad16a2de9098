"""Tests for API endpoints."""

from __future__ import annotations

import io

from fastapi.testclient import TestClient
from PIL import Image

from flagrant.main import app
from tests.conftest import DEEP_NESTING, FRANCE, TAGGED, UNDEFINED_REFERENCE


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["palette"]["r"] == "#ff0000"
    assert len(data["palette"]) == 6


def test_render_png():
    response = client.post("/api/render", json={"expression": FRANCE, "width": 30, "height": 20})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    image = Image.open(io.BytesIO(response.content)).convert("RGB")
    assert image.size == (30, 20)
    assert image.getpixel((0, 0)) == (0, 0, 255)
    assert image.getpixel((29, 19)) == (255, 0, 0)


def test_render_background():
    response = client.post(
        "/api/render",
        json={"expression": "(h 1 (s r) 1 (s g) 1 (s b))", "width": 10, "height": 2, "background": "w"},
    )
    assert response.status_code == 200
    image = Image.open(io.BytesIO(response.content)).convert("RGB")
    assert image.getpixel((9, 0)) == (255, 255, 255)


def test_render_default_size():
    response = client.post("/api/render", json={"expression": "(s y)"})
    assert response.status_code == 200
    assert Image.open(io.BytesIO(response.content)).size == (400, 300)


def test_layout_tagged():
    response = client.post("/api/layout", json={"expression": TAGGED, "width": 400, "height": 300})
    assert response.status_code == 200
    data = response.json()
    assert data["tags"] == ["x"]
    assert data["canonical"] == TAGGED
    assert [r["width"] for r in data["regions"]] == [200, 200]
    assert {r["color"] for r in data["regions"]} == {"#0000ff"}
    assert data["diagnostics"] == []


def test_layout_undefined_reference():
    response = client.post("/api/layout", json={"expression": UNDEFINED_REFERENCE, "width": 400, "height": 300})
    assert response.status_code == 200
    data = response.json()
    assert data["regions"] == [{"left": 0, "top": 0, "width": 400, "height": 300, "color": "#00ff00"}]
    assert data["diagnostics"][0]["kind"] == "undefined_tag_reference"


def test_invalid_color_rejected():
    response = client.post("/api/layout", json={"expression": "(s #zzzzzz)"})
    assert response.status_code == 422
    assert response.json()["kind"] == "invalid_color"


def test_zero_weight_rejected():
    response = client.post("/api/render", json={"expression": "(h 0 (s r))", "width": 10, "height": 10})
    assert response.status_code == 422
    assert response.json()["kind"] == "zero_weight_split"


def test_cycle_rejected():
    response = client.post("/api/layout", json={"expression": "(t x (h 1 (r x)))"})
    assert response.status_code == 422
    assert response.json()["kind"] == "recursive_tag_cycle"


def test_oversize_canvas_rejected():
    response = client.post("/api/render", json={"expression": "(s r)", "width": 100000, "height": 100000})
    assert response.status_code == 422


def test_deep_nesting_rejected():
    for path in ("/api/layout", "/api/render"):
        response = client.post(path, json={"expression": DEEP_NESTING, "width": 10, "height": 10})
        assert response.status_code == 422
        assert response.json()["kind"] == "nesting_too_deep"
