"""Tests for sunburst FastAPI endpoints."""

import math

from fastapi.testclient import TestClient

from sunburst.main import app

client = TestClient(app)

SAMPLE_TREE = {"children": [{"name": "a"}, {"name": "b"}, {"name": "c", "children": [{}, {}]}]}


class TestHealthEndpoint:
    def test_health_returns_200(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["service"] == "sunburst"

    def test_health_includes_version(self):
        resp = client.get("/health")
        assert "version" in resp.json()


class TestSvgEndpoint:
    def test_returns_wrapped_svg(self):
        resp = client.post("/sunburst/svg", json={"tree": SAMPLE_TREE})
        assert resp.status_code == 200
        assert "image/svg+xml" in resp.headers["content-type"]
        assert resp.text.startswith("<svg")
        assert resp.text.count("<path") == 5

    def test_unwrapped_markup(self):
        resp = client.post("/sunburst/svg", json={"tree": SAMPLE_TREE, "options": {"wrap": False}})
        assert resp.status_code == 200
        assert resp.text.startswith("<circle")

    def test_camel_case_options(self):
        resp = client.post(
            "/sunburst/svg",
            json={
                "tree": SAMPLE_TREE,
                "options": {"initialRadius": 50, "levelStep": 5, "centerText": "root"},
            },
        )
        assert resp.status_code == 200
        assert 'viewBox="-60 -60 120 120"' in resp.text
        assert "root</text>" in resp.text

    def test_custom_colors(self):
        resp = client.post(
            "/sunburst/svg",
            json={"tree": SAMPLE_TREE, "options": {"colors": ["#FF0000", "#00FF00"]}},
        )
        assert resp.status_code == 200
        assert "#FF0000" in resp.text

    def test_invalid_leaves_returns_422(self):
        resp = client.post("/sunburst/svg", json={"tree": {"children": [{"leaves": -1}]}})
        assert resp.status_code == 422

    def test_partial_override_returns_422(self):
        resp = client.post("/sunburst/svg", json={"tree": {"children": [{"startAngle": 1.0}]}})
        assert resp.status_code == 422
        assert "together" in resp.json()["detail"]

    def test_non_list_children_returns_422(self):
        resp = client.post("/sunburst/svg", json={"tree": {"children": {"a": {}}}})
        assert resp.status_code == 422

    def test_non_string_color_returns_422(self):
        resp = client.post("/sunburst/svg", json={"tree": {"children": [{"color": 5}]}})
        assert resp.status_code == 422
        assert "color" in resp.json()["detail"]

    def test_empty_palette_returns_422(self):
        resp = client.post("/sunburst/svg", json={"tree": SAMPLE_TREE, "options": {"colors": []}})
        assert resp.status_code == 422

    def test_non_positive_radius_returns_422(self):
        resp = client.post(
            "/sunburst/svg", json={"tree": SAMPLE_TREE, "options": {"initialRadius": 0}}
        )
        assert resp.status_code == 422


class TestPngEndpoint:
    def test_returns_png(self):
        resp = client.post("/sunburst/png", json={"tree": SAMPLE_TREE, "size": 128})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "image/png"
        assert resp.content[:4] == b"\x89PNG"

    def test_respects_size_limits(self):
        resp = client.post("/sunburst/png", json={"tree": SAMPLE_TREE, "size": 32})
        assert resp.status_code == 422


class TestSectorsEndpoint:
    def test_returns_sector_geometry(self):
        resp = client.post("/sunburst/sectors", json={"tree": SAMPLE_TREE})
        assert resp.status_code == 200
        data = resp.json()
        assert data["total_leaves"] == 4
        assert data["depth"] == 2
        assert data["bound"] == 120
        assert data["view_box"] == "-120 -120 240 240"
        assert [s["path"] for s in data["sectors"]] == ["0:0", "0:1", "0:2", "0:2:0", "0:2:1"]

    def test_sector_widths(self):
        resp = client.post("/sunburst/sectors", json={"tree": SAMPLE_TREE})
        sectors = resp.json()["sectors"][:3]
        widths = [s["end_angle"] - s["start_angle"] for s in sectors]
        assert math.isclose(widths[0], math.pi / 2)
        assert math.isclose(widths[2], math.pi)

    def test_sector_names(self):
        resp = client.post("/sunburst/sectors", json={"tree": SAMPLE_TREE})
        names = [s["name"] for s in resp.json()["sectors"]]
        assert names == ["a", "b", "c", None, None]

    def test_leaf_only_tree(self):
        resp = client.post("/sunburst/sectors", json={"tree": {}})
        assert resp.status_code == 200
        data = resp.json()
        assert data["sectors"] == []
        assert data["bound"] == 100

    def test_returns_disk(self):
        resp = client.post("/sunburst/sectors", json={"tree": SAMPLE_TREE})
        assert resp.json()["disk"] == {"path": "0", "radius": 100.0, "color": "#fafafa"}

    def test_non_string_color_returns_422(self):
        resp = client.post("/sunburst/sectors", json={"tree": {"children": [{"color": 5}]}})
        assert resp.status_code == 422
        assert "0:0" in resp.json()["detail"]

    def test_inconsistent_leaves_returns_422(self):
        tree = {"children": [{"leaves": 1, "children": [{}, {}]}, {}]}
        resp = client.post("/sunburst/sectors", json={"tree": tree})
        assert resp.status_code == 422
        assert "children's total" in resp.json()["detail"]
