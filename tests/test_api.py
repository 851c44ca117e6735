"""Tests for the HTTP surface."""

from __future__ import annotations

from fastapi.testclient import TestClient

from cargo_optimizer.api import app, build_response
from cargo_optimizer.io.schemas import PackingRequest
from cargo_optimizer.render import ITEM_COLORS

client = TestClient(app)

PALLET_REQUEST = {
    "container": {"preset": "20ft"},
    "items": [
        {"id": "1", "length": 120, "width": 80, "height": 100, "weight": 500, "quantity": 1, "orientation": "any"}
    ],
}


def test_pack_single_pallet() -> None:
    response = client.post("/pack", json=PALLET_REQUEST)

    assert response.status_code == 200
    data = response.json()

    result = data["result"]
    assert len(result["placed_items"]) == 1
    assert result["unplaced_items"] == []
    assert result["remaining_weight"] == 27700
    assert len(result["remaining_spaces"]) == 3

    placed = result["placed_items"][0]
    assert placed["unit_id"] == "1-0"
    assert placed["original_item_id"] == "1"
    assert (placed["x"], placed["y"], placed["z"]) == (0, 0, 0)

    summary = data["summary"]
    assert summary["placed_count"] == 1
    assert summary["unplaced_count"] == 0
    assert summary["is_full"] is False
    assert data["render"] is None


def test_pack_with_render_param() -> None:
    response = client.post("/pack?render=1", json=PALLET_REQUEST)

    assert response.status_code == 200
    render = response.json()["render"]
    assert render["container"]["dims"] == [589, 235, 239]
    assert len(render["items"]) == 1
    assert render["items"][0]["color"] == ITEM_COLORS[0]
    assert set(render["items"][0]) == {"center", "dims", "unit_id", "original_item_id", "color"}


def test_unplaced_units_are_reported() -> None:
    request = {
        "container": {"length": 10, "width": 10, "height": 10, "max_weight": 1000},
        "items": [
            {"id": "A", "length": 2, "width": 2, "height": 2, "weight": 600},
            {"id": "B", "length": 2, "width": 2, "height": 2, "weight": 600, "orientation": "l_h"},
        ],
    }

    data = client.post("/pack", json=request).json()

    unplaced = data["result"]["unplaced_items"]
    assert [u["unit_id"] for u in unplaced] == ["B-0"]
    assert unplaced[0]["quantity"] == 1
    assert unplaced[0]["orientation"] == "l_h"
    assert data["summary"]["unplaced_by_item"] == {"B": 1}
    assert data["summary"]["is_full"] is True


def test_unknown_preset_returns_422() -> None:
    response = client.post("/pack", json={"container": {"preset": "99ft"}, "items": []})

    assert response.status_code == 422
    assert "Unknown container preset" in response.json()["detail"]


def test_missing_container_returns_422() -> None:
    response = client.post("/pack", json={"items": [{"length": 1, "width": 1, "height": 1, "weight": 1}]})

    assert response.status_code == 422


def test_presets_endpoint() -> None:
    response = client.get("/presets", params={"mode": "air"})

    assert response.status_code == 200
    data = response.json()
    assert list(data) == ["LD3 (AKE/AVE)", "LD6 (ALF/ALP)", "LD9 (AAP)"]
    assert data["LD3 (AKE/AVE)"]["max_weight"] == 1588

    assert "20ft" in client.get("/presets").json()
    assert client.get("/presets", params={"mode": "rail"}).status_code == 422


def test_health() -> None:
    assert client.get("/health").json() == {"ok": True}


def test_build_response_drops_invalid_lines_but_keeps_their_colours() -> None:
    request = PackingRequest.model_validate({
        "container": {"preset": "LD3 (AKE/AVE)"},
        "items": [
            {"id": "draft", "length": 0, "width": 0, "height": 0, "weight": 0},
            {"id": "box", "length": 50, "width": 40, "height": 30, "weight": 20, "quantity": 2},
        ],
    })

    response = build_response(request, include_render=True)

    assert [p.original_item_id for p in response.result.placed_items] == ["box", "box"]
    assert response.result.unplaced_items == []
    assert {i.color for i in response.render.items} == {ITEM_COLORS[1]}
