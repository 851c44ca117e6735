"""
Lightweight rendering payload for 3D viewers.

Core frame: origin at the container's back-bottom-left, +x depth, +y right, +z up.
Scene frame: scene X = core y, scene Y = -core z (screen Y grows downward),
scene Z = core x. Boxes are described by their centre and scaled dims.
"""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel

from cargo_optimizer.models import CargoItem, Container, PackingResult

ITEM_COLORS = [
    "#ef4444", "#f97316", "#eab308", "#84cc16", "#22c55e", "#10b981",
    "#14b8a6", "#06b6d4", "#0ea5e9", "#3b82f6", "#6366f1", "#8b5cf6",
    "#a855f7", "#d946ef", "#ec4899", "#f43f5e",
]
FALLBACK_COLOR = "#cccccc"

Vec3 = Tuple[float, float, float]


class SceneBox(BaseModel):
    center: Vec3
    # Scaled (length, width, height)
    dims: Vec3


class RenderItem(SceneBox):
    unit_id: str
    original_item_id: str
    color: str


class RenderPayload(BaseModel):
    container: SceneBox
    items: List[RenderItem]


def color_map(cargo_items: list[CargoItem]) -> dict[str, str]:
    """One palette colour per item type, by its position in the request."""
    return {item.id: ITEM_COLORS[i % len(ITEM_COLORS)] for i, item in enumerate(cargo_items)}


def to_scene_center(
    x: float,
    y: float,
    z: float,
    length: float,
    width: float,
    height: float,
    scale: float = 1.0,
) -> SceneBox:
    L, W, H = length * scale, width * scale, height * scale
    # back-bottom-left corner in scene coordinates
    sx, sy, sz = y * scale, -(z * scale), x * scale
    return SceneBox(
        center=(sx + W / 2, sy - H / 2, sz + L / 2),
        dims=(L, W, H),
    )


def build_render_payload(
    container: Container,
    cargo_items: list[CargoItem],
    result: PackingResult,
    scale: float = 1.0,
) -> RenderPayload:
    colors = color_map(cargo_items)
    items = []
    for p in result.placed_items:
        box = to_scene_center(p.x, p.y, p.z, p.length, p.width, p.height, scale)
        items.append(RenderItem(
            center=box.center,
            dims=box.dims,
            unit_id=p.unit_id,
            original_item_id=p.original_item_id,
            color=colors.get(p.original_item_id, FALLBACK_COLOR),
        ))

    return RenderPayload(
        container=to_scene_center(0.0, 0.0, 0.0, container.length, container.width, container.height, scale),
        items=items,
    )
