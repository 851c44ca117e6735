from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from cargo_optimizer.models import Container, PackingResult, PlacedItem, Space

MAX_LISTED_SPACES = 10


class LoadSummary(BaseModel):
    """Utilization figures for a packing result."""

    total_volume: float = 0.0
    used_volume: float = 0.0
    volume_utilization: float = Field(default=0.0, description="Used / total volume, 0..1")
    max_weight: float = 0.0
    used_weight: float = 0.0
    remaining_weight: float = 0.0
    weight_utilization: float = Field(default=0.0, description="Used / max weight, 0..1")
    placed_count: int = 0
    unplaced_count: int = 0
    unplaced_by_item: Dict[str, int] = Field(default_factory=dict)
    is_full: bool = False
    largest_spaces: List[Space] = Field(default_factory=list)


def placed_volume(placed: list[PlacedItem]) -> float:
    return sum(p.length * p.width * p.height for p in placed)


def container_volume(container: Container) -> float:
    return float(container.length) * float(container.width) * float(container.height)


def summarize(container: Container, result: PackingResult) -> LoadSummary:
    total_volume = container_volume(container)
    used_volume = placed_volume(result.placed_items)
    volume_utilization = used_volume / total_volume if total_volume > 0 else 0.0

    max_weight = float(container.max_weight)
    used_weight = sum(p.weight for p in result.placed_items)
    weight_utilization = used_weight / max_weight if max_weight > 0 else 0.0

    unplaced_by_item: dict[str, int] = {}
    for u in result.unplaced_items:
        unplaced_by_item[u.original_item_id] = unplaced_by_item.get(u.original_item_id, 0) + u.quantity

    return LoadSummary(
        total_volume=total_volume,
        used_volume=used_volume,
        volume_utilization=volume_utilization,
        max_weight=max_weight,
        used_weight=used_weight,
        remaining_weight=result.remaining_weight,
        weight_utilization=weight_utilization,
        placed_count=len(result.placed_items),
        unplaced_count=sum(unplaced_by_item.values()),
        unplaced_by_item=unplaced_by_item,
        is_full=bool(unplaced_by_item),
        largest_spaces=result.remaining_spaces[:MAX_LISTED_SPACES],
    )
