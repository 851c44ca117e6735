# src/cargo_optimizer/packing/best_fit.py

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from cargo_optimizer.models import (
    CargoItem,
    Container,
    PackingResult,
    PlacedItem,
    Rotation,
    Space,
    UnitItem,
    UnplacedItem,
)
from cargo_optimizer.packing.constraints import WeightTracker
from cargo_optimizer.packing.expander import expand_units
from cargo_optimizer.packing.rotations import get_rotations
from cargo_optimizer.packing.spaces import SpacePool, split_space

logger = logging.getLogger(__name__)


def is_valid_container(container: Container) -> bool:
    return (
        container.length > 0
        and container.width > 0
        and container.height > 0
        and container.max_weight > 0
    )


def fit_score(space: Space, rotation: Rotation) -> Optional[float]:
    """
    Best-Short-Side-Fit score: the smallest leftover margin across the 3 axes.
    Returns None if the rotation does not fit in the space.
    """
    L, W, H = rotation
    if L <= space.length and W <= space.width and H <= space.height:
        return min(space.length - L, space.width - W, space.height - H)
    return None


def find_best_fit(unit: UnitItem, spaces: Iterable[Space]) -> Optional[Tuple[int, Space, Rotation]]:
    """
    Scan spaces (in the given order) x rotations for the lowest fit score.

    Only a strictly lower score replaces the current best, so the first
    (space, rotation) pair reaching the minimum wins.
    """
    rotations = get_rotations(unit.length, unit.width, unit.height, unit.orientation)

    best: Optional[Tuple[int, Space, Rotation]] = None
    best_score = 0.0
    for index, space in enumerate(spaces):
        for rotation in rotations:
            score = fit_score(space, rotation)
            if score is None:
                continue
            if best is None or score < best_score:
                best = (index, space, rotation)
                best_score = score
    return best


def _unplaced(unit: UnitItem) -> UnplacedItem:
    return UnplacedItem(
        unit_id=unit.unit_id,
        original_item_id=unit.original_item_id,
        length=unit.length,
        width=unit.width,
        height=unit.height,
        weight=unit.weight,
        quantity=1,
        orientation=unit.orientation,
    )


def pack_items(container: Container, cargo_items: list[CargoItem]) -> PackingResult:
    """
    Greedy best-fit packer over a pool of free spaces.

    - Units are visited largest volume first, each exactly once
    - A unit heavier than the remaining payload is rejected without a search
    - Otherwise the pool is re-sorted by short side and searched for the
      best (space, rotation); the used space is replaced by its guillotine
      residuals and the pool is compacted
    - Deterministic: identical input gives identical output, ordering included

    Cargo items are expected to be pre-validated (positive dims, weight,
    quantity). A container with a non-positive field packs nothing.
    """
    units = expand_units(cargo_items)

    if not is_valid_container(container):
        logger.warning(
            f"Invalid container {container.length} x {container.width} x {container.height}, "
            f"max_weight={container.max_weight}: nothing packed"
        )
        return PackingResult(
            placed_items=[],
            unplaced_items=[_unplaced(u) for u in units],
            remaining_spaces=[],
            remaining_weight=max(float(container.max_weight), 0.0),
        )

    pool = SpacePool.for_container(container)
    weight = WeightTracker(container.max_weight)
    placed: list[PlacedItem] = []
    unplaced: list[UnplacedItem] = []

    for unit in units:
        if not weight.admits(unit.weight):
            logger.debug(f"Unit {unit.unit_id} rejected: weight {unit.weight} > remaining {weight.remaining}")
            unplaced.append(_unplaced(unit))
            continue

        pool.sort_for_search()
        best = find_best_fit(unit, pool)

        if best is None:
            logger.debug(f"Unit {unit.unit_id} rejected: no free space fits")
            unplaced.append(_unplaced(unit))
            continue

        index, space, rotation = best
        L, W, H = rotation
        placed.append(PlacedItem(
            unit_id=unit.unit_id,
            original_item_id=unit.original_item_id,
            x=space.x,
            y=space.y,
            z=space.z,
            length=L,
            width=W,
            height=H,
            weight=unit.weight,
        ))
        weight.consume(unit.weight)

        pool.replace(index, split_space(space, rotation))
        pool.compact()
        logger.debug(f"Unit {unit.unit_id} placed at ({space.x}, {space.y}, {space.z}) as {rotation}")

    logger.info(
        f"Packed {len(placed)}/{len(units)} units, "
        f"{len(pool)} free spaces left, remaining_weight={weight.remaining}"
    )

    return PackingResult(
        placed_items=placed,
        unplaced_items=unplaced,
        remaining_spaces=pool.snapshot(),
        remaining_weight=weight.remaining,
    )
