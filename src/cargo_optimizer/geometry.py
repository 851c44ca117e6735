"""Geometry utilities for load planning."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .models import Container, PlacedItem, Space

Bounds = tuple[float, float, float, float, float, float]


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """
    Axis-aligned bounding box (AABB) overlap test.

    a, b are bounds: (x1, y1, z1, x2, y2, z2)

    Overlap exists only if they overlap on ALL 3 axes with positive volume.
    Touching faces/edges (ax2 == bx1) is NOT considered overlap.
    """
    ax1, ay1, az1, ax2, ay2, az2 = a
    bx1, by1, bz1, bx2, by2, bz2 = b

    return (ax1 < bx2 and ax2 > bx1) and (ay1 < by2 and ay2 > by1) and (az1 < bz2 and az2 > bz1)


def _bounds(x: float, y: float, z: float, L: float, W: float, H: float) -> Bounds:
    return (x, y, z, x + L, y + W, z + H)


def placement_bounds(p: "PlacedItem") -> Bounds:
    return _bounds(p.x, p.y, p.z, p.length, p.width, p.height)


def space_bounds(s: "Space") -> Bounds:
    return _bounds(s.x, s.y, s.z, s.length, s.width, s.height)


def within_container(bounds: Bounds, container: "Container") -> bool:
    x1, y1, z1, x2, y2, z2 = bounds
    return (
        x1 >= 0 and y1 >= 0 and z1 >= 0
        and x2 <= container.length
        and y2 <= container.width
        and z2 <= container.height
    )


def overlapping_pairs(bounds: Iterable[Bounds]) -> list[tuple[int, int]]:
    """Index pairs (i, j), i < j, of boxes whose interiors intersect."""
    boxes = list(bounds)
    pairs = []
    for i in range(len(boxes)):
        for j in range(i + 1, len(boxes)):
            if boxes_overlap(boxes[i], boxes[j]):
                pairs.append((i, j))
    return pairs
