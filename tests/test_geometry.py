from __future__ import annotations

from cargo_optimizer.geometry import (
    boxes_overlap,
    overlapping_pairs,
    placement_bounds,
    space_bounds,
    within_container,
)
from cargo_optimizer.models import Container, PlacedItem, Space


def test_boxes_overlap_overlapping() -> None:
    """Test that overlapping boxes are detected."""
    # Box a: (0, 0, 0) to (2, 2, 2)
    a = (0.0, 0.0, 0.0, 2.0, 2.0, 2.0)
    # Box b: (1, 1, 1) to (3, 3, 3) - overlaps with a
    b = (1.0, 1.0, 1.0, 3.0, 3.0, 3.0)

    assert boxes_overlap(a, b) is True


def test_boxes_overlap_not_overlapping() -> None:
    """Test that non-overlapping boxes are detected."""
    a = (0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    b = (2.0, 2.0, 2.0, 3.0, 3.0, 3.0)

    assert boxes_overlap(a, b) is False


def test_touching_faces_do_not_overlap() -> None:
    a = (0.0, 0.0, 0.0, 1.0, 1.0, 1.0)
    b = (1.0, 0.0, 0.0, 2.0, 1.0, 1.0)

    assert boxes_overlap(a, b) is False


def test_bounds_and_containment() -> None:
    container = Container(length=10, width=10, height=10, max_weight=1)
    inside = PlacedItem(unit_id="A-0", original_item_id="A", x=2, y=3, z=4, length=8, width=7, height=6)
    outside = Space(x=5, y=0, z=0, length=6, width=1, height=1)

    assert placement_bounds(inside) == (2, 3, 4, 10, 10, 10)
    assert within_container(placement_bounds(inside), container)
    assert not within_container(space_bounds(outside), container)


def test_overlapping_pairs() -> None:
    boxes = [
        (0.0, 0.0, 0.0, 2.0, 2.0, 2.0),
        (5.0, 5.0, 5.0, 6.0, 6.0, 6.0),
        (1.0, 1.0, 1.0, 3.0, 3.0, 3.0),
    ]

    assert overlapping_pairs(boxes) == [(0, 2)]
