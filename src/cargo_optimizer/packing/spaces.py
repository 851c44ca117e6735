"""Free-space pool and guillotine splitting."""

from __future__ import annotations

from typing import Iterable, Iterator

from cargo_optimizer.models import Container, Rotation, Space


def min_side(space: Space) -> float:
    return min(space.length, space.width, space.height)


def split_space(space: Space, rotation: Rotation) -> list[Space]:
    """
    Guillotine cut of `space` after placing an item of dims `rotation` at its corner.

    Returns up to 3 residuals that never overlap each other or the item:
      - top:   full footprint, above the item
      - right: full length, beside the item, capped at the item's height
      - front: in front of the item, capped at the item's width and height

    The residuals can be smaller than the true free volume around the item.
    """
    L, W, H = rotation
    spaces: list[Space] = []

    if space.height > H:
        spaces.append(Space(
            x=space.x,
            y=space.y,
            z=space.z + H,
            length=space.length,
            width=space.width,
            height=space.height - H,
        ))

    if space.width > W:
        spaces.append(Space(
            x=space.x,
            y=space.y + W,
            z=space.z,
            length=space.length,
            width=space.width - W,
            height=H,
        ))

    if space.length > L:
        spaces.append(Space(
            x=space.x + L,
            y=space.y,
            z=space.z,
            length=space.length - L,
            width=W,
            height=H,
        ))

    return spaces


class SpacePool:
    """Ordered, mutable collection of disjoint free spaces."""

    def __init__(self, spaces: Iterable[Space] = ()):
        self._spaces: list[Space] = list(spaces)

    @classmethod
    def for_container(cls, container: Container) -> "SpacePool":
        return cls([Space(
            x=0.0,
            y=0.0,
            z=0.0,
            length=float(container.length),
            width=float(container.width),
            height=float(container.height),
        )])

    def __iter__(self) -> Iterator[Space]:
        return iter(self._spaces)

    def __len__(self) -> int:
        return len(self._spaces)

    def __getitem__(self, index: int) -> Space:
        return self._spaces[index]

    def sort_for_search(self) -> None:
        """Smallest short side first (stable)."""
        self._spaces.sort(key=min_side)

    def replace(self, index: int, residuals: list[Space]) -> None:
        """Swap the space at `index` for its residuals, in place."""
        self._spaces[index:index + 1] = residuals

    def compact(self) -> None:
        # Only reorders by descending volume; adjacent spaces are not merged.
        self._spaces.sort(key=lambda s: s.volume, reverse=True)

    def snapshot(self) -> list[Space]:
        return list(self._spaces)
