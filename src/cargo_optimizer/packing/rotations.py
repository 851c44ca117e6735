from __future__ import annotations

from cargo_optimizer.models import Orientation, Rotation


def all_rotations(length: float, width: float, height: float) -> list[Rotation]:
    """
    The 6 axis-aligned orientations, in search order:
      (L,W,H) (W,L,H) (L,H,W) (H,L,W) (W,H,L) (H,W,L)
    """
    L, W, H = float(length), float(width), float(height)
    return [
        (L, W, H),
        (W, L, H),
        (L, H, W),
        (H, L, W),
        (W, H, L),
        (H, W, L),
    ]


def _footprint_pair(a: float, b: float, vertical: float) -> list[Rotation]:
    # Swapping equal footprint sides is a no-op.
    if a == b:
        return [(a, b, vertical)]
    return [(a, b, vertical), (b, a, vertical)]


def get_rotations(
    length: float,
    width: float,
    height: float,
    orientation: Orientation | str = Orientation.ANY,
) -> list[Rotation]:
    """
    Admissible (L, W, H) rotations for an item under an orientation constraint.

    - any: the distinct permutations (1 for a cube, 3 with two equal sides, else 6)
    - l_w: height stays vertical, footprint length x width
    - l_h: width stays vertical, footprint length x height
    - w_h: length stays vertical, footprint width x height

    Raises ValueError for an unknown orientation.
    """
    orientation = Orientation(orientation)
    L, W, H = float(length), float(width), float(height)

    if orientation is Orientation.ANY:
        seen: set[Rotation] = set()
        out: list[Rotation] = []
        for dims in all_rotations(L, W, H):
            if dims not in seen:
                seen.add(dims)
                out.append(dims)
        return out
    if orientation is Orientation.LENGTH_WIDTH:
        return _footprint_pair(L, W, H)
    if orientation is Orientation.LENGTH_HEIGHT:
        return _footprint_pair(L, H, W)
    if orientation is Orientation.WIDTH_HEIGHT:
        return _footprint_pair(W, H, L)

    raise ValueError(f"Unsupported orientation '{orientation}'")
