"""Weight capacity tracking for a packing run."""

from __future__ import annotations


class WeightTracker:
    """Remaining payload counter, seeded with the container's max weight."""

    def __init__(self, max_weight: float):
        self.max_weight = float(max_weight)
        self.remaining = float(max_weight)

    def admits(self, weight: float) -> bool:
        """True if a unit of `weight` still fits under the remaining payload."""
        return weight <= self.remaining

    def consume(self, weight: float) -> None:
        self.remaining -= weight

    @property
    def used(self) -> float:
        return self.max_weight - self.remaining
