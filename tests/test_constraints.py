from __future__ import annotations

from cargo_optimizer.packing.constraints import WeightTracker


def test_weight_tracker_counts_down() -> None:
    tracker = WeightTracker(1000)

    assert tracker.admits(1000)
    tracker.consume(600)

    assert tracker.remaining == 400
    assert tracker.used == 600
    assert tracker.admits(400)
    assert not tracker.admits(400.5)
