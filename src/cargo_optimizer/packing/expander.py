from __future__ import annotations

from typing import Iterable

from cargo_optimizer.models import CargoItem, UnitItem


def unit_volume(item: CargoItem) -> float:
    return float(item.length) * float(item.width) * float(item.height)


def expand_units(cargo_items: Iterable[CargoItem]) -> list[UnitItem]:
    """
    Expand every cargo item into one UnitItem per unit of quantity.

    Units are returned largest volume first. The sort is stable, so units of
    equal volume keep the order in which their items were listed.
    """
    units: list[UnitItem] = []
    for item in cargo_items:
        volume = unit_volume(item)
        for i in range(item.quantity):
            units.append(UnitItem(
                unit_id=f"{item.id}-{i}",
                original_item_id=item.id,
                length=float(item.length),
                width=float(item.width),
                height=float(item.height),
                weight=float(item.weight),
                volume=volume,
                orientation=item.orientation,
            ))

    return sorted(units, key=lambda u: u.volume, reverse=True)
