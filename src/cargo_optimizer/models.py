from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

# Oriented dimensions (L, W, H) of an item as placed.
Rotation = Tuple[float, float, float]


class Orientation(str, Enum):
    """Which pair of an item's original dimensions may form its footprint."""

    ANY = "any"
    LENGTH_WIDTH = "l_w"
    LENGTH_HEIGHT = "l_h"
    WIDTH_HEIGHT = "w_h"


class Container(BaseModel):
    """Container or ULD.

    Fields are unconstrained: the packer answers a non-positive
    container with an empty plan instead of rejecting it.
    """

    model_config = ConfigDict(frozen=True)

    length: float = Field(description="Inner length (x axis), e.g. cm")
    width: float = Field(description="Inner width (y axis), e.g. cm")
    height: float = Field(description="Inner height (z axis), e.g. cm")
    max_weight: float = Field(description="Maximum payload, e.g. kg")

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height


class CargoItem(BaseModel):
    """One cargo item type with a quantity."""

    id: str = Field(description="Identifier of the item type")
    length: float = Field(description="Original length")
    width: float = Field(description="Original width")
    height: float = Field(description="Original height")
    weight: float = Field(description="Weight of a single unit")
    quantity: int = Field(default=1, description="Number of identical units")
    orientation: Orientation = Field(default=Orientation.ANY, description="Allowed footprint")


class UnitItem(BaseModel):
    """A single physical unit expanded from a CargoItem."""

    unit_id: str
    original_item_id: str
    length: float
    width: float
    height: float
    weight: float
    volume: float
    orientation: Orientation = Orientation.ANY


class Space(BaseModel):
    """Free axis-aligned box; (x, y, z) is its back-bottom-left corner."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float
    length: float
    width: float
    height: float

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height


class PlacedItem(BaseModel):
    """Unit bound to a rotation and anchored at the corner of a free space."""

    model_config = ConfigDict(frozen=True)

    unit_id: str = Field(description="Identifier of the placed unit")
    original_item_id: str = Field(description="Identifier of the cargo item type")
    x: float = Field(description="X coordinate (depth)")
    y: float = Field(description="Y coordinate (rightward)")
    z: float = Field(description="Z coordinate (upward)")

    # Oriented dimensions after rotation
    length: float
    width: float
    height: float
    weight: float = 0.0

    @property
    def rotation(self) -> Rotation:
        return (self.length, self.width, self.height)

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height


class UnplacedItem(BaseModel):
    """Unit that could not be placed, normalized back to quantity 1."""

    unit_id: str
    original_item_id: str
    length: float
    width: float
    height: float
    weight: float
    quantity: int = 1
    orientation: Orientation = Orientation.ANY


class PackingResult(BaseModel):
    """Full output of one packing run."""

    placed_items: List[PlacedItem] = Field(default_factory=list)
    unplaced_items: List[UnplacedItem] = Field(default_factory=list)
    remaining_spaces: List[Space] = Field(default_factory=list)
    remaining_weight: float = 0.0
