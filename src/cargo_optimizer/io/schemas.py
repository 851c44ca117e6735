"""Data schemas for input/output operations."""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from cargo_optimizer.containers import get_container
from cargo_optimizer.metrics import LoadSummary
from cargo_optimizer.models import CargoItem, Container, Orientation, PackingResult
from cargo_optimizer.render import RenderPayload

logger = logging.getLogger(__name__)


class ContainerRequest(BaseModel):
    """Container given by preset name, explicit dims, or a preset with overrides."""
    preset: Optional[str] = Field(None, description="Preset name, e.g. '20ft' or 'LD3 (AKE/AVE)'")
    length: Optional[float] = Field(None, description="Inner length in cm")
    width: Optional[float] = Field(None, description="Inner width in cm")
    height: Optional[float] = Field(None, description="Inner height in cm")
    max_weight: Optional[float] = Field(None, description="Maximum payload in kg")

    @model_validator(mode="after")
    def check_preset_or_dims(self) -> "ContainerRequest":
        dims = (self.length, self.width, self.height, self.max_weight)
        if self.preset is None and any(d is None for d in dims):
            raise ValueError("container needs either 'preset' or length, width, height and max_weight")
        return self

    def to_container(self) -> Container:
        """Resolve the preset (if any) and apply explicit overrides. Raises ValueError for unknown presets."""
        fields = {}
        if self.preset is not None:
            fields.update(get_container(self.preset).model_dump())
        for name in ("length", "width", "height", "max_weight"):
            value = getattr(self, name)
            if value is not None:
                fields[name] = value
        return Container(**fields)


class CargoItemRequest(BaseModel):
    """Cargo item line as entered by a user; values are checked by PackingRequest."""
    id: Optional[str] = Field(None, description="Item type identifier (defaults to its position)")
    length: float = Field(0.0, description="Length in cm")
    width: float = Field(0.0, description="Width in cm")
    height: float = Field(0.0, description="Height in cm")
    weight: float = Field(0.0, description="Weight per unit in kg")
    quantity: int = Field(1, description="Number of units")
    orientation: Orientation = Field(Orientation.ANY, description="Allowed footprint")

    @property
    def is_valid(self) -> bool:
        return (
            self.length > 0
            and self.width > 0
            and self.height > 0
            and self.weight > 0
            and self.quantity > 0
        )


class PackingRequest(BaseModel):
    """Schema for a packing request."""
    container: ContainerRequest
    items: List[CargoItemRequest] = Field(default_factory=list, description="Cargo item lines")

    def to_container(self) -> Container:
        return self.container.to_container()

    def cargo_items(self) -> list[CargoItem]:
        """All item lines as CargoItems, invalid ones included."""
        out = []
        for index, item in enumerate(self.items, start=1):
            out.append(CargoItem(
                id=item.id if item.id is not None else str(index),
                length=item.length,
                width=item.width,
                height=item.height,
                weight=item.weight,
                quantity=item.quantity,
                orientation=item.orientation,
            ))
        return out

    def valid_cargo_items(self) -> list[CargoItem]:
        """Item lines with positive dims, weight and quantity; the rest are dropped."""
        valid = [c for c, item in zip(self.cargo_items(), self.items) if item.is_valid]
        dropped = len(self.items) - len(valid)
        if dropped:
            logger.warning(f"Dropped {dropped} cargo item(s) with non-positive dimensions, weight or quantity")
        return valid


class PackingResponse(BaseModel):
    """Schema for a packing response."""
    result: PackingResult
    summary: LoadSummary
    render: Optional[RenderPayload] = None
