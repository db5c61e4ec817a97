"""Measurement value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Measurements:
    """Immutable treatment measurements.

    All lengths share one measurement unit (centimetres by default). A rail
    width or drop of zero is allowed and marks the measurements as
    incomplete; negative values are rejected.

    Attributes:
        rail_width: Finished horizontal span the treatment covers.
        drop: Finished height from the rail to the hem.
        pooling: Extra length left to drape on the floor.
        return_depth: Depth of each return wrapping back to the wall.
        quantity: Number of panels or pieces (at least 1).
    """

    rail_width: float
    drop: float
    pooling: float = 0.0
    return_depth: float = 0.0
    quantity: int = 1

    def __post_init__(self) -> None:
        for name in ("rail_width", "drop", "pooling", "return_depth"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number")
            if value < 0:
                raise ValueError(f"{name} must be non-negative")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("Quantity must be an integer")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def is_complete(self) -> bool:
        """Whether both rail width and drop are present."""
        return self.rail_width > 0 and self.drop > 0

    @property
    def area(self) -> float:
        """Finished area (rail width x drop) for a single piece."""
        return self.rail_width * self.drop
