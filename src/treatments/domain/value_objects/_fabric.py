"""Fabric value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Orientation(str, Enum):
    """How the fabric roll is laid against the treatment.

    VERTICAL is the standard drop-wise cut: the roll length runs down the
    drop and roll widths are joined across the rail. HORIZONTAL is
    railroaded: the roll is turned so its length runs along the rail.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class FabricSpec:
    """Fabric specification supplied by the catalog.

    The roll width is not required to be positive here: blinds never divide
    by it, and curtains report a non-positive roll width as an invalid
    fabric specification at calculation time.

    Attributes:
        roll_width: Usable width of the roll in measurement units.
        price_per_unit: Price per selling unit of length (or area for blinds).
        vertical_repeat: Pattern repeat along the roll length (0 = none).
        horizontal_repeat: Pattern repeat across the roll width (0 = none).
        orientation: Roll orientation, see Orientation.
        name: Optional catalog name used in breakdowns.
    """

    roll_width: float
    price_per_unit: float
    vertical_repeat: float = 0.0
    horizontal_repeat: float = 0.0
    orientation: Orientation = Orientation.VERTICAL
    name: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.roll_width):
            raise ValueError("Roll width must be a finite number")
        if not math.isfinite(self.price_per_unit) or self.price_per_unit < 0:
            raise ValueError("Fabric price must be non-negative")
        for repeat in (self.vertical_repeat, self.horizontal_repeat):
            if not math.isfinite(repeat) or repeat < 0:
                raise ValueError("Pattern repeats must be finite and non-negative")

    @property
    def has_repeat(self) -> bool:
        """Whether the fabric carries a pattern repeat on either axis."""
        return self.vertical_repeat > 0 or self.horizontal_repeat > 0

    @property
    def label(self) -> str:
        """Display label for breakdowns."""
        return self.name or "Fabric"
