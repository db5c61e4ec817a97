"""Pricing configuration value objects.

A treatment is priced by exactly one of six methods, modelled as a
tagged union of frozen dataclasses:

- LinearPricing: price per selling unit of fabric consumed
- FixedPricing: flat price per piece, replacing the fabric cost
- GridPricing: width-range x drop-range table lookup
- FormulaDrivenPricing: template making-cost rule with its own rate and markup
- PerDropPricing: curtain making charged per piece from a drop-range table
- PerSquareMetrePricing: blind making charged by finished area
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class PricingMethod(str, Enum):
    """Discriminator for the pricing configuration variants."""

    LINEAR = "linear"
    FIXED = "fixed"
    GRID = "grid"
    FORMULA = "formula"
    PER_DROP = "per_drop"
    PER_SQM = "per_sqm"


class PricingUnit(str, Enum):
    """Unit a making-cost rule charges per."""

    PER_UNIT = "per_unit"
    PER_LINEAR_METRE = "per_linear_metre"


@dataclass(frozen=True)
class LinearPricing:
    """Fabric priced per selling unit consumed."""

    price_per_unit: float

    method = PricingMethod.LINEAR

    def __post_init__(self) -> None:
        if self.price_per_unit < 0:
            raise ValueError("Linear price must be non-negative")


@dataclass(frozen=True)
class FixedPricing:
    """Flat price per piece, independent of fabric consumption."""

    unit_price: float

    method = PricingMethod.FIXED

    def __post_init__(self) -> None:
        if self.unit_price < 0:
            raise ValueError("Fixed unit price must be non-negative")


@dataclass(frozen=True)
class GridCell:
    """Price for an inclusive width range within a grid row."""

    width_min: float
    width_max: float
    price: float

    def __post_init__(self) -> None:
        if self.width_min > self.width_max:
            raise ValueError(
                f"Grid cell width_min ({self.width_min}) exceeds "
                f"width_max ({self.width_max})"
            )
        if self.price < 0:
            raise ValueError("Grid cell price must be non-negative")

    def covers(self, width: float) -> bool:
        """Whether the width falls inside this cell's inclusive range."""
        return self.width_min <= width <= self.width_max


@dataclass(frozen=True)
class GridRow:
    """Inclusive drop range and the width cells priced within it."""

    drop_min: float
    drop_max: float
    cells: tuple[GridCell, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.drop_min > self.drop_max:
            raise ValueError(
                f"Grid row drop_min ({self.drop_min}) exceeds "
                f"drop_max ({self.drop_max})"
            )
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))

    def covers(self, drop: float) -> bool:
        """Whether the drop falls inside this row's inclusive range."""
        return self.drop_min <= drop <= self.drop_max


@dataclass(frozen=True)
class GridPricing:
    """Two-dimensional supplier price table.

    Rows and cells are expected not to overlap. When they do, the first
    match in table order wins.
    """

    rows: tuple[GridRow, ...]

    method = PricingMethod.GRID

    def __post_init__(self) -> None:
        if not isinstance(self.rows, tuple):
            object.__setattr__(self, "rows", tuple(self.rows))
        if not self.rows:
            raise ValueError("Pricing grid must have at least one row")


@dataclass(frozen=True)
class MakingCostRule:
    """Template-configured making cost.

    Attributes:
        base_making_cost: Charge per piece or per linear metre of rail.
        pricing_unit: Whether the base cost applies per piece or per metre.
        height_surcharges_enabled: Whether tall curtains carry a surcharge.
        height_surcharge_threshold: Drop above which the surcharge applies.
        height_surcharge_amount: Surcharge per piece.
    """

    base_making_cost: float
    pricing_unit: PricingUnit = PricingUnit.PER_UNIT
    height_surcharges_enabled: bool = False
    height_surcharge_threshold: float | None = None
    height_surcharge_amount: float = 0.0

    def __post_init__(self) -> None:
        if self.base_making_cost < 0:
            raise ValueError("Base making cost must be non-negative")
        if self.height_surcharge_amount < 0:
            raise ValueError("Height surcharge amount must be non-negative")
        if self.height_surcharges_enabled and self.height_surcharge_threshold is None:
            raise ValueError(
                "height_surcharge_threshold is required when height surcharges "
                "are enabled"
            )


@dataclass(frozen=True)
class FormulaDrivenPricing:
    """Template formula: making-cost rule with optional rate and markup.

    Omitted labor rate or markup percentage fall back to engine settings.
    """

    making_cost_rule: MakingCostRule
    labor_rate: float | None = None
    markup_percentage: float | None = None

    method = PricingMethod.FORMULA

    def __post_init__(self) -> None:
        if self.markup_percentage is not None and self.markup_percentage < 0:
            raise ValueError("Markup percentage must be non-negative")


@dataclass(frozen=True)
class DropBand:
    """Making price per piece for an inclusive drop range."""

    drop_min: float
    drop_max: float
    price: float

    def __post_init__(self) -> None:
        if self.drop_min > self.drop_max:
            raise ValueError(
                f"Drop band drop_min ({self.drop_min}) exceeds "
                f"drop_max ({self.drop_max})"
            )
        if self.price < 0:
            raise ValueError("Drop band price must be non-negative")

    def covers(self, drop: float) -> bool:
        """Whether the drop falls inside this band's inclusive range."""
        return self.drop_min <= drop <= self.drop_max


@dataclass(frozen=True)
class PerDropPricing:
    """Curtain manufacturing priced by drop height.

    Each piece is charged the price of the first band covering the drop.
    Fabric is charged separately at the fabric's own price per unit.
    """

    bands: tuple[DropBand, ...]

    method = PricingMethod.PER_DROP

    def __post_init__(self) -> None:
        if not isinstance(self.bands, tuple):
            object.__setattr__(self, "bands", tuple(self.bands))
        if not self.bands:
            raise ValueError("Per-drop pricing must have at least one drop band")

    def band_for(self, drop: float) -> DropBand | None:
        """First band covering the drop, or None."""
        return next((band for band in self.bands if band.covers(drop)), None)


@dataclass(frozen=True)
class PerSquareMetrePricing:
    """Blind manufacturing priced by finished area in square metres.

    Fabric is charged separately at the fabric's own price per unit.
    """

    price_per_square_metre: float

    method = PricingMethod.PER_SQM

    def __post_init__(self) -> None:
        if self.price_per_square_metre < 0:
            raise ValueError("Price per square metre must be non-negative")


PricingConfiguration = Union[
    LinearPricing,
    FixedPricing,
    GridPricing,
    FormulaDrivenPricing,
    PerDropPricing,
    PerSquareMetrePricing,
]
