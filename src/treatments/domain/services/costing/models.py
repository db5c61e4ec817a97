"""Costing data models.

This module provides frozen dataclasses for:
- GridMatch / NoMatch: Pricing grid lookup outcomes
- FabricRequirement: Fabric quantity, cut geometry and waste
- LaborEstimate: Making hours and cost
- LineItem / FeatureCost: Priced add-ons
- CostResult: Machine-readable cost figures
- Breakdown: Human-readable explanation of each step
- CostEstimate: Successful calculation (result + breakdown)
- CalculationError: Reportable calculation failure
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .errors import ErrorKind

NOT_APPLICABLE = "not applicable"


@dataclass(frozen=True)
class GridMatch:
    """Matched pricing grid cell.

    Attributes:
        price: Price of the matched cell.
        row_index: Index of the matched row in table order.
        cell_index: Index of the matched cell within the row.
    """

    price: float
    row_index: int
    cell_index: int


@dataclass(frozen=True)
class NoMatch:
    """No grid row or cell covers the requested size."""

    reason: str


GridLookup = Union[GridMatch, NoMatch]


@dataclass(frozen=True)
class FabricRequirement:
    """Fabric needed for a treatment.

    Lengths are in measurement units; quantity is in selling units (linear
    for curtains, square for blinds).

    Attributes:
        quantity: Fabric to order in selling units.
        unit: Selling unit label (e.g. "yd" or "yd²").
        total_length: Total cut length in measurement units (0 for blinds).
        widths_per_panel: Roll widths (or railroaded pieces) per panel.
        cut_length: Length of each cut after repeat rounding.
        leftover_length: Length wasted by repeat rounding, all cuts.
        leftover_width: Width wasted across joined roll widths, all panels.
        explanation: Derivation of the arithmetic.
    """

    quantity: float
    unit: str
    total_length: float
    widths_per_panel: int
    cut_length: float
    leftover_length: float
    leftover_width: float
    explanation: str


@dataclass(frozen=True)
class LaborEstimate:
    """Making hours and cost."""

    hours: float
    cost: float
    explanation: str


@dataclass(frozen=True)
class LineItem:
    """A priced add-on line."""

    name: str
    unit_price: float
    quantity: float
    total: float


@dataclass(frozen=True)
class FeatureCost:
    """Sum of selected add-ons."""

    cost: float
    line_items: tuple[LineItem, ...] = field(default_factory=tuple)
    explanation: str = ""


@dataclass(frozen=True)
class CostResult:
    """Machine-readable cost figures stored with the treatment record.

    Attributes:
        fabric_quantity: Fabric in selling units (0 for grid pricing).
        fabric_cost: Cost of the fabric.
        labor_hours: Making hours.
        labor_cost: Making cost.
        features_cost: Add-on and lining cost.
        subtotal: fabric_cost + labor_cost + features_cost (grid price for grids).
        markup_percentage: Markup applied to the subtotal.
        total: subtotal x (1 + markup_percentage / 100).
        unit_price: total / quantity.
    """

    fabric_quantity: float
    fabric_cost: float
    labor_hours: float
    labor_cost: float
    features_cost: float
    subtotal: float
    markup_percentage: float
    total: float
    unit_price: float

    @classmethod
    def zero(cls) -> CostResult:
        """Explicit zero-valued result for incomplete input."""
        return cls(
            fabric_quantity=0.0,
            fabric_cost=0.0,
            labor_hours=0.0,
            labor_cost=0.0,
            features_cost=0.0,
            subtotal=0.0,
            markup_percentage=0.0,
            total=0.0,
            unit_price=0.0,
        )

    def to_dict(self) -> dict[str, float]:
        """Convert to a plain dictionary for persistence."""
        return {
            "fabric_quantity": self.fabric_quantity,
            "fabric_cost": self.fabric_cost,
            "labor_hours": self.labor_hours,
            "labor_cost": self.labor_cost,
            "features_cost": self.features_cost,
            "subtotal": self.subtotal,
            "markup_percentage": self.markup_percentage,
            "total": self.total,
            "unit_price": self.unit_price,
        }


@dataclass(frozen=True)
class Breakdown:
    """Human-readable justification of a cost result.

    Attributes:
        fabric: Fabric derivation, or "not applicable" for grid pricing.
        labor: Labor derivation, or "not applicable" for grid pricing.
        features: Add-on derivation.
        pricing: How the subtotal, markup and total were reached.
        leftover_length: Waste along the roll length in measurement units.
        leftover_width: Waste across the roll width in measurement units.
        line_items: Priced add-on lines.
    """

    fabric: str
    labor: str
    features: str
    pricing: str
    leftover_length: float = 0.0
    leftover_width: float = 0.0
    line_items: tuple[LineItem, ...] = field(default_factory=tuple)

    @property
    def steps(self) -> tuple[str, ...]:
        """Explanations in calculation order."""
        return (self.fabric, self.labor, self.features, self.pricing)


@dataclass(frozen=True)
class CostEstimate:
    """Successful calculation.

    Attributes:
        result: Cost figures.
        breakdown: Explanation of the figures.
        strategy: Name of the pricing method that produced them.
    """

    result: CostResult
    breakdown: Breakdown
    strategy: str

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class CalculationError:
    """Reportable calculation failure.

    Hosts show the message and withhold any total. Only incomplete
    measurements carry a result, the explicit zero-valued one.

    Attributes:
        kind: Error kind.
        message: Explanation for the salesperson.
        result: Zero-valued result for incomplete measurements, else None.
    """

    kind: ErrorKind
    message: str
    result: CostResult | None = None

    @property
    def is_error(self) -> bool:
        return True


CostOutcome = Union[CostEstimate, CalculationError]
