"""Pricing strategy pattern implementation.

Each pricing method of a treatment maps to one PricingStrategy:

- GridStrategy: supplier price table lookup, bypassing fabric and labor math
- LinearStrategy: fabric priced per selling unit consumed
- FixedStrategy: flat price per piece replacing the fabric cost
- FormulaDrivenStrategy: template making-cost rule with its own rate and markup
- PerDropStrategy: fabric at its own price plus making from a drop-range table
- PerSquareMetreStrategy: fabric at its own price plus making by finished area

Strategies raise CostingError subclasses for bad input; turning those into
CalculationError values is the engine's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TypeVar

from treatments.domain.value_objects import (
    FixedPricing,
    FormulaDrivenPricing,
    GridPricing,
    LinearPricing,
    PerDropPricing,
    PerSquareMetrePricing,
    PricingConfiguration,
    PricingMethod,
    TreatmentInput,
)

from .config import EngineSettings
from .errors import NoPriceMatchError
from .fabric_calculator import FabricRequirementCalculator
from .feature_aggregator import FeatureAggregator
from .grid_resolver import PricingGridResolver
from .labor_calculator import LaborCalculator
from .models import (
    NOT_APPLICABLE,
    Breakdown,
    CostEstimate,
    CostResult,
    FabricRequirement,
    LaborEstimate,
    NoMatch,
)

P = TypeVar("P")


@dataclass(frozen=True)
class CostingContext:
    """Settings and calculators shared by every strategy."""

    settings: EngineSettings
    fabric_calculator: FabricRequirementCalculator = field(init=False)
    labor_calculator: LaborCalculator = field(init=False)
    feature_aggregator: FeatureAggregator = field(init=False)
    grid_resolver: PricingGridResolver = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "fabric_calculator", FabricRequirementCalculator(self.settings)
        )
        object.__setattr__(self, "labor_calculator", LaborCalculator(self.settings))
        object.__setattr__(self, "feature_aggregator", FeatureAggregator(self.settings))
        object.__setattr__(self, "grid_resolver", PricingGridResolver())


def apply_markup(
    subtotal: float, markup_percentage: float, quantity: int
) -> tuple[float, float]:
    """Apply a markup to a subtotal.

    Returns:
        Tuple of (total, unit_price) where
        total = subtotal x (1 + markup_percentage / 100) and
        unit_price = total / quantity.
    """
    total = subtotal * (1 + markup_percentage / 100)
    return total, total / quantity


def pricing_of(treatment: TreatmentInput, pricing_type: type[P]) -> P:
    """Return the treatment's pricing configuration as the expected variant.

    Raises:
        TypeError: If the treatment is priced by another variant.
    """
    pricing = treatment.pricing
    if not isinstance(pricing, pricing_type):
        raise TypeError(
            f"Expected {pricing_type.__name__}, got {type(pricing).__name__}"
        )
    return pricing


class PricingStrategy(ABC):
    """Abstract base class for pricing strategies."""

    method: PricingMethod

    @abstractmethod
    def price(self, treatment: TreatmentInput, context: CostingContext) -> CostEstimate:
        """Price a treatment.

        Args:
            treatment: Complete treatment input.
            context: Engine settings and calculators.

        Returns:
            CostEstimate with result figures and breakdown.

        Raises:
            CostingError: For input the calculators cannot price.
        """
        ...


class GridStrategy(PricingStrategy):
    """Price straight from a supplier grid.

    The grid price is the whole price: subtotal and total both equal it,
    no markup applies and fabric and labor are reported as not applicable.
    """

    method = PricingMethod.GRID

    def price(self, treatment: TreatmentInput, context: CostingContext) -> CostEstimate:
        grid = pricing_of(treatment, GridPricing)
        measurements = treatment.measurements

        lookup = context.grid_resolver.resolve(
            grid, measurements.rail_width, measurements.drop
        )
        if isinstance(lookup, NoMatch):
            raise NoPriceMatchError(
                f"No price for width {measurements.rail_width:g} x drop "
                f"{measurements.drop:g}: {lookup.reason}",
                width=measurements.rail_width,
                drop=measurements.drop,
            )

        total = lookup.price
        unit_price = total / measurements.quantity
        result = CostResult(
            fabric_quantity=0.0,
            fabric_cost=0.0,
            labor_hours=0.0,
            labor_cost=0.0,
            features_cost=0.0,
            subtotal=total,
            markup_percentage=0.0,
            total=total,
            unit_price=unit_price,
        )
        breakdown = Breakdown(
            fabric=NOT_APPLICABLE,
            labor=NOT_APPLICABLE,
            features=NOT_APPLICABLE,
            pricing=(
                f"Grid price: row {lookup.row_index + 1}, column "
                f"{lookup.cell_index + 1} = {total:.2f}; Unit price: "
                f"{total:.2f} / {measurements.quantity} = {unit_price:.2f}"
            ),
        )
        return CostEstimate(result=result, breakdown=breakdown, strategy=self.method.value)


class FabricBasedStrategy(PricingStrategy):
    """Template for strategies that run the fabric, labor and feature steps.

    Subclasses decide how fabric is charged, how making cost is reached
    and which markup applies.
    """

    def price(self, treatment: TreatmentInput, context: CostingContext) -> CostEstimate:
        measurements = treatment.measurements
        options = treatment.options

        requirement = context.fabric_calculator.compute(
            measurements, treatment.fabric, options
        )
        fabric_cost, fabric_cost_step = self.fabric_cost(treatment, requirement)
        labor = self.labor(treatment, context)
        features = context.feature_aggregator.compute(
            measurements, options, requirement.quantity
        )
        markup = self.markup_percentage(treatment, context.settings)

        subtotal = fabric_cost + labor.cost + features.cost
        total, unit_price = apply_markup(subtotal, markup, measurements.quantity)

        result = CostResult(
            fabric_quantity=requirement.quantity,
            fabric_cost=fabric_cost,
            labor_hours=labor.hours,
            labor_cost=labor.cost,
            features_cost=features.cost,
            subtotal=subtotal,
            markup_percentage=markup,
            total=total,
            unit_price=unit_price,
        )
        pricing = "; ".join(
            [
                f"Subtotal: fabric {fabric_cost:.2f} + labor {labor.cost:.2f} + "
                f"features {features.cost:.2f} = {subtotal:.2f}",
                f"Markup {markup:g}%: {subtotal:.2f} x {1 + markup / 100:g} = {total:.2f}",
                f"Unit price: {total:.2f} / {measurements.quantity} = {unit_price:.2f}",
            ]
        )
        breakdown = Breakdown(
            fabric=f"{requirement.explanation}; {fabric_cost_step}",
            labor=labor.explanation,
            features=features.explanation,
            pricing=pricing,
            leftover_length=requirement.leftover_length,
            leftover_width=requirement.leftover_width,
            line_items=features.line_items,
        )
        return CostEstimate(result=result, breakdown=breakdown, strategy=self.method.value)

    @abstractmethod
    def fabric_cost(
        self, treatment: TreatmentInput, requirement: FabricRequirement
    ) -> tuple[float, str]:
        """Fabric cost and the step explaining it."""
        ...

    def labor(self, treatment: TreatmentInput, context: CostingContext) -> LaborEstimate:
        """Hourly fallback at the settings' default labor rate."""
        return context.labor_calculator.compute(
            treatment.measurements,
            treatment.options,
            None,
            context.settings.default_labor_rate,
        )

    def markup_percentage(
        self, treatment: TreatmentInput, settings: EngineSettings
    ) -> float:
        return settings.default_markup_percentage


def _per_unit_fabric_cost(
    requirement: FabricRequirement, price_per_unit: float
) -> tuple[float, str]:
    cost = requirement.quantity * price_per_unit
    step = (
        f"Fabric cost: {requirement.quantity:.3f} {requirement.unit} x "
        f"{price_per_unit:.2f} = {cost:.2f}"
    )
    return cost, step


class LinearStrategy(FabricBasedStrategy):
    """Fabric priced per selling unit at the configured price."""

    method = PricingMethod.LINEAR

    def fabric_cost(
        self, treatment: TreatmentInput, requirement: FabricRequirement
    ) -> tuple[float, str]:
        pricing = pricing_of(treatment, LinearPricing)
        return _per_unit_fabric_cost(requirement, pricing.price_per_unit)


class FixedStrategy(FabricBasedStrategy):
    """Flat price per piece in place of the fabric cost.

    Fabric quantity is still computed for the breakdown and waste figures.
    """

    method = PricingMethod.FIXED

    def fabric_cost(
        self, treatment: TreatmentInput, requirement: FabricRequirement
    ) -> tuple[float, str]:
        pricing = pricing_of(treatment, FixedPricing)
        quantity = treatment.measurements.quantity
        cost = pricing.unit_price * quantity
        step = f"Fixed price: {pricing.unit_price:.2f} x {quantity} piece(s) = {cost:.2f}"
        return cost, step


class FormulaDrivenStrategy(FabricBasedStrategy):
    """Template formula pricing.

    Fabric is charged at the fabric's own price per unit, making cost comes
    from the template rule, and the template's labor rate and markup
    override the settings when given.
    """

    method = PricingMethod.FORMULA

    def fabric_cost(
        self, treatment: TreatmentInput, requirement: FabricRequirement
    ) -> tuple[float, str]:
        return _per_unit_fabric_cost(requirement, treatment.fabric.price_per_unit)

    def labor(self, treatment: TreatmentInput, context: CostingContext) -> LaborEstimate:
        pricing = pricing_of(treatment, FormulaDrivenPricing)
        labor_rate = pricing.labor_rate
        if labor_rate is None:
            labor_rate = context.settings.default_labor_rate
        return context.labor_calculator.compute(
            treatment.measurements,
            treatment.options,
            pricing.making_cost_rule,
            labor_rate,
        )

    def markup_percentage(
        self, treatment: TreatmentInput, settings: EngineSettings
    ) -> float:
        pricing = pricing_of(treatment, FormulaDrivenPricing)
        if pricing.markup_percentage is None:
            return settings.default_markup_percentage
        return pricing.markup_percentage


class PerDropStrategy(FabricBasedStrategy):
    """Curtain manufacturing price list charged per drop.

    Fabric is charged at the fabric's own price per unit; making comes
    from the drop band covering the drop. Settings markup applies.
    """

    method = PricingMethod.PER_DROP

    def fabric_cost(
        self, treatment: TreatmentInput, requirement: FabricRequirement
    ) -> tuple[float, str]:
        return _per_unit_fabric_cost(requirement, treatment.fabric.price_per_unit)

    def labor(self, treatment: TreatmentInput, context: CostingContext) -> LaborEstimate:
        return context.labor_calculator.per_drop(
            treatment.measurements, pricing_of(treatment, PerDropPricing)
        )


class PerSquareMetreStrategy(FabricBasedStrategy):
    """Blind manufacturing price list charged by finished area."""

    method = PricingMethod.PER_SQM

    def fabric_cost(
        self, treatment: TreatmentInput, requirement: FabricRequirement
    ) -> tuple[float, str]:
        return _per_unit_fabric_cost(requirement, treatment.fabric.price_per_unit)

    def labor(self, treatment: TreatmentInput, context: CostingContext) -> LaborEstimate:
        return context.labor_calculator.per_square_metre(
            treatment.measurements, pricing_of(treatment, PerSquareMetrePricing)
        )


# Registry of strategies by pricing method
PRICING_STRATEGIES: dict[PricingMethod, PricingStrategy] = {
    PricingMethod.GRID: GridStrategy(),
    PricingMethod.LINEAR: LinearStrategy(),
    PricingMethod.FIXED: FixedStrategy(),
    PricingMethod.FORMULA: FormulaDrivenStrategy(),
    PricingMethod.PER_DROP: PerDropStrategy(),
    PricingMethod.PER_SQM: PerSquareMetreStrategy(),
}


def select_strategy(pricing: PricingConfiguration) -> PricingStrategy:
    """Select the pricing strategy for a pricing configuration.

    Raises:
        TypeError: If the configuration is not one of the pricing variants.
    """
    method = getattr(pricing, "method", None)
    if method not in PRICING_STRATEGIES:
        raise TypeError(f"Unsupported pricing configuration: {type(pricing).__name__}")
    return PRICING_STRATEGIES[method]
