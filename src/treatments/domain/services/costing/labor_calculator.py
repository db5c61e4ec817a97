"""Labor and making cost calculation.

This module provides LaborCalculator, which prices manufacturing from a
template making-cost rule, from estimated hours at an hourly rate, or from
a manufacturing price list charged per drop or per square metre.
"""

from __future__ import annotations

from treatments.domain.value_objects import (
    MakingCostRule,
    Measurements,
    PerDropPricing,
    PerSquareMetrePricing,
    PricingUnit,
    TreatmentCategory,
    TreatmentOptions,
)

from .config import EngineSettings
from .errors import InvalidLaborConfigurationError, NoPriceMatchError
from .models import LaborEstimate


class LaborCalculator:
    """Service for calculating making cost.

    With a making-cost rule:
        cost = base_making_cost x (rail metres | quantity)
        + height_surcharge_amount x quantity for tall curtains
    Without a rule:
        cost = hours_per_unit x labor_rate x quantity
        hours = cost / labor_rate
    From a manufacturing price list (no hours are estimated):
        cost = drop band price x quantity, or
        cost = rail_width x drop in m² x quantity x price per m²
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()

    def compute(
        self,
        measurements: Measurements,
        options: TreatmentOptions,
        rule: MakingCostRule | None,
        labor_rate: float,
    ) -> LaborEstimate:
        """Calculate making hours and cost.

        Args:
            measurements: Treatment measurements.
            options: Treatment options (category decides surcharges and hours).
            rule: Template making-cost rule, or None for the hourly fallback.
            labor_rate: Hourly labor rate.

        Returns:
            LaborEstimate with hours, cost and explanation.

        Raises:
            InvalidLaborConfigurationError: If the hourly fallback runs with a
                labor rate that is not positive.
        """
        if rule is not None:
            return self._from_rule(measurements, options, rule, labor_rate)
        return self._from_hours(measurements, options, labor_rate)

    def _from_rule(
        self,
        measurements: Measurements,
        options: TreatmentOptions,
        rule: MakingCostRule,
        labor_rate: float,
    ) -> LaborEstimate:
        """Price making from a template rule."""
        if rule.pricing_unit == PricingUnit.PER_LINEAR_METRE:
            multiplier = measurements.rail_width / self.settings.length_units_per_metre
            basis = f"{multiplier:.2f} m of rail"
        else:
            multiplier = float(measurements.quantity)
            basis = f"{measurements.quantity} piece(s)"

        cost = rule.base_making_cost * multiplier
        parts = [f"Making: {rule.base_making_cost:.2f} x {basis} = {cost:.2f}"]

        # Height surcharges never apply to blinds
        if (
            options.category == TreatmentCategory.CURTAIN
            and rule.height_surcharges_enabled
            and rule.height_surcharge_threshold is not None
            and measurements.drop > rule.height_surcharge_threshold
        ):
            surcharge = rule.height_surcharge_amount * measurements.quantity
            cost += surcharge
            parts.append(
                f"Height surcharge (drop {measurements.drop:g} > "
                f"{rule.height_surcharge_threshold:g}): "
                f"{rule.height_surcharge_amount:.2f} x {measurements.quantity} = "
                f"{surcharge:.2f}"
            )

        hours = cost / labor_rate if labor_rate > 0 else 0.0
        return LaborEstimate(hours=hours, cost=cost, explanation="; ".join(parts))

    def _from_hours(
        self,
        measurements: Measurements,
        options: TreatmentOptions,
        labor_rate: float,
    ) -> LaborEstimate:
        """Price making from estimated hours at an hourly rate."""
        if labor_rate <= 0:
            raise InvalidLaborConfigurationError(
                f"Labor rate must be positive to estimate making cost "
                f"(got {labor_rate:g})"
            )

        hours_per_unit = self.settings.hours_per_unit[options.category]
        cost = hours_per_unit * labor_rate * measurements.quantity
        hours = cost / labor_rate
        explanation = (
            f"Labor: {hours_per_unit:g} h x {labor_rate:.2f}/h x "
            f"{measurements.quantity} piece(s) = {cost:.2f} ({hours:g} h)"
        )
        return LaborEstimate(hours=hours, cost=cost, explanation=explanation)

    def per_drop(
        self, measurements: Measurements, pricing: PerDropPricing
    ) -> LaborEstimate:
        """Price making from a drop-range price list.

        cost = price of the band covering the drop x quantity

        Raises:
            NoPriceMatchError: If no band covers the drop.
        """
        band = pricing.band_for(measurements.drop)
        if band is None:
            raise NoPriceMatchError(
                f"No making price for drop {measurements.drop:g}: "
                f"no drop band covers it",
                width=measurements.rail_width,
                drop=measurements.drop,
            )

        cost = band.price * measurements.quantity
        explanation = (
            f"Making per drop ({band.drop_min:g}-{band.drop_max:g}): "
            f"{band.price:.2f} x {measurements.quantity} piece(s) = {cost:.2f}"
        )
        return LaborEstimate(hours=0.0, cost=cost, explanation=explanation)

    def per_square_metre(
        self, measurements: Measurements, pricing: PerSquareMetrePricing
    ) -> LaborEstimate:
        """Price making by finished area.

        Area is always charged in square metres, whatever the selling unit.
        """
        units_per_metre = self.settings.length_units_per_metre
        area = (
            measurements.rail_width
            * measurements.drop
            / units_per_metre**2
            * measurements.quantity
        )
        cost = area * pricing.price_per_square_metre
        explanation = (
            f"Making: {area:.3f} m² x {pricing.price_per_square_metre:.2f}/m² = "
            f"{cost:.2f}"
        )
        return LaborEstimate(hours=0.0, cost=cost, explanation=explanation)
