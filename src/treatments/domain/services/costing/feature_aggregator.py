"""Add-on cost aggregation.

This module provides FeatureAggregator for summing the selected optional
line items and lining of a treatment.
"""

from __future__ import annotations

from treatments.domain.value_objects import LiningKind, Measurements, TreatmentOptions

from .config import EngineSettings
from .models import FeatureCost, LineItem


class FeatureAggregator:
    """Service for pricing selected add-ons.

    Curtains carry every selected feature at unit_price x quantity, plus
    lining priced per selling unit of fabric. Blinds carry no feature or
    lining surcharges: they always price at zero with no line items.
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()

    def compute(
        self,
        measurements: Measurements,
        options: TreatmentOptions,
        fabric_quantity: float = 0.0,
    ) -> FeatureCost:
        """Sum the selected add-ons.

        Args:
            measurements: Treatment measurements (quantity multiplies features).
            options: Treatment options with features and lining.
            fabric_quantity: Fabric in selling units, used to price lining.

        Returns:
            FeatureCost with the total and one line item per priced add-on.
        """
        if options.is_blind:
            return FeatureCost(
                cost=0.0,
                line_items=(),
                explanation="Features: not charged for blinds",
            )

        quantity = measurements.quantity
        items: list[LineItem] = [
            LineItem(
                name=feature.name,
                unit_price=feature.unit_price,
                quantity=quantity,
                total=feature.unit_price * quantity,
            )
            for feature in options.selected_features
        ]

        if options.lining != LiningKind.NONE:
            lining_price = self.settings.lining_price(options.lining)
            items.append(
                LineItem(
                    name=f"Lining ({options.lining.value})",
                    unit_price=lining_price,
                    quantity=fabric_quantity,
                    total=lining_price * fabric_quantity,
                )
            )

        cost = sum(item.total for item in items)
        if items:
            lines = ", ".join(
                f"{item.name} {item.unit_price:.2f} x {item.quantity:g} = {item.total:.2f}"
                for item in items
            )
            explanation = f"Features: {lines}; total {cost:.2f}"
        else:
            explanation = "Features: none selected"
        return FeatureCost(cost=cost, line_items=tuple(items), explanation=explanation)
