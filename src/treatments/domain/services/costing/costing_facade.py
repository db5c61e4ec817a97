"""CostingEngine facade service.

This module provides the CostingEngine class, which coordinates the
fabric, labor, feature and grid services behind a single pure entry
point: compute_cost(TreatmentInput) -> CostEstimate | CalculationError.
"""

from __future__ import annotations

import logging
from typing import Iterable

from treatments.domain.value_objects import TreatmentInput

from .config import EngineSettings
from .errors import CostingError, ErrorKind
from .models import CalculationError, CostOutcome, CostResult
from .pricing_strategies import CostingContext, select_strategy

logger = logging.getLogger(__name__)

INSUFFICIENT_MEASUREMENTS = "insufficient measurements"


class CostingEngine:
    """Treatment costing service.

    Selects the pricing strategy from the treatment's pricing configuration,
    runs the calculators it needs and assembles the cost result together
    with a breakdown that justifies every figure.

    Pricing methods:
        - grid: supplier table price, no fabric or labor math, no markup
        - linear: fabric x price per unit + hourly labor + features, settings markup
        - fixed: unit price x quantity + hourly labor + features, settings markup
        - formula: fabric x fabric price + template making cost + features,
          template markup
        - per_drop: fabric x fabric price + drop band price per piece + features,
          settings markup
        - per_sqm: fabric x fabric price + finished m² x price + features,
          settings markup

    Expected bad input never raises. Incomplete measurements, unusable
    fabric, missing grid or drop band prices and bad labor rates come back as a
    CalculationError naming the problem.

    The engine holds only immutable settings and stateless calculators, so
    one instance may be shared freely.

    Example:
        >>> engine = CostingEngine()
        >>> outcome = engine.compute_cost(treatment)
        >>> if outcome.is_error:
        ...     print(outcome.message)
        ... else:
        ...     print(f"{outcome.result.total:.2f}")
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        """Initialize the costing engine.

        Args:
            settings: Optional settings overrides. Uses defaults if not provided.
        """
        self.settings = settings or EngineSettings()
        self._context = CostingContext(self.settings)

    def compute_cost(self, treatment: TreatmentInput) -> CostOutcome:
        """Price a single treatment.

        Args:
            treatment: Measurements, fabric, options and pricing configuration.

        Returns:
            CostEstimate on success, CalculationError for input that cannot
            be priced.
        """
        if not treatment.measurements.is_complete:
            logger.debug(
                "Incomplete measurements: rail_width=%s drop=%s",
                treatment.measurements.rail_width,
                treatment.measurements.drop,
            )
            return CalculationError(
                kind=ErrorKind.INCOMPLETE_MEASUREMENTS,
                message=INSUFFICIENT_MEASUREMENTS,
                result=CostResult.zero(),
            )

        strategy = select_strategy(treatment.pricing)
        logger.debug("Pricing treatment with %s strategy", strategy.method.value)

        try:
            return strategy.price(treatment, self._context)
        except CostingError as e:
            logger.warning("Calculation failed (%s): %s", e.kind.value, e.message)
            return CalculationError(kind=e.kind, message=e.message)

    def compute_many(self, treatments: Iterable[TreatmentInput]) -> list[CostOutcome]:
        """Price several treatments independently.

        Args:
            treatments: Treatments to price.

        Returns:
            One outcome per treatment, in input order.
        """
        outcomes = [self.compute_cost(treatment) for treatment in treatments]
        failed = sum(1 for outcome in outcomes if outcome.is_error)
        logger.info(
            "Priced %d treatment(s): %d ok, %d failed",
            len(outcomes),
            len(outcomes) - failed,
            failed,
        )
        return outcomes
