"""Application commands (use cases) for treatment quoting."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from treatments.application.config import (
    QuoteConfiguration,
    config_to_input,
    config_to_settings,
)
from treatments.domain.services.costing import CostingEngine, EngineSettings

from .dtos import QuoteOutput

logger = logging.getLogger(__name__)


class PriceQuoteCommand:
    """Command to price validated quote configurations.

    Each quote may carry its own settings overrides, so an engine is built
    per distinct settings value.
    """

    def __init__(
        self,
        engine_factory: Callable[[EngineSettings], CostingEngine] | None = None,
    ) -> None:
        self.engine_factory = engine_factory or CostingEngine

    def execute(self, config: QuoteConfiguration) -> QuoteOutput:
        """Price one quote.

        Args:
            config: A validated quote configuration.

        Returns:
            QuoteOutput with the cost estimate or calculation error.
        """
        settings = config_to_settings(config)
        treatment = config_to_input(config)
        outcome = self.engine_factory(settings).compute_cost(treatment)
        if outcome.is_error:
            logger.debug("Quote %s did not price: %s", config.reference, outcome.message)
        return QuoteOutput(
            reference=config.reference,
            treatment=treatment,
            settings=settings,
            outcome=outcome,
        )

    def execute_many(self, configs: Iterable[QuoteConfiguration]) -> list[QuoteOutput]:
        """Price several quotes independently, in input order."""
        outputs = [self.execute(config) for config in configs]
        logger.info(
            "Priced %d quote(s), %d with errors",
            len(outputs),
            sum(1 for output in outputs if not output.is_valid),
        )
        return outputs
