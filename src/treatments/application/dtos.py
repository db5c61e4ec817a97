"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from treatments.domain.services.costing import (
    CalculationError,
    CostEstimate,
    CostOutcome,
    EngineSettings,
)
from treatments.domain.value_objects import TreatmentInput


@dataclass
class QuoteOutput:
    """Output DTO for a priced quote.

    Attributes:
        reference: Quote or job reference from the quote file, if any.
        treatment: Domain input the quote was priced from.
        settings: Engine settings used for the calculation.
        outcome: Cost estimate, or the calculation error.
    """

    reference: str | None
    treatment: TreatmentInput
    settings: EngineSettings
    outcome: CostOutcome

    @property
    def is_valid(self) -> bool:
        """Check if the quote priced without a calculation error."""
        return not self.outcome.is_error

    @property
    def estimate(self) -> CostEstimate | None:
        return self.outcome if isinstance(self.outcome, CostEstimate) else None

    @property
    def error(self) -> CalculationError | None:
        return self.outcome if isinstance(self.outcome, CalculationError) else None
