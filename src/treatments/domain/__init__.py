"""Domain layer - core business logic."""

from .services import (
    CalculationError,
    CostEstimate,
    CostingEngine,
    CostOutcome,
    CostResult,
    EngineSettings,
    ErrorKind,
    PricingGridResolver,
)
from .value_objects import (
    FabricSpec,
    Measurements,
    PricingMethod,
    TreatmentCategory,
    TreatmentInput,
    TreatmentOptions,
)

__all__ = [
    "CalculationError",
    "CostEstimate",
    "CostingEngine",
    "CostOutcome",
    "CostResult",
    "EngineSettings",
    "ErrorKind",
    "FabricSpec",
    "Measurements",
    "PricingGridResolver",
    "PricingMethod",
    "TreatmentCategory",
    "TreatmentInput",
    "TreatmentOptions",
]
