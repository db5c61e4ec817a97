"""Domain services for treatment costing.

This package provides the costing engine and its calculators:
- Fabric requirement, labor and add-on calculation
- Pricing grid lookup
- Pricing strategy selection and markup
"""

from .costing import (
    CalculationError,
    CostEstimate,
    CostingEngine,
    CostOutcome,
    CostResult,
    EngineSettings,
    ErrorKind,
    PricingGridResolver,
)

__all__ = [
    "CalculationError",
    "CostEstimate",
    "CostingEngine",
    "CostOutcome",
    "CostResult",
    "EngineSettings",
    "ErrorKind",
    "PricingGridResolver",
]
