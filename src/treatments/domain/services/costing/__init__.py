"""Treatment costing domain services and data models.

This package provides:
- Engine settings and unit/hem/labor constants
- Pricing grid lookup
- Fabric requirement formulas (blind, standard curtain, configured curtain)
- Labor/making cost and add-on aggregation
- Pricing strategies (grid, linear, fixed, formula, per drop, per square metre)
- CostingEngine service tying them together
"""

from __future__ import annotations

# Re-export constants
from .constants import (
    BOTTOM_HEM,
    CM_PER_METRE,
    CM_PER_YARD,
    DEFAULT_LABOR_RATE,
    DEFAULT_MARKUP_PERCENTAGE,
    HEADER_HEM,
    HOURS_PER_UNIT,
    LINING_PRICES,
    MEASUREMENT_UNIT,
)

# Re-export config
from .config import EngineSettings

# Re-export errors
from .errors import (
    CostingError,
    ErrorKind,
    InvalidFabricSpecError,
    InvalidLaborConfigurationError,
    NoPriceMatchError,
)

# Re-export models
from .models import (
    NOT_APPLICABLE,
    Breakdown,
    CalculationError,
    CostEstimate,
    CostOutcome,
    CostResult,
    FabricRequirement,
    FeatureCost,
    GridLookup,
    GridMatch,
    LaborEstimate,
    LineItem,
    NoMatch,
)

# Re-export calculators
from .grid_resolver import PricingGridResolver
from .fabric_calculator import (
    BlindFabricFormula,
    ConfiguredFabricFormula,
    FabricFormula,
    FabricRequirementCalculator,
    StandardFabricFormula,
    count_widths,
    round_up_to_repeat,
    select_fabric_formula,
)
from .labor_calculator import LaborCalculator
from .feature_aggregator import FeatureAggregator

# Re-export pricing strategies (Strategy pattern)
from .pricing_strategies import (
    PRICING_STRATEGIES,
    CostingContext,
    FabricBasedStrategy,
    FixedStrategy,
    FormulaDrivenStrategy,
    GridStrategy,
    LinearStrategy,
    PerDropStrategy,
    PerSquareMetreStrategy,
    PricingStrategy,
    apply_markup,
    pricing_of,
    select_strategy,
)

# Re-export facade
from .costing_facade import INSUFFICIENT_MEASUREMENTS, CostingEngine

__all__ = [
    # Constants
    "BOTTOM_HEM",
    "CM_PER_METRE",
    "CM_PER_YARD",
    "DEFAULT_LABOR_RATE",
    "DEFAULT_MARKUP_PERCENTAGE",
    "HEADER_HEM",
    "HOURS_PER_UNIT",
    "LINING_PRICES",
    "MEASUREMENT_UNIT",
    # Config
    "EngineSettings",
    # Errors
    "CostingError",
    "ErrorKind",
    "InvalidFabricSpecError",
    "InvalidLaborConfigurationError",
    "NoPriceMatchError",
    # Models
    "NOT_APPLICABLE",
    "Breakdown",
    "CalculationError",
    "CostEstimate",
    "CostOutcome",
    "CostResult",
    "FabricRequirement",
    "FeatureCost",
    "GridLookup",
    "GridMatch",
    "LaborEstimate",
    "LineItem",
    "NoMatch",
    # Calculators
    "PricingGridResolver",
    "BlindFabricFormula",
    "ConfiguredFabricFormula",
    "FabricFormula",
    "FabricRequirementCalculator",
    "StandardFabricFormula",
    "count_widths",
    "round_up_to_repeat",
    "select_fabric_formula",
    "LaborCalculator",
    "FeatureAggregator",
    # Pricing strategies
    "PRICING_STRATEGIES",
    "CostingContext",
    "FabricBasedStrategy",
    "FixedStrategy",
    "FormulaDrivenStrategy",
    "GridStrategy",
    "LinearStrategy",
    "PerDropStrategy",
    "PerSquareMetreStrategy",
    "PricingStrategy",
    "apply_markup",
    "pricing_of",
    "select_strategy",
    # Facade
    "INSUFFICIENT_MEASUREMENTS",
    "CostingEngine",
]
