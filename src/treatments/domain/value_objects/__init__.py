"""Value objects for the treatment costing domain.

This module provides immutable data types used throughout the costing
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Measurements
from ._measurements import Measurements

# Fabric
from ._fabric import FabricSpec, Orientation

# Options
from ._options import (
    FeatureSelection,
    HemConfiguration,
    LiningKind,
    TreatmentCategory,
    TreatmentOptions,
)

# Pricing configuration
from ._pricing import (
    DropBand,
    FixedPricing,
    FormulaDrivenPricing,
    GridCell,
    GridPricing,
    GridRow,
    LinearPricing,
    MakingCostRule,
    PerDropPricing,
    PerSquareMetrePricing,
    PricingConfiguration,
    PricingMethod,
    PricingUnit,
)

# Input aggregate
from ._input import TreatmentInput

__all__ = [
    # Measurements
    "Measurements",
    # Fabric
    "FabricSpec",
    "Orientation",
    # Options
    "FeatureSelection",
    "HemConfiguration",
    "LiningKind",
    "TreatmentCategory",
    "TreatmentOptions",
    # Pricing configuration
    "DropBand",
    "FixedPricing",
    "FormulaDrivenPricing",
    "GridCell",
    "GridPricing",
    "GridRow",
    "LinearPricing",
    "MakingCostRule",
    "PerDropPricing",
    "PerSquareMetrePricing",
    "PricingConfiguration",
    "PricingMethod",
    "PricingUnit",
    # Input aggregate
    "TreatmentInput",
]
