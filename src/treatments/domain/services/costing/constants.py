"""Costing constants for units, hems, labor and lining.

This module provides:
- Unit conversion constants between measurement and selling units
- Default hem allowances for the standard curtain formula
- Estimated making hours per piece by treatment category
- Lining prices per selling unit of fabric
- Default labor rate and markup used when a template omits them

Calculators never read these directly; they reach them through
EngineSettings so a deployment can swap units or rates.
"""

from __future__ import annotations

from treatments.domain.value_objects import LiningKind, TreatmentCategory


# --- Units ---

MEASUREMENT_UNIT = "cm"

# Selling unit lengths expressed in measurement units (cm)
CM_PER_YARD: float = 91.44
CM_PER_METRE: float = 100.0

SELLING_UNIT_YARD = "yd"
SELLING_UNIT_METRE = "m"


# --- Standard curtain hems (cm) ---

HEADER_HEM: float = 15.0
BOTTOM_HEM: float = 10.0


# --- Labor ---

# Estimated making hours per piece when no making-cost rule is configured
HOURS_PER_UNIT: dict[TreatmentCategory, float] = {
    TreatmentCategory.BLIND: 1.5,
    TreatmentCategory.CURTAIN: 3.0,
}

DEFAULT_LABOR_RATE: float = 45.0  # per hour
DEFAULT_MARKUP_PERCENTAGE: float = 40.0


# --- Lining ---

# Price per selling unit of fabric consumed
LINING_PRICES: dict[LiningKind, float] = {
    LiningKind.NONE: 0.0,
    LiningKind.STANDARD: 8.50,
    LiningKind.BLACKOUT: 12.00,
    LiningKind.THERMAL: 15.00,
}

# Decimal places the configured curtain formula rounds fabric quantities to
CONFIGURED_QUANTITY_PRECISION = 2

# A seam join takes the seam hem from both joined widths
SEAM_SIDES = 2
