"""Costing engine configuration.

This module provides EngineSettings, the settings provider for the
costing engine: unit conversion, standard hems, labor defaults and lining
prices.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from treatments.domain.value_objects import LiningKind, TreatmentCategory

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
    SELLING_UNIT_METRE,
    SELLING_UNIT_YARD,
)


@dataclass(frozen=True)
class EngineSettings:
    """Settings for the costing engine.

    Attributes:
        measurement_unit: Unit all measurements are given in.
        selling_unit: Unit fabric is sold in (e.g. "yd" or "m").
        selling_unit_length: Length of one selling unit in measurement units.
        length_units_per_metre: Measurement units per metre, used by
            per-linear-metre and per-square-metre making costs.
        header_hem: Standard header hem for the standard curtain formula.
        bottom_hem: Standard bottom hem for the standard curtain formula.
        hours_per_unit: Estimated making hours per piece by category.
        lining_prices: Lining price per selling unit of fabric.
        default_labor_rate: Hourly rate used when a template omits one.
        default_markup_percentage: Markup used when a template omits one.
    """

    measurement_unit: str = MEASUREMENT_UNIT
    selling_unit: str = SELLING_UNIT_YARD
    selling_unit_length: float = CM_PER_YARD
    length_units_per_metre: float = CM_PER_METRE
    header_hem: float = HEADER_HEM
    bottom_hem: float = BOTTOM_HEM
    hours_per_unit: Mapping[TreatmentCategory, float] = field(
        default_factory=lambda: MappingProxyType(dict(HOURS_PER_UNIT)),
        hash=False,
    )
    lining_prices: Mapping[LiningKind, float] = field(
        default_factory=lambda: MappingProxyType(dict(LINING_PRICES)),
        hash=False,
    )
    default_labor_rate: float = DEFAULT_LABOR_RATE
    default_markup_percentage: float = DEFAULT_MARKUP_PERCENTAGE

    def __post_init__(self) -> None:
        if self.selling_unit_length <= 0:
            raise ValueError("selling_unit_length must be positive")
        if self.length_units_per_metre <= 0:
            raise ValueError("length_units_per_metre must be positive")
        if self.header_hem < 0 or self.bottom_hem < 0:
            raise ValueError("Standard hems must be non-negative")
        if self.default_markup_percentage < 0:
            raise ValueError("default_markup_percentage must be non-negative")
        for category in TreatmentCategory:
            if self.hours_per_unit.get(category, 0) <= 0:
                raise ValueError(f"hours_per_unit for {category.value} must be positive")
        # Mappings are stored read-only
        if not isinstance(self.hours_per_unit, MappingProxyType):
            object.__setattr__(
                self, "hours_per_unit", MappingProxyType(dict(self.hours_per_unit))
            )
        if not isinstance(self.lining_prices, MappingProxyType):
            object.__setattr__(
                self, "lining_prices", MappingProxyType(dict(self.lining_prices))
            )

    @classmethod
    def metric(cls, **overrides: object) -> "EngineSettings":
        """Settings that sell fabric by the metre instead of the yard."""
        values: dict[str, object] = {
            "selling_unit": SELLING_UNIT_METRE,
            "selling_unit_length": CM_PER_METRE,
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]

    @property
    def selling_unit_area(self) -> float:
        """Area of one square selling unit in square measurement units."""
        return self.selling_unit_length**2

    @property
    def standard_hem_allowance(self) -> float:
        """Header plus bottom hem of the standard curtain formula."""
        return self.header_hem + self.bottom_hem

    def to_selling_units(self, length: float) -> float:
        """Convert a length in measurement units to selling units."""
        return length / self.selling_unit_length

    def lining_price(self, lining: LiningKind) -> float:
        """Price per selling unit for a lining kind (0 when unpriced)."""
        return self.lining_prices.get(lining, 0.0)
