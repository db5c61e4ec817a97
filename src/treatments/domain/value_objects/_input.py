"""Calculation input aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from ._fabric import FabricSpec
from ._measurements import Measurements
from ._options import TreatmentOptions
from ._pricing import PricingConfiguration


@dataclass(frozen=True)
class TreatmentInput:
    """Everything the costing engine needs to price one treatment."""

    measurements: Measurements
    fabric: FabricSpec
    options: TreatmentOptions
    pricing: PricingConfiguration
