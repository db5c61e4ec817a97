"""Treatment option value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TreatmentCategory(str, Enum):
    """Treatment category, selects the fabric and labor formula branch."""

    CURTAIN = "curtain"
    BLIND = "blind"


class LiningKind(str, Enum):
    """Lining applied behind curtain fabric."""

    NONE = "none"
    STANDARD = "standard"
    BLACKOUT = "blackout"
    THERMAL = "thermal"


@dataclass(frozen=True)
class FeatureSelection:
    """Optional add-on line item offered for a treatment.

    Attributes:
        name: Display name of the feature.
        unit_price: Price per panel or piece.
        selected: Whether the customer chose the feature.
    """

    name: str
    unit_price: float
    selected: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Feature name must not be empty")
        if self.unit_price < 0:
            raise ValueError("Feature unit price must be non-negative")


@dataclass(frozen=True)
class HemConfiguration:
    """Template-configured hem allowances.

    Presence of a hem configuration switches curtains to the configured
    fabric formula, which also accounts for side hems, seams and waste.

    Attributes:
        header_hem: Allowance folded into the heading.
        bottom_hem: Allowance folded into the bottom hem.
        side_hem: Allowance per side of each panel.
        seam_hem: Allowance consumed per seam join.
        waste_percent: Extra fabric ordered on top of the cut length.
    """

    header_hem: float
    bottom_hem: float
    side_hem: float = 0.0
    seam_hem: float = 0.0
    waste_percent: float = 0.0

    def __post_init__(self) -> None:
        if min(self.header_hem, self.bottom_hem, self.side_hem, self.seam_hem) < 0:
            raise ValueError("Hem allowances must be non-negative")
        if self.waste_percent < 0:
            raise ValueError("Waste percent must be non-negative")

    @property
    def hem_allowance(self) -> float:
        """Header plus bottom hem."""
        return self.header_hem + self.bottom_hem


@dataclass(frozen=True)
class TreatmentOptions:
    """Heading, lining and add-on choices for a treatment.

    Attributes:
        category: Curtain or blind.
        fullness_ratio: Fabric-width-to-rail-width multiplier (curtains).
        heading_style: Heading name, shown in breakdowns.
        lining: Lining kind (curtains only).
        features: Offered add-ons with their selection state.
        hem_configuration: Optional template hem configuration.
    """

    category: TreatmentCategory
    fullness_ratio: float = 2.0
    heading_style: str = "standard"
    lining: LiningKind = LiningKind.NONE
    features: tuple[FeatureSelection, ...] = field(default_factory=tuple)
    hem_configuration: HemConfiguration | None = None

    def __post_init__(self) -> None:
        if self.fullness_ratio <= 0:
            raise ValueError("Fullness ratio must be positive")
        # Lists from callers are stored as tuples
        if not isinstance(self.features, tuple):
            object.__setattr__(self, "features", tuple(self.features))

    @property
    def is_blind(self) -> bool:
        return self.category == TreatmentCategory.BLIND

    @property
    def selected_features(self) -> tuple[FeatureSelection, ...]:
        """Features the customer selected."""
        return tuple(f for f in self.features if f.selected)
