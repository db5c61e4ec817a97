"""Pydantic schemas for quote configuration files.

A quote file carries everything needed to price one treatment: the
measurements, the fabric, the making options, the pricing method and
optional engine settings overrides. Pricing is discriminated on its
``method`` field.
"""

from typing import Annotated, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from treatments.domain.value_objects import (
    LiningKind,
    Orientation,
    PricingUnit,
    TreatmentCategory,
)

# Supported schema versions for quote files
# Version 1.0: Initial schema with linear, fixed, grid and formula pricing
# Version 1.1: Added hem configuration and engine settings overrides
# Version 1.2: Added per_drop and per_sqm manufacturing pricing
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1", "1.2"})


class MeasurementsConfig(BaseModel):
    """Treatment measurements in the measurement unit (centimetres).

    Zero rail width or drop is accepted; such a quote prices as
    incomplete rather than failing validation.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    rail_width: float = Field(..., ge=0)
    drop: float = Field(..., ge=0)
    pooling: float = Field(default=0.0, ge=0)
    return_depth: float = Field(default=0.0, ge=0)
    quantity: int = Field(default=1, ge=1, le=100)


class FabricConfig(BaseModel):
    """Fabric catalog entry.

    Attributes:
        name: Catalog name (optional).
        roll_width: Usable width of the roll.
        price_per_unit: Price per selling unit.
        vertical_repeat: Pattern repeat along the roll length.
        horizontal_repeat: Pattern repeat across the roll width.
        orientation: vertical (standard) or horizontal (railroaded).
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    name: str = ""
    roll_width: float = Field(..., ge=0)
    price_per_unit: float = Field(default=0.0, ge=0)
    vertical_repeat: float = Field(default=0.0, ge=0)
    horizontal_repeat: float = Field(default=0.0, ge=0)
    orientation: Orientation = Orientation.VERTICAL


class FeatureConfig(BaseModel):
    """Optional priced add-on."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    name: str = Field(..., min_length=1)
    unit_price: float = Field(..., ge=0)
    selected: bool = True


class HemConfigurationConfig(BaseModel):
    """Template hem allowances for the configured curtain formula."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    header_hem: float = Field(..., ge=0)
    bottom_hem: float = Field(..., ge=0)
    side_hem: float = Field(default=0.0, ge=0)
    seam_hem: float = Field(default=0.0, ge=0)
    waste_percent: float = Field(default=0.0, ge=0, le=100)


class OptionsConfig(BaseModel):
    """Making options of a treatment.

    Attributes:
        category: curtain or blind.
        fullness_ratio: Fabric width to rail width multiplier (curtains).
        heading_style: Heading style label.
        lining: Lining kind (curtains only).
        features: Selectable add-ons.
        hem_configuration: Template hems; switches curtains to the
            configured formula.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    category: TreatmentCategory
    fullness_ratio: float = Field(default=2.0, gt=0, le=5.0)
    heading_style: str = "standard"
    lining: LiningKind = LiningKind.NONE
    features: list[FeatureConfig] = Field(default_factory=list, max_length=50)
    hem_configuration: HemConfigurationConfig | None = None


class LinearPricingConfig(BaseModel):
    """Fabric priced per selling unit consumed."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    method: Literal["linear"]
    price_per_unit: float = Field(..., ge=0)


class FixedPricingConfig(BaseModel):
    """Flat price per piece."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    method: Literal["fixed"]
    unit_price: float = Field(..., ge=0)


class GridCellConfig(BaseModel):
    """Inclusive width range and its price."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    width_min: float = Field(..., ge=0)
    width_max: float = Field(..., ge=0)
    price: float = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_range(self) -> "GridCellConfig":
        """Ensure width_min does not exceed width_max."""
        if self.width_min > self.width_max:
            raise ValueError(
                f"width_min ({self.width_min}) must not exceed "
                f"width_max ({self.width_max})"
            )
        return self


class GridRowConfig(BaseModel):
    """Inclusive drop range and the width cells priced within it."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    drop_min: float = Field(..., ge=0)
    drop_max: float = Field(..., ge=0)
    cells: list[GridCellConfig] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_range(self) -> "GridRowConfig":
        """Ensure drop_min does not exceed drop_max."""
        if self.drop_min > self.drop_max:
            raise ValueError(
                f"drop_min ({self.drop_min}) must not exceed "
                f"drop_max ({self.drop_max})"
            )
        return self


class GridPricingConfig(BaseModel):
    """Supplier pricing grid."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    method: Literal["grid"]
    rows: list[GridRowConfig] = Field(..., min_length=1)


class DropBandConfig(BaseModel):
    """Inclusive drop range and its making price per piece."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    drop_min: float = Field(..., ge=0)
    drop_max: float = Field(..., ge=0)
    price: float = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_range(self) -> "DropBandConfig":
        """Ensure drop_min does not exceed drop_max."""
        if self.drop_min > self.drop_max:
            raise ValueError(
                f"drop_min ({self.drop_min}) must not exceed "
                f"drop_max ({self.drop_max})"
            )
        return self


class PerDropPricingConfig(BaseModel):
    """Curtain manufacturing price list by drop height."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    method: Literal["per_drop"]
    bands: list[DropBandConfig] = Field(..., min_length=1)


class PerSquareMetrePricingConfig(BaseModel):
    """Blind manufacturing price per square metre of finished blind."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    method: Literal["per_sqm"]
    price_per_square_metre: float = Field(..., ge=0)


class MakingCostRuleConfig(BaseModel):
    """Template making-cost rule."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    base_making_cost: float = Field(..., ge=0)
    pricing_unit: PricingUnit = PricingUnit.PER_UNIT
    height_surcharges_enabled: bool = False
    height_surcharge_threshold: float | None = Field(default=None, ge=0)
    height_surcharge_amount: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def validate_surcharge(self) -> "MakingCostRuleConfig":
        """Require a threshold when height surcharges are enabled."""
        if self.height_surcharges_enabled and self.height_surcharge_threshold is None:
            raise ValueError(
                "height_surcharge_threshold is required when "
                "height_surcharges_enabled is true"
            )
        return self


class FormulaPricingConfig(BaseModel):
    """Template formula pricing.

    Omitted labor_rate or markup_percentage fall back to the engine settings.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    method: Literal["formula"]
    making_cost_rule: MakingCostRuleConfig
    labor_rate: float | None = Field(default=None, ge=0)
    markup_percentage: float | None = Field(default=None, ge=0, le=1000)


PricingConfig = Annotated[
    Union[
        LinearPricingConfig,
        FixedPricingConfig,
        GridPricingConfig,
        FormulaPricingConfig,
        PerDropPricingConfig,
        PerSquareMetrePricingConfig,
    ],
    Field(discriminator="method"),
]


class SettingsConfig(BaseModel):
    """Engine settings overrides.

    Every field is optional; omitted fields keep the engine defaults.
    Partial hours_per_unit and lining_prices maps are merged over the
    defaults.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    selling_unit: Literal["yd", "m"] = "yd"
    header_hem: float | None = Field(default=None, ge=0)
    bottom_hem: float | None = Field(default=None, ge=0)
    default_labor_rate: float | None = Field(default=None, ge=0)
    default_markup_percentage: float | None = Field(default=None, ge=0, le=1000)
    hours_per_unit: dict[TreatmentCategory, float] | None = None
    lining_prices: dict[LiningKind, float] | None = None

    @field_validator("hours_per_unit")
    @classmethod
    def validate_hours(
        cls, v: dict[TreatmentCategory, float] | None
    ) -> dict[TreatmentCategory, float] | None:
        """Ensure every hour estimate is positive."""
        if v is not None:
            for category, hours in v.items():
                if hours <= 0:
                    raise ValueError(
                        f"hours_per_unit for {category.value} must be positive"
                    )
        return v

    @field_validator("lining_prices")
    @classmethod
    def validate_lining_prices(
        cls, v: dict[LiningKind, float] | None
    ) -> dict[LiningKind, float] | None:
        """Ensure every lining price is non-negative."""
        if v is not None:
            for lining, price in v.items():
                if price < 0:
                    raise ValueError(
                        f"lining price for {lining.value} must be non-negative"
                    )
        return v


class QuoteConfiguration(BaseModel):
    """Root model of a quote file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0").
        reference: Optional quote or job reference shown in reports.
        measurements: Treatment measurements.
        fabric: Fabric catalog entry.
        options: Making options.
        pricing: Pricing method, discriminated on ``method``.
        settings: Optional engine settings overrides.

    Example:
        >>> config = QuoteConfiguration.model_validate({
        ...     "schema_version": "1.0",
        ...     "measurements": {"rail_width": 100, "drop": 120},
        ...     "fabric": {"roll_width": 140},
        ...     "options": {"category": "blind"},
        ...     "pricing": {"method": "linear", "price_per_unit": 20},
        ... })
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    reference: str | None = None
    measurements: MeasurementsConfig
    fabric: FabricConfig
    options: OptionsConfig
    pricing: PricingConfig
    settings: SettingsConfig | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
