"""Adapter to convert QuoteConfiguration into domain objects.

This module turns the Pydantic quote schema into the frozen value objects
and engine settings the costing engine consumes.
"""

from treatments.application.config.schemas import (
    FabricConfig,
    FixedPricingConfig,
    FormulaPricingConfig,
    GridPricingConfig,
    LinearPricingConfig,
    MeasurementsConfig,
    OptionsConfig,
    PerDropPricingConfig,
    PerSquareMetrePricingConfig,
    QuoteConfiguration,
)
from treatments.domain.services.costing import HOURS_PER_UNIT, LINING_PRICES, EngineSettings
from treatments.domain.value_objects import (
    DropBand,
    FabricSpec,
    FeatureSelection,
    FixedPricing,
    FormulaDrivenPricing,
    GridCell,
    GridPricing,
    GridRow,
    HemConfiguration,
    LinearPricing,
    MakingCostRule,
    Measurements,
    PerDropPricing,
    PerSquareMetrePricing,
    PricingConfiguration,
    TreatmentInput,
    TreatmentOptions,
)


def _measurements(config: MeasurementsConfig) -> Measurements:
    return Measurements(
        rail_width=config.rail_width,
        drop=config.drop,
        pooling=config.pooling,
        return_depth=config.return_depth,
        quantity=config.quantity,
    )


def _fabric(config: FabricConfig) -> FabricSpec:
    return FabricSpec(
        roll_width=config.roll_width,
        price_per_unit=config.price_per_unit,
        vertical_repeat=config.vertical_repeat,
        horizontal_repeat=config.horizontal_repeat,
        orientation=config.orientation,
        name=config.name,
    )


def _options(config: OptionsConfig) -> TreatmentOptions:
    hems = None
    if config.hem_configuration is not None:
        hems = HemConfiguration(
            header_hem=config.hem_configuration.header_hem,
            bottom_hem=config.hem_configuration.bottom_hem,
            side_hem=config.hem_configuration.side_hem,
            seam_hem=config.hem_configuration.seam_hem,
            waste_percent=config.hem_configuration.waste_percent,
        )
    return TreatmentOptions(
        category=config.category,
        fullness_ratio=config.fullness_ratio,
        heading_style=config.heading_style,
        lining=config.lining,
        features=tuple(
            FeatureSelection(
                name=feature.name,
                unit_price=feature.unit_price,
                selected=feature.selected,
            )
            for feature in config.features
        ),
        hem_configuration=hems,
    )


def config_to_grid(config: GridPricingConfig) -> GridPricing:
    """Convert a grid schema into the domain pricing grid."""
    return GridPricing(
        rows=tuple(
            GridRow(
                drop_min=row.drop_min,
                drop_max=row.drop_max,
                cells=tuple(
                    GridCell(
                        width_min=cell.width_min,
                        width_max=cell.width_max,
                        price=cell.price,
                    )
                    for cell in row.cells
                ),
            )
            for row in config.rows
        )
    )


def config_to_pricing(
    config: LinearPricingConfig
    | FixedPricingConfig
    | GridPricingConfig
    | FormulaPricingConfig
    | PerDropPricingConfig
    | PerSquareMetrePricingConfig,
) -> PricingConfiguration:
    """Convert a pricing schema into its domain pricing configuration.

    Raises:
        TypeError: If the schema is not a known pricing variant.
    """
    if isinstance(config, LinearPricingConfig):
        return LinearPricing(price_per_unit=config.price_per_unit)
    if isinstance(config, FixedPricingConfig):
        return FixedPricing(unit_price=config.unit_price)
    if isinstance(config, GridPricingConfig):
        return config_to_grid(config)
    if isinstance(config, FormulaPricingConfig):
        rule = config.making_cost_rule
        return FormulaDrivenPricing(
            making_cost_rule=MakingCostRule(
                base_making_cost=rule.base_making_cost,
                pricing_unit=rule.pricing_unit,
                height_surcharges_enabled=rule.height_surcharges_enabled,
                height_surcharge_threshold=rule.height_surcharge_threshold,
                height_surcharge_amount=rule.height_surcharge_amount,
            ),
            labor_rate=config.labor_rate,
            markup_percentage=config.markup_percentage,
        )
    if isinstance(config, PerDropPricingConfig):
        return PerDropPricing(
            bands=tuple(
                DropBand(
                    drop_min=band.drop_min,
                    drop_max=band.drop_max,
                    price=band.price,
                )
                for band in config.bands
            )
        )
    if isinstance(config, PerSquareMetrePricingConfig):
        return PerSquareMetrePricing(
            price_per_square_metre=config.price_per_square_metre
        )
    raise TypeError(f"Unsupported pricing schema: {type(config).__name__}")


def config_to_input(config: QuoteConfiguration) -> TreatmentInput:
    """Convert a QuoteConfiguration to a TreatmentInput.

    Args:
        config: A validated QuoteConfiguration instance

    Returns:
        TreatmentInput ready for CostingEngine.compute_cost

    Example:
        >>> config = load_config(Path("living-room.json"))
        >>> outcome = CostingEngine(config_to_settings(config)).compute_cost(
        ...     config_to_input(config)
        ... )
    """
    return TreatmentInput(
        measurements=_measurements(config.measurements),
        fabric=_fabric(config.fabric),
        options=_options(config.options),
        pricing=config_to_pricing(config.pricing),
    )


def config_to_settings(config: QuoteConfiguration) -> EngineSettings:
    """Build engine settings from a quote's optional settings overrides.

    Omitted fields keep the engine defaults. Partial hour and lining maps
    are merged over the default maps.
    """
    settings = config.settings
    if settings is None:
        return EngineSettings()

    overrides: dict[str, object] = {}
    for name in (
        "header_hem",
        "bottom_hem",
        "default_labor_rate",
        "default_markup_percentage",
    ):
        value = getattr(settings, name)
        if value is not None:
            overrides[name] = value
    if settings.hours_per_unit:
        overrides["hours_per_unit"] = {**HOURS_PER_UNIT, **settings.hours_per_unit}
    if settings.lining_prices:
        overrides["lining_prices"] = {**LINING_PRICES, **settings.lining_prices}

    if settings.selling_unit == "m":
        return EngineSettings.metric(**overrides)
    return EngineSettings(**overrides)  # type: ignore[arg-type]
