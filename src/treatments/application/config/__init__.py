"""Quote file schema and loading system.

This package provides JSON-based quote loading and validation. It
includes Pydantic models for schema validation, a loader with
comprehensive error handling, quoting advisory checks and adapters that
turn a validated quote into costing engine inputs.

Public API:
    - QuoteConfiguration: Root quote model
    - MeasurementsConfig, FabricConfig, OptionsConfig: Treatment models
    - LinearPricingConfig, FixedPricingConfig, GridPricingConfig,
      FormulaPricingConfig, PerDropPricingConfig,
      PerSquareMetrePricingConfig: Pricing method models
    - SettingsConfig: Engine settings overrides
    - load_config: Load a quote from a JSON file
    - load_config_from_dict: Load a quote from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Perform full quote validation
    - config_to_input: Convert a quote to a TreatmentInput
    - config_to_settings: Convert a quote's overrides to EngineSettings

Example:
    >>> from pathlib import Path
    >>> from treatments.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("living-room.json"))
    ...     print(f"Pricing method: {config.pricing.method}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from treatments.application.config.adapter import (
    config_to_grid,
    config_to_input,
    config_to_pricing,
    config_to_settings,
)
from treatments.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from treatments.application.config.schemas import (
    SUPPORTED_VERSIONS,
    DropBandConfig,
    FabricConfig,
    FeatureConfig,
    FixedPricingConfig,
    FormulaPricingConfig,
    GridCellConfig,
    GridPricingConfig,
    GridRowConfig,
    HemConfigurationConfig,
    LinearPricingConfig,
    MakingCostRuleConfig,
    MeasurementsConfig,
    OptionsConfig,
    PerDropPricingConfig,
    PerSquareMetrePricingConfig,
    PricingConfig,
    QuoteConfiguration,
    SettingsConfig,
)
from treatments.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schemas
    "SUPPORTED_VERSIONS",
    "DropBandConfig",
    "FabricConfig",
    "FeatureConfig",
    "FixedPricingConfig",
    "FormulaPricingConfig",
    "GridCellConfig",
    "GridPricingConfig",
    "GridRowConfig",
    "HemConfigurationConfig",
    "LinearPricingConfig",
    "MakingCostRuleConfig",
    "MeasurementsConfig",
    "OptionsConfig",
    "PerDropPricingConfig",
    "PerSquareMetrePricingConfig",
    "PricingConfig",
    "QuoteConfiguration",
    "SettingsConfig",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Validator
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
    # Adapter
    "config_to_grid",
    "config_to_input",
    "config_to_pricing",
    "config_to_settings",
]
