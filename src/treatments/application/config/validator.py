"""Validation structures and quoting advisory checks.

This module provides validation result structures and the checks run by
``treatments validate``: blocking errors for quotes the engine cannot
price, and warnings for quotes that price but probably not as intended.
"""

from dataclasses import dataclass, field
from typing import Any

from treatments.application.config.adapter import config_to_grid
from treatments.application.config.schemas import (
    FormulaPricingConfig,
    GridPricingConfig,
    PerDropPricingConfig,
    PerSquareMetrePricingConfig,
    QuoteConfiguration,
)
from treatments.domain.services.costing import NoMatch, PricingGridResolver
from treatments.domain.value_objects import LiningKind, TreatmentCategory

# Typical fullness range for gathered and pleated headings
MIN_RECOMMENDED_FULLNESS = 1.5
MAX_RECOMMENDED_FULLNESS = 3.5


@dataclass
class ValidationError:
    """Blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "pricing.rows[0]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the quote has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_measurement_advisories(config: QuoteConfiguration) -> ValidationResult:
    """Warn when the quote will price as incomplete."""
    result = ValidationResult()
    measurements = config.measurements
    for name in ("rail_width", "drop"):
        if getattr(measurements, name) == 0:
            result.add_warning(
                path=f"measurements.{name}",
                message=f"{name} is zero; the quote will price as insufficient measurements",
                suggestion=f"Measure the {name.replace('_', ' ')} before quoting",
            )
    return result


def check_fabric_advisories(config: QuoteConfiguration) -> ValidationResult:
    """Check the fabric against the treatment it is used for.

    Advisories checked:
    - Curtains need a positive roll width (error)
    - Horizontal repeat wider than the roll
    - Vertical repeat longer than the drop
    """
    result = ValidationResult()
    fabric = config.fabric
    is_curtain = config.options.category == TreatmentCategory.CURTAIN

    if is_curtain and fabric.roll_width <= 0:
        result.add_error(
            path="fabric.roll_width",
            message="Curtains need a positive roll width to count fabric widths",
            value=fabric.roll_width,
        )

    if fabric.roll_width > 0 and fabric.horizontal_repeat > fabric.roll_width:
        result.add_warning(
            path="fabric.horizontal_repeat",
            message=(
                f"Horizontal repeat ({fabric.horizontal_repeat:g}) is wider than "
                f"the roll ({fabric.roll_width:g})"
            ),
            suggestion="Check the repeat was entered in the measurement unit",
        )

    drop = config.measurements.drop
    if drop > 0 and fabric.vertical_repeat > drop:
        result.add_warning(
            path="fabric.vertical_repeat",
            message=(
                f"Vertical repeat ({fabric.vertical_repeat:g}) is longer than "
                f"the drop ({drop:g}); expect significant waste"
            ),
        )
    return result


def check_option_advisories(config: QuoteConfiguration) -> ValidationResult:
    """Check making options for settings that will be ignored or look wrong."""
    result = ValidationResult()
    options = config.options

    if options.category == TreatmentCategory.BLIND:
        selected = [f.name for f in options.features if f.selected]
        if selected:
            result.add_warning(
                path="options.features",
                message=f"Features are not charged for blinds: {', '.join(selected)}",
            )
        if options.lining != LiningKind.NONE:
            result.add_warning(
                path="options.lining",
                message="Lining is not charged for blinds",
            )
        if options.hem_configuration is not None:
            result.add_warning(
                path="options.hem_configuration",
                message="Hem configuration only applies to curtains and will be ignored",
            )
        return result

    if not MIN_RECOMMENDED_FULLNESS <= options.fullness_ratio <= MAX_RECOMMENDED_FULLNESS:
        result.add_warning(
            path="options.fullness_ratio",
            message=(
                f"Fullness ratio of {options.fullness_ratio:g} is outside the usual "
                f"{MIN_RECOMMENDED_FULLNESS:g}-{MAX_RECOMMENDED_FULLNESS:g} range"
            ),
            suggestion="Use 2.0-2.5 for pinch pleat and 1.5-2.0 for wave headings",
        )
    return result


def _ranges_overlap(a_min: float, a_max: float, b_min: float, b_max: float) -> bool:
    return a_min <= b_max and b_min <= a_max


def check_grid_advisories(
    config: QuoteConfiguration, grid: GridPricingConfig
) -> ValidationResult:
    """Check a pricing grid for overlaps and coverage of the quoted size.

    Overlapping ranges are a warning since the first match in table order
    wins. A quoted size no row or cell covers is an error.
    """
    result = ValidationResult()

    for i, row in enumerate(grid.rows):
        for j in range(i + 1, len(grid.rows)):
            other = grid.rows[j]
            if _ranges_overlap(row.drop_min, row.drop_max, other.drop_min, other.drop_max):
                result.add_warning(
                    path=f"pricing.rows[{j}]",
                    message=f"Drop range overlaps pricing.rows[{i}]; the earlier row wins",
                )
        for k, cell in enumerate(row.cells):
            for m in range(k + 1, len(row.cells)):
                other_cell = row.cells[m]
                if _ranges_overlap(
                    cell.width_min, cell.width_max, other_cell.width_min, other_cell.width_max
                ):
                    result.add_warning(
                        path=f"pricing.rows[{i}].cells[{m}]",
                        message=(
                            f"Width range overlaps pricing.rows[{i}].cells[{k}]; "
                            f"the earlier cell wins"
                        ),
                    )

    measurements = config.measurements
    if measurements.rail_width > 0 and measurements.drop > 0:
        lookup = PricingGridResolver().resolve(
            config_to_grid(grid), measurements.rail_width, measurements.drop
        )
        if isinstance(lookup, NoMatch):
            result.add_error(
                path="pricing.rows",
                message=f"Grid cannot price this size: {lookup.reason}",
                value={"width": measurements.rail_width, "drop": measurements.drop},
            )
    return result


def check_drop_band_advisories(
    config: QuoteConfiguration, pricing: PerDropPricingConfig
) -> ValidationResult:
    """Check a per-drop price list for overlaps and coverage of the drop."""
    result = ValidationResult()
    bands = pricing.bands

    for i, band in enumerate(bands):
        for j in range(i + 1, len(bands)):
            other = bands[j]
            if _ranges_overlap(band.drop_min, band.drop_max, other.drop_min, other.drop_max):
                result.add_warning(
                    path=f"pricing.bands[{j}]",
                    message=f"Drop range overlaps pricing.bands[{i}]; the earlier band wins",
                )

    if config.options.category == TreatmentCategory.BLIND:
        result.add_warning(
            path="pricing.method",
            message="Per-drop pricing is a curtain manufacturing method",
            suggestion="Use per_sqm or grid pricing for blinds",
        )

    drop = config.measurements.drop
    if drop > 0 and not any(band.drop_min <= drop <= band.drop_max for band in bands):
        result.add_error(
            path="pricing.bands",
            message=f"No drop band covers drop {drop:g}",
            value=drop,
        )
    return result


def check_pricing_advisories(config: QuoteConfiguration) -> ValidationResult:
    """Check the pricing method against the options and settings."""
    pricing = config.pricing
    if isinstance(pricing, GridPricingConfig):
        return check_grid_advisories(config, pricing)

    if isinstance(pricing, PerDropPricingConfig):
        return check_drop_band_advisories(config, pricing)

    result = ValidationResult()
    if isinstance(pricing, PerSquareMetrePricingConfig):
        if config.options.category == TreatmentCategory.CURTAIN:
            result.add_warning(
                path="pricing.method",
                message="Per square metre pricing is a blind manufacturing method",
                suggestion="Use per_drop or formula pricing for curtains",
            )
        return result

    if isinstance(pricing, FormulaPricingConfig):
        rule = pricing.making_cost_rule
        if (
            rule.height_surcharges_enabled
            and config.options.category == TreatmentCategory.BLIND
        ):
            result.add_warning(
                path="pricing.making_cost_rule.height_surcharges_enabled",
                message="Height surcharges only apply to curtains and will be ignored",
            )
        return result

    # Linear and fixed pricing estimate labor at the default rate
    settings = config.settings
    if (
        settings is not None
        and settings.default_labor_rate is not None
        and settings.default_labor_rate <= 0
    ):
        result.add_error(
            path="settings.default_labor_rate",
            message=f"{pricing.method.capitalize()} pricing needs a positive labor rate",
            value=settings.default_labor_rate,
        )
    return result


def validate_config(config: QuoteConfiguration) -> ValidationResult:
    """Perform full validation of a quote.

    Structural validation is already handled by Pydantic; this adds the
    quoting advisories.

    Args:
        config: A QuoteConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_measurement_advisories(config))
    result.merge(check_fabric_advisories(config))
    result.merge(check_option_advisories(config))
    result.merge(check_pricing_advisories(config))
    return result
