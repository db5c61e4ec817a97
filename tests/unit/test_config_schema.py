"""Unit tests for the quote schema and loader.

These tests verify:
- Valid quotes are loaded correctly
- Pricing is discriminated on the method field
- Range checks and cross-field checks reject bad values
- Unknown fields are rejected (extra="forbid")
- Schema version validation
- Loader error handling (file not found, JSON parse errors, validation)
"""

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from treatments.application.config import (
    SUPPORTED_VERSIONS,
    ConfigError,
    FixedPricingConfig,
    FormulaPricingConfig,
    GridPricingConfig,
    LinearPricingConfig,
    MakingCostRuleConfig,
    MeasurementsConfig,
    OptionsConfig,
    PerDropPricingConfig,
    PerSquareMetrePricingConfig,
    QuoteConfiguration,
    SettingsConfig,
    load_config,
    load_config_from_dict,
)
from treatments.domain.value_objects import LiningKind, Orientation, TreatmentCategory

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _quote(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "measurements": {"rail_width": 300, "drop": 200, "quantity": 2},
        "fabric": {"roll_width": 140, "price_per_unit": 18.70},
        "options": {"category": "curtain"},
        "pricing": {"method": "linear", "price_per_unit": 18.70},
    }
    data.update(overrides)
    return data


class TestMeasurementsConfig:
    """Tests for MeasurementsConfig model."""

    def test_defaults(self) -> None:
        m = MeasurementsConfig(rail_width=300, drop=200)
        assert m.pooling == 0.0
        assert m.return_depth == 0.0
        assert m.quantity == 1

    def test_zero_allowed(self) -> None:
        assert MeasurementsConfig(rail_width=0, drop=0).rail_width == 0

    def test_negative_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            MeasurementsConfig(rail_width=-1, drop=200)

    @pytest.mark.parametrize("quantity", [0, 101])
    def test_quantity_range(self, quantity: int) -> None:
        with pytest.raises(PydanticValidationError):
            MeasurementsConfig(rail_width=300, drop=200, quantity=quantity)


class TestOptionsConfig:
    """Tests for OptionsConfig model."""

    def test_defaults(self) -> None:
        options = OptionsConfig(category=TreatmentCategory.CURTAIN)
        assert options.fullness_ratio == 2.0
        assert options.lining == LiningKind.NONE
        assert options.features == []
        assert options.hem_configuration is None

    def test_category_from_string(self) -> None:
        assert OptionsConfig.model_validate({"category": "blind"}).category == (
            TreatmentCategory.BLIND
        )

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            OptionsConfig.model_validate({"category": "shutter"})

    @pytest.mark.parametrize("ratio", [0, 5.5])
    def test_fullness_range(self, ratio: float) -> None:
        with pytest.raises(PydanticValidationError):
            OptionsConfig(category=TreatmentCategory.CURTAIN, fullness_ratio=ratio)


class TestPricingConfig:
    """Tests for the pricing method union."""

    @pytest.mark.parametrize(
        "pricing,expected",
        [
            ({"method": "linear", "price_per_unit": 18.7}, LinearPricingConfig),
            ({"method": "fixed", "unit_price": 120}, FixedPricingConfig),
            (
                {
                    "method": "grid",
                    "rows": [
                        {
                            "drop_min": 100,
                            "drop_max": 150,
                            "cells": [{"width_min": 80, "width_max": 100, "price": 42.5}],
                        }
                    ],
                },
                GridPricingConfig,
            ),
            (
                {"method": "formula", "making_cost_rule": {"base_making_cost": 40}},
                FormulaPricingConfig,
            ),
            (
                {
                    "method": "per_drop",
                    "bands": [{"drop_min": 0, "drop_max": 250, "price": 45}],
                },
                PerDropPricingConfig,
            ),
            ({"method": "per_sqm", "price_per_square_metre": 30}, PerSquareMetrePricingConfig),
        ],
    )
    def test_discriminated_on_method(self, pricing: dict[str, Any], expected: type) -> None:
        config = QuoteConfiguration.model_validate(_quote(pricing=pricing))
        assert isinstance(config.pricing, expected)

    def test_unknown_method_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate(_quote(pricing={"method": "auction"}))

    def test_fields_of_other_method_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate(
                _quote(pricing={"method": "linear", "unit_price": 120})
            )

    def test_empty_grid_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate(_quote(pricing={"method": "grid", "rows": []}))

    def test_inverted_cell_range_rejected(self) -> None:
        pricing = {
            "method": "grid",
            "rows": [
                {
                    "drop_min": 100,
                    "drop_max": 150,
                    "cells": [{"width_min": 100, "width_max": 80, "price": 42.5}],
                }
            ],
        }
        with pytest.raises(PydanticValidationError, match="must not exceed"):
            QuoteConfiguration.model_validate(_quote(pricing=pricing))

    def test_surcharge_requires_threshold(self) -> None:
        with pytest.raises(PydanticValidationError, match="height_surcharge_threshold"):
            MakingCostRuleConfig(base_making_cost=40, height_surcharges_enabled=True)

    def test_empty_drop_bands_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate(
                _quote(pricing={"method": "per_drop", "bands": []})
            )

    def test_inverted_drop_band_rejected(self) -> None:
        pricing = {
            "method": "per_drop",
            "bands": [{"drop_min": 250, "drop_max": 100, "price": 45}],
        }
        with pytest.raises(PydanticValidationError, match="must not exceed"):
            QuoteConfiguration.model_validate(_quote(pricing=pricing))

    def test_negative_square_metre_price_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PerSquareMetrePricingConfig(method="per_sqm", price_per_square_metre=-1)


class TestNonFiniteNumbers:
    """Infinity and NaN are rejected wherever a number is read."""

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_measurement_rejected(self, value: float) -> None:
        with pytest.raises(PydanticValidationError, match="finite"):
            MeasurementsConfig(rail_width=value, drop=200)

    @pytest.mark.parametrize("field", ["vertical_repeat", "horizontal_repeat"])
    def test_fabric_repeat_rejected(self, field: str) -> None:
        data = _quote(fabric={"roll_width": 140, field: float("inf")})
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.details[0]["path"] == f"fabric.{field}"
        assert exc_info.value.details[0]["error_type"] == "finite_number"

    def test_rail_width_error_has_json_path(self) -> None:
        data = _quote(measurements={"rail_width": float("inf"), "drop": 200})
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        detail = exc_info.value.details[0]
        assert detail["path"] == "measurements.rail_width"
        # Reported as text so the details stay JSON-serializable
        assert detail["value"] == "inf"

    def test_infinity_literal_in_file(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "infinite_rail_width.json")
        assert exc_info.value.error_type == "validation"
        assert "measurements.rail_width" in exc_info.value.message

    def test_drop_band_price_rejected(self) -> None:
        pricing = {
            "method": "per_drop",
            "bands": [{"drop_min": 0, "drop_max": 250, "price": float("inf")}],
        }
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_quote(pricing=pricing))
        assert exc_info.value.details[0]["path"] == "pricing.bands[0].price"


class TestSettingsConfig:
    """Tests for SettingsConfig model."""

    def test_all_optional(self) -> None:
        settings = SettingsConfig()
        assert settings.selling_unit == "yd"
        assert settings.default_labor_rate is None

    def test_unknown_selling_unit_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            SettingsConfig.model_validate({"selling_unit": "ft"})

    def test_hours_must_be_positive(self) -> None:
        with pytest.raises(PydanticValidationError, match="must be positive"):
            SettingsConfig.model_validate({"hours_per_unit": {"blind": 0}})

    def test_lining_prices_by_kind(self) -> None:
        settings = SettingsConfig.model_validate({"lining_prices": {"blackout": 10}})
        assert settings.lining_prices == {LiningKind.BLACKOUT: 10}


class TestQuoteConfiguration:
    """Tests for the root QuoteConfiguration model."""

    def test_minimal(self) -> None:
        config = QuoteConfiguration.model_validate(_quote())
        assert config.reference is None
        assert config.settings is None
        assert config.fabric.orientation == Orientation.VERTICAL

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate(_quote(colour="red"))

    def test_supported_versions(self) -> None:
        assert "1.0" in SUPPORTED_VERSIONS
        assert "1.1" in SUPPORTED_VERSIONS
        assert "1.2" in SUPPORTED_VERSIONS

    def test_newer_minor_version_accepted(self) -> None:
        config = QuoteConfiguration.model_validate(_quote(schema_version="1.9"))
        assert config.schema_version == "1.9"

    def test_unsupported_major_version_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="Unsupported schema version"):
            QuoteConfiguration.model_validate(_quote(schema_version="2.0"))

    def test_malformed_version_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate(_quote(schema_version="v1"))


class TestLoadConfig:
    """Tests for the file loader."""

    def test_load_curtain(self) -> None:
        config = load_config(FIXTURES_PATH / "curtain_linear.json")
        assert config.reference == "Living room curtains"
        assert config.measurements.quantity == 2
        assert isinstance(config.pricing, LinearPricingConfig)

    def test_load_formula(self) -> None:
        config = load_config(FIXTURES_PATH / "formula_curtain.json")
        assert isinstance(config.pricing, FormulaPricingConfig)
        assert config.options.hem_configuration is not None
        assert config.settings is not None
        assert config.settings.selling_unit == "m"

    def test_file_not_found(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "nonexistent.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "not found" in str(exc_info.value)

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 3

    def test_unknown_field(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "unknown_field.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.message.startswith("Quote validation failed:")
        assert any(d["path"] == "measurements.colour" for d in error.details)

    def test_grid_error_path_omits_method_tag(self) -> None:
        data = _quote(
            pricing={
                "method": "grid",
                "rows": [
                    {
                        "drop_min": 100,
                        "drop_max": 150,
                        "cells": [{"width_min": 80, "width_max": 100, "price": -1}],
                    }
                ],
            }
        )
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        paths = [d["path"] for d in exc_info.value.details]
        assert "pricing.rows[0].cells[0].price" in paths

    def test_load_from_dict(self) -> None:
        config = load_config_from_dict(_quote(reference="Study"))
        assert config.reference == "Study"
        assert config.options.category == TreatmentCategory.CURTAIN

    def test_load_from_dict_error_has_no_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(_quote(measurements={"drop": 200}))
        assert exc_info.value.path is None
        assert exc_info.value.details[0]["path"] == "measurements.rail_width"
