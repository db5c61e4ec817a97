"""Pytest configuration and shared fixtures for treatment costing tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from treatments.domain.services.costing import CostingEngine, EngineSettings
from treatments.domain.value_objects import (
    FabricSpec,
    GridCell,
    GridPricing,
    GridRow,
    LinearPricing,
    Measurements,
    TreatmentCategory,
    TreatmentInput,
    TreatmentOptions,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures for engine inputs
# =============================================================================


@pytest.fixture
def settings() -> EngineSettings:
    """Default engine settings (centimetres measured, yards sold)."""
    return EngineSettings()


@pytest.fixture
def engine(settings: EngineSettings) -> CostingEngine:
    return CostingEngine(settings)


@pytest.fixture
def curtain_input() -> TreatmentInput:
    """Pair of curtains on a 300 cm rail, 200 cm drop, 140 cm roll at 18.70/yd."""
    return TreatmentInput(
        measurements=Measurements(rail_width=300, drop=200, quantity=2),
        fabric=FabricSpec(roll_width=140, price_per_unit=18.70),
        options=TreatmentOptions(category=TreatmentCategory.CURTAIN, fullness_ratio=2.0),
        pricing=LinearPricing(price_per_unit=18.70),
    )


@pytest.fixture
def blind_input() -> TreatmentInput:
    """Single 100 x 120 cm blind."""
    return TreatmentInput(
        measurements=Measurements(rail_width=100, drop=120, quantity=1),
        fabric=FabricSpec(roll_width=200, price_per_unit=20.0),
        options=TreatmentOptions(category=TreatmentCategory.BLIND),
        pricing=LinearPricing(price_per_unit=20.0),
    )


@pytest.fixture
def pricing_grid() -> GridPricing:
    """Supplier grid with a single 100-150 drop row priced 42.50 for 80-100 wide."""
    return GridPricing(
        rows=(
            GridRow(
                drop_min=100,
                drop_max=150,
                cells=(
                    GridCell(width_min=60, width_max=79, price=35.00),
                    GridCell(width_min=80, width_max=100, price=42.50),
                ),
            ),
        )
    )


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
