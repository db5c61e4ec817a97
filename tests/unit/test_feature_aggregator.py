"""Unit tests for FeatureAggregator."""

import pytest

from treatments.domain.services.costing import EngineSettings, FeatureAggregator, LineItem
from treatments.domain.value_objects import (
    FeatureSelection,
    LiningKind,
    Measurements,
    TreatmentCategory,
    TreatmentOptions,
)

TIEBACKS = FeatureSelection(name="Tiebacks", unit_price=12.5)
WEIGHTS = FeatureSelection(name="Weighted hem", unit_price=8.0, selected=False)
PAIR = Measurements(rail_width=300, drop=200, quantity=2)


@pytest.fixture
def aggregator() -> FeatureAggregator:
    return FeatureAggregator()


class TestFeatureAggregator:
    """Tests for add-on aggregation."""

    def test_no_features(self, aggregator: FeatureAggregator) -> None:
        cost = aggregator.compute(PAIR, TreatmentOptions(category=TreatmentCategory.CURTAIN))
        assert cost.cost == 0.0
        assert cost.line_items == ()
        assert cost.explanation == "Features: none selected"

    def test_selected_features_times_quantity(self, aggregator: FeatureAggregator) -> None:
        options = TreatmentOptions(
            category=TreatmentCategory.CURTAIN, features=(TIEBACKS, WEIGHTS)
        )
        cost = aggregator.compute(PAIR, options)

        assert cost.cost == pytest.approx(25.0)
        assert cost.line_items == (
            LineItem(name="Tiebacks", unit_price=12.5, quantity=2, total=25.0),
        )
        assert cost.explanation.endswith("total 25.00")

    def test_lining_priced_per_fabric_unit(self, aggregator: FeatureAggregator) -> None:
        options = TreatmentOptions(
            category=TreatmentCategory.CURTAIN, lining=LiningKind.BLACKOUT
        )
        cost = aggregator.compute(PAIR, options, fabric_quantity=10.0)

        assert cost.cost == pytest.approx(120.0)
        assert cost.line_items[0].name == "Lining (blackout)"
        assert cost.line_items[0].quantity == 10.0

    def test_custom_lining_prices(self) -> None:
        settings = EngineSettings(lining_prices={LiningKind.STANDARD: 5.0})
        options = TreatmentOptions(
            category=TreatmentCategory.CURTAIN, lining=LiningKind.STANDARD
        )
        cost = FeatureAggregator(settings).compute(PAIR, options, fabric_quantity=4.0)
        assert cost.cost == pytest.approx(20.0)

    def test_unpriced_lining_costs_nothing(self) -> None:
        settings = EngineSettings(lining_prices={})
        options = TreatmentOptions(
            category=TreatmentCategory.CURTAIN, lining=LiningKind.THERMAL
        )
        cost = FeatureAggregator(settings).compute(PAIR, options, fabric_quantity=4.0)
        assert cost.cost == 0.0

    def test_blinds_never_charge_features(self, aggregator: FeatureAggregator) -> None:
        options = TreatmentOptions(
            category=TreatmentCategory.BLIND,
            lining=LiningKind.BLACKOUT,
            features=(TIEBACKS,),
        )
        cost = aggregator.compute(Measurements(rail_width=100, drop=120), options, 1.4)

        assert cost.cost == 0.0
        assert cost.line_items == ()
        assert cost.explanation == "Features: not charged for blinds"
