"""Unit tests for PricingGridResolver."""

import pytest

from treatments.domain.services.costing import GridMatch, NoMatch, PricingGridResolver
from treatments.domain.value_objects import GridCell, GridPricing, GridRow


@pytest.fixture
def resolver() -> PricingGridResolver:
    return PricingGridResolver()


class TestPricingGridResolver:
    """Tests for grid lookup."""

    def test_match_inside_ranges(
        self, resolver: PricingGridResolver, pricing_grid: GridPricing
    ) -> None:
        lookup = resolver.resolve(pricing_grid, 90, 145)
        assert lookup == GridMatch(price=42.50, row_index=0, cell_index=1)

    def test_match_on_boundaries(self, resolver: PricingGridResolver) -> None:
        """Both ends of row and cell ranges are inclusive."""
        grid = GridPricing(
            rows=(GridRow(100, 150, (GridCell(60, 80, 35.0),)),)
        )
        assert isinstance(resolver.resolve(grid, 80, 150), GridMatch)
        assert isinstance(resolver.resolve(grid, 60, 100), GridMatch)

    def test_no_row_covers_drop(
        self, resolver: PricingGridResolver, pricing_grid: GridPricing
    ) -> None:
        lookup = resolver.resolve(pricing_grid, 90, 155)
        assert isinstance(lookup, NoMatch)
        assert lookup.reason == "no grid row covers drop 155"

    def test_no_cell_covers_width(
        self, resolver: PricingGridResolver, pricing_grid: GridPricing
    ) -> None:
        lookup = resolver.resolve(pricing_grid, 120, 145)
        assert isinstance(lookup, NoMatch)
        assert "width 120" in lookup.reason
        assert "100-150" in lookup.reason

    def test_first_match_wins_on_overlap(self, resolver: PricingGridResolver) -> None:
        grid = GridPricing(
            rows=(
                GridRow(100, 150, (GridCell(50, 100, 30.0), GridCell(90, 120, 99.0))),
                GridRow(140, 200, (GridCell(50, 100, 55.0),)),
            )
        )
        lookup = resolver.resolve(grid, 95, 145)
        assert lookup == GridMatch(price=30.0, row_index=0, cell_index=0)

    def test_later_row_matches(self, resolver: PricingGridResolver) -> None:
        grid = GridPricing(
            rows=(
                GridRow(100, 150, (GridCell(50, 100, 30.0),)),
                GridRow(151, 200, (GridCell(50, 100, 55.0),)),
            )
        )
        lookup = resolver.resolve(grid, 75, 180)
        assert lookup == GridMatch(price=55.0, row_index=1, cell_index=0)

    def test_resolution_is_repeatable(
        self, resolver: PricingGridResolver, pricing_grid: GridPricing
    ) -> None:
        assert resolver.resolve(pricing_grid, 90, 145) == resolver.resolve(
            pricing_grid, 90, 145
        )
