"""Pricing grid lookup service.

This module provides PricingGridResolver for finding the price of a
width x drop size in a supplier pricing grid.
"""

from __future__ import annotations

from treatments.domain.value_objects import GridPricing

from .models import GridLookup, GridMatch, NoMatch


class PricingGridResolver:
    """Resolves a target size against a pricing grid.

    Rows carry inclusive drop ranges and cells carry inclusive width
    ranges, so a target equal to a range's min or max matches that range.
    Ranges are expected not to overlap; when they do, the first row and
    then the first cell in table order win.

    Example:
        >>> grid = GridPricing(rows=(GridRow(100, 150, (GridCell(80, 100, 42.5),)),))
        >>> PricingGridResolver().resolve(grid, 90, 145)
        GridMatch(price=42.5, row_index=0, cell_index=0)
    """

    def resolve(
        self, grid: GridPricing, target_width: float, target_drop: float
    ) -> GridLookup:
        """Find the price for a width and drop.

        Args:
            grid: Pricing grid to search.
            target_width: Width to price, in the grid's measurement unit.
            target_drop: Drop to price, in the grid's measurement unit.

        Returns:
            GridMatch with the cell price, or NoMatch when no row or no
            cell within the matched row covers the target.
        """
        row_index = next(
            (i for i, row in enumerate(grid.rows) if row.covers(target_drop)), None
        )
        if row_index is None:
            return NoMatch(reason=f"no grid row covers drop {target_drop:g}")

        row = grid.rows[row_index]
        cell_index = next(
            (i for i, cell in enumerate(row.cells) if cell.covers(target_width)), None
        )
        if cell_index is None:
            return NoMatch(
                reason=(
                    f"no grid column covers width {target_width:g} "
                    f"in drop range {row.drop_min:g}-{row.drop_max:g}"
                )
            )

        return GridMatch(
            price=row.cells[cell_index].price,
            row_index=row_index,
            cell_index=cell_index,
        )
