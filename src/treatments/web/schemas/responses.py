"""Pydantic response schemas for the REST API."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class CostResultSchema(BaseModel):
    """Machine-readable cost figures."""

    fabric_quantity: float = Field(..., description="Fabric in selling units")
    fabric_cost: float = Field(..., description="Cost of the fabric")
    labor_hours: float = Field(..., description="Making hours")
    labor_cost: float = Field(..., description="Making cost")
    features_cost: float = Field(..., description="Add-on and lining cost")
    subtotal: float = Field(..., description="Fabric + labor + features")
    markup_percentage: float = Field(..., description="Markup applied to the subtotal")
    total: float = Field(..., description="Subtotal with markup")
    unit_price: float = Field(..., description="Total divided by quantity")


class LineItemSchema(BaseModel):
    """Priced add-on line."""

    name: str
    unit_price: float
    quantity: float
    total: float


class BreakdownSchema(BaseModel):
    """Human-readable justification of the cost figures."""

    fabric: str = Field(..., description="Fabric derivation")
    labor: str = Field(..., description="Labor derivation")
    features: str = Field(..., description="Add-on derivation")
    pricing: str = Field(..., description="Subtotal, markup and total derivation")
    leftover_length: float = Field(default=0.0, description="Waste along the roll")
    leftover_width: float = Field(default=0.0, description="Waste across the roll")
    line_items: list[LineItemSchema] = Field(default_factory=list)


class QuoteResponseSchema(BaseModel):
    """Response for a priced quote."""

    reference: str | None = Field(default=None, description="Quote reference")
    strategy: str = Field(..., description="Pricing method used")
    selling_unit: str = Field(..., description="Unit fabric is sold in")
    result: CostResultSchema
    breakdown: BreakdownSchema


class CalculationErrorSchema(BaseModel):
    """Reportable calculation failure."""

    kind: str = Field(..., description="Error kind identifier")
    message: str = Field(..., description="Explanation for the salesperson")


class BatchQuoteItemSchema(BaseModel):
    """One quote in a batch response."""

    reference: str | None = None
    status: Literal["ok", "error"]
    quote: QuoteResponseSchema | None = None
    error: CalculationErrorSchema | None = None


class BatchQuoteResponseSchema(BaseModel):
    """Response for a batch of quotes."""

    quotes: list[BatchQuoteItemSchema]
    priced: int = Field(..., description="Number of quotes priced")
    failed: int = Field(..., description="Number of quotes that could not be priced")


class ValidationResultSchema(BaseModel):
    """Response for quote validation."""

    is_valid: bool = Field(..., description="Whether the quote is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
