"""Pydantic schemas for the REST API."""

from treatments.web.schemas.requests import (
    BatchQuoteRequest,
    ConfigValidateRequest,
    QuoteRequest,
)
from treatments.web.schemas.responses import (
    BatchQuoteItemSchema,
    BatchQuoteResponseSchema,
    BreakdownSchema,
    CalculationErrorSchema,
    CostResultSchema,
    ErrorResponseSchema,
    LineItemSchema,
    QuoteResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "BatchQuoteRequest",
    "ConfigValidateRequest",
    "QuoteRequest",
    # Responses
    "BatchQuoteItemSchema",
    "BatchQuoteResponseSchema",
    "BreakdownSchema",
    "CalculationErrorSchema",
    "CostResultSchema",
    "ErrorResponseSchema",
    "LineItemSchema",
    "QuoteResponseSchema",
    "ValidationResultSchema",
]
