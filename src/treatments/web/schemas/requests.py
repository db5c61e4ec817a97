"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class QuoteRequest(BaseModel):
    """Request for pricing a single quote."""

    config: dict[str, Any] = Field(..., description="Quote configuration JSON")


class BatchQuoteRequest(BaseModel):
    """Request for pricing several quotes."""

    configs: list[dict[str, Any]] = Field(
        ..., min_length=1, max_length=100, description="Quote configuration JSON objects"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a quote configuration."""

    config: dict[str, Any] = Field(..., description="Quote configuration JSON")
