"""Quote pricing endpoints."""

from typing import Any

from fastapi import APIRouter

from treatments.application.config import (
    ConfigError,
    QuoteConfiguration,
    load_config_from_dict,
)
from treatments.application.dtos import QuoteOutput
from treatments.domain.services.costing import CalculationError, CostEstimate
from treatments.web.dependencies import QuoteCommandDep
from treatments.web.exceptions import QuoteCalculationError
from treatments.web.schemas.requests import BatchQuoteRequest, QuoteRequest
from treatments.web.schemas.responses import (
    BatchQuoteItemSchema,
    BatchQuoteResponseSchema,
    BreakdownSchema,
    CalculationErrorSchema,
    CostResultSchema,
    LineItemSchema,
    QuoteResponseSchema,
)

router = APIRouter(prefix="/quote", tags=["quote"])


def _estimate_to_schema(output: QuoteOutput, estimate: CostEstimate) -> QuoteResponseSchema:
    """Convert a cost estimate to the response schema."""
    breakdown = estimate.breakdown
    return QuoteResponseSchema(
        reference=output.reference,
        strategy=estimate.strategy,
        selling_unit=output.settings.selling_unit,
        result=CostResultSchema(**estimate.result.to_dict()),
        breakdown=BreakdownSchema(
            fabric=breakdown.fabric,
            labor=breakdown.labor,
            features=breakdown.features,
            pricing=breakdown.pricing,
            leftover_length=breakdown.leftover_length,
            leftover_width=breakdown.leftover_width,
            line_items=[
                LineItemSchema(
                    name=item.name,
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                    total=item.total,
                )
                for item in breakdown.line_items
            ],
        ),
    )


def _batch_item(output: QuoteOutput) -> BatchQuoteItemSchema:
    outcome = output.outcome
    if isinstance(outcome, CalculationError):
        return BatchQuoteItemSchema(
            reference=output.reference,
            status="error",
            error=CalculationErrorSchema(kind=outcome.kind.value, message=outcome.message),
        )
    return BatchQuoteItemSchema(
        reference=output.reference,
        status="ok",
        quote=_estimate_to_schema(output, outcome),
    )


def _load_batch_item(index: int, data: dict[str, Any]) -> QuoteConfiguration:
    """Load one batch entry, prefixing error paths with its position."""
    try:
        return load_config_from_dict(data)
    except ConfigError as e:
        details = [
            {**detail, "path": f"configs[{index}].{detail.get('path', '')}".rstrip(".")}
            for detail in e.details
        ]
        raise ConfigError(
            message=f"Quote {index}: {e.message}",
            error_type=e.error_type,
            details=details,
        ) from e


@router.post("", response_model=QuoteResponseSchema)
async def price_quote(
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> QuoteResponseSchema:
    """Price a single quote.

    Raises:
        ConfigError: If the configuration fails validation (422).
        QuoteCalculationError: If the quote cannot be priced (422).
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config)

    outcome = output.outcome
    if isinstance(outcome, CalculationError):
        raise QuoteCalculationError(outcome)
    return _estimate_to_schema(output, outcome)


@router.post("/batch", response_model=BatchQuoteResponseSchema)
async def price_batch(
    request: BatchQuoteRequest,
    command: QuoteCommandDep,
) -> BatchQuoteResponseSchema:
    """Price several quotes.

    Quotes that cannot be priced are reported per item; the request only
    fails when a configuration does not validate.
    """
    configs = [_load_batch_item(i, data) for i, data in enumerate(request.configs)]
    outputs = command.execute_many(configs)
    items = [_batch_item(output) for output in outputs]
    failed = sum(1 for item in items if item.status == "error")
    return BatchQuoteResponseSchema(
        quotes=items,
        priced=len(items) - failed,
        failed=failed,
    )
