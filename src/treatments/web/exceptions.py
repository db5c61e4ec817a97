"""Custom exceptions and error handlers for the REST API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from treatments.application.config import ConfigError
from treatments.domain.services.costing import CalculationError

logger = logging.getLogger(__name__)


class QuoteCalculationError(Exception):
    """Raised when a quote loads but cannot be priced."""

    def __init__(self, error: CalculationError) -> None:
        self.error = error
        super().__init__(error.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": "validation",
                "details": exc.details,
            },
        )

    @app.exception_handler(QuoteCalculationError)
    async def calculation_error_handler(
        request: Request, exc: QuoteCalculationError
    ) -> JSONResponse:
        logger.warning("Quote could not be priced: %s", exc.error.message)
        result = exc.error.result
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.error.message,
                "error_type": exc.error.kind.value,
                "details": {"result": result.to_dict()} if result else None,
            },
        )
