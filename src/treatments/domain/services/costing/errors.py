"""Calculation error kinds and exceptions.

Calculators raise CostingError subclasses for expected bad input. The
costing engine catches them and hands callers a CalculationError value
instead, so hosts never see an exception for a quote they can fix.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Reportable calculation failure kinds."""

    INCOMPLETE_MEASUREMENTS = "incomplete_measurements"
    INVALID_FABRIC_SPEC = "invalid_fabric_spec"
    NO_PRICE_MATCH = "no_price_match"
    INVALID_LABOR_CONFIGURATION = "invalid_labor_configuration"


class CostingError(Exception):
    """Base class for recoverable calculation errors.

    Attributes:
        kind: Error kind reported to the caller.
        message: Explanation shown to the salesperson.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidFabricSpecError(CostingError):
    """Fabric roll width cannot support the curtain calculation."""

    kind = ErrorKind.INVALID_FABRIC_SPEC


class NoPriceMatchError(CostingError):
    """No grid cell or drop band covers the requested size."""

    kind = ErrorKind.NO_PRICE_MATCH

    def __init__(self, message: str, width: float, drop: float) -> None:
        self.width = width
        self.drop = drop
        super().__init__(message)


class InvalidLaborConfigurationError(CostingError):
    """Labor rate is missing or not positive."""

    kind = ErrorKind.INVALID_LABOR_CONFIGURATION
