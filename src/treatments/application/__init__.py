"""Application layer - use cases and orchestration."""

from .commands import PriceQuoteCommand
from .dtos import QuoteOutput

__all__ = [
    "PriceQuoteCommand",
    "QuoteOutput",
]
