"""FastAPI dependency injection for quoting services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from treatments.application.commands import PriceQuoteCommand


@lru_cache(maxsize=1)
def get_quote_command() -> PriceQuoteCommand:
    """Get cached PriceQuoteCommand instance."""
    return PriceQuoteCommand()


# Type aliases for cleaner endpoint signatures
QuoteCommandDep = Annotated[PriceQuoteCommand, Depends(get_quote_command)]
