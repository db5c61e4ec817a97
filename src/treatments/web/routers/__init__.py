"""API routers for the REST API."""

from treatments.web.routers.quote import router as quote_router
from treatments.web.routers.validate import router as validate_router

__all__ = [
    "quote_router",
    "validate_router",
]
