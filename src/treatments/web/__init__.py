"""FastAPI REST API for treatment quoting.

This module provides a REST API for pricing quotes and validating quote
configurations.

Usage:
    uvicorn treatments.web:app --reload
"""

from treatments.web.app import app, create_app

__all__ = ["app", "create_app"]
