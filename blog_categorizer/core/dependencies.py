# core/dependencies.py

"""
Dependency Providers for FastAPI.

Small helpers that retrieve the shared services from the FastAPI
application state. Route handlers use them through `Depends`, and tests
replace them through `app.dependency_overrides`.

Provided dependencies:
    - ContentResolver
    - Categorizer
    - AppSettings
"""

from fastapi import Request
from blog_categorizer.core.config import AppSettings
from blog_categorizer.services.resolver import ContentResolver
from blog_categorizer.services.categorizer import Categorizer


# ---- Resolver ----
def get_resolver(request: Request) -> ContentResolver:
    """
    Retrieve the shared content resolver from app state.

    Args:
        request (Request): FastAPI request object.

    Returns:
        ContentResolver: The resolver instance (fetcher + extractor).
    """
    return request.app.state.resolver


# ---- Categorizer ----
def get_categorizer(request: Request) -> Categorizer:
    """
    Retrieve the shared categorizer from app state.

    Args:
        request (Request): FastAPI request object.

    Returns:
        Categorizer: The categorizer instance.
    """
    return request.app.state.categorizer


# ---- Settings ----
def get_app_settings(request: Request) -> AppSettings:
    return getattr(request.app.state, "settings", None) or AppSettings()
