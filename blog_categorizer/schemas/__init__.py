# schemas/__init__.py
from .category import Category
from .categorize import CategorizeRequest, CategorizeResponse, ErrorResponse
from .debug import HealthResponse, CategoriesResponse

__all__ = [
    # vocabulary
    "Category",
    # categorize
    "CategorizeRequest",
    "CategorizeResponse",
    "ErrorResponse",
    # debug
    "HealthResponse",
    "CategoriesResponse",
]
