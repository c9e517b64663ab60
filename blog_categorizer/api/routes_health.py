# api/routes_health.py
import logging
from fastapi import APIRouter

from blog_categorizer.schemas import Category, CategoriesResponse, HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix='/api')


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness check. Makes no outbound calls."""
    return HealthResponse(status="ok")


@router.get("/categories", response_model=CategoriesResponse)
async def categories():
    """
    Return the category vocabulary:
      - every category the service can answer with
      - the fallback used when the model's answer is ambiguous
    """
    return CategoriesResponse(categories=list(Category), fallback=Category.fallback())
