from pydantic import BaseModel, Field
from typing import List

from .category import Category


class HealthResponse(BaseModel):
    status: str = Field(..., description="Health status of the application")

class CategoriesResponse(BaseModel):
    categories: List[Category] = Field(..., description="Allowed category vocabulary")
    fallback: Category = Field(..., description="Category returned when classification is ambiguous")
