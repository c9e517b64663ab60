from typing import Optional

from pydantic import BaseModel, Field

from .category import Category


class CategorizeRequest(BaseModel):
    input: Optional[str] = Field(None, description="Article URL or raw article text")


class CategorizeResponse(BaseModel):
    category: Category = Field(..., description="Category assigned to the content")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Reason the request was rejected")
