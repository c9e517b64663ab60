# api/routes_categorize.py
"""
Categorize Routes API.

Defines the FastAPI endpoint that resolves a URL or raw text into article
text and assigns it a category.

Endpoint:
    - POST `/categorize` → Categorize the article behind a URL or the given text.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from blog_categorizer.core.config import AppSettings
from blog_categorizer.core.core_utils import truncate
from blog_categorizer.core.dependencies import get_resolver, get_categorizer, get_app_settings
from blog_categorizer.core.errors import ExtractionError
from blog_categorizer.schemas import CategorizeRequest, CategorizeResponse, ErrorResponse
from blog_categorizer.services import ContentResolver, Categorizer

logger = logging.getLogger(__name__)
router = APIRouter(tags=["categorize"])

INPUT_REQUIRED = "Input required (URL or article text)."


@router.post(
    "/categorize",
    response_model=CategorizeResponse,
    responses={400: {"model": ErrorResponse}},
)
async def categorize(
    request: CategorizeRequest,
    resolver: ContentResolver = Depends(get_resolver),
    categorizer: Categorizer = Depends(get_categorizer),
    settings: AppSettings = Depends(get_app_settings),
):
    """
    Categorize an article given as a URL or as raw text.

    Steps:
        1. Reject missing or blank input.
        2. Resolve URLs into extracted article text.
        3. Truncate the text to `max_input_chars`.
        4. Ask the categorizer for a single category.

    Args:
        request (CategorizeRequest): Payload with the `input` URL or text.
        resolver (ContentResolver): Dependency-injected content resolver.
        categorizer (Categorizer): Dependency-injected categorizer.
        settings (AppSettings): Service settings (truncation limit).

    Returns:
        CategorizeResponse: The assigned category.

    Raises:
        HTTPException: 500 if fetching/extraction or classification fails.
    """
    if request.input is None or not request.input.strip():
        return JSONResponse(status_code=400, content={"error": INPUT_REQUIRED})

    try:
        text = await resolver.resolve(request.input)
    except ExtractionError as e:
        logger.error(f"Extraction error: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to fetch/extract URL: {e}")

    text = truncate(text, settings.max_input_chars)

    try:
        category = await categorizer.categorize(text)
    except Exception as e:
        logger.error(f"Classification error: {e}")
        raise HTTPException(status_code=500, detail=f"AI classification failed: {e}")

    logger.info(f"Category: {category.value}")
    return CategorizeResponse(category=category)
