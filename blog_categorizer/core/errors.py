# core/errors.py
"""
Error types raised by the categorizer services.

Route handlers translate these into HTTP responses:
    - ClientInputError → 400
    - ExtractionError (FetchBlocked, FetchFailed) → 500
    - AiCallFailed → 500
"""
from typing import Optional


class CategorizerError(Exception):
    """Base class for all service errors."""


class ClientInputError(CategorizerError):
    """The request did not carry a usable URL or article text."""


class ExtractionError(CategorizerError):
    """Fetching or extracting the content behind a URL failed."""


class FetchBlocked(ExtractionError):
    """Every fetch attempt was blocked or returned no usable content."""


class FetchFailed(ExtractionError):
    """The page responded with a non-retryable error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AiCallFailed(CategorizerError):
    """The inference API answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"AI call failed: {status_code} - {body}")
        self.status_code = status_code
        self.body = body
