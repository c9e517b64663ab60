# services/__init__.py

from .fetcher import PageFetcher
from .extractor import ContentExtractor, ReadabilityExtractor
from .resolver import ContentResolver
from .llm_client import LLMClient
from .categorizer import Categorizer, LLMCategorizer
from .response_parser import extract_completion_text, normalize_category

__all__ = [
    "PageFetcher",
    "ContentExtractor",
    "ReadabilityExtractor",
    "ContentResolver",
    "LLMClient",
    "Categorizer",
    "LLMCategorizer",
    "extract_completion_text",
    "normalize_category",
]
