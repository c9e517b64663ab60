# services/response_parser.py
"""
Maps chat-completion responses onto the category vocabulary.

Model output is free-form, so nothing here raises: anything that cannot be
read or matched becomes the fallback category.
"""
import json
import logging
import re
from typing import Any, Optional

from blog_categorizer.schemas import Category

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[\r\n:\-]+")
_EDGE_CHARS = "\"'`.,;!?()[]{}* \t\r\n"


def extract_completion_text(body: str) -> Optional[str]:
    """
    Pull the generated text out of a chat-completion response body.

    Tried in order: `choices[0].message.content`, `choices[0].text`,
    top-level `output`.

    Returns:
        Optional[str]: The generated text, or None if the body is not JSON or
        has none of the known shapes.
    """
    try:
        data: Any = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        logger.warning("Inference response is not valid JSON")
        return None
    if not isinstance(data, dict):
        return None

    choices = data.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        first = choices[0]
        message = first.get("message")
        if isinstance(message, dict) and isinstance(message.get("content"), str):
            return message["content"]
        if isinstance(first.get("text"), str):
            return first["text"]

    if isinstance(data.get("output"), str):
        return data["output"]
    return None


def normalize_category(raw: Optional[str]) -> Category:
    """
    Map a free-form model answer onto the category vocabulary.

    Examples:
        "Category: .NET" -> .NET, " 'AI' " -> AI,
        "I think this is Cloud-related" -> Cloud, "banana" -> Other.
    """
    if raw is None or not raw.strip():
        return Category.fallback()

    candidate = raw.strip().strip(_EDGE_CHARS)
    by_name = {c.value.lower(): c for c in Category}

    for token in _TOKEN_SPLIT.split(candidate):
        token = token.strip().strip("\"'`")
        if token and token.lower() in by_name:
            return by_name[token.lower()]

    # Bare ".NET" loses its dot to the edge trim, so match against the raw answer.
    lowered = raw.lower()
    for category in Category:
        if category.value.lower() in lowered:
            return category

    logger.warning(f"Unmapped model answer {raw!r}, using {Category.fallback().value}")
    return Category.fallback()
