# services/categorizer.py
import logging
from abc import ABC, abstractmethod
from typing import Dict, List

from blog_categorizer.core.core_utils import truncate
from blog_categorizer.schemas import Category
from .llm_client import LLMClient
from .response_parser import extract_completion_text, normalize_category

logger = logging.getLogger(__name__)


def build_system_prompt() -> str:
    allowed = ", ".join(Category.names())
    return (
        "You are a blog post categorizer.\n"
        f"Allowed categories (exactly): {allowed}.\n"
        "Return EXACTLY ONE category word from the list above, and nothing else. "
        f"If unsure, return {Category.fallback().value}."
    )


class Categorizer(ABC):
    """Assigns exactly one category to a piece of text."""

    @abstractmethod
    async def categorize(self, text: str) -> Category:
        ...

    async def aclose(self):
        pass


class LLMCategorizer(Categorizer):
    """
    Categorizer that asks a chat-completion model for a single category word.

    Empty text short-circuits to the fallback category. The model gets one
    attempt; its answer is normalized onto the vocabulary, and anything
    unreadable becomes the fallback category.

    Attributes:
        llm_client (LLMClient): Client for the inference API.
        max_chars (int): Text is truncated to this length before submission.
        system_prompt (str): Instruction listing the allowed categories.
    """
    def __init__(self, llm_client: LLMClient):
        self.llm_client = llm_client
        self.max_chars = llm_client.cfg.max_chars
        self.system_prompt = build_system_prompt()

    def build_messages(self, text: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": text},
        ]

    async def categorize(self, text: str) -> Category:
        """
        Categorize the provided content.

        Args:
            text (str): Article text.

        Returns:
            Category: One of the fixed categories, `Other` when unsure.

        Raises:
            AiCallFailed: If the inference API answers with a non-success status.
            httpx.HTTPError: On network failures talking to the API.
        """
        if not text or not text.strip():
            return Category.fallback()

        body = await self.llm_client.chat(self.build_messages(truncate(text, self.max_chars)))
        raw = extract_completion_text(body)
        category = normalize_category(raw)
        logger.info(f"Model answered {raw!r}, categorized as {category.value}")
        return category

    async def aclose(self):
        await self.llm_client.aclose()
