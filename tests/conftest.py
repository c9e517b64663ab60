"""
Shared fixtures and stub services for the test suite
"""

import json
from typing import Callable, List

import httpx
import pytest

from blog_categorizer.core.config import FetcherSettings, InferenceSettings
from blog_categorizer.schemas import Category


class StubResolver:
    """Resolver that records inputs and returns canned text."""

    def __init__(self, text: str = "resolved text", error: Exception = None):
        self.text = text
        self.error = error
        self.calls: List[str] = []

    async def resolve(self, value: str) -> str:
        self.calls.append(value)
        if self.error is not None:
            raise self.error
        return self.text

    async def aclose(self):
        pass


class StubCategorizer:
    """Categorizer that records inputs and returns a fixed category."""

    def __init__(self, category: Category = Category.AI, error: Exception = None):
        self.category = category
        self.error = error
        self.calls: List[str] = []

    async def categorize(self, text: str) -> Category:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.category

    async def aclose(self):
        pass


def completion_body(content: str) -> dict:
    """Minimal chat-completion response carrying `content`."""
    return {
        "id": "chatcmpl-test",
        "model": "openai/gpt-4o-mini",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def json_payloads(self) -> List[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def fetcher_settings():
    """Fetcher settings with no backoff delay."""
    return FetcherSettings(max_attempts=3, backoff_seconds=0.0, extra_headers={})


@pytest.fixture
def inference_settings():
    return InferenceSettings(
        base_url="https://models.example.test/",
        api_key="test-token",
        org=None,
        model="openai/gpt-4o-mini",
        temperature=0.0,
        max_chars=32000,
        default_kwargs={},
    )
