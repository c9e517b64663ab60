import logging
import httpx
from typing import List, Dict, Optional

from blog_categorizer.core.config import InferenceSettings
from blog_categorizer.core.errors import AiCallFailed

logger = logging.getLogger(__name__)


class LLMClient:
    """
    Asynchronous client for an OpenAI-style chat-completion inference API.

    Calls go to `inference/chat/completions` under the configured base
    address, or to `orgs/{org}/inference/chat/completions` when an
    organization is configured.

    Attributes:
        cfg (InferenceSettings): Configuration settings for the inference API.
        client (httpx.AsyncClient): Persistent async HTTP client.
    """
    def __init__(
        self,
        settings: InferenceSettings = InferenceSettings(),
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the LLMClient with API settings.

        Args:
            settings (InferenceSettings): Configuration for the API (token, base address, model, etc.).
            client (httpx.AsyncClient, optional): Pre-built HTTP client, mainly for tests.
        """
        self.cfg = settings
        self.client = client or httpx.AsyncClient(timeout=settings.timeout)

    def headers(self) -> Dict[str, str]:
        """
        Build authorization and content headers for API requests.

        Returns:
            Dict[str, str]: HTTP headers including Authorization and Content-Type.
        """
        return {
            "Authorization": f"Bearer {self.cfg.api_key}",
            "Content-Type": "application/json",
            "User-Agent": self.cfg.user_agent,
        }

    def endpoint(self) -> str:
        """Relative path of the chat-completion endpoint, org-scoped when configured."""
        org = (self.cfg.org or "").strip()
        if org:
            return f"orgs/{org}/inference/chat/completions"
        return "inference/chat/completions"

    async def chat(self, messages: List[Dict[str, str]], **overrides) -> str:
        """
        Send a chat completion request and return the raw response body.

        Parsing is left to the caller so that unexpected response shapes can
        be handled without raising.

        Args:
            messages (List[Dict[str, str]]): A list of messages, each with "role" and "content".
            **overrides: Optional keyword arguments to override payload parameters such as
                model or temperature.

        Returns:
            str: The response body text.

        Raises:
            AiCallFailed: If the API answers with a non-success status.
        """
        payload = {
            "model": self.cfg.model,
            "messages": messages,
            "temperature": self.cfg.temperature,
            **self.cfg.default_kwargs,
            **overrides,
        }
        base_url = self.cfg.base_url.rstrip("/")
        r = await self.client.post(
            f"{base_url}/{self.endpoint()}",
            headers=self.headers(),
            json=payload,
        )
        if not r.is_success:
            logger.error(f"Inference call failed with {r.status_code}")
            raise AiCallFailed(r.status_code, r.text)
        return r.text

    async def aclose(self):
        """
        Gracefully close the underlying async HTTP client.

        Should be called during application shutdown to release resources.
        """
        await self.client.aclose()
