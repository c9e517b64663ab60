# services/fetcher.py
import asyncio
import logging
from typing import Dict, Optional

import httpx

from blog_categorizer.core.config import FetcherSettings
from blog_categorizer.core.errors import FetchBlocked, FetchFailed

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Fetches article HTML with browser-like headers.

    Blocking responses (403/429) and transient network errors are retried with
    a linear backoff, up to `settings.max_attempts` GETs in total. Any other
    error status fails immediately.

    Attributes:
        settings (FetcherSettings): Header values, retry cap and timeouts.
        client (httpx.AsyncClient): Persistent async HTTP client.
    """
    def __init__(
        self,
        settings: FetcherSettings = FetcherSettings(),
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self.client = client or httpx.AsyncClient(
            timeout=settings.timeout,
            follow_redirects=True,
        )

    def headers(self, url: str) -> Dict[str, str]:
        """
        Build request headers that look like a regular browser navigation.

        Args:
            url (str): Target URL, also sent as the Referer.

        Returns:
            Dict[str, str]: HTTP headers for the GET request.
        """
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": self.settings.accept,
            "Accept-Language": self.settings.accept_language,
            "Referer": url,
            "Sec-Fetch-Site": "none",
            "Sec-Fetch-Mode": "navigate",
            **{k: str(v) for k, v in self.settings.extra_headers.items()},
        }

    async def _backoff(self, attempt: int) -> None:
        delay = self.settings.backoff_seconds * attempt
        if delay > 0:
            await asyncio.sleep(delay)

    async def fetch(self, url: str) -> str:
        """
        Download the HTML body of `url`.

        Args:
            url (str): Absolute http(s) URL.

        Returns:
            str: Response body text.

        Raises:
            FetchFailed: On a non-retryable error status.
            FetchBlocked: If every attempt was blocked or failed, or the body is empty.
        """
        max_attempts = max(1, self.settings.max_attempts)
        html: Optional[str] = None
        last_error: Optional[Exception] = None

        for attempt in range(1, max_attempts + 1):
            try:
                resp = await self.client.get(url, headers=self.headers(url))
            except httpx.TransportError as e:
                last_error = e
                logger.warning(f"Fetch attempt {attempt}/{max_attempts} for {url} failed: {e}")
                if attempt < max_attempts:
                    await self._backoff(attempt)
                continue

            if resp.status_code in self.settings.blocking_statuses:
                logger.warning(
                    f"Fetch attempt {attempt}/{max_attempts} for {url} blocked ({resp.status_code})"
                )
                if attempt < max_attempts:
                    await self._backoff(attempt)
                continue

            if not resp.is_success:
                raise FetchFailed(
                    f"Fetching {url} returned {resp.status_code} {resp.reason_phrase}",
                    status_code=resp.status_code,
                )

            html = resp.text
            break

        if html is None or not html.strip():
            message = (
                "Failed to fetch HTML (403 or blocked). "
                "Consider using a headless browser (Playwright) or proxy."
            )
            if last_error is not None:
                raise FetchBlocked(message) from last_error
            raise FetchBlocked(message)

        logger.info(f"Fetched {len(html)} characters from {url}")
        return html

    async def aclose(self):
        """
        Gracefully close the underlying async HTTP client.

        Should be called during application shutdown to release resources.
        """
        await self.client.aclose()
