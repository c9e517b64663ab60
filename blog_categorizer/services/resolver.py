# services/resolver.py
import asyncio
import logging

from blog_categorizer.core.core_utils import is_absolute_url
from blog_categorizer.core.errors import ExtractionError
from .extractor import ContentExtractor
from .fetcher import PageFetcher

logger = logging.getLogger(__name__)


class ContentResolver:
    """
    Turns request input into the text that gets classified.

    URLs are fetched and reduced to their article text; anything else is
    treated as the article text itself.

    Attributes:
        fetcher (PageFetcher): Downloads page HTML.
        extractor (ContentExtractor): Extracts the main content from HTML.
    """
    def __init__(self, fetcher: PageFetcher, extractor: ContentExtractor):
        self.fetcher = fetcher
        self.extractor = extractor

    async def resolve(self, value: str) -> str:
        """
        Resolve a URL or raw text into plain text.

        Args:
            value (str): Article URL or article text.

        Returns:
            str: Extracted article text for URLs, `value` unchanged otherwise.

        Raises:
            ExtractionError: If fetching or extracting the URL fails.
        """
        candidate = value.strip()
        if not is_absolute_url(candidate):
            return value

        logger.info(f"Resolving URL input: {candidate}")
        try:
            html = await self.fetcher.fetch(candidate)
            text = await asyncio.get_event_loop().run_in_executor(
                None, lambda: self.extractor.extract_main_content(html, candidate)
            )
        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(str(e) or type(e).__name__) from e

        logger.info(f"Extracted {len(text)} characters from {candidate}")
        return text

    async def aclose(self):
        await self.fetcher.aclose()
