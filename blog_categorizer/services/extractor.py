# services/extractor.py
import logging
from abc import ABC, abstractmethod

from bs4 import BeautifulSoup
from readability import Document

from blog_categorizer.core.core_utils import collapse_whitespace

logger = logging.getLogger(__name__)

NOISE_TAGS = ["script", "style", "noscript"]


class ContentExtractor(ABC):
    """Turns fetched HTML into the plain text of the main article."""

    @abstractmethod
    def extract_main_content(self, html: str, url: str) -> str:
        """Return whitespace-normalized article text for `html` fetched from `url`."""


class ReadabilityExtractor(ContentExtractor):
    """
    Extractor backed by readability-lxml, with a BeautifulSoup fallback.

    The readability summary is used when it yields any text. Otherwise the
    whole document is parsed, script/style/noscript nodes are dropped and the
    body text is returned. Extraction problems never propagate.
    """

    def __init__(self, parser: str = "lxml"):
        self.parser = parser

    def extract_main_content(self, html: str, url: str) -> str:
        try:
            summary = Document(html, url=url).summary(html_partial=True)
            text = self._html_to_text(summary)
            if text:
                return text
            logger.warning(f"Readability produced no content for {url}, using body text")
        except Exception as e:
            logger.warning(f"Readability failed for {url} ({e}), using body text")

        return self.body_text(html)

    def body_text(self, html: str) -> str:
        """Strip non-content tags and return the body's text (whole document if no body)."""
        soup = BeautifulSoup(html or "", self.parser)
        for tag in soup(NOISE_TAGS):
            tag.decompose()
        root = soup.body or soup
        return collapse_whitespace(root.get_text(" "))

    def _html_to_text(self, fragment: str) -> str:
        soup = BeautifulSoup(fragment or "", self.parser)
        for tag in soup(NOISE_TAGS):
            tag.decompose()
        return collapse_whitespace(soup.get_text(" "))
