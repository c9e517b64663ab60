import re
from urllib.parse import urlparse

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse every run of whitespace to a single space and trim the ends."""
    return _WHITESPACE.sub(" ", text or "").strip()


def is_absolute_url(value: str) -> bool:
    """
    Return True if `value` is a well-formed absolute http(s) URL.

    Free text that merely starts with a word and a colon ("Note: ...") is not
    a URL; neither is anything containing whitespace.
    """
    if not value or _WHITESPACE.search(value):
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def truncate(text: str, limit: int) -> str:
    """Hard-truncate `text` to at most `limit` characters."""
    if len(text) > limit:
        return text[:limit]
    return text
