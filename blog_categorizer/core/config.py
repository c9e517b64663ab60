"""
Configuration Module.

Defines dataclasses for managing environment-driven application settings,
including the inference API, the page fetcher, and the HTTP server.

Each configuration class loads defaults from environment variables, allowing
flexible deployment across environments without hardcoding values.
"""

import os
from dataclasses import dataclass, field
import json
from typing import Dict, Any, Optional


def _load_kwargs(env_var: str) -> Dict[str, Any]:
    """
    Parse additional keyword arguments from an environment variable.

    The variable can be either:
      - A JSON string (preferred).
      - A comma-separated list of key=value pairs.

    Args:
        env_var (str): Name of the environment variable.

    Returns:
        Dict[str, Any]: Parsed key-value pairs (empty if variable is unset).
    """
    raw = os.getenv(env_var, "")
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        parts = [kv.strip() for kv in raw.split(",") if "=" in kv]
        return {k: v for k, v in (p.split("=", 1) for p in parts)}


@dataclass
class InferenceSettings:
    """
    Settings for the chat-completion inference API.

    Attributes:
        base_url (str): Base address of the inference host.
        api_key (str): Bearer token (GitHub PAT) used for authentication.
        org (Optional[str]): Organization name for org-attributed calls.
        model (str): Model identifier sent with each request.
        temperature (float): Sampling temperature. Zero keeps answers deterministic.
        max_chars (int): Content is truncated to this many characters before submission.
        timeout (float): Per-request timeout in seconds.
        user_agent (str): User-Agent header sent to the inference host.
        default_kwargs (Dict[str, Any]): Additional payload parameters,
            parsed from env `MODEL_KWARGS`.
    """
    base_url: str = os.getenv("MODEL_BASE_ADDRESS", "https://models.github.ai/")
    api_key: str = os.getenv("GITHUB_PAT", "")
    org: Optional[str] = os.getenv("GITHUB_ORG")
    model: str = os.getenv("MODEL_ID", "openai/gpt-4o-mini")
    temperature: float = float(os.getenv("MODEL_TEMPERATURE", 0.0))
    max_chars: int = int(os.getenv("MODEL_MAX_CHARS", 32000))
    timeout: float = float(os.getenv("MODEL_TIMEOUT", 60.0))
    user_agent: str = os.getenv("MODEL_USER_AGENT", "BlogCategorizer/1.0")
    default_kwargs: Dict[str, Any] = field(default_factory=lambda: _load_kwargs("MODEL_KWARGS"))

    def validate(self) -> None:
        """
        Check that the settings required to reach the API are present.

        Raises:
            RuntimeError: If the base address or the bearer token is missing.
        """
        if not self.base_url:
            raise RuntimeError("MODEL_BASE_ADDRESS is not configured")
        if not self.api_key:
            raise RuntimeError("GITHUB_PAT is not configured in the environment")


@dataclass
class FetcherSettings:
    """
    Settings for fetching article pages.

    Attributes:
        user_agent (str): Browser-like User-Agent header.
        accept (str): Accept header value.
        accept_language (str): Accept-Language header value.
        max_attempts (int): Total number of GET attempts before giving up.
        backoff_seconds (float): Base delay; attempt N waits N * backoff_seconds.
        timeout (float): Per-request timeout in seconds.
        blocking_statuses (tuple): Status codes treated as "blocked, retry later".
        extra_headers (Dict[str, str]): Additional request headers,
            parsed from env `FETCH_EXTRA_HEADERS`.
    """
    user_agent: str = os.getenv(
        "FETCH_USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0 Safari/537.36",
    )
    accept: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    accept_language: str = os.getenv("FETCH_ACCEPT_LANGUAGE", "en-US,en;q=0.9")
    max_attempts: int = int(os.getenv("FETCH_MAX_ATTEMPTS", 3))
    backoff_seconds: float = float(os.getenv("FETCH_BACKOFF_SECONDS", 0.5))
    timeout: float = float(os.getenv("FETCH_TIMEOUT", 20.0))
    blocking_statuses: tuple = (403, 429)
    extra_headers: Dict[str, str] = field(default_factory=lambda: _load_kwargs("FETCH_EXTRA_HEADERS"))


@dataclass
class AppSettings:
    """
    Settings for the HTTP service itself.

    Attributes:
        max_input_chars (int): Resolved text is hard-truncated to this length
            before classification.
        host (str): Bind address for uvicorn.
        port (int): Bind port for uvicorn.
        log_level (str): Root logging level name.
    """
    max_input_chars: int = int(os.getenv("MAX_INPUT_CHARS", 30000))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
