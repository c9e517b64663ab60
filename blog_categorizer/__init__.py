"""Categorizes blog posts, given as a URL or raw text, with a chat-completion model."""

__version__ = "1.0.0"
