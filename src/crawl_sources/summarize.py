"""Summarizers used to shorten fetched content before rendering."""

from __future__ import annotations

from typing import Optional

from common.errors import SummarizationError

DEFAULT_SUMMARY_CHARS = 200


class Summarizer:
    """Turns a title and its body text into a short summary."""

    def summarize(self, title: str, content: str) -> str:
        raise NotImplementedError


class TruncatingSummarizer(Summarizer):
    """Placeholder summarizer: the first `max_chars` characters of the content.

    Holds the credential an LLM-backed summarizer would use.
    """

    def __init__(self, api_key: Optional[str] = None, max_chars: int = DEFAULT_SUMMARY_CHARS):
        if max_chars <= 0:
            raise ValueError("max_chars must be positive")
        self.api_key = api_key
        self.max_chars = max_chars

    def summarize(self, title: str, content: str) -> str:
        if content is None:
            raise SummarizationError(f"No content to summarize for {title!r}")
        return content[: self.max_chars]
