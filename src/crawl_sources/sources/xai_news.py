"""World-news digest from xAI's OpenAI-compatible chat completions endpoint."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Sequence

import openai
from openai import OpenAI

from common.config import HttpConfig
from common.errors import NetworkError
from common.storage import ObjectStore
from crawl_sources.crawler import Crawler

logger = logging.getLogger(__name__)

XAI_BASE_URL = "https://api.x.ai/v1"
DEFAULT_MODEL = "grok-3-latest"
DIGEST_PROMPT = "Provide me a digest of world news in the last 24 hours."


class XaiNewsCrawler(Crawler):
    name = "xAI News"
    slug = "xai-news"

    def __init__(
        self,
        store: ObjectStore,
        api_key: str,
        http_config: HttpConfig,
        model: str = DEFAULT_MODEL,
        client: OpenAI | None = None,
    ):
        super().__init__(store)
        self.model = model
        self.client = client or OpenAI(
            api_key=api_key,
            base_url=XAI_BASE_URL,
            timeout=http_config.request_timeout,
            max_retries=0,
        )

    def fetch(self) -> Any:
        logger.info("Fetching news digest from xAI")
        try:
            return self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": DIGEST_PROMPT}],
                extra_body={"search_parameters": {"mode": "auto"}},
            )
        except openai.APIError as e:
            raise NetworkError(f"xAI chat completion failed: {e}") from e

    def parse(self, raw: Any) -> list[str]:
        choices = getattr(raw, "choices", None) or []
        if not choices:
            logger.warning("Received no choices from xAI")
            return []
        content = choices[0].message.content or ""
        if not content.strip():
            logger.warning("Received empty digest from xAI")
            return []
        return [content]

    def render(self, records: Sequence[str], day: date) -> str:
        return records[0]
