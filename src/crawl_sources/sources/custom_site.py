"""A single configured site, stripped to text and summarized."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from common.config import HttpConfig
from common.http import build_session, get_text
from common.storage import ObjectStore
from crawl_sources.crawler import Crawler
from crawl_sources.html import strip_markup
from crawl_sources.models import CrawlResult
from crawl_sources.summarize import Summarizer, TruncatingSummarizer

logger = logging.getLogger(__name__)


def render_site(url: str, summary: str) -> str:
    return f"# Fetched Content\n\nURL: {url}\n\n{summary}"


class CustomSiteCrawler(Crawler):
    name = "Custom Site"
    slug = "custom-site"

    def __init__(
        self,
        store: ObjectStore,
        url: Optional[str],
        http_config: HttpConfig,
        summarizer: Optional[Summarizer] = None,
    ):
        super().__init__(store)
        self.url = url
        self.summarizer = summarizer or TruncatingSummarizer()
        self.timeout = http_config.request_timeout
        self.session = build_session(http_config)

    def fetch(self) -> str:
        logger.info("Fetching custom site: %s", self.url)
        return get_text(self.session, self.url, self.timeout)

    def parse(self, raw: str) -> list[str]:
        text = " ".join(strip_markup(raw).split())
        if not text:
            return []
        return [self.summarizer.summarize(self.url, text)]

    def render(self, records: Sequence[str], day: date) -> str:
        return render_site(self.url, records[0])

    def run(self) -> CrawlResult:
        if not self.url:
            logger.warning("CUSTOM_SITE_URL not set; skipping custom site crawler")
            return CrawlResult(name=self.name, slug=self.slug, path=None)
        return super().run()
