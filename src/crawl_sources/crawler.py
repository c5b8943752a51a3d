"""Crawler contract shared by every source adapter."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Sequence

from common.cli_helpers import utc_today
from common.storage import MARKDOWN_CONTENT_TYPE, ObjectStore, build_object_path
from crawl_sources.models import CrawlResult

logger = logging.getLogger(__name__)


class Crawler:
    """One runnable source: fetch -> parse -> render -> upload.

    Subclasses set `name` and `slug` and implement fetch(), parse() and render().
    Adapters that enrich records or fan out override run() or enrich().
    """

    name: str = "base"
    slug: str = "base"

    def __init__(self, store: ObjectStore):
        self.store = store

    def fetch(self) -> Any:
        raise NotImplementedError

    def parse(self, raw: Any) -> list:
        raise NotImplementedError

    def render(self, records: Sequence, day: date) -> str:
        raise NotImplementedError

    def enrich(self, records: list) -> list:
        return records

    def run(self) -> CrawlResult:
        logger.info("%s crawler starting up", self.name)
        day = utc_today()
        raw = self.fetch()
        records = self.enrich(self.parse(raw))
        if not records:
            logger.info("%s: no records found, skipping upload", self.name)
            return CrawlResult(name=self.name, slug=self.slug, path=None)
        return self.upload(self.render(records, day), records=len(records), day=day)

    def upload(self, markdown: str, records: int, day: date | None = None) -> CrawlResult:
        """Upload a rendered document to `{day}/{slug}.md`."""
        path = build_object_path(self.slug, day or utc_today())
        content = markdown.encode("utf-8")
        self.store.upload(path, content, MARKDOWN_CONTENT_TYPE)
        logger.info("%s: uploaded %d records to %s", self.name, records, path)
        return CrawlResult(
            name=self.name,
            slug=self.slug,
            path=path,
            records=records,
            bytes_uploaded=len(content),
        )
