"""Research-paper bodies from arXiv's HTML rendering."""

from __future__ import annotations

import logging

from common.config import HttpConfig
from common.http import build_session, get_text
from crawl_sources.body_text import extract_body_text

logger = logging.getLogger(__name__)

ARXIV_HTML_URL = "https://arxiv.org/html/{arxiv_id}"


class ArxivClient:
    def __init__(self, http_config: HttpConfig):
        self.timeout = http_config.request_timeout
        self.session = build_session(http_config)

    def fetch_html(self, arxiv_id: str) -> str:
        url = ARXIV_HTML_URL.format(arxiv_id=arxiv_id.strip())
        logger.info("Fetching paper from %s", url)
        return get_text(self.session, url, self.timeout)

    def fetch_paper_body(self, arxiv_id: str) -> str:
        """Fetch a paper and return its body text without author/affiliation blocks."""
        return extract_body_text(self.fetch_html(arxiv_id))
