"""Ranking tables scraped from single HTML pages (MCP servers, OpenRouter models).

The selectors are broad guesses over the pages' layouts; a page that does not
match simply yields no rows.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from common.config import HttpConfig
from common.http import build_session, get_text
from common.storage import ObjectStore
from crawl_sources.crawler import Crawler
from crawl_sources.html import compile_selector, first_text, parse_document
from crawl_sources.models import RankingRow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankingSource:
    """Where a ranking lives and how to read and render it."""
    name: str
    slug: str
    url: str
    title: str
    name_column: str
    metric_column: str
    row_selector: str
    name_selector: str
    metric_selector: str
    description_selector: Optional[str] = None
    decimal_metric: bool = False


MCP_RANKINGS = RankingSource(
    name="MCP Rankings",
    slug="mcp-rankings",
    url="https://mcp.so",
    title="MCP Server Rankings",
    name_column="Server Name",
    metric_column="Stars",
    row_selector="tr, .server-row, .mcp-row, .ranking-item",
    name_selector=".server-name, .name, h3, h4, .title",
    metric_selector=".stars, .star-count, .github-stars",
    description_selector=".description, .desc, p",
)

OPENROUTER_RANKINGS = RankingSource(
    name="OpenRouter",
    slug="openrouter-rankings",
    url="https://openrouter.ai/rankings",
    title="OpenRouter Model Rankings",
    name_column="Model Name",
    metric_column="Score",
    row_selector="tr, .ranking-row, .model-row",
    name_selector=".model-name, .name, h3, h4",
    metric_selector=".score, .rating, .points",
    decimal_metric=True,
)


def parse_metric(text: Optional[str], decimal: bool = False) -> float:
    """Read a number out of mixed text ("1,234 stars", "Score: 98.5"); 0 when absent."""
    if not text:
        return 0
    if decimal:
        match = re.search(r"\d+(?:\.\d+)?", text.replace(",", ""))
        return float(match.group()) if match else 0.0
    digits = "".join(ch for ch in text if ch.isascii() and ch.isdigit())
    return int(digits) if digits else 0


def _escape_cell(value: str) -> str:
    return " ".join(value.split()).replace("|", "\\|")


def parse_rankings(html: str, source: RankingSource) -> list[RankingRow]:
    """Extract ranking rows in document order; rows without a name are skipped."""
    row_sel = compile_selector(source.row_selector)
    name_sel = compile_selector(source.name_selector)
    metric_sel = compile_selector(source.metric_selector)
    desc_sel = compile_selector(source.description_selector) if source.description_selector else None

    document = parse_document(html)
    if document is None:
        return []

    rows: list[RankingRow] = []
    for row in row_sel(document):
        name = first_text(row, name_sel)
        if not name:
            continue
        description = (first_text(row, desc_sel) or "") if desc_sel is not None else ""
        rows.append(
            RankingRow(
                rank=len(rows) + 1,
                name=name,
                description=description,
                metric=parse_metric(first_text(row, metric_sel), source.decimal_metric),
            )
        )

    logger.info("Parsed %d rows from %s", len(rows), source.url)
    return rows


def render_rankings(rows: Sequence[RankingRow], source: RankingSource, day: date) -> str:
    has_description = source.description_selector is not None
    lines = [f"# {source.title}", "", f"*Fetched on {day.isoformat()}*", ""]

    if has_description:
        lines.append(f"| Rank | {source.name_column} | Description | {source.metric_column} |")
        lines.append("|------|-------------|-------------|-------|")
    else:
        lines.append(f"| Rank | {source.name_column} | {source.metric_column} |")
        lines.append("|------|------------|-------|")

    for row in rows:
        metric = f"{row.metric:.2f}" if source.decimal_metric else str(int(row.metric))
        cells = [str(row.rank), _escape_cell(row.name)]
        if has_description:
            cells.append(_escape_cell(row.description))
        cells.append(metric)
        lines.append("| " + " | ".join(cells) + " |")

    return "\n".join(lines) + "\n"


class RankingTableCrawler(Crawler):
    def __init__(self, store: ObjectStore, source: RankingSource, http_config: HttpConfig):
        super().__init__(store)
        self.source = source
        self.name = source.name
        self.slug = source.slug
        self.timeout = http_config.request_timeout
        self.session = build_session(http_config)

    def fetch(self) -> str:
        logger.info("Fetching %s from %s", self.name, self.source.url)
        return get_text(self.session, self.source.url, self.timeout)

    def parse(self, raw: str) -> list[RankingRow]:
        return parse_rankings(raw, self.source)

    def render(self, records: Sequence[RankingRow], day: date) -> str:
        return render_rankings(records, self.source, day)
