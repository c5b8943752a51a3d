"""Data models for the crawl sources."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Repository:
    """One entry of a trending-repositories page."""
    name: str
    link: str
    stars: str
    description: Optional[str]


@dataclass
class Story:
    """Link-aggregator item that passed the score filter."""
    story_id: int
    title: str
    score: int
    url: Optional[str]
    text: Optional[str]
    summary: Optional[str] = None


@dataclass
class RankingRow:
    """One row of a ranking table, rank assigned in document order."""
    rank: int
    name: str
    description: str
    metric: float


@dataclass
class CrawlResult:
    """Outcome of a successful crawler run.

    `path` is None when nothing was uploaded (no records, empty digest, no URL).
    """
    name: str
    slug: str
    path: Optional[str]
    records: int = 0
    bytes_uploaded: int = 0
