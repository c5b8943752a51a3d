"""Build the configured crawlers and run them once."""

from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from common.config import Config, load_config
from common.errors import ConfigError
from common.storage import ObjectStore, get_object_store
from crawl_sources.crawler import Crawler
from crawl_sources.sources.custom_site import CustomSiteCrawler
from crawl_sources.sources.github_trending import GithubTrendingCrawler
from crawl_sources.sources.hacker_news import HackerNewsCrawler
from crawl_sources.sources.rankings import MCP_RANKINGS, OPENROUTER_RANKINGS, RankingTableCrawler
from crawl_sources.sources.xai_news import XaiNewsCrawler
from crawl_sources.summarize import TruncatingSummarizer
from run_crawlers.manager import CrawlerManager
from run_crawlers.models import RunSummary

logger = logging.getLogger(__name__)

CRAWLER_SLUGS = (
    GithubTrendingCrawler.slug,
    HackerNewsCrawler.slug,
    MCP_RANKINGS.slug,
    OPENROUTER_RANKINGS.slug,
    CustomSiteCrawler.slug,
    XaiNewsCrawler.slug,
)


def _validate_slugs(only: Sequence[str]) -> set[str]:
    unknown = [slug for slug in only if slug not in CRAWLER_SLUGS]
    if unknown:
        raise ConfigError(
            f"Unknown crawler(s): {', '.join(unknown)}. Valid crawlers: {', '.join(CRAWLER_SLUGS)}"
        )
    return set(only)


def build_crawlers(config: Config, store: ObjectStore, only: Optional[Sequence[str]] = None) -> list[Crawler]:
    """Construct every crawler whose configuration is present.

    Unconfigured crawlers are left out and logged; `only` restricts the result
    to the given slugs.
    """
    wanted = _validate_slugs(only) if only else set(CRAWLER_SLUGS)
    crawlers: list[Crawler] = []

    if GithubTrendingCrawler.slug in wanted:
        if config.languages:
            crawlers.append(GithubTrendingCrawler(store, config.languages, config.http))
        else:
            logger.info("No languages configured; GitHub trending crawler not registered")

    if HackerNewsCrawler.slug in wanted:
        if config.gemini_api_key:
            summarizer = TruncatingSummarizer(api_key=config.gemini_api_key)
            crawlers.append(HackerNewsCrawler(store, summarizer, config.hacker_news, config.http))
        else:
            logger.info("GEMINI_API_KEY not set; Hacker News crawler not registered")

    if XaiNewsCrawler.slug in wanted:
        if config.xai_api_key:
            crawlers.append(XaiNewsCrawler(store, config.xai_api_key, config.http))
        else:
            logger.info("XAI_API_KEY not set; xAI news crawler not registered")

    if CustomSiteCrawler.slug in wanted:
        if config.custom_site_url:
            crawlers.append(CustomSiteCrawler(store, config.custom_site_url, config.http))
        else:
            logger.info("CUSTOM_SITE_URL not set; custom site crawler not registered")

    for source in (OPENROUTER_RANKINGS, MCP_RANKINGS):
        if source.slug in wanted:
            crawlers.append(RankingTableCrawler(store, source, config.http))

    logger.info("Registered crawlers: %s", ", ".join(c.slug for c in crawlers) or "none")
    return crawlers


def run_once(
    config: Optional[Config] = None,
    store: Optional[ObjectStore] = None,
    only: Optional[Sequence[str]] = None,
    cancel_event: Optional[threading.Event] = None,
) -> RunSummary:
    """Run every configured crawler once.

    Raises CrawlRunError when at least one crawler failed.
    """
    if config is None:
        config = load_config()
    if store is None:
        store = get_object_store(config)

    manager = CrawlerManager(max_workers=config.max_workers, cancel_event=cancel_event)
    for crawler in build_crawlers(config, store, only):
        manager.register(crawler)
    return manager.run_all()
