"""Runs registered crawlers concurrently and aggregates their outcomes."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Optional

from common.errors import CrawlRunError
from crawl_sources.crawler import Crawler
from run_crawlers.models import ManagerState, RunSummary, TaskOutcome

logger = logging.getLogger(__name__)

CANCELLED_REASON = "cancelled before start (shutdown requested)"


class CrawlerManager:
    """Owns a set of crawlers and runs each as an isolated unit of work.

    A failing crawler never stops the others; every unit is joined before the
    run is reported.
    """

    def __init__(self, max_workers: Optional[int] = None, cancel_event: Optional[threading.Event] = None):
        self.crawlers: list[Crawler] = []
        self.max_workers = max_workers
        self.cancel_event = cancel_event
        self.state = ManagerState.IDLE

    def register(self, crawler: Crawler) -> "CrawlerManager":
        self.crawlers.append(crawler)
        return self

    def _run_crawler(self, crawler: Crawler) -> TaskOutcome:
        if self.cancel_event is not None and self.cancel_event.is_set():
            return TaskOutcome(name=crawler.name, error=CANCELLED_REASON)
        try:
            result = crawler.run()
        except Exception as e:
            return TaskOutcome(name=crawler.name, error=f"{type(e).__name__}: {e}")
        return TaskOutcome(name=crawler.name, result=result)

    def run_all(self) -> RunSummary:
        """Run every registered crawler; raise CrawlRunError if any failed."""
        self.state = ManagerState.RUNNING
        summary = RunSummary()
        logger.info("Running %d crawlers", len(self.crawlers))

        if self.crawlers:
            workers = self.max_workers or len(self.crawlers)
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [executor.submit(self._run_crawler, crawler) for crawler in self.crawlers]
                for future in as_completed(futures):
                    outcome = future.result()
                    summary.outcomes.append(outcome)
                    if outcome.ok:
                        logger.info("Crawler %s completed successfully", outcome.name)
                    else:
                        logger.error("Crawler %s failed: %s", outcome.name, outcome.error)

        logger.info("Crawl run finished: %d succeeded, %d failed", summary.succeeded, summary.failed)

        if summary.failed:
            self.state = ManagerState.SOME_FAILED
            raise CrawlRunError(summary.succeeded, summary.failed, summary)

        self.state = ManagerState.ALL_SUCCEEDED
        return summary
