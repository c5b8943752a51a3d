"""Error taxonomy shared by crawlers, the storage sink and the run entry point."""

from __future__ import annotations

from typing import Any


class CrawlerError(Exception):
    """Base class for every error raised by the crawl pipeline."""


class NetworkError(CrawlerError):
    """Transport failure or non-success status on a fetch."""


class StructureError(CrawlerError):
    """A parse pattern or selector could not be constructed."""


class UploadError(CrawlerError):
    """The object store reported a failed upload."""


class ConfigError(CrawlerError):
    """A required configuration value is missing or invalid."""


class SummarizationError(CrawlerError):
    """The summarizer could not produce a summary."""


class CrawlRunError(CrawlerError):
    """At least one crawler failed during a run.

    Raised only after every registered crawler has finished, so the counts are final.
    """

    def __init__(self, succeeded: int, failed: int, summary: Any = None):
        self.succeeded = succeeded
        self.failed = failed
        self.summary = summary
        super().__init__(f"Some crawlers failed: {failed} failed, {succeeded} succeeded")
