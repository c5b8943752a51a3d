"""Outcome types for one crawl run."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from crawl_sources.models import CrawlResult


class ManagerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ALL_SUCCEEDED = "all_succeeded"
    SOME_FAILED = "some_failed"


@dataclass
class TaskOutcome:
    """Result of one crawler task: a CrawlResult on success, an error message otherwise."""
    name: str
    result: Optional[CrawlResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunSummary:
    outcomes: list[TaskOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    @property
    def ok(self) -> bool:
        return self.failed == 0
