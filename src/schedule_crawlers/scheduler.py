"""Daily scheduler that triggers one crawl run at a fixed UTC time."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class DailyScheduler:
    """Call `job` once a day at hour:minute UTC until shutdown() is called.

    A failing run is logged and the loop keeps going.
    """

    def __init__(
        self,
        hour: int,
        minute: int,
        job: Callable[[], object],
        stop_event: Optional[threading.Event] = None,
        clock: Callable[[], datetime] | None = None,
    ):
        if not 0 <= hour <= 23 or not 0 <= minute <= 59:
            raise ValueError(f"Invalid schedule time {hour:02d}:{minute:02d}")
        self.hour = hour
        self.minute = minute
        self.job = job
        self.stop_event = stop_event or threading.Event()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def next_run_after(self, now: datetime) -> datetime:
        """The first hour:minute UTC strictly after `now`."""
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        now = now.astimezone(timezone.utc)
        candidate = now.replace(hour=self.hour, minute=self.minute, second=0, microsecond=0)
        if candidate <= now:
            candidate += timedelta(days=1)
        return candidate

    def run_job(self) -> bool:
        """Run the job once; True when it completed without raising."""
        logger.info("Starting scheduled crawl run")
        try:
            self.job()
        except Exception as e:
            logger.error("Scheduled crawl run failed: %s", e)
            return False
        logger.info("Scheduled crawl run completed successfully")
        return True

    def shutdown(self) -> None:
        logger.info("Shutdown requested")
        self.stop_event.set()

    def run_forever(self, run_now: bool = False) -> None:
        logger.info("Scheduler started; runs daily at %02d:%02d UTC", self.hour, self.minute)
        if run_now and not self.stop_event.is_set():
            self.run_job()

        while not self.stop_event.is_set():
            now = self.clock()
            next_run = self.next_run_after(now)
            logger.info("Next crawl run at %s", next_run.isoformat())
            if self.stop_event.wait((next_run - now).total_seconds()):
                break
            self.run_job()

        logger.info("Scheduler stopped")
