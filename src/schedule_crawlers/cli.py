"""CLI for running the crawlers every day at a fixed UTC time."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading

from dotenv import load_dotenv

from common.cli_helpers import parse_hour, parse_minute, setup_logging
from common.config import load_config
from common.errors import ConfigError
from common.storage import get_object_store
from run_crawlers.run_crawlers import run_once
from schedule_crawlers.scheduler import DailyScheduler

logger = logging.getLogger(__name__)


def parse_schedule_crawlers_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the crawlers once a day.")
    parser.add_argument("--config", default=None, help="Config name under configs/ or a path to a YAML file.")
    parser.add_argument("--hour", type=parse_hour, default=None, help="UTC hour (default: from config).")
    parser.add_argument("--minute", type=parse_minute, default=None, help="UTC minute (default: from config).")
    parser.add_argument("--run-now", action="store_true", help="Also run once at startup.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    setup_logging()
    args = parse_schedule_crawlers_args(argv)

    try:
        config = load_config(args.config)
        store = get_object_store(config)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1

    hour = config.schedule.hour if args.hour is None else args.hour
    minute = config.schedule.minute if args.minute is None else args.minute

    stop_event = threading.Event()
    scheduler = DailyScheduler(
        hour,
        minute,
        job=lambda: run_once(config=config, store=store, cancel_event=stop_event),
        stop_event=stop_event,
    )

    def handle_signal(signum, frame):
        logger.info("Received signal %s", signal.Signals(signum).name)
        scheduler.shutdown()

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    scheduler.run_forever(run_now=args.run_now)
    return 0


if __name__ == "__main__":
    sys.exit(main())
