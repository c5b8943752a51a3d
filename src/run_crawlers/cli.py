"""CLI for running every configured crawler once."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import parse_slugs, setup_logging
from common.config import load_config
from common.errors import ConfigError, CrawlRunError
from common.storage import LocalObjectStore, get_object_store
from run_crawlers.run_crawlers import CRAWLER_SLUGS, run_once

logger = logging.getLogger(__name__)


def parse_run_crawlers_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the daily crawlers once.")
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ or a path to a YAML file (default: $CRAWLER_CONFIG or 'default').",
    )
    parser.add_argument(
        "--only",
        default=None,
        help=f"Comma-separated crawler slugs (default: all). Choices: {', '.join(CRAWLER_SLUGS)}.",
    )
    parser.add_argument(
        "--load-local",
        action="store_true",
        help="Write documents under the local output directory instead of object storage.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    setup_logging()
    args = parse_run_crawlers_args(argv)

    try:
        config = load_config(args.config)
        if args.load_local:
            store = LocalObjectStore(config.storage.local_path)
        else:
            store = get_object_store(config)
        summary = run_once(config=config, store=store, only=parse_slugs(args.only))
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except CrawlRunError as e:
        logger.error("%s", e)
        return 1

    logger.info("All %d crawlers completed successfully", summary.succeeded)
    return 0


if __name__ == "__main__":
    sys.exit(main())
