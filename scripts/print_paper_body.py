"""Print the body text of an arXiv paper."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the body text of an arXiv paper.")
    parser.add_argument("arxiv_id", help="arXiv identifier, e.g. 2501.01234")
    parser.add_argument("--config", default=None, help="Config name under configs/ or a path to a YAML file")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    logger = logging.getLogger(__name__)

    load_dotenv()

    from common.config import load_config
    from crawl_sources.sources.arxiv import ArxivClient

    config = load_config(args.config)
    body = ArxivClient(config.http).fetch_paper_body(args.arxiv_id)

    logger.info("Extracted %d lines from %s", len(body.splitlines()), args.arxiv_id)
    print(body)


if __name__ == "__main__":
    main()
