"""Hacker News top stories via the Firebase API."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import date
from typing import Any, Optional, Sequence

from common.config import HackerNewsConfig, HttpConfig
from common.http import build_session, get_json
from common.storage import ObjectStore
from crawl_sources.crawler import Crawler
from crawl_sources.html import strip_markup
from crawl_sources.models import Story
from crawl_sources.summarize import Summarizer

logger = logging.getLogger(__name__)

BASE_URL = "https://hacker-news.firebaseio.com/v0"
SECTION_SEPARATOR = "\n\n---\n\n"
NO_CONTENT = "No content available."
MAX_FETCH_WORKERS = 16


def parse_item(item: Any) -> Optional[Story]:
    """Build a Story from an item payload; None for deleted or untitled items."""
    if not isinstance(item, dict):
        return None
    title = (item.get("title") or "").strip()
    if not title:
        return None
    try:
        score = int(item.get("score") or 0)
        story_id = int(item["id"])
    except (KeyError, TypeError, ValueError):
        return None
    return Story(
        story_id=story_id,
        title=title,
        score=score,
        url=item.get("url") or None,
        text=item.get("text") or None,
    )


def render_story(story: Story) -> str:
    if story.url:
        body = f"[View Link]({story.url})"
    elif story.summary:
        body = story.summary
    elif story.text:
        body = strip_markup(story.text) or NO_CONTENT
    else:
        body = NO_CONTENT
    return f"# {story.title}\n\n**Score**: {story.score}\n\n{body}"


class HackerNewsCrawler(Crawler):
    name = "Hacker News"
    slug = "hacker-news"

    def __init__(
        self,
        store: ObjectStore,
        summarizer: Summarizer,
        hn_config: HackerNewsConfig,
        http_config: HttpConfig,
        base_url: str = BASE_URL,
    ):
        super().__init__(store)
        self.summarizer = summarizer
        self.config = hn_config
        self.base_url = base_url.rstrip("/")
        self.timeout = http_config.request_timeout
        self.session = build_session(http_config)

    def get_top_stories(self) -> list[int]:
        ids = get_json(self.session, f"{self.base_url}/topstories.json", self.timeout)
        if not isinstance(ids, list):
            return []
        return ids[: self.config.max_stories]

    def get_story(self, story_id: int) -> Any:
        return get_json(self.session, f"{self.base_url}/item/{story_id}.json", self.timeout)

    def should_summarize(self, story: Story) -> bool:
        if not story.text:
            return False
        length = len(story.text.encode("utf-8"))
        return self.config.min_html_length <= length < self.config.max_html_length

    def summarize_story(self, story: Story) -> Optional[str]:
        """Summarize the item's text; failures degrade to no summary."""
        logger.info("Summarizing story: %s", story.title)
        try:
            return self.summarizer.summarize(story.title, strip_markup(story.text))
        except Exception as e:
            logger.warning("Error summarizing story %s: %s", story.title, e)
            return None

    def process_story(self, story_id: int) -> Optional[Story]:
        story = parse_item(self.get_story(story_id))
        if story is None:
            logger.warning("Skipping story %s: deleted or missing title", story_id)
            return None
        if story.score < self.config.min_score_threshold:
            return None
        if self.should_summarize(story):
            story.summary = self.summarize_story(story)
        return story

    def fetch(self) -> list[int]:
        story_ids = self.get_top_stories()
        logger.info("Fetched %d top story IDs", len(story_ids))
        return story_ids

    def parse(self, raw: Sequence[int]) -> list[Story]:
        """Fetch each story concurrently; a failing item is skipped.

        Stories keep the top-stories order.
        """
        if not raw:
            return []

        by_id: dict[int, Story] = {}
        workers = min(MAX_FETCH_WORKERS, len(raw))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self.process_story, story_id): story_id for story_id in raw}
            for future in as_completed(futures):
                story_id = futures[future]
                try:
                    story = future.result()
                except Exception as e:
                    logger.warning("Error fetching story %s: %s", story_id, e)
                    continue
                if story is not None:
                    by_id[story_id] = story

        stories = [by_id[story_id] for story_id in raw if story_id in by_id]
        logger.info("%d of %d stories passed the score filter", len(stories), len(raw))
        return stories

    def render(self, records: Sequence[Story], day: date) -> str:
        return SECTION_SEPARATOR.join(render_story(story) for story in records)
