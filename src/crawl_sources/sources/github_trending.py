"""GitHub trending repositories, one page per configured language."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import date
from typing import Sequence

from common.config import HttpConfig
from common.http import build_session, get_text
from common.storage import ObjectStore
from crawl_sources.crawler import Crawler
from crawl_sources.html import compile_selector, first_text, parse_document
from crawl_sources.models import CrawlResult, Repository

logger = logging.getLogger(__name__)

TRENDING_URL = "https://github.com/trending/{language}?since=daily"
OVERALL_TRENDING_URL = "https://github.com/trending?since=daily"

ARTICLE_SELECTOR = "article.Box-row"
NAME_SELECTOR = "h2.h3 a"
DESCRIPTION_SELECTOR = "p.col-9"
STARS_SELECTOR = "a[href*='/stargazers']"

MARKDOWN_FORMAT = "\n# {title}\n\n**Stars**: {stars}\n\n[View Repository]({link})\n\n{description}\n"
SECTION_SEPARATOR = "\n---\n"
NO_DESCRIPTION = "No description provided."


def trending_url(language: str) -> str:
    """Trending page URL; an empty language means the overall list."""
    if not language:
        return OVERALL_TRENDING_URL
    return TRENDING_URL.format(language=language)


def parse_trending(html: str) -> list[Repository]:
    """Extract repositories from a trending page, skipping rows without a name."""
    article_sel = compile_selector(ARTICLE_SELECTOR)
    name_sel = compile_selector(NAME_SELECTOR)
    desc_sel = compile_selector(DESCRIPTION_SELECTOR)
    stars_sel = compile_selector(STARS_SELECTOR)

    document = parse_document(html)
    if document is None:
        return []

    repositories = []
    for article in article_sel(document):
        name_nodes = name_sel(article)
        href = name_nodes[0].get("href") if name_nodes else None
        full_name = href.strip().lstrip("/") if href else ""
        if not full_name:
            logger.warning("Could not extract repository name and owner from an article. Skipping.")
            continue

        stars = first_text(article, stars_sel)
        stars = stars.replace(",", "") if stars else ""

        repositories.append(
            Repository(
                name=full_name,
                link=f"https://github.com/{full_name}",
                stars=stars or "0",
                description=first_text(article, desc_sel) or None,
            )
        )
    return repositories


def render_repository(repository: Repository) -> str:
    return MARKDOWN_FORMAT.format(
        title=repository.name,
        stars=repository.stars,
        link=repository.link,
        description=repository.description or NO_DESCRIPTION,
    )


class GithubTrendingCrawler(Crawler):
    name = "GitHub Trending"
    slug = "github-trending"

    def __init__(self, store: ObjectStore, languages: Sequence[str], http_config: HttpConfig):
        super().__init__(store)
        self.languages = list(languages)
        self.timeout = http_config.request_timeout
        self.session = build_session(http_config)

    def fetch_language(self, language: str) -> list[Repository]:
        url = trending_url(language)
        logger.info("Fetching trending repositories from: %s", url)
        repositories = parse_trending(get_text(self.session, url, self.timeout))
        logger.info("Found %d repositories for language '%s'", len(repositories), language or "overall")
        return repositories

    def fetch(self) -> list[Repository]:
        """Fetch every language concurrently; a failing language is skipped."""
        repositories: list[Repository] = []
        if not self.languages:
            return repositories

        with ThreadPoolExecutor(max_workers=len(self.languages)) as executor:
            futures = {executor.submit(self.fetch_language, lang): lang for lang in self.languages}
            for future in as_completed(futures):
                language = futures[future]
                try:
                    found = future.result()
                except Exception as e:
                    logger.warning("Failed to fetch trending for language '%s': %s", language, e)
                    continue
                repositories.extend(found)
                logger.info("Processed language: %s", language or "overall")
        return repositories

    def parse(self, raw: list[Repository]) -> list[Repository]:
        return raw

    def render(self, records: Sequence[Repository], day: date) -> str:
        return SECTION_SEPARATOR.join(render_repository(repo) for repo in records)

    def run(self) -> CrawlResult:
        # A broken selector fails the whole task, not each language.
        for css in (ARTICLE_SELECTOR, NAME_SELECTOR, DESCRIPTION_SELECTOR, STARS_SELECTOR):
            compile_selector(css)
        return super().run()
