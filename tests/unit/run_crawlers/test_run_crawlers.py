"""Tests for run_crawlers.run_crawlers module."""

from unittest.mock import Mock, patch

import pytest

from common.config import parse_config
from common.errors import ConfigError, CrawlRunError
from crawl_sources.sources.custom_site import CustomSiteCrawler
from crawl_sources.sources.github_trending import GithubTrendingCrawler
from crawl_sources.sources.hacker_news import HackerNewsCrawler
from crawl_sources.sources.rankings import RankingTableCrawler
from crawl_sources.sources.xai_news import XaiNewsCrawler
from crawl_sources.models import CrawlResult
from run_crawlers.run_crawlers import CRAWLER_SLUGS, build_crawlers, run_once


def _full_config():
    config = parse_config({"languages": ["", "python"]})
    config.gemini_api_key = "g-key"
    config.xai_api_key = "x-key"
    config.custom_site_url = "https://example.com"
    return config


class TestBuildCrawlers:
    def test_everything_configured(self) -> None:
        crawlers = build_crawlers(_full_config(), Mock())
        assert sorted(c.slug for c in crawlers) == sorted(CRAWLER_SLUGS)

    def test_unconfigured_crawlers_are_omitted(self) -> None:
        crawlers = build_crawlers(parse_config({}), Mock())

        assert all(isinstance(c, RankingTableCrawler) for c in crawlers)
        assert sorted(c.slug for c in crawlers) == ["mcp-rankings", "openrouter-rankings"]

    def test_each_credential_enables_its_crawler(self) -> None:
        config = parse_config({"languages": ["rust"]})
        config.xai_api_key = "x-key"

        types = {type(c) for c in build_crawlers(config, Mock())}

        assert GithubTrendingCrawler in types
        assert XaiNewsCrawler in types
        assert HackerNewsCrawler not in types
        assert CustomSiteCrawler not in types

    def test_only_restricts(self) -> None:
        crawlers = build_crawlers(_full_config(), Mock(), only=["hacker-news", "mcp-rankings"])
        assert sorted(c.slug for c in crawlers) == ["hacker-news", "mcp-rankings"]

    def test_only_unknown_slug_raises(self) -> None:
        with pytest.raises(ConfigError):
            build_crawlers(_full_config(), Mock(), only=["reddit"])

    def test_crawlers_share_store(self) -> None:
        store = Mock()
        assert all(c.store is store for c in build_crawlers(_full_config(), store))


class TestRunOnce:
    @patch("run_crawlers.run_crawlers.build_crawlers")
    def test_runs_registered_crawlers(self, mock_build) -> None:
        crawler = Mock()
        crawler.name = "Fake"
        crawler.run.return_value = CrawlResult(name="Fake", slug="fake", path="2024-03-07/fake.md")
        mock_build.return_value = [crawler]
        store = Mock()
        config = parse_config({})

        summary = run_once(config=config, store=store, only=["mcp-rankings"])

        assert summary.succeeded == 1
        mock_build.assert_called_once_with(config, store, ["mcp-rankings"])

    @patch("run_crawlers.run_crawlers.build_crawlers")
    def test_failure_raises_run_error(self, mock_build) -> None:
        crawler = Mock()
        crawler.name = "Fake"
        crawler.run.side_effect = RuntimeError("boom")
        mock_build.return_value = [crawler]

        with pytest.raises(CrawlRunError):
            run_once(config=parse_config({}), store=Mock())

    @patch("run_crawlers.run_crawlers.get_object_store")
    @patch("run_crawlers.run_crawlers.load_config")
    @patch("run_crawlers.run_crawlers.build_crawlers")
    def test_defaults_load_config_and_store(self, mock_build, mock_load, mock_store) -> None:
        mock_load.return_value = parse_config({})
        mock_build.return_value = []

        run_once()

        mock_load.assert_called_once_with()
        mock_store.assert_called_once_with(mock_load.return_value)
        mock_build.assert_called_once_with(mock_load.return_value, mock_store.return_value, None)
