"""Tests for common.config module."""

import pytest

from common.config import (
    DEFAULT_USER_AGENT,
    apply_env,
    find_config_path,
    load_config,
    parse_config,
    parse_languages,
)
from common.errors import ConfigError


class TestParseLanguages:
    def test_splits_and_strips(self) -> None:
        assert parse_languages("python, rust ,go") == ["python", "rust", "go"]

    def test_drops_blanks(self) -> None:
        assert parse_languages("python,,") == ["python"]

    def test_none_and_empty(self) -> None:
        assert parse_languages(None) == []
        assert parse_languages("") == []


class TestParseConfig:
    def test_defaults_for_empty_dict(self) -> None:
        config = parse_config({})
        assert config.languages == []
        assert config.hacker_news.max_stories == 30
        assert config.hacker_news.min_score_threshold == 20
        assert config.hacker_news.min_html_length == 100
        assert config.hacker_news.max_html_length == 10_000
        assert config.http.request_timeout == 30.0
        assert config.http.user_agent == DEFAULT_USER_AGENT
        assert config.storage.backend == "s3"
        assert config.schedule.hour == 9
        assert config.schedule.minute == 0
        assert config.max_workers is None

    def test_reads_sections(self) -> None:
        config = parse_config(
            {
                "languages": ["", "python"],
                "hacker_news": {"max_stories": 5, "min_score_threshold": 50},
                "http": {"request_timeout": 10},
                "storage": {"backend": "local", "local_path": "/tmp/out"},
                "schedule": {"hour": 6, "minute": 30},
                "max_workers": 4,
            }
        )
        assert config.languages == ["", "python"]
        assert config.hacker_news.max_stories == 5
        assert config.hacker_news.min_score_threshold == 50
        assert config.http.request_timeout == 10.0
        assert config.storage.backend == "local"
        assert config.storage.local_path == "/tmp/out"
        assert config.schedule.hour == 6
        assert config.schedule.minute == 30
        assert config.max_workers == 4


class TestApplyEnv:
    def test_reads_credentials(self) -> None:
        config = apply_env(
            parse_config({}),
            {
                "GEMINI_API_KEY": "g-key",
                "XAI_API_KEY": "x-key",
                "CUSTOM_SITE_URL": "https://example.com",
                "S3_BUCKET_NAME": "daily",
                "S3_ENDPOINT": "https://storage.example.com/s3",
            },
        )
        assert config.gemini_api_key == "g-key"
        assert config.xai_api_key == "x-key"
        assert config.custom_site_url == "https://example.com"
        assert config.storage.bucket == "daily"
        assert config.storage.endpoint_url == "https://storage.example.com/s3"

    def test_empty_values_are_not_configured(self) -> None:
        config = apply_env(parse_config({}), {"GEMINI_API_KEY": "", "XAI_API_KEY": "", "CUSTOM_SITE_URL": ""})
        assert config.gemini_api_key is None
        assert config.xai_api_key is None
        assert config.custom_site_url is None

    def test_languages_env_overrides_yaml(self) -> None:
        config = apply_env(parse_config({"languages": ["python"]}), {"LANGUAGES": "rust,go"})
        assert config.languages == ["rust", "go"]

    def test_missing_languages_env_keeps_yaml(self) -> None:
        config = apply_env(parse_config({"languages": ["python"]}), {})
        assert config.languages == ["python"]


class TestFindConfigPath:
    def test_resolves_name_in_config_dir(self, tmp_path) -> None:
        (tmp_path / "daily.yaml").write_text("languages: []\n")
        assert find_config_path("daily", config_dir=tmp_path) == tmp_path / "daily.yaml"

    def test_accepts_explicit_yaml_path(self, tmp_path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("languages: []\n")
        assert find_config_path(str(path)) == path

    def test_uses_env_when_name_missing(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "staging.yaml").write_text("languages: []\n")
        monkeypatch.setenv("CRAWLER_CONFIG", "staging")
        assert find_config_path(None, config_dir=tmp_path) == tmp_path / "staging.yaml"

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(ConfigError):
            find_config_path("nope", config_dir=tmp_path)


class TestLoadConfig:
    def test_loads_yaml_and_env(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "test.yaml"
        path.write_text("languages:\n  - python\nstorage:\n  backend: local\n")
        monkeypatch.setattr("common.config.load_dotenv", lambda: None)
        monkeypatch.delenv("LANGUAGES", raising=False)
        monkeypatch.setenv("XAI_API_KEY", "x-key")

        config = load_config(str(path))

        assert config.languages == ["python"]
        assert config.storage.backend == "local"
        assert config.xai_api_key == "x-key"

    def test_shipped_default_config_parses(self, monkeypatch) -> None:
        monkeypatch.setattr("common.config.load_dotenv", lambda: None)
        monkeypatch.delenv("LANGUAGES", raising=False)
        config = load_config("default")
        assert "" in config.languages
        assert config.http.request_timeout == 30.0
