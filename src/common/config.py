"""Configuration loader for the crawlers.

Tunables come from `configs/{name}.yaml`; credentials and per-deployment
values come from the environment (a local `.env` is loaded first).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from common.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"
DEFAULT_CONFIG_NAME = "default"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass
class HackerNewsConfig:
    max_stories: int = 30
    min_score_threshold: int = 20
    min_html_length: int = 100
    max_html_length: int = 10_000


@dataclass
class HttpConfig:
    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class StorageConfig:
    backend: str = "s3"  # "s3" or "local"
    local_path: str = "output"
    bucket: Optional[str] = None
    endpoint_url: Optional[str] = None


@dataclass
class ScheduleConfig:
    hour: int = 9
    minute: int = 0


@dataclass
class Config:
    languages: list[str] = field(default_factory=list)
    hacker_news: HackerNewsConfig = field(default_factory=HackerNewsConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    max_workers: Optional[int] = None
    gemini_api_key: Optional[str] = None
    xai_api_key: Optional[str] = None
    custom_site_url: Optional[str] = None


def parse_languages(value: str | None) -> list[str]:
    """Split a comma-separated language list, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def find_config_path(config_name: str | None, config_dir: Path = CONFIG_DIR) -> Path:
    """Resolve a config name (without .yaml) or an explicit path to a file."""
    if config_name is None:
        config_name = os.environ.get("CRAWLER_CONFIG", DEFAULT_CONFIG_NAME)

    candidate = Path(config_name)
    if candidate.suffix in (".yaml", ".yml"):
        config_path = candidate
    else:
        config_path = config_dir / f"{config_name}.yaml"

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    return config_path


def load_config(config_name: str | None = None) -> Config:
    """Load YAML tunables and overlay environment values."""
    load_dotenv()

    config_path = find_config_path(config_name)
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    config = parse_config(data)
    apply_env(config, os.environ)
    logger.info("Loaded config from %s", config_path)
    return config


def parse_config(data: dict) -> Config:
    """Parse a config dictionary into a Config object."""
    hn = data.get("hacker_news", {}) or {}
    http = data.get("http", {}) or {}
    storage = data.get("storage", {}) or {}
    schedule = data.get("schedule", {}) or {}

    return Config(
        languages=list(data.get("languages") or []),
        hacker_news=HackerNewsConfig(
            max_stories=int(hn.get("max_stories", 30)),
            min_score_threshold=int(hn.get("min_score_threshold", 20)),
            min_html_length=int(hn.get("min_html_length", 100)),
            max_html_length=int(hn.get("max_html_length", 10_000)),
        ),
        http=HttpConfig(
            request_timeout=float(http.get("request_timeout", 30.0)),
            user_agent=http.get("user_agent") or DEFAULT_USER_AGENT,
        ),
        storage=StorageConfig(
            backend=storage.get("backend", "s3"),
            local_path=storage.get("local_path", "output"),
            bucket=storage.get("bucket"),
            endpoint_url=storage.get("endpoint_url"),
        ),
        schedule=ScheduleConfig(
            hour=int(schedule.get("hour", 9)),
            minute=int(schedule.get("minute", 0)),
        ),
        max_workers=data.get("max_workers"),
    )


def apply_env(config: Config, env) -> Config:
    """Overlay credentials and deployment values from the environment.

    Empty strings count as not configured.
    """
    languages = parse_languages(env.get("LANGUAGES"))
    if languages:
        config.languages = languages

    config.gemini_api_key = env.get("GEMINI_API_KEY") or None
    config.xai_api_key = env.get("XAI_API_KEY") or None
    config.custom_site_url = env.get("CUSTOM_SITE_URL") or None

    config.storage.bucket = env.get("S3_BUCKET_NAME") or config.storage.bucket
    config.storage.endpoint_url = env.get("S3_ENDPOINT") or config.storage.endpoint_url
    return config
