"""HTTP helpers shared by the source crawlers."""

from __future__ import annotations

import logging
from typing import Any

import requests

from common.config import HttpConfig
from common.errors import NetworkError

logger = logging.getLogger(__name__)


def build_session(http_config: HttpConfig) -> requests.Session:
    """Create a session owned by a single crawler."""
    session = requests.Session()
    session.headers.update({"User-Agent": http_config.user_agent})
    return session


def _request(session: requests.Session, method: str, url: str, timeout: float, **kwargs) -> requests.Response:
    try:
        response = session.request(method, url, timeout=timeout, **kwargs)
    except requests.RequestException as e:
        raise NetworkError(f"{method} {url} failed: {e}") from e

    if not response.ok:
        raise NetworkError(f"{method} {url} returned {response.status_code}: {response.text[:200]}")
    return response


def get_text(session: requests.Session, url: str, timeout: float) -> str:
    """GET a page and return its body as text."""
    return _request(session, "GET", url, timeout).text


def get_json(session: requests.Session, url: str, timeout: float) -> Any:
    """GET a JSON document and return it decoded."""
    response = _request(session, "GET", url, timeout)
    try:
        return response.json()
    except ValueError as e:
        raise NetworkError(f"GET {url} returned invalid JSON: {e}") from e
