"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
from datetime import date, datetime, timezone


def setup_logging() -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def utc_today() -> date:
    """Current date in UTC, used for object paths."""
    return datetime.now(timezone.utc).date()


def parse_slugs(value: str | None) -> list[str] | None:
    """Parse a comma-separated --only argument. None means every crawler."""
    if not value or value.strip().lower() == "all":
        return None
    slugs = [part.strip() for part in value.split(",") if part.strip()]
    return slugs or None


def _parse_bounded_int(value: str, field_name: str, upper: int) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be an integer") from exc
    if not 0 <= number <= upper:
        raise argparse.ArgumentTypeError(f"{field_name} must be between 0 and {upper}")
    return number


def parse_hour(value: str) -> int:
    """Parse a UTC hour for argparse arguments.

    Args:
        value: Hour string, 0-23.

    Returns:
        Parsed hour.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer in range.
    """
    return _parse_bounded_int(value, "hour", 23)


def parse_minute(value: str) -> int:
    """Parse a minute for argparse arguments.

    Args:
        value: Minute string, 0-59.

    Returns:
        Parsed minute.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer in range.
    """
    return _parse_bounded_int(value, "minute", 59)
