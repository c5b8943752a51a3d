"""Object storage sink for rendered Markdown documents."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from common.config import Config
from common.errors import ConfigError, UploadError

logger = logging.getLogger(__name__)

MARKDOWN_CONTENT_TYPE = "text/markdown"


def build_object_path(slug: str, day: date) -> str:
    """Build the date-partitioned object path for one source."""
    return f"{day.isoformat()}/{slug}.md"


class ObjectStore:
    """Upload interface: one attempt, last write wins."""

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        raise NotImplementedError


class S3ObjectStore(ObjectStore):
    def __init__(self, bucket: str, endpoint_url: str | None = None, client=None):
        self.bucket = bucket
        self.endpoint_url = endpoint_url
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = get_s3_client(self.endpoint_url)
        return self._client

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        key = path.lstrip("/")
        logger.info("Uploading to s3://%s/%s (%d bytes)", self.bucket, key, len(content))
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=content,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            raise UploadError(f"Failed to upload s3://{self.bucket}/{key}: {e}") from e
        logger.info("Uploaded s3://%s/%s", self.bucket, key)


class LocalObjectStore(ObjectStore):
    def __init__(self, output_dir: str = "output"):
        self.output_dir = Path(output_dir)

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        filepath = self.output_dir / path.lstrip("/")
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            filepath.write_bytes(content)
        except OSError as e:
            raise UploadError(f"Failed to write {filepath}: {e}") from e
        logger.info("Saved %d bytes to %s", len(content), filepath)


def get_s3_client(endpoint_url: str | None = None):
    """Create S3 client, optionally against an S3-compatible endpoint."""
    return boto3.client("s3", endpoint_url=endpoint_url)


def get_object_store(config: Config) -> ObjectStore:
    """Pick the storage backend named in the config."""
    backend = config.storage.backend
    if backend == "local":
        return LocalObjectStore(config.storage.local_path)
    if backend == "s3":
        if not config.storage.bucket:
            raise ConfigError("S3_BUCKET_NAME must be set for the s3 storage backend")
        return S3ObjectStore(config.storage.bucket, config.storage.endpoint_url)
    raise ConfigError(f"Unknown storage backend: {backend}")
