from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import boto3
from botocore.client import BaseClient

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client
else:
    S3Client = BaseClient  # type: ignore[misc,assignment]

DEFAULT_GRAPH_CACHE_PREFIX = "station-graphs"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_str(name: str) -> str | None:
    return (os.getenv(name) or "").strip() or None


@dataclass(frozen=True, slots=True)
class AwsRuntimeConfig:
    """S3 settings for the precomputed graph cache.

    Env vars:
      - GRAPH_CACHE_BUCKET (unset disables the cache)
      - GRAPH_CACHE_PREFIX (default: station-graphs)
      - AWS_REGION, ENDPOINT_URL, USE_LOCALSTACK, LOCALSTACK_ENDPOINT_URL
    """

    use_localstack: bool
    region: str
    endpoint_url: str | None
    graph_cache_bucket: str | None = None
    graph_cache_prefix: str = DEFAULT_GRAPH_CACHE_PREFIX

    @staticmethod
    def from_env() -> "AwsRuntimeConfig":
        prefix = _env_str("GRAPH_CACHE_PREFIX") or DEFAULT_GRAPH_CACHE_PREFIX
        return AwsRuntimeConfig(
            use_localstack=_env_bool("USE_LOCALSTACK"),
            region=os.getenv("AWS_REGION", "eu-west-1"),
            endpoint_url=_env_str("ENDPOINT_URL"),
            graph_cache_bucket=_env_str("GRAPH_CACHE_BUCKET"),
            graph_cache_prefix=prefix.strip("/"),
        )

    @property
    def graph_cache_enabled(self) -> bool:
        return self.graph_cache_bucket is not None

    def resolved_endpoint_url(self) -> str | None:
        if self.endpoint_url:
            return self.endpoint_url
        if self.use_localstack:
            return os.getenv("LOCALSTACK_ENDPOINT_URL", "http://localhost:4566")
        return None


def s3_client(cfg: AwsRuntimeConfig | None = None) -> S3Client:
    cfg = cfg or AwsRuntimeConfig.from_env()
    session = boto3.session.Session(region_name=cfg.region)
    return session.client("s3", endpoint_url=cfg.resolved_endpoint_url())
