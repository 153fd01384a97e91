from __future__ import annotations

import gzip
import logging
import pickle
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError

from src.adapters.aws import AwsRuntimeConfig, s3_client
from src.app.ports.output import IGraphRepository
from src.domain.algorithms.station_graph import StationGraph
from src.domain.models import TimetableTables

from .graph_fingerprint import tables_fingerprint

logger = logging.getLogger(__name__)

_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


@dataclass(slots=True)
class S3CachedGraphRepository(IGraphRepository):
    """Caches precomputed station graphs in S3.

    Wraps another IGraphRepository. The pickled graph already holds both
    next-hop tables, so a cache hit skips the Floyd-Warshall passes.

    Bucket and prefix fall back to AwsRuntimeConfig.from_env(). Pickle
    loading is only safe for trusted buckets.
    """

    upstream: IGraphRepository
    bucket: str | None = None
    prefix: str | None = None
    client: Any | None = None

    def load_graph(self, tables: TimetableTables) -> StationGraph:
        cfg = AwsRuntimeConfig.from_env()
        bucket = self.bucket or cfg.graph_cache_bucket
        if not bucket:
            raise RuntimeError("Missing GRAPH_CACHE_BUCKET")
        prefix = (self.prefix or cfg.graph_cache_prefix).strip("/")
        key = f"{prefix}/{tables_fingerprint(tables)}.pkl.gz"
        s3 = self.client or s3_client(cfg)

        try:
            obj = s3.get_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code not in _MISSING_CODES:
                raise
            logger.info("Graph cache miss for s3://%s/%s", bucket, key)
        else:
            logger.info("Graph cache hit for s3://%s/%s", bucket, key)
            return pickle.loads(gzip.decompress(obj["Body"].read()))

        graph = self.upstream.load_graph(tables)
        payload = gzip.compress(pickle.dumps(graph, protocol=pickle.HIGHEST_PROTOCOL))
        s3.put_object(Bucket=bucket, Key=key, Body=payload)
        return graph
