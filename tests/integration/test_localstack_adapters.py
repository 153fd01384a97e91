from __future__ import annotations

import os
from uuid import uuid4

import pytest

from src.adapters.aws import s3_client
from src.adapters.persistence import InMemoryGraphRepository, S3CachedGraphRepository
from src.domain.algorithms.station_graph import StationGraph
from src.domain.models import TimetableTables


def _tables() -> TimetableTables:
    return TimetableTables(
        trip_rows=(("1", "2", "0800", "0900"), ("2", "3", "0920", "1000")),
        station_rows=(("1", "A"), ("2", "B"), ("3", "C")),
    )


@pytest.mark.integration
def test_s3_cached_graph_repository_round_trips_graph(require_localstack: str) -> None:
    bucket = "timetable-test-station-graphs"
    os.environ["GRAPH_CACHE_BUCKET"] = bucket
    os.environ["GRAPH_CACHE_PREFIX"] = f"station-graphs-test-{uuid4()}"

    s3 = s3_client()
    try:
        s3.create_bucket(
            Bucket=bucket,
            CreateBucketConfiguration={
                "LocationConstraint": os.environ.get("AWS_REGION", "eu-west-1")
            },
        )
    except s3.exceptions.BucketAlreadyOwnedByYou:
        pass

    class _CountingUpstream(InMemoryGraphRepository):
        calls = 0

        def load_graph(self, tables: TimetableTables) -> StationGraph:
            type(self).calls += 1
            return StationGraph(tables.trip_rows, tables.station_rows)

    cached = S3CachedGraphRepository(upstream=_CountingUpstream())

    g1 = cached.load_graph(_tables())
    assert _CountingUpstream.calls == 1

    g2 = cached.load_graph(_tables())
    assert _CountingUpstream.calls == 1
    assert g2.get_shortest_route(1, 3, True).total_weight == 120
    assert g1.get_shortest_route(1, 3, True) == g2.get_shortest_route(1, 3, True)
