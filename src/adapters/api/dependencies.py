from __future__ import annotations

from functools import lru_cache

from src.adapters.aws import AwsRuntimeConfig
from src.adapters.persistence import (
    InMemoryGraphRepository,
    LocalTimetableRepository,
    S3CachedGraphRepository,
)
from src.app.ports.output import IGraphRepository
from src.app.services.schedule_service import ScheduleService


def build_graph_repository() -> IGraphRepository:
    base: IGraphRepository = InMemoryGraphRepository()
    if AwsRuntimeConfig.from_env().graph_cache_enabled:
        return S3CachedGraphRepository(upstream=base)
    return base


@lru_cache(maxsize=1)
def get_schedule_service() -> ScheduleService:
    # The O(V^3) precomputation runs once per process.
    return ScheduleService.from_repositories(
        timetable_repository=LocalTimetableRepository(),
        graph_repository=build_graph_repository(),
    )
