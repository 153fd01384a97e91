from .in_memory_graph_repository import InMemoryGraphRepository
from .local_timetable_repository import LocalTimetableRepository
from .s3_cached_graph_repository import S3CachedGraphRepository

__all__ = [
    "InMemoryGraphRepository",
    "LocalTimetableRepository",
    "S3CachedGraphRepository",
]
