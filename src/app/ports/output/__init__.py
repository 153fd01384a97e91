from .graph_repository import IGraphRepository
from .timetable_repository import ITimetableRepository

__all__ = [
    "IGraphRepository",
    "ITimetableRepository",
]
