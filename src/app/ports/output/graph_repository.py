from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.algorithms.station_graph import StationGraph
from src.domain.models import TimetableTables


class IGraphRepository(ABC):
    """Port for obtaining a fully precomputed station graph."""

    @abstractmethod
    def load_graph(self, tables: TimetableTables) -> StationGraph:
        """Return the graph for these tables, building it if needed."""
