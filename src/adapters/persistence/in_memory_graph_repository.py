from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import IGraphRepository
from src.domain.algorithms.station_graph import StationGraph
from src.domain.models import TimetableTables

from .graph_fingerprint import tables_fingerprint

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InMemoryGraphRepository(IGraphRepository):
    """Builds station graphs and keeps them for the life of the process."""

    _graphs: dict[str, StationGraph] = field(default_factory=dict)

    def load_graph(self, tables: TimetableTables) -> StationGraph:
        key = tables_fingerprint(tables)
        graph = self._graphs.get(key)
        if graph is None:
            logger.info("Building station graph %s", key[:12])
            graph = StationGraph(tables.trip_rows, tables.station_rows)
            self._graphs[key] = graph
        return graph
