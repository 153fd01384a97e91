from __future__ import annotations

import logging
import time
from typing import Sequence

import networkx as nx

from src.domain.exceptions import TimetableError
from src.domain.models.departure import Departure
from src.domain.models.route import Route
from src.domain.models.timetable import Station, TripRecord

from .all_pairs import ShortestPaths, floyd_warshall, ride_and_layover, ride_only
from .itinerary import shortest_route
from .station_views import build_arrivals_view, build_departures_view
from .time_expanded import build_departures_graph, departures_digraph

logger = logging.getLogger(__name__)

# Some timetables record afternoon departures on a 12-hour clock.
HALF_DAY_CLOCK = 1200


class StationGraph:
    """Timetable graph with precomputed shortest itineraries.

    Holds three views of the same trip table:

    - a station graph (trips leaving each station) for schedule lookups;
    - an arrivals graph (trips reaching each station);
    - a time-expanded departures graph, one vertex per scheduled trip plus a
      sink per station, whose edges only connect trains that can actually be
      caught.

    Both next-hop tables are computed once here. Nothing can be added after
    construction since that would silently invalidate them.
    """

    def __init__(
        self,
        trip_table: Sequence[Sequence[str]],
        station_table: Sequence[Sequence[str]],
        station_count: int | None = None,
    ) -> None:
        started = time.perf_counter()

        if station_count is None:
            station_count = len(station_table)
        elif station_count != len(station_table):
            raise TimetableError(
                f"Station count {station_count} does not match "
                f"{len(station_table)} station rows"
            )
        self._station_count = station_count

        records = tuple(TripRecord.from_row(row) for row in trip_table)
        station_ids = tuple(int(row[0]) for row in station_table)

        self._stations = build_departures_view(records, station_count=station_count)
        self._arrivals = build_arrivals_view(records, station_count=station_count)
        self._departures = build_departures_graph(records, station_ids)
        self._departures_digraph = departures_digraph(self._departures)
        grouped: dict[int, list[int]] = {}
        for vertex in self._departures:
            grouped.setdefault(vertex.station_id, []).append(vertex.lookup_key)
        self._keys_by_station: dict[int, tuple[int, ...]] = {
            sid: tuple(keys) for sid, keys in grouped.items()
        }

        self._with_layovers = floyd_warshall(self._departures, ride_and_layover)
        self._without_layovers = floyd_warshall(self._departures, ride_only)

        logger.info(
            "Station graph ready: %d stations, %d departure vertices in %.3fs",
            station_count,
            len(self._departures),
            time.perf_counter() - started,
        )

    @property
    def station_count(self) -> int:
        return self._station_count

    @property
    def departure_count(self) -> int:
        return len(self._departures)

    def get_vertex_count(self) -> int:
        """Number of stations, i.e. vertices of the station graph."""

        return self._station_count

    def shortest_paths(self, *, include_layovers: bool) -> ShortestPaths:
        return self._with_layovers if include_layovers else self._without_layovers

    def _station_is_valid(self, station_id: int) -> bool:
        return 1 <= station_id <= self._station_count

    def get_station_from_graph(self, station_id: int) -> Station | None:
        if not self._station_is_valid(station_id):
            return None
        return self._stations[station_id - 1]

    def get_station_from_arrival_graph(self, station_id: int) -> Station | None:
        if not self._station_is_valid(station_id):
            return None
        return self._arrivals[station_id - 1]

    def get_departure_from_graph(self, lookup_key: int) -> Departure | None:
        if not 0 <= lookup_key < len(self._departures):
            return None
        return self._departures[lookup_key]

    def get_shortest_route(
        self,
        departure_station_id: int,
        destination_station_id: int,
        include_layovers: bool,
    ) -> Route | None:
        return shortest_route(
            self._departures,
            self._keys_by_station.get(departure_station_id, ()),
            self._keys_by_station.get(destination_station_id, ()),
            self.shortest_paths(include_layovers=include_layovers),
            include_layovers=include_layovers,
        )

    def get_route_from_time(
        self,
        twenty_four_time: int,
        departure_station_id: int,
        destination_station_id: int,
    ) -> Route | None:
        """Shortest route (layovers counted) leaving at exactly the given time.

        A departure stored as `time - 1200` also matches.
        """

        def _departs_at(vertex: Departure) -> bool:
            return vertex.departure_time in (
                twenty_four_time,
                twenty_four_time - HALF_DAY_CLOCK,
            )

        return shortest_route(
            self._departures,
            self._keys_by_station.get(departure_station_id, ()),
            self._keys_by_station.get(destination_station_id, ()),
            self._with_layovers,
            include_layovers=True,
            departure_filter=_departs_at,
        )

    def path_exists(self, start_station_id: int, target_station_id: int) -> bool:
        """True when a chain of catchable trains links the two stations.

        Searches the time-expanded graph, so it agrees with
        `get_shortest_route(start, target, True) is not None`.
        """

        if not (
            self._station_is_valid(start_station_id)
            and self._station_is_valid(target_station_id)
        ):
            return False
        targets = set(self._keys_by_station.get(target_station_id, ()))
        return any(
            not targets.isdisjoint(nx.descendants(self._departures_digraph, key))
            for key in self._keys_by_station.get(start_station_id, ())
        )

    def direct_path_exists(self, station1_id: int, station2_id: int) -> bool:
        station = self.get_station_from_graph(station1_id)
        if station is None:
            return False
        return any(trip.destination_id == station2_id for trip in station.trips)
