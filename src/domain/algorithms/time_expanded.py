from __future__ import annotations

import logging
from typing import Sequence

import networkx as nx

from src.domain.exceptions import TimetableError
from src.domain.models.departure import Departure, TripPlusLayover
from src.domain.models.timetable import TripRecord

from .clock import clock_to_minutes

logger = logging.getLogger(__name__)


def canonical_keys(records: Sequence[TripRecord]) -> dict[TripRecord, int]:
    """Map each distinct record to the first vertex index that carries it.

    Rows repeating the same (origin, destination, departure, arrival) tuple
    alias one physical departure; connection edges always target the first.
    """

    keys: dict[TripRecord, int] = {}
    for index, record in enumerate(records):
        keys.setdefault(record, index)
    return keys


def sink_keys(station_ids: Sequence[int], *, trip_count: int) -> dict[int, int]:
    keys: dict[int, int] = {}
    for offset, station_id in enumerate(station_ids):
        keys.setdefault(station_id, trip_count + offset)
    return keys


def _edges_for(
    record: TripRecord,
    *,
    departures_by_origin: dict[int, list[TripRecord]],
    keys: dict[TripRecord, int],
    sinks: dict[int, int],
) -> tuple[TripPlusLayover, ...]:
    sink = sinks.get(record.destination_id)
    if sink is None:
        raise TimetableError(
            f"Trip destination {record.destination_id} has no station row"
        )

    ride = record.ride_minutes
    edges = [TripPlusLayover(destination_key=sink, ride_minutes=ride)]

    arrival_m = clock_to_minutes(record.arrival_time)
    for onward in departures_by_origin.get(record.destination_id, ()):
        if onward == record:
            continue
        layover = clock_to_minutes(onward.departure_time) - arrival_m
        # Only strictly later departures can be caught.
        if layover > 0:
            edges.append(
                TripPlusLayover(
                    destination_key=keys[onward],
                    ride_minutes=ride,
                    layover_minutes=layover,
                )
            )
    return tuple(edges)


def build_departures_graph(
    records: Sequence[TripRecord], station_ids: Sequence[int]
) -> tuple[Departure, ...]:
    """Build the time-expanded vertex list.

    Keys 0..R-1 follow the trip records one to one; keys R..R+S-1 are the
    station sinks in station table order.
    """

    keys = canonical_keys(records)
    sinks = sink_keys(station_ids, trip_count=len(records))

    departures_by_origin: dict[int, list[TripRecord]] = {}
    for record in keys:
        departures_by_origin.setdefault(record.origin_id, []).append(record)

    edges_by_record = {
        record: _edges_for(
            record,
            departures_by_origin=departures_by_origin,
            keys=keys,
            sinks=sinks,
        )
        for record in keys
    }

    vertices = [
        Departure(
            lookup_key=index,
            station_id=record.origin_id,
            departure_time=record.departure_time,
            trips=edges_by_record[record],
        )
        for index, record in enumerate(records)
    ]
    vertices.extend(
        Departure(lookup_key=len(records) + offset, station_id=station_id)
        for offset, station_id in enumerate(station_ids)
    )

    logger.debug(
        "Built time-expanded graph: %d departures, %d sinks, %d edges",
        len(records),
        len(station_ids),
        sum(v.trip_count for v in vertices),
    )
    return tuple(vertices)


def departures_digraph(vertices: Sequence[Departure]) -> nx.DiGraph:
    """The time-expanded graph as a networkx digraph keyed by lookup key."""

    g = nx.DiGraph()
    for vertex in vertices:
        g.add_node(vertex.lookup_key)
        for edge in vertex.trips:
            g.add_edge(vertex.lookup_key, edge.destination_key)
    return g
