from __future__ import annotations

from typing import Iterable

from src.domain.exceptions import TimetableError
from src.domain.models.timetable import Station, Trip, TripRecord


def _check_station_id(station_id: int, station_count: int) -> None:
    if not 1 <= station_id <= station_count:
        raise TimetableError(
            f"Station id {station_id} outside 1..{station_count} in trip table"
        )


def build_departures_view(
    records: Iterable[TripRecord], *, station_count: int
) -> tuple[Station, ...]:
    """Trips keyed by origin: index i holds the station with id i + 1."""

    buckets: list[list[Trip]] = [[] for _ in range(station_count)]
    for r in records:
        _check_station_id(r.origin_id, station_count)
        buckets[r.origin_id - 1].append(
            Trip(
                origin_id=r.origin_id,
                destination_id=r.destination_id,
                departure_time=r.departure_time,
                arrival_time=r.arrival_time,
            )
        )
    return tuple(Station(id=i + 1, trips=tuple(t)) for i, t in enumerate(buckets))


def build_arrivals_view(
    records: Iterable[TripRecord], *, station_count: int
) -> tuple[Station, ...]:
    """Same records re-keyed by destination."""

    buckets: list[list[Trip]] = [[] for _ in range(station_count)]
    for r in records:
        _check_station_id(r.destination_id, station_count)
        buckets[r.destination_id - 1].append(
            Trip(
                origin_id=r.origin_id,
                destination_id=r.destination_id,
                departure_time=r.departure_time,
                arrival_time=r.arrival_time,
            )
        )
    return tuple(Station(id=i + 1, trips=tuple(t)) for i, t in enumerate(buckets))
