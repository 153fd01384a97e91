from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from src.domain.algorithms.clock import ride_minutes


@dataclass(frozen=True, slots=True)
class TripRecord:
    """One raw timetable row, parsed to integers.

    Times are HHMM clock values (850 means 08:50). Two rows with the same
    fields describe the same physical departure, so the record itself is the
    canonical key used to merge aliasing rows.
    """

    origin_id: int
    destination_id: int
    departure_time: int
    arrival_time: int

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "TripRecord":
        return cls(
            origin_id=int(row[0]),
            destination_id=int(row[1]),
            departure_time=int(row[2]),
            arrival_time=int(row[3]),
        )

    @property
    def ride_minutes(self) -> int:
        return ride_minutes(self.departure_time, self.arrival_time)


@dataclass(frozen=True, slots=True)
class Trip:
    """A scheduled ride as seen from one station of the static views."""

    origin_id: int
    destination_id: int
    departure_time: int
    arrival_time: int

    @property
    def duration_minutes(self) -> int:
        return ride_minutes(self.departure_time, self.arrival_time)


@dataclass(frozen=True, slots=True)
class Station:
    id: int
    trips: tuple[Trip, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return self.id > 0

    @property
    def trip_count(self) -> int:
        return len(self.trips)


@dataclass(frozen=True, slots=True)
class TimetableTables:
    """Raw tables as supplied by a timetable loader.

    Trip rows are `[origin, destination, departure, arrival]`; station rows
    start with the station id. Row order of the station table fixes where
    the station sinks sit in the departures graph.
    """

    trip_rows: tuple[tuple[str, ...], ...]
    station_rows: tuple[tuple[str, ...], ...]
    station_names: dict[int, str] = field(default_factory=dict)
