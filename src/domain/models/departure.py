from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TripPlusLayover:
    """Directed edge of the time-expanded graph.

    `layover_minutes` is the wait at the destination before the connecting
    departure; it is 0 for edges that end the journey at a station sink.
    """

    destination_key: int
    ride_minutes: int
    layover_minutes: int = 0

    @property
    def weight(self) -> int:
        return self.ride_minutes + self.layover_minutes


@dataclass(frozen=True, slots=True)
class Departure:
    """Vertex of the time-expanded graph.

    Either one scheduled departure (with outgoing edges) or the sink of a
    station (no edges, departure time 0).
    """

    lookup_key: int
    station_id: int
    departure_time: int = 0
    trips: tuple[TripPlusLayover, ...] = field(default_factory=tuple)

    @property
    def is_final_destination(self) -> bool:
        return not self.trips

    @property
    def trip_count(self) -> int:
        return len(self.trips)

    def find_trip(self, destination_key: int) -> TripPlusLayover | None:
        for trip in self.trips:
            if trip.destination_key == destination_key:
                return trip
        return None
