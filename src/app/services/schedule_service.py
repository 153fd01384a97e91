from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import IGraphRepository, ITimetableRepository
from src.domain.algorithms.clock import add_minutes, format_clock
from src.domain.algorithms.station_graph import StationGraph
from src.domain.exceptions import NoPathFound, StationNotFound
from src.domain.models import Route, Station, Trip

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StationInfo:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class ScheduledTrip:
    origin: StationInfo
    destination: StationInfo
    depart_at: str
    arrive_at: str
    duration_minutes: int


@dataclass(frozen=True, slots=True)
class StationSchedule:
    station: StationInfo
    departures: tuple[ScheduledTrip, ...] = ()
    arrivals: tuple[ScheduledTrip, ...] = ()


@dataclass(frozen=True, slots=True)
class ItineraryLeg:
    origin: StationInfo
    destination: StationInfo
    depart_at: str
    arrive_at: str
    ride_minutes: int
    layover_minutes: int


@dataclass(frozen=True, slots=True)
class Itinerary:
    origin: StationInfo
    destination: StationInfo
    include_layovers: bool
    legs: tuple[ItineraryLeg, ...] = field(default_factory=tuple)

    @property
    def total_ride_minutes(self) -> int:
        return sum(leg.ride_minutes for leg in self.legs)

    @property
    def total_layover_minutes(self) -> int:
        return sum(leg.layover_minutes for leg in self.legs)

    @property
    def total_minutes(self) -> int:
        if self.include_layovers:
            return self.total_ride_minutes + self.total_layover_minutes
        return self.total_ride_minutes


@dataclass(slots=True)
class ScheduleService:
    """Application service behind the menu and the HTTP API.

    The graph reports missing stations and routes as None; this layer turns
    them into StationNotFound / NoPathFound.
    """

    graph: StationGraph
    station_names: dict[int, str] = field(default_factory=dict)

    @classmethod
    def from_repositories(
        cls,
        *,
        timetable_repository: ITimetableRepository,
        graph_repository: IGraphRepository,
    ) -> "ScheduleService":
        tables = timetable_repository.load_tables()
        graph = graph_repository.load_graph(tables)
        return cls(graph=graph, station_names=dict(tables.station_names))

    def _info(self, station_id: int) -> StationInfo:
        return StationInfo(
            id=station_id,
            name=self.station_names.get(station_id, f"Station {station_id}"),
        )

    def _require_station(self, station_id: int) -> Station:
        station = self.graph.get_station_from_graph(station_id)
        if station is None:
            raise StationNotFound(f"Unknown station id: {station_id}")
        return station

    def _scheduled(self, trip: Trip) -> ScheduledTrip:
        return ScheduledTrip(
            origin=self._info(trip.origin_id),
            destination=self._info(trip.destination_id),
            depart_at=format_clock(trip.departure_time),
            arrive_at=format_clock(trip.arrival_time),
            duration_minutes=trip.duration_minutes,
        )

    def stations(self) -> list[StationInfo]:
        return [self._info(i) for i in range(1, self.graph.station_count + 1)]

    def lookup_station_id(self, name: str) -> StationInfo:
        wanted = name.strip().casefold()
        for station_id, station_name in sorted(self.station_names.items()):
            if station_name.casefold() == wanted:
                return self._info(station_id)
        raise StationNotFound(f"Unknown station name: {name!r}")

    def lookup_station_name(self, station_id: int) -> StationInfo:
        self._require_station(station_id)
        return self._info(station_id)

    def station_schedule(self, station_id: int) -> StationSchedule:
        departures = self._require_station(station_id)
        arrivals = self.graph.get_station_from_arrival_graph(station_id)
        return StationSchedule(
            station=self._info(station_id),
            departures=tuple(self._scheduled(t) for t in departures.trips),
            arrivals=tuple(self._scheduled(t) for t in arrivals.trips)
            if arrivals is not None
            else (),
        )

    def complete_schedule(self) -> list[StationSchedule]:
        return [
            self.station_schedule(i) for i in range(1, self.graph.station_count + 1)
        ]

    def path_exists(self, origin_id: int, destination_id: int) -> bool:
        self._require_station(origin_id)
        self._require_station(destination_id)
        return self.graph.path_exists(origin_id, destination_id)

    def direct_path_exists(self, origin_id: int, destination_id: int) -> bool:
        self._require_station(origin_id)
        self._require_station(destination_id)
        return self.graph.direct_path_exists(origin_id, destination_id)

    def shortest_route(
        self, *, origin_id: int, destination_id: int, include_layovers: bool
    ) -> Itinerary:
        self._require_station(origin_id)
        self._require_station(destination_id)
        route = self.graph.get_shortest_route(
            origin_id, destination_id, include_layovers
        )
        if route is None:
            raise NoPathFound(
                f"No route from station {origin_id} to station {destination_id}"
            )
        return self._itinerary(route, include_layovers=include_layovers)

    def route_from_time(
        self, *, clock: int, origin_id: int, destination_id: int
    ) -> Itinerary:
        self._require_station(origin_id)
        self._require_station(destination_id)
        route = self.graph.get_route_from_time(clock, origin_id, destination_id)
        if route is None:
            raise NoPathFound(
                f"No route from station {origin_id} to station {destination_id} "
                f"departing at {format_clock(clock)}"
            )
        return self._itinerary(route, include_layovers=True)

    def _itinerary(self, route: Route, *, include_layovers: bool) -> Itinerary:
        legs: list[ItineraryLeg] = []
        current = route.departing
        last = len(route.segments) - 1
        for index, segment in enumerate(route.segments):
            target = self.graph.get_departure_from_graph(segment.destination_key)
            if target is None:
                # Edges only ever point inside the departures graph.
                raise RuntimeError(f"Dangling edge to {segment.destination_key}")
            layover = segment.layover_minutes
            if index == last and not target.is_final_destination:
                # No wait after the final arrival.
                layover = 0
            legs.append(
                ItineraryLeg(
                    origin=self._info(current.station_id),
                    destination=self._info(target.station_id),
                    depart_at=format_clock(current.departure_time),
                    arrive_at=format_clock(
                        add_minutes(current.departure_time, segment.ride_minutes)
                    ),
                    ride_minutes=segment.ride_minutes,
                    layover_minutes=layover,
                )
            )
            current = target

        logger.debug(
            "Itinerary %d -> %d with %d legs",
            route.departing.station_id,
            route.destination.station_id,
            len(legs),
        )
        return Itinerary(
            origin=self._info(route.departing.station_id),
            destination=self._info(route.destination.station_id),
            include_layovers=include_layovers,
            legs=tuple(legs),
        )
