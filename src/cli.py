from __future__ import annotations

import logging
import os
import sys
from typing import Callable

from src.adapters.persistence import InMemoryGraphRepository, LocalTimetableRepository
from src.app.services.schedule_service import (
    Itinerary,
    ScheduledTrip,
    ScheduleService,
    StationSchedule,
)
from src.domain.exceptions import RoutingError

MENU = """\
======================== Train Schedule ========================
 1. Print full schedule
 2. Print station schedule
 3. Look up station id
 4. Look up station name
 5. Check whether any route exists between two stations
 6. Check whether a direct route exists between two stations
 7. Shortest route by ride time only
 8. Shortest route including layovers
 9. Shortest route departing at a given time
 0. Quit
================================================================"""

Prompt = Callable[[str], str]


def _format_trip(trip: ScheduledTrip) -> str:
    return (
        f"  {trip.origin.name} ({trip.origin.id}) {trip.depart_at} -> "
        f"{trip.destination.name} ({trip.destination.id}) {trip.arrive_at}"
        f"  [{trip.duration_minutes} min]"
    )


def format_station_schedule(schedule: StationSchedule) -> str:
    lines = [f"Schedule for {schedule.station.name} ({schedule.station.id})"]
    lines.append(" Departures:")
    lines.extend(_format_trip(t) for t in schedule.departures)
    if not schedule.departures:
        lines.append("  none")
    lines.append(" Arrivals:")
    lines.extend(_format_trip(t) for t in schedule.arrivals)
    if not schedule.arrivals:
        lines.append("  none")
    return "\n".join(lines)


def format_itinerary(itinerary: Itinerary) -> str:
    lines = [f"Route {itinerary.origin.name} -> {itinerary.destination.name}"]
    for leg in itinerary.legs:
        line = (
            f"  {leg.origin.name} {leg.depart_at} -> "
            f"{leg.destination.name} {leg.arrive_at} ({leg.ride_minutes} min)"
        )
        if leg.layover_minutes:
            line += f", then wait {leg.layover_minutes} min"
        lines.append(line)
    lines.append(
        f"  Ride time {itinerary.total_ride_minutes} min, "
        f"layovers {itinerary.total_layover_minutes} min, "
        f"total {itinerary.total_minutes} min"
    )
    return "\n".join(lines)


def _ask_int(prompt: Prompt, message: str) -> int | None:
    raw = prompt(message).strip()
    try:
        return int(raw)
    except ValueError:
        print(f"Not a number: {raw!r}")
        return None


def _ask_pair(prompt: Prompt) -> tuple[int, int] | None:
    origin = _ask_int(prompt, "Departure station id: ")
    if origin is None:
        return None
    destination = _ask_int(prompt, "Destination station id: ")
    if destination is None:
        return None
    return origin, destination


def handle_choice(choice: int, service: ScheduleService, prompt: Prompt) -> None:
    if choice == 1:
        for schedule in service.complete_schedule():
            print(format_station_schedule(schedule))
    elif choice == 2:
        station_id = _ask_int(prompt, "Station id: ")
        if station_id is not None:
            print(format_station_schedule(service.station_schedule(station_id)))
    elif choice == 3:
        info = service.lookup_station_id(prompt("Station name: "))
        print(f"Station id for {info.name} is {info.id}")
    elif choice == 4:
        station_id = _ask_int(prompt, "Station id: ")
        if station_id is not None:
            info = service.lookup_station_name(station_id)
            print(f"Station {info.id} is {info.name}")
    elif choice in (5, 6):
        pair = _ask_pair(prompt)
        if pair is None:
            return
        if choice == 5:
            exists = service.path_exists(*pair)
            kind = "A route"
        else:
            exists = service.direct_path_exists(*pair)
            kind = "A direct route"
        verb = "exists" if exists else "does not exist"
        print(f"{kind} from {pair[0]} to {pair[1]} {verb}.")
    elif choice in (7, 8):
        pair = _ask_pair(prompt)
        if pair is None:
            return
        itinerary = service.shortest_route(
            origin_id=pair[0], destination_id=pair[1], include_layovers=choice == 8
        )
        print(format_itinerary(itinerary))
    elif choice == 9:
        clock = _ask_int(prompt, "Departure time (HHMM): ")
        pair = _ask_pair(prompt) if clock is not None else None
        if clock is None or pair is None:
            return
        itinerary = service.route_from_time(
            clock=clock, origin_id=pair[0], destination_id=pair[1]
        )
        print(format_itinerary(itinerary))


def run_menu(service: ScheduleService, prompt: Prompt = input) -> None:
    print(MENU)
    while True:
        raw = prompt("Enter choice: ").strip()
        try:
            choice = int(raw)
        except ValueError:
            choice = -1

        if choice == 0:
            print("Exiting...")
            return
        if not 1 <= choice <= 9:
            print(MENU)
            print("Invalid choice (enter number 0-9).")
            continue

        try:
            handle_choice(choice, service, prompt)
        except RoutingError as exc:
            print(exc)


def log_level(name: str | None) -> int:
    """Map a LOG_LEVEL value to a logging level; unknown names mean WARNING."""

    levels = logging.getLevelNamesMapping()
    return levels.get((name or "").strip().upper(), logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("usage: python -m src.cli <stations.dat> <trains.dat>")
        return 0

    logging.basicConfig(level=log_level(os.getenv("LOG_LEVEL")))

    service = ScheduleService.from_repositories(
        timetable_repository=LocalTimetableRepository(
            stations_path=args[0], trains_path=args[1]
        ),
        graph_repository=InMemoryGraphRepository(),
    )
    try:
        run_menu(service)
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
