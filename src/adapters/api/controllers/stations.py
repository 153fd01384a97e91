from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_schedule_service
from src.adapters.api.schemas.stations import (
    ScheduledTripSchema,
    StationScheduleSchema,
    StationSchema,
)
from src.app.services.schedule_service import (
    ScheduledTrip,
    ScheduleService,
    StationInfo,
)

router = APIRouter(prefix="/stations", tags=["stations"])


def _station_to_schema(info: StationInfo) -> StationSchema:
    return StationSchema(id=info.id, name=info.name)


def _trip_to_schema(trip: ScheduledTrip) -> ScheduledTripSchema:
    return ScheduledTripSchema(
        origin=_station_to_schema(trip.origin),
        destination=_station_to_schema(trip.destination),
        depart_at=trip.depart_at,
        arrive_at=trip.arrive_at,
        duration_minutes=trip.duration_minutes,
    )


@router.get("", response_model=list[StationSchema])
def list_stations(
    service: ScheduleService = Depends(get_schedule_service),
) -> list[StationSchema]:
    return [_station_to_schema(s) for s in service.stations()]


@router.get("/lookup", response_model=StationSchema)
def lookup_station(
    name: str = Query(..., min_length=1),
    service: ScheduleService = Depends(get_schedule_service),
) -> StationSchema:
    return _station_to_schema(service.lookup_station_id(name))


@router.get("/{station_id}", response_model=StationSchema)
def get_station(
    station_id: int,
    service: ScheduleService = Depends(get_schedule_service),
) -> StationSchema:
    return _station_to_schema(service.lookup_station_name(station_id))


@router.get("/{station_id}/schedule", response_model=StationScheduleSchema)
def get_station_schedule(
    station_id: int,
    service: ScheduleService = Depends(get_schedule_service),
) -> StationScheduleSchema:
    schedule = service.station_schedule(station_id)
    return StationScheduleSchema(
        station=_station_to_schema(schedule.station),
        departures=[_trip_to_schema(t) for t in schedule.departures],
        arrivals=[_trip_to_schema(t) for t in schedule.arrivals],
    )
