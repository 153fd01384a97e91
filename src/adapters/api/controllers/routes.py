from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_schedule_service
from src.adapters.api.schemas.routes import (
    ItineraryLegSchema,
    ItinerarySchema,
    PathExistsSchema,
)
from src.adapters.api.schemas.stations import StationSchema
from src.app.services.schedule_service import Itinerary, ScheduleService

router = APIRouter(tags=["routes"])


def _itinerary_to_schema(itinerary: Itinerary) -> ItinerarySchema:
    return ItinerarySchema(
        origin=StationSchema(id=itinerary.origin.id, name=itinerary.origin.name),
        destination=StationSchema(
            id=itinerary.destination.id, name=itinerary.destination.name
        ),
        include_layovers=itinerary.include_layovers,
        legs=[
            ItineraryLegSchema(
                origin=StationSchema(id=leg.origin.id, name=leg.origin.name),
                destination=StationSchema(
                    id=leg.destination.id, name=leg.destination.name
                ),
                depart_at=leg.depart_at,
                arrive_at=leg.arrive_at,
                ride_minutes=leg.ride_minutes,
                layover_minutes=leg.layover_minutes,
            )
            for leg in itinerary.legs
        ],
        total_ride_minutes=itinerary.total_ride_minutes,
        total_layover_minutes=itinerary.total_layover_minutes,
        total_minutes=itinerary.total_minutes,
    )


@router.get("/routes/shortest", response_model=ItinerarySchema)
def shortest_route(
    origin: int,
    destination: int,
    include_layovers: bool = True,
    service: ScheduleService = Depends(get_schedule_service),
) -> ItinerarySchema:
    itinerary = service.shortest_route(
        origin_id=origin,
        destination_id=destination,
        include_layovers=include_layovers,
    )
    return _itinerary_to_schema(itinerary)


@router.get("/routes/from-time", response_model=ItinerarySchema)
def route_from_time(
    origin: int,
    destination: int,
    time: int = Query(..., ge=0, le=2359, description="Departure clock, HHMM"),
    service: ScheduleService = Depends(get_schedule_service),
) -> ItinerarySchema:
    itinerary = service.route_from_time(
        clock=time, origin_id=origin, destination_id=destination
    )
    return _itinerary_to_schema(itinerary)


@router.get("/paths/exists", response_model=PathExistsSchema)
def path_exists(
    origin: int,
    destination: int,
    service: ScheduleService = Depends(get_schedule_service),
) -> PathExistsSchema:
    return PathExistsSchema(
        origin=origin,
        destination=destination,
        exists=service.path_exists(origin, destination),
    )


@router.get("/paths/direct", response_model=PathExistsSchema)
def direct_path_exists(
    origin: int,
    destination: int,
    service: ScheduleService = Depends(get_schedule_service),
) -> PathExistsSchema:
    return PathExistsSchema(
        origin=origin,
        destination=destination,
        exists=service.direct_path_exists(origin, destination),
    )
