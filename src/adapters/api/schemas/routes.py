from __future__ import annotations

from pydantic import BaseModel

from .stations import StationSchema


class ItineraryLegSchema(BaseModel):
    origin: StationSchema
    destination: StationSchema
    depart_at: str
    arrive_at: str
    ride_minutes: int
    layover_minutes: int


class ItinerarySchema(BaseModel):
    origin: StationSchema
    destination: StationSchema
    include_layovers: bool
    legs: list[ItineraryLegSchema] = []

    total_ride_minutes: int
    total_layover_minutes: int
    total_minutes: int


class PathExistsSchema(BaseModel):
    origin: int
    destination: int
    exists: bool
