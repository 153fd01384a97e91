from __future__ import annotations

from pydantic import BaseModel


class StationSchema(BaseModel):
    id: int
    name: str


class ScheduledTripSchema(BaseModel):
    origin: StationSchema
    destination: StationSchema
    depart_at: str
    arrive_at: str
    duration_minutes: int


class StationScheduleSchema(BaseModel):
    station: StationSchema
    departures: list[ScheduledTripSchema] = []
    arrivals: list[ScheduledTripSchema] = []
