from .departure import Departure, TripPlusLayover
from .route import Route
from .timetable import Station, TimetableTables, Trip, TripRecord

__all__ = [
    "Departure",
    "Route",
    "Station",
    "TimetableTables",
    "Trip",
    "TripPlusLayover",
    "TripRecord",
]
