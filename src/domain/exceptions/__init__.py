from .routing import NoPathFound, RoutingError, StationNotFound, TimetableError

__all__ = [
    "NoPathFound",
    "RoutingError",
    "StationNotFound",
    "TimetableError",
]
