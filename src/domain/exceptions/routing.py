class RoutingError(Exception):
    """Base exception for route calculation failures."""


class NoPathFound(RoutingError):
    """Raised when no feasible path exists for the given request."""


class StationNotFound(RoutingError):
    """Raised when a station id or name is not part of the timetable."""


class TimetableError(ValueError):
    """Raised when timetable tables are inconsistent or malformed."""
