from __future__ import annotations

from dataclasses import dataclass, field

from .departure import Departure, TripPlusLayover


@dataclass(frozen=True, slots=True)
class Route:
    """A reconstructed itinerary over the time-expanded graph."""

    departing: Departure
    destination: Departure
    segments: tuple[TripPlusLayover, ...] = field(default_factory=tuple)

    @property
    def total_ride_minutes(self) -> int:
        return sum(s.ride_minutes for s in self.segments)

    @property
    def total_layover_minutes(self) -> int:
        return sum(s.layover_minutes for s in self.segments)

    @property
    def total_weight(self) -> int:
        return sum(s.weight for s in self.segments)

    def weight(self, *, include_layovers: bool) -> int:
        return self.total_weight if include_layovers else self.total_ride_minutes
