from __future__ import annotations

MINUTES_PER_DAY = 24 * 60


def clock_to_minutes(clock: int) -> int:
    """Convert an HHMM clock value (e.g. 850 for 08:50) to minutes of day."""

    hours, minutes = divmod(int(clock), 100)
    return hours * 60 + minutes


def minutes_between(start_clock: int, end_clock: int) -> int:
    return clock_to_minutes(end_clock) - clock_to_minutes(start_clock)


def ride_minutes(departure_clock: int, arrival_clock: int) -> int:
    """In-vehicle minutes; an arrival earlier than the departure is next day."""

    delta = minutes_between(departure_clock, arrival_clock)
    if delta < 0:
        delta += MINUTES_PER_DAY
    return delta


def format_clock(clock: int) -> str:
    hours, minutes = divmod(int(clock), 100)
    return f"{hours:02d}:{minutes:02d}"


def add_minutes(clock: int, minutes: int) -> int:
    """Clock value reached `minutes` after `clock`, wrapping past midnight."""

    total = (clock_to_minutes(clock) + minutes) % MINUTES_PER_DAY
    hours, mins = divmod(total, 60)
    return hours * 100 + mins
