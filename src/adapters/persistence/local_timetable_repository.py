from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import ITimetableRepository
from src.domain.exceptions import TimetableError
from src.domain.models import TimetableTables

logger = logging.getLogger(__name__)


def _read_rows(path: Path) -> list[tuple[int, list[str]]]:
    rows: list[tuple[int, list[str]]] = []
    with path.open("r", encoding="utf-8") as fp:
        for lineno, line in enumerate(fp, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            rows.append((lineno, stripped.split()))
    return rows


@dataclass(slots=True)
class LocalTimetableRepository(ITimetableRepository):
    """Loads a timetable from two whitespace-separated text files.

    Stations file: `<id> <name...>`. Trains file:
    `<origin> <destination> <departure HHMM> <arrival HHMM>`.

    Env vars:
      - TIMETABLE_PATH: directory holding both files (default: data/timetable)
      - STATIONS_FILE: stations file name or path (default: stations.dat)
      - TRAINS_FILE: trains file name or path (default: trains.dat)
    """

    stations_path: str | Path | None = None
    trains_path: str | Path | None = None

    def _base(self) -> Path:
        return Path(os.getenv("TIMETABLE_PATH") or "data/timetable")

    def _resolve(self, explicit: str | Path | None, env: str, default: str) -> Path:
        if explicit:
            return Path(explicit)
        return self._base() / (os.getenv(env) or default)

    def load_tables(self) -> TimetableTables:
        stations_path = self._resolve(
            self.stations_path, "STATIONS_FILE", "stations.dat"
        )
        trains_path = self._resolve(self.trains_path, "TRAINS_FILE", "trains.dat")

        station_rows: list[tuple[str, ...]] = []
        station_names: dict[int, str] = {}
        for lineno, fields in _read_rows(stations_path):
            if len(fields) < 2:
                raise TimetableError(
                    f"{stations_path}:{lineno}: expected '<id> <name>'"
                )
            station_id, name = fields[0], " ".join(fields[1:])
            station_rows.append((station_id, name))
            station_names[int(station_id)] = name

        trip_rows: list[tuple[str, ...]] = []
        for lineno, fields in _read_rows(trains_path):
            if len(fields) != 4:
                raise TimetableError(
                    f"{trains_path}:{lineno}: expected 4 fields, got {len(fields)}"
                )
            trip_rows.append(tuple(fields))

        logger.info(
            "Loaded %d stations and %d trips from %s",
            len(station_rows),
            len(trip_rows),
            trains_path.parent,
        )
        return TimetableTables(
            trip_rows=tuple(trip_rows),
            station_rows=tuple(station_rows),
            station_names=station_names,
        )
