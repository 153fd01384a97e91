from __future__ import annotations

import hashlib

from src.domain.models import TimetableTables


def tables_fingerprint(tables: TimetableTables) -> str:
    """Stable sha256 over both tables; station names are not part of the graph."""

    digest = hashlib.sha256()
    sections = (("trips", tables.trip_rows), ("stations", tables.station_rows))
    for section, rows in sections:
        digest.update(section.encode("utf-8"))
        for row in rows:
            digest.update(b"\x1e")
            digest.update("\x1f".join(row).encode("utf-8"))
    return digest.hexdigest()
