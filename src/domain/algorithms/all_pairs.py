from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from src.domain.models.departure import Departure, TripPlusLayover

# Larger than any timetable cost (a day is 1440 minutes).
INF = 2**31 - 1

WeightSelector = Callable[[TripPlusLayover], int]


def ride_and_layover(edge: TripPlusLayover) -> int:
    return edge.weight


def ride_only(edge: TripPlusLayover) -> int:
    return edge.ride_minutes


@dataclass(frozen=True, slots=True)
class ShortestPaths:
    """All-pairs result: distances plus the first hop of each shortest path.

    `next_hop[i][j]` is None when j is unreachable from i.
    """

    distance: tuple[tuple[int, ...], ...]
    next_hop: tuple[tuple[int | None, ...], ...]

    def reachable(self, from_key: int, to_key: int) -> bool:
        return self.next_hop[from_key][to_key] is not None


def floyd_warshall(
    vertices: Sequence[Departure], weight: WeightSelector
) -> ShortestPaths:
    """Floyd-Warshall over the time-expanded graph, O(V^3)."""

    n = len(vertices)
    dist: list[list[int]] = [[INF] * n for _ in range(n)]
    nxt: list[list[int | None]] = [[None] * n for _ in range(n)]

    for vertex in vertices:
        row = dist[vertex.lookup_key]
        hops = nxt[vertex.lookup_key]
        for edge in vertex.trips:
            w = weight(edge)
            if w < row[edge.destination_key]:
                row[edge.destination_key] = w
                hops[edge.destination_key] = edge.destination_key

    for k in range(n):
        dist_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik == INF:
                continue
            dist_i = dist[i]
            hops_i = nxt[i]
            # Propagate the first hop, not k, so paths stay reconstructable.
            first_hop = hops_i[k]
            for j in range(n):
                d_kj = dist_k[j]
                if d_kj == INF:
                    continue
                candidate = d_ik + d_kj
                if candidate < dist_i[j]:
                    dist_i[j] = candidate
                    hops_i[j] = first_hop

    return ShortestPaths(
        distance=tuple(tuple(row) for row in dist),
        next_hop=tuple(tuple(row) for row in nxt),
    )
