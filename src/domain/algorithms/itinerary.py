from __future__ import annotations

from typing import Callable, Iterable, Sequence

from src.domain.models.departure import Departure, TripPlusLayover
from src.domain.models.route import Route

from .all_pairs import ShortestPaths

DepartureFilter = Callable[[Departure], bool]


def get_route(
    vertices: Sequence[Departure],
    from_key: int,
    to_key: int,
    paths: ShortestPaths,
) -> Route | None:
    """Walk the next-hop table from one vertex to another.

    Returns None when the destination is unreachable, when an edge the table
    points at does not exist, or when from and to are the same vertex.
    """

    if from_key == to_key:
        return None

    segments: list[TripPlusLayover] = []
    current = from_key
    # A shortest path visits each vertex at most once.
    for _ in range(len(vertices)):
        node = vertices[current]
        nxt = paths.next_hop[current][to_key]
        if node.is_final_destination or nxt is None:
            break

        edge = node.find_trip(nxt)
        if edge is None:
            return None
        segments.append(edge)
        current = nxt
        if current == to_key:
            break

    if current != to_key:
        return None

    return Route(
        departing=vertices[from_key],
        destination=vertices[to_key],
        segments=tuple(segments),
    )


def shortest_route(
    vertices: Sequence[Departure],
    origin_keys: Iterable[int],
    destination_keys: Sequence[int],
    paths: ShortestPaths,
    *,
    include_layovers: bool,
    departure_filter: DepartureFilter | None = None,
) -> Route | None:
    """Cheapest reconstructable route over every (origin, destination) pair.

    Ties keep the first pair in ascending key order.
    """

    best: Route | None = None
    best_weight = 0
    for j in origin_keys:
        if departure_filter is not None and not departure_filter(vertices[j]):
            continue
        for k in destination_keys:
            route = get_route(vertices, j, k, paths)
            if route is None:
                continue
            w = route.weight(include_layovers=include_layovers)
            if best is None or w < best_weight:
                best = route
                best_weight = w
    return best
