from __future__ import annotations

from src.domain.algorithms.all_pairs import (
    INF,
    floyd_warshall,
    ride_and_layover,
    ride_only,
)
from src.domain.algorithms.station_graph import StationGraph
from src.domain.models import Departure, TripPlusLayover


def _vertices(graph: StationGraph) -> list[Departure]:
    return [graph.get_departure_from_graph(k) for k in range(graph.departure_count)]


def test_next_hop_chains_reach_target_and_match_distance(
    network: StationGraph,
) -> None:
    vertices = _vertices(network)
    n = len(vertices)

    for include_layovers, weight in ((True, ride_and_layover), (False, ride_only)):
        paths = network.shortest_paths(include_layovers=include_layovers)
        for i in range(n):
            for j in range(n):
                if i == j or paths.next_hop[i][j] is None:
                    continue

                current, total, steps = i, 0, 0
                while current != j:
                    nxt = paths.next_hop[current][j]
                    edge = vertices[current].find_trip(nxt)
                    assert edge is not None
                    total += weight(edge)
                    current = nxt
                    steps += 1
                    assert steps <= n

                assert total == paths.distance[i][j]


def test_unreachable_pairs_have_no_hop_and_infinite_distance(
    network: StationGraph,
) -> None:
    paths = network.shortest_paths(include_layovers=True)

    # Sinks have no outgoing edges.
    for j in range(network.departure_count):
        assert paths.next_hop[8][j] is None
        assert paths.distance[8][j] == INF
    assert paths.reachable(1, 11)
    assert not paths.reachable(11, 1)


def test_weight_modes_share_topology(network: StationGraph) -> None:
    with_layovers = network.shortest_paths(include_layovers=True)
    without_layovers = network.shortest_paths(include_layovers=False)
    n = network.departure_count

    for i in range(n):
        reach_a = {j for j in range(n) if with_layovers.reachable(i, j)}
        reach_b = {j for j in range(n) if without_layovers.reachable(i, j)}
        assert reach_a == reach_b


def test_first_hop_is_propagated_not_intermediate() -> None:
    # 0 -> 1 -> 2 -> 3 chain; the hop from 0 towards 3 must be 1.
    vertices = [
        Departure(lookup_key=0, station_id=1, trips=(TripPlusLayover(1, 5),)),
        Departure(lookup_key=1, station_id=2, trips=(TripPlusLayover(2, 5),)),
        Departure(lookup_key=2, station_id=3, trips=(TripPlusLayover(3, 5),)),
        Departure(lookup_key=3, station_id=4),
    ]

    paths = floyd_warshall(vertices, ride_only)

    assert paths.next_hop[0][3] == 1
    assert paths.next_hop[1][3] == 2
    assert paths.distance[0][3] == 15
