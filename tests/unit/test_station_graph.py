from __future__ import annotations

from src.domain.algorithms.itinerary import get_route
from src.domain.algorithms.station_graph import StationGraph


def test_scenario_a_shortest_route_with_layovers(scenario_a: StationGraph) -> None:
    route = scenario_a.get_shortest_route(1, 3, True)

    assert route is not None
    assert len(route.segments) == 2
    assert route.departing.lookup_key == 0
    assert route.destination.station_id == 3
    assert route.destination.is_final_destination
    assert route.total_weight == 120
    assert [s.layover_minutes for s in route.segments] == [20, 0]


def test_scenario_a_shortest_route_ride_time_only(scenario_a: StationGraph) -> None:
    route = scenario_a.get_shortest_route(1, 3, False)

    assert route is not None
    assert [s.destination_key for s in route.segments] == [1, 4]
    assert route.weight(include_layovers=False) == 100
    assert route.total_ride_minutes == 100


def test_scenario_b_missed_connection_has_no_route(
    scenario_b: StationGraph,
) -> None:
    assert scenario_b.get_shortest_route(1, 3, True) is None
    assert scenario_b.get_shortest_route(1, 3, False) is None
    assert scenario_b.get_shortest_route(1, 2, True) is not None


def test_unknown_stations_have_no_route(scenario_a: StationGraph) -> None:
    assert scenario_a.get_shortest_route(0, 3, True) is None
    assert scenario_a.get_shortest_route(1, 9, False) is None
    assert scenario_a.get_shortest_route(3, 1, True) is None


def test_same_minute_connection_is_never_used(stations_abc: list[list[str]]) -> None:
    trips = [
        ["1", "2", "0800", "0900"],
        ["2", "3", "0900", "0905"],
        ["2", "3", "0920", "1000"],
    ]
    graph = StationGraph(trips, stations_abc)

    route = graph.get_shortest_route(1, 3, True)

    assert route is not None
    assert route.segments[0].destination_key == 2
    assert route.total_weight == 120


def test_layover_mode_picks_least_total_time(network: StationGraph) -> None:
    route = network.get_shortest_route(1, 4, True)

    assert route is not None
    # 09:00 to station 2, wait 30 for the 10:00 to station 4.
    assert route.departing.lookup_key == 1
    assert route.total_weight == 90
    assert route.total_layover_minutes == 30


def test_ride_only_mode_may_hide_waiting_time(network: StationGraph) -> None:
    route = network.get_shortest_route(1, 4, False)

    assert route is not None
    # 08:00 and 09:00 both ride 60 minutes; the earlier vertex wins the tie,
    # although it waits 90 minutes at station 2.
    assert route.departing.lookup_key == 0
    assert route.weight(include_layovers=False) == 60
    assert route.total_layover_minutes == 90


def test_route_from_time_filters_departure_vertex(network: StationGraph) -> None:
    at_eight = network.get_route_from_time(800, 1, 4)
    at_nine = network.get_route_from_time(900, 1, 4)

    assert at_eight is not None and at_eight.departing.departure_time == 800
    assert at_eight.total_weight == 120
    assert at_nine is not None and at_nine.total_weight == 90
    assert network.get_route_from_time(830, 1, 4) is None


def test_route_from_time_also_matches_twelve_hours_earlier(
    stations_abc: list[list[str]],
) -> None:
    trips = [["1", "2", "100", "200"], ["1", "2", "1400", "1500"]]
    graph = StationGraph(trips, stations_abc)

    # 1300 matches a departure stored as 100.
    afternoon = graph.get_route_from_time(1300, 1, 2)
    assert afternoon is not None and afternoon.departing.lookup_key == 0

    # Above 1200 the exact value still matches.
    exact = graph.get_route_from_time(1400, 1, 2)
    assert exact is not None and exact.departing.lookup_key == 1

    # Below 1200 only the exact value can match.
    assert graph.get_route_from_time(100, 1, 2).departing.lookup_key == 0
    assert graph.get_route_from_time(200, 1, 2) is None


def test_repeated_queries_are_identical(network: StationGraph) -> None:
    for include_layovers in (True, False):
        first = network.get_shortest_route(1, 4, include_layovers)
        second = network.get_shortest_route(1, 4, include_layovers)
        assert first == second


def test_every_route_ends_at_its_target_without_revisiting(
    network: StationGraph,
) -> None:
    vertices = [
        network.get_departure_from_graph(k) for k in range(network.departure_count)
    ]
    paths = network.shortest_paths(include_layovers=True)

    for i in range(len(vertices)):
        for j in range(len(vertices)):
            route = get_route(vertices, i, j, paths)
            if route is None:
                continue
            visited = [i] + [s.destination_key for s in route.segments]
            assert visited[-1] == j
            assert len(set(visited)) == len(visited)


def test_get_route_is_none_for_same_vertex_and_unreachable(
    network: StationGraph,
) -> None:
    vertices = [
        network.get_departure_from_graph(k) for k in range(network.departure_count)
    ]
    paths = network.shortest_paths(include_layovers=True)

    assert get_route(vertices, 0, 0, paths) is None
    assert get_route(vertices, 11, 0, paths) is None
