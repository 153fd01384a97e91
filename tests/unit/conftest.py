from __future__ import annotations

import pytest

from src.domain.algorithms.station_graph import StationGraph

STATIONS_ABC = [["1", "Ashland"], ["2", "Bellmont"], ["3", "Cedar Falls"]]

# Four stations, eight departures. Vertex keys follow row order; sinks are 8..11.
NETWORK_STATIONS = [
    ["1", "Ashland"],
    ["2", "Bellmont Junction"],
    ["3", "Cedar Falls"],
    ["4", "Dunmore"],
]
NETWORK_TRIPS = [
    ["1", "2", "800", "830"],
    ["1", "2", "900", "930"],
    ["2", "3", "840", "910"],
    ["2", "3", "945", "1015"],
    ["3", "4", "920", "1000"],
    ["1", "4", "805", "1100"],
    ["2", "4", "1000", "1030"],
    ["3", "1", "1030", "1100"],
]


@pytest.fixture
def stations_abc() -> list[list[str]]:
    return [list(row) for row in STATIONS_ABC]


@pytest.fixture
def scenario_a(stations_abc: list[list[str]]) -> StationGraph:
    trips = [["1", "2", "0800", "0900"], ["2", "3", "0920", "1000"]]
    return StationGraph(trips, stations_abc)


@pytest.fixture
def scenario_b(stations_abc: list[list[str]]) -> StationGraph:
    # The connection leaves station 2 before the first train gets there.
    trips = [["1", "2", "0800", "0900"], ["2", "3", "0850", "1000"]]
    return StationGraph(trips, stations_abc)


@pytest.fixture
def network_tables() -> tuple[list[list[str]], list[list[str]]]:
    return [list(r) for r in NETWORK_TRIPS], [list(r) for r in NETWORK_STATIONS]


@pytest.fixture
def network(
    network_tables: tuple[list[list[str]], list[list[str]]],
) -> StationGraph:
    trips, stations = network_tables
    return StationGraph(trips, stations)
