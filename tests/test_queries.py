"""Tests for the three railroad graph queries."""

import pytest

from railroad.domain.models import NO_SUCH_ROUTE, NoSuchRoute, RouteResult
from railroad.graph.conditions import DistanceLessThan, StopsEqual, StopsLessOrEqual
from railroad.graph.network import RailroadGraph

TEST_INPUT = "AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7"


@pytest.fixture
def graph():
    return RailroadGraph(TEST_INPUT)


@pytest.fixture
def cities():
    return RailroadGraph.from_edges(
        [("Paris", "Lyon", 4), ("Lyon", "Nice", 3), ("Nice", "Paris", 5)]
    )


# distance_of


@pytest.mark.parametrize(
    "route, expected",
    [
        ("A-B-C", 9),
        ("A-D", 5),
        ("A-D-C", 13),
        ("A-E-B-C-D", 22),
        ("C-D-C-D", 24),
    ],
)
def test_distance_of_existing_route(graph, route, expected):
    assert graph.distance_of(route) == expected


def test_distance_of_missing_route_returns_sentinel(graph):
    result = graph.distance_of("A-E-D")

    assert result is NO_SUCH_ROUTE
    assert isinstance(result, NoSuchRoute)
    assert str(result) == "NO SUCH ROUTE"


def test_distance_of_sentinel_differs_from_zero_distance():
    graph = RailroadGraph("AB0, BC1")

    assert graph.distance_of("A-B") == 0
    assert graph.distance_of("A-B") is not NO_SUCH_ROUTE
    assert graph.distance_of("B-A") is NO_SUCH_ROUTE


def test_distance_of_is_additive(graph):
    route = ["A", "E", "B", "C", "D"]
    expected = sum(graph.weight(a, b) for a, b in zip(route, route[1:]))

    assert graph.distance_of(route) == expected == 22


def test_distance_of_accepts_node_sequence(cities):
    assert cities.distance_of(["Paris", "Lyon", "Nice"]) == 7
    assert cities.distance_of(("Lyon", "Paris")) is NO_SUCH_ROUTE


# routes_count_for


def test_routes_count_with_maximum_stops(graph):
    assert graph.routes_count_for("C", "C", stops_less_than_or_equal_to=3) == 2


def test_routes_count_with_exact_stops(graph):
    assert graph.routes_count_for("A", "C", stops_equal_to=4) == 3


def test_routes_count_with_threshold_distance(graph):
    assert graph.routes_count_for("C", "C", distance_less_than=30) == 7


def test_routes_count_accepts_condition_objects(graph):
    assert graph.routes_count_for("C", "C", StopsLessOrEqual(3)) == 2
    assert graph.routes_count_for("A", "C", StopsEqual(4)) == 3
    assert graph.routes_count_for("C", "C", DistanceLessThan(30)) == 7


def test_routes_count_accepts_condition_mapping(graph):
    assert graph.routes_count_for("A", "C", {"stops_equal_to": 4}) == 3


def test_routes_count_accepts_historical_condition_name(graph):
    assert graph.routes_count_for("C", "C", stops_lower_than_or_equal_to=3) == 2


def test_routes_count_requires_at_least_one_stop(graph):
    assert graph.routes_count_for("C", "C", stops_less_than_or_equal_to=0) == 0
    assert graph.routes_count_for("C", "C", distance_less_than=9) == 0


def test_routes_count_exact_zero_stops_counts_empty_route(graph):
    assert graph.routes_count_for("A", "A", stops_equal_to=0) == 1
    assert graph.routes_count_for("C", "C", stops_equal_to=0) == 1
    assert graph.routes_count_for("A", "C", stops_equal_to=0) == 0


def test_routes_count_returns_zero_when_unreachable(graph):
    assert graph.routes_count_for("B", "A", stops_less_than_or_equal_to=10) == 0
    assert graph.routes_count_for("E", "A", distance_less_than=100) == 0


def test_routes_count_is_monotonic_in_maximum_stops(graph):
    counts = [
        graph.routes_count_for("C", "C", stops_less_than_or_equal_to=n)
        for n in range(7)
    ]

    assert counts[:4] == [0, 0, 1, 2]
    assert counts == sorted(counts)


def test_routes_count_is_monotonic_in_threshold_distance(graph):
    counts = [graph.routes_count_for("C", "C", distance_less_than=n) for n in range(0, 40, 3)]

    assert counts == sorted(counts)
    assert graph.routes_count_for("C", "C", distance_less_than=10) == 1


def test_routes_count_with_opaque_nodes(cities):
    assert cities.routes_count_for("Paris", "Paris", stops_less_than_or_equal_to=3) == 1
    assert cities.routes_count_for("Paris", "Paris", stops_less_than_or_equal_to=6) == 2
    assert cities.routes_count_for("Paris", "Nice", distance_less_than=8) == 1


# length_for / shortest_route_for


def test_length_for_distinct_nodes(graph):
    assert graph.length_for("A", "C") == 9
    assert graph.length_for("A", "E") == 7
    assert graph.length_for("E", "D") == 15


def test_length_for_same_node_requires_a_cycle(graph):
    assert graph.length_for("B", "B") == 9
    assert graph.length_for("C", "C") == 9


def test_length_for_returns_none_without_route(graph):
    assert graph.length_for("A", "A") is None
    assert graph.length_for("B", "A") is None


def test_length_for_dead_end_node():
    graph = RailroadGraph.from_edges([(1, 2, 1), (2, 3, 1)])

    assert graph.length_for(1, 3) == 2
    assert graph.length_for(3, 1) is None
    assert graph.length_for(3, 3) is None


def test_length_for_with_opaque_nodes(cities):
    assert cities.length_for("Paris", "Paris") == 12
    assert cities.length_for("Nice", "Lyon") == 9


def test_shortest_route_for_returns_path(graph):
    route = graph.shortest_route_for("B", "B")

    assert route == RouteResult(path=("B", "C", "E", "B"), total_distance=9)
    assert route.num_stops == 3
    assert str(route) == "B-C-E-B"
    assert graph.shortest_route_for("D", "B").path == ("D", "E", "B")


def test_length_for_is_never_below_a_real_route(graph):
    for start in graph.nodes:
        for finish in graph.nodes:
            length = graph.length_for(start, finish)
            route = graph.shortest_route_for(start, finish)
            if length is None:
                assert route is None
                continue
            assert graph.distance_of(route.path) == length
            assert graph.routes_count_for(start, finish, distance_less_than=length) == 0


def test_queries_do_not_change_the_graph(graph):
    before = graph.edge_list()

    graph.routes_count_for("C", "C", distance_less_than=30)
    graph.length_for("B", "B")
    graph.distance_of("A-B-C")

    assert graph.edge_list() == before
