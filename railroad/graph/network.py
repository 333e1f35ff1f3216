"""The railroad network as a directed, edge-weighted graph.

An instance of ``RailroadGraph`` is built once from a specification and
never changes afterwards. It answers three kinds of queries:

- ``distance_of``: the length of a fully specified route;
- ``routes_count_for``: how many routes between two nodes satisfy a
  stop or distance condition;
- ``length_for``: the length of the shortest route between two nodes.

Example::

    graph = RailroadGraph("AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7")
    graph.distance_of("A-B-C")                                  # 9
    graph.routes_count_for("C", "C", stops_less_than_or_equal_to=3)  # 2
    graph.length_for("B", "B")                                  # 9
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from ..domain.errors import (
    InvalidInputTypeError,
    MalformedSpecificationError,
    UnknownNodeError,
)
from ..domain.models import NO_SUCH_ROUTE, Edge, Node, NoSuchRoute, RouteResult
from .conditions import Assessor, Condition, resolve_condition
from .dijkstra import dijkstra
from .load_graph import ROUTE_EXAMPLE, Adjacency, load_graph, parse_edges, parse_route

logger = logging.getLogger(__name__)


class RailroadGraph:
    """Immutable directed graph of named nodes and weighted edges."""

    def __init__(self, specification: str) -> None:
        """Build the graph from a textual specification.

        Args:
            specification: Edges separated with commas and optional
                spaces, e.g. ``"AB1, BC2, CA3"``.

        Raises:
            InvalidInputTypeError: If the specification is not a string.
            MalformedSpecificationError: If it does not match the grammar.
            SelfLoopError: If an edge starts and ends at the same node.
            DuplicateEdgeError: If an ordered pair is given twice.
        """
        self._init_from_edges(parse_edges(specification))

    @classmethod
    def from_edges(cls, edges: Iterable[Union[Edge, Tuple[Node, Node, int]]]) -> RailroadGraph:
        """Build the graph from structured edges.

        Node identifiers may be any hashable, mutually comparable values.

        Args:
            edges: ``Edge`` instances or ``(source, target, weight)`` tuples.
        """
        graph = cls.__new__(cls)
        graph._init_from_edges(
            edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges
        )
        return graph

    def _init_from_edges(self, edges: Iterable[Edge]) -> None:
        adjacency, nodes = load_graph(edges)
        self._adjacency: Adjacency = adjacency
        self._nodes: Tuple[Node, ...] = nodes
        self._node_set = frozenset(nodes)
        self._edges = MappingProxyType(
            {source: MappingProxyType(targets) for source, targets in adjacency.items()}
        )
        logger.debug(
            "Graph built",
            extra={"nodes": len(nodes), "edges": sum(map(len, adjacency.values()))},
        )

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Sorted tuple of every node referenced by an edge."""
        return self._nodes

    @property
    def edges(self) -> Mapping[Node, Mapping[Node, int]]:
        """Read-only view of the adjacency model.

        ``graph.edges["A"]["B"]`` is the weight of the edge from A to B.
        Nodes without outgoing edges have no entry.
        """
        return self._edges

    def edge_list(self) -> Tuple[Edge, ...]:
        """Return every edge, ordered by source then target."""
        return tuple(
            Edge(source, target, weight)
            for source in sorted(self._adjacency)
            for target, weight in sorted(self._adjacency[source].items())
        )

    def weight(self, source: Node, target: Node) -> Optional[int]:
        """Return the weight of the edge ``source -> target`` or None."""
        return self._adjacency.get(source, {}).get(target)

    def __contains__(self, node: object) -> bool:
        try:
            return node in self._node_set
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RailroadGraph):
            return NotImplemented
        return self._adjacency == other._adjacency

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(str, self.edge_list()))!r})"

    def distance_of(self, route: Union[str, Sequence[Node]]) -> Union[int, NoSuchRoute]:
        """Calculate the length of a route.

        Args:
            route: Hyphen-separated nodes such as ``"A-B-C"``, or a
                sequence of at least two node identifiers.

        Returns:
            The total distance, or ``NO_SUCH_ROUTE`` if two consecutive
            nodes of the route are not connected by an edge.

        Raises:
            InvalidInputTypeError: If the route is neither text nor a sequence.
            MalformedSpecificationError: If it is not a valid route.
            UnknownNodeError: If it mentions a node absent from the graph.
        """
        stops = self._route_nodes(route)

        total = 0
        for source, target in zip(stops, stops[1:]):
            weight = self.weight(source, target)
            if weight is None:
                logger.info(
                    "No such route",
                    extra={"route": stops, "missing": (source, target)},
                )
                return NO_SUCH_ROUTE
            total += weight

        logger.info("Route distance", extra={"route": stops, "distance": total})
        return total

    def routes_count_for(
        self,
        start: Node,
        finish: Node,
        condition: Optional[Union[Condition, Mapping[str, Any]]] = None,
        **keywords: Any,
    ) -> int:
        """Count the routes from start to finish that meet a condition.

        Routes may revisit nodes and edges. The condition is given either
        as an object (``StopsLessOrEqual(3)``, ``StopsEqual(4)``,
        ``DistanceLessThan(30)``) or by name::

            graph.routes_count_for("C", "C", stops_less_than_or_equal_to=3)
            graph.routes_count_for("A", "C", stops_equal_to=4)
            graph.routes_count_for("C", "C", distance_less_than=30)

        Counting with ``distance_less_than`` terminates only if every
        cycle reachable from start has a positive length.

        Returns:
            The number of matching routes, possibly zero.

        Raises:
            UnknownNodeError: If start or finish is not in the graph.
            NoConditionSpecifiedError, TooManyConditionsSpecifiedError,
            UnknownConditionError, InvalidInputTypeError: On a bad condition.
        """
        self._check_endpoints(start, finish)
        selected = resolve_condition(condition, **keywords)

        count = self._routes_count(start, finish, selected.assessor())
        logger.info(
            "Routes counted",
            extra={
                "start": start,
                "finish": finish,
                "condition": selected,
                "count": count,
            },
        )
        return count

    def shortest_route_for(self, start: Node, finish: Node) -> Optional[RouteResult]:
        """Find the shortest route from start to finish.

        When start and finish are the same node the route contains at
        least one edge.

        Returns:
            RouteResult with the nodes and total distance, or None when
            finish can not be reached.

        Raises:
            UnknownNodeError: If start or finish is not in the graph.
        """
        self._check_endpoints(start, finish)

        path, distance = dijkstra(self._adjacency, start, finish)
        if distance is None:
            logger.info("No route", extra={"start": start, "finish": finish})
            return None

        logger.info(
            "Shortest route found",
            extra={"start": start, "finish": finish, "distance": distance},
        )
        return RouteResult(path=tuple(path), total_distance=distance)

    def length_for(self, start: Node, finish: Node) -> Optional[int]:
        """Return the length of the shortest route, or None if there is none."""
        route = self.shortest_route_for(start, finish)
        return None if route is None else route.total_distance

    def _routes_count(self, start: Node, finish: Node, assess: Assessor) -> int:
        # LIFO work list of (node, stops, distance) route states.
        queue = [(start, 0, 0)]
        count = 0

        while queue:
            node, stops, distance = queue.pop()
            halt, increment = assess(node, stops, distance)
            if halt:
                continue
            if node == finish and increment:
                count += 1
            for target, weight in self._adjacency.get(node, {}).items():
                queue.append((target, stops + 1, distance + weight))

        return count

    def _route_nodes(self, route: Union[str, Sequence[Node]]) -> Tuple[Node, ...]:
        if isinstance(route, str):
            stops = tuple(parse_route(route))
        elif isinstance(route, Sequence):
            stops = tuple(route)
            if len(stops) < 2:
                raise MalformedSpecificationError(
                    specification=repr(route),
                    expected=ROUTE_EXAMPLE,
                )
        else:
            raise InvalidInputTypeError(
                argument="route specification",
                expected="a string or a sequence of nodes",
                received=route,
            )

        for node in stops:
            if node not in self:
                raise UnknownNodeError(node=node, role="route")
        return stops

    def _check_endpoints(self, start: Node, finish: Node) -> None:
        if start not in self:
            raise UnknownNodeError(node=start, role="start")
        if finish not in self:
            raise UnknownNodeError(node=finish, role="finish")
