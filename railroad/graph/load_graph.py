"""Railroad map loading from its textual specification.

This module defines the adjacency type used throughout the project and
the grammar of the two textual inputs the graph understands:

- a graph specification, edges separated with commas and optional
  spaces, e.g. ``"AB5, BC4, CD8"`` (edge A -> B of weight 5, ...);
- a route specification, nodes separated with hyphens, e.g. ``"A-B-C"``.

In the textual form a node is a single capital latin letter. Graphs
built with ``load_graph`` directly from edges accept any hashable,
comparable node identifiers.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Set, Tuple

from ..domain.errors import (
    DuplicateEdgeError,
    InvalidInputTypeError,
    MalformedSpecificationError,
    SelfLoopError,
)
from ..domain.models import Edge, Node

Adjacency = Dict[Node, Dict[Node, int]]

GRAPH_EXAMPLE = "AB1, BC2, CA3"
ROUTE_EXAMPLE = "A-B-C"

_EDGE = r"([A-Z])([A-Z])(\d+)"
_GRAPH_PATTERN = re.compile(rf"(?:{_EDGE},\s*)*{_EDGE}")
_EDGE_PATTERN = re.compile(_EDGE)
_EDGE_SEPARATOR = re.compile(r",\s*")
_ROUTE_PATTERN = re.compile(r"(?:[A-Z]-)+[A-Z]")


def parse_edges(specification: str) -> List[Edge]:
    """Parse a graph specification into edges.

    Parameters
    ----------
    specification:
        Text such as ``"AB5, BC4"``.

    Returns
    -------
    list[Edge]
        Edges in the order they appear in the specification. Structural
        invariants (self loops, repeated edges) are checked by
        ``load_graph``.
    """
    if not isinstance(specification, str):
        raise InvalidInputTypeError(
            argument="graph specification",
            expected="a string",
            received=specification,
        )

    text = specification.strip()
    if not _GRAPH_PATTERN.fullmatch(text):
        raise MalformedSpecificationError(
            specification=specification,
            expected=GRAPH_EXAMPLE,
        )

    edges: List[Edge] = []
    for token in _EDGE_SEPARATOR.split(text):
        match = _EDGE_PATTERN.fullmatch(token)
        assert match is not None
        source, target, weight = match.groups()
        edges.append(Edge(source=source, target=target, weight=int(weight)))
    return edges


def parse_route(specification: str) -> List[Node]:
    """Parse a hyphen-delimited route specification into its nodes."""
    if not isinstance(specification, str):
        raise InvalidInputTypeError(
            argument="route specification",
            expected="a string",
            received=specification,
        )
    if not _ROUTE_PATTERN.fullmatch(specification.strip()):
        raise MalformedSpecificationError(
            specification=specification,
            expected=ROUTE_EXAMPLE,
        )
    return specification.strip().split("-")


def load_graph(edges: Iterable[Edge]) -> Tuple[Adjacency, Tuple[Node, ...]]:
    """Build the adjacency model and the sorted node set from edges.

    Parameters
    ----------
    edges:
        Directed edges. Weights must be non-negative integers.

    Returns
    -------
    dict, tuple
        Mapping ``source -> {target: weight}`` and the sorted tuple of
        every node referenced by an edge.
    """
    edges = list(edges)

    # All self loops are reported before any repeated edge.
    for edge in edges:
        if edge.source == edge.target:
            raise SelfLoopError(node=edge.source)

    adjacency: Adjacency = {}
    nodes: Set[Node] = set()
    for edge in edges:
        if isinstance(edge.weight, bool) or not isinstance(edge.weight, int):
            raise InvalidInputTypeError(
                argument="edge weight",
                expected="a non-negative integer",
                received=edge.weight,
            )
        if edge.weight < 0:
            raise InvalidInputTypeError(
                argument="edge weight",
                expected="a non-negative integer",
                received=edge.weight,
            )

        neighbours = adjacency.setdefault(edge.source, {})
        if edge.target in neighbours:
            raise DuplicateEdgeError(pair=(edge.source, edge.target))
        neighbours[edge.target] = edge.weight
        nodes.update((edge.source, edge.target))

    return adjacency, tuple(sorted(nodes))
