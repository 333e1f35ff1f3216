"""Immutable domain models for the railroad network.

All models are frozen dataclasses with slots. They have no external
dependencies and describe the values produced by the graph queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Tuple

# Node identifiers are opaque: any hashable, mutually comparable token.
Node = Hashable


class NoSuchRoute(Enum):
    """Result of a distance query over a walk that is not in the graph.

    This is a valid outcome, not an error. It never compares equal to an
    integer distance, so a real zero-length route stays distinguishable.
    """

    NO_SUCH_ROUTE = "NO SUCH ROUTE"

    def __str__(self) -> str:
        return self.value


NO_SUCH_ROUTE = NoSuchRoute.NO_SUCH_ROUTE


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted connection between two nodes."""

    source: Node
    target: Node
    weight: int

    def __str__(self) -> str:
        return f"{self.source}{self.target}{self.weight}"


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-route computation.

    Attributes:
        path: Ordered tuple of nodes from start to finish, both included.
            When start and finish are the same node it appears at both ends.
        total_distance: Sum of the edge weights along the path
    """

    path: Tuple[Node, ...]
    total_distance: int

    @property
    def num_stops(self) -> int:
        """Return the number of edges traversed."""
        return max(len(self.path) - 1, 0)

    def __str__(self) -> str:
        return "-".join(str(node) for node in self.path)
