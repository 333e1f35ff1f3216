"""Top-level package for the railroad network project.

The package models a railroad map as a directed, edge-weighted graph of
named nodes and answers three kinds of queries against it: the distance
of a given route, the number of routes meeting a stop or distance
condition, and the length of the shortest route between two nodes.
"""

from .domain.errors import RailroadError
from .domain.models import NO_SUCH_ROUTE, NoSuchRoute, RouteResult
from .graph import DistanceLessThan, RailroadGraph, StopsEqual, StopsLessOrEqual

__all__ = [
    "RailroadGraph",
    "StopsLessOrEqual",
    "StopsEqual",
    "DistanceLessThan",
    "RouteResult",
    "NoSuchRoute",
    "NO_SUCH_ROUTE",
    "RailroadError",
]
