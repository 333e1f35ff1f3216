"""Shortest-route computation using a modified Dijkstra algorithm.

The start node does not get a zero distance up front. It stays
unsettled until some route comes back to it, so a query whose start and
finish are the same node returns the shortest non-empty cycle instead of
the empty route.
"""

import heapq
import logging
from typing import Dict, List, Optional, Set, Tuple

from ..domain.models import Node
from .load_graph import Adjacency

logger = logging.getLogger(__name__)


def dijkstra(
    graph: Adjacency, start: Node, end: Node
) -> Tuple[List[Node], Optional[int]]:
    """Compute the shortest route between two nodes.

    Parameters
    ----------
    graph:
        Adjacency model as produced by ``load_graph``.
    start:
        Identifier of the departure node.
    end:
        Identifier of the arrival node. May equal ``start``, in which
        case at least one edge is traversed.

    Returns
    -------
    list, int or None
        The sequence of nodes from ``start`` to ``end`` (inclusive) and
        the total distance. If no route exists, returns ``([], None)``.
    """
    distances: Dict[Node, int] = {}
    previous: Dict[Node, Node] = {}
    settled: Set[Node] = set()

    # Entries are (distance, tie-breaker, node); the counter keeps heap
    # ordering well defined for node types that do not compare.
    heap: List[Tuple[int, int, Node]] = []
    counter = 0

    for v, weight in graph.get(start, {}).items():
        distances[v] = weight
        previous[v] = start
        heapq.heappush(heap, (weight, counter, v))
        counter += 1

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in settled or current_distance > distances[u]:
            continue

        if u == end:
            break

        settled.add(u)

        for v, weight in graph.get(u, {}).items():
            if v in settled:
                continue
            new_distance = current_distance + weight
            if v not in distances or new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, counter, v))
                counter += 1

    if end not in distances:
        logger.debug("Finish node unreachable", extra={"start": start, "end": end})
        return [], None

    path: List[Node] = [end]
    current = previous[end]
    while current != start:
        path.append(current)
        current = previous[current]
    path.append(start)

    path.reverse()
    return path, distances[end]
