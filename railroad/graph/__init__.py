"""Graph-related modules for representing the railroad network.

This subpackage contains the specification grammar, the adjacency model
and the three query algorithms run on top of it.
"""

from .conditions import Condition, DistanceLessThan, StopsEqual, StopsLessOrEqual
from .network import RailroadGraph

__all__ = [
    "RailroadGraph",
    "Condition",
    "StopsLessOrEqual",
    "StopsEqual",
    "DistanceLessThan",
]
