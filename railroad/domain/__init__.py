"""Domain layer - Core models, errors and the message catalog.

This module contains the immutable value types returned by the graph
queries and the typed errors raised by its validation. No external
dependencies.
"""

from .errors import (
    DuplicateEdgeError,
    ErrorKind,
    InvalidInputTypeError,
    MalformedSpecificationError,
    NoConditionSpecifiedError,
    RailroadError,
    SelfLoopError,
    TooManyConditionsSpecifiedError,
    UnknownConditionError,
    UnknownNodeError,
)
from .messages import MESSAGES, describe, message_for
from .models import NO_SUCH_ROUTE, Edge, Node, NoSuchRoute, RouteResult

__all__ = [
    # Models
    "Node",
    "Edge",
    "RouteResult",
    "NoSuchRoute",
    "NO_SUCH_ROUTE",
    # Errors
    "ErrorKind",
    "RailroadError",
    "InvalidInputTypeError",
    "MalformedSpecificationError",
    "SelfLoopError",
    "DuplicateEdgeError",
    "UnknownNodeError",
    "NoConditionSpecifiedError",
    "TooManyConditionsSpecifiedError",
    "UnknownConditionError",
    # Messages
    "MESSAGES",
    "message_for",
    "describe",
]
