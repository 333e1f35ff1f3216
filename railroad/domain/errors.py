"""Typed domain errors for the railroad network.

Every validation failure raised by the graph is one of the types below.
They are raised synchronously where the problem is detected and are not
caught anywhere inside the package; the caller decides how to report them.

All errors inherit from RailroadError. Each subclass declares its
ErrorKind so that user-facing text comes from the message catalog in
``domain/messages.py`` instead of being hard-coded at the raise site.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple


class ErrorKind(Enum):
    """Closed set of validation failures."""

    INVALID_INPUT_TYPE = "invalid_input_type"
    MALFORMED_SPECIFICATION = "malformed_specification"
    SELF_LOOP = "self_loop"
    DUPLICATE_EDGE = "duplicate_edge"
    UNKNOWN_NODE = "unknown_node"
    NO_CONDITION_SPECIFIED = "no_condition_specified"
    TOO_MANY_CONDITIONS_SPECIFIED = "too_many_conditions_specified"
    UNKNOWN_CONDITION = "unknown_condition"


@dataclass
class RailroadError(Exception):
    """Base error for the railroad domain.

    Attributes:
        message: Human-readable error description. Defaults to the
            catalog description of the error kind.
        cause: Optional underlying exception that caused this error
    """

    kind: ClassVar[ErrorKind]

    message: str = ""
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        if not self.message:
            from .messages import describe

            self.message = describe(self)
        super().__init__(self.message)


@dataclass
class InvalidInputTypeError(RailroadError):
    """Input is not of the expected type.

    Attributes:
        argument: Name of the offending argument
        expected: Description of the accepted type
        received: The value that was passed
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_INPUT_TYPE

    argument: str = ""
    expected: str = ""
    received: Any = field(default=None, repr=False)


@dataclass
class MalformedSpecificationError(RailroadError):
    """Graph or route text does not match the required grammar.

    Attributes:
        specification: The rejected text
        expected: Example of the accepted form
    """

    kind: ClassVar[ErrorKind] = ErrorKind.MALFORMED_SPECIFICATION

    specification: str = ""
    expected: str = ""


@dataclass
class SelfLoopError(RailroadError):
    """An edge starts and ends at the same node."""

    kind: ClassVar[ErrorKind] = ErrorKind.SELF_LOOP

    node: Any = None


@dataclass
class DuplicateEdgeError(RailroadError):
    """The same ordered pair of nodes is specified more than once."""

    kind: ClassVar[ErrorKind] = ErrorKind.DUPLICATE_EDGE

    pair: Tuple[Any, ...] = ()


@dataclass
class UnknownNodeError(RailroadError):
    """A referenced node is absent from the graph.

    Attributes:
        node: The missing node identifier
        role: Where the node was referenced ("start", "finish" or "route")
    """

    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN_NODE

    node: Any = None
    role: str = ""


@dataclass
class NoConditionSpecifiedError(RailroadError):
    """Route counting was requested without a condition."""

    kind: ClassVar[ErrorKind] = ErrorKind.NO_CONDITION_SPECIFIED


@dataclass
class TooManyConditionsSpecifiedError(RailroadError):
    """Route counting was requested with more than one condition."""

    kind: ClassVar[ErrorKind] = ErrorKind.TOO_MANY_CONDITIONS_SPECIFIED

    names: Tuple[str, ...] = ()


@dataclass
class UnknownConditionError(RailroadError):
    """Route counting was requested with an unsupported condition name."""

    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN_CONDITION

    name: str = ""
