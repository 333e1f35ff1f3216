"""Human-readable message catalog for domain errors.

The graph raises typed errors only; this module owns the text shown to
users. Each ErrorKind maps to one template which is filled in from the
fields of the error instance.
"""

from __future__ import annotations

from dataclasses import fields
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Mapping

from .errors import ErrorKind

if TYPE_CHECKING:
    from .errors import RailroadError


MESSAGES: Mapping[ErrorKind, str] = MappingProxyType(
    {
        ErrorKind.INVALID_INPUT_TYPE: "{argument} should be {expected}, got {received!r}",
        ErrorKind.MALFORMED_SPECIFICATION: (
            "Malformed specification {specification!r}, "
            "expected something like {expected!r}"
        ),
        ErrorKind.SELF_LOOP: "Graph should not contain self-looped nodes: {node!r}",
        ErrorKind.DUPLICATE_EDGE: "Graph should not contain repeated edges: {pair!r}",
        ErrorKind.UNKNOWN_NODE: "Unknown {role} node: {node!r}",
        ErrorKind.NO_CONDITION_SPECIFIED: "No condition specified",
        ErrorKind.TOO_MANY_CONDITIONS_SPECIFIED: "Too many conditions specified: {names!r}",
        ErrorKind.UNKNOWN_CONDITION: "Unknown condition specified: {name!r}",
    }
)


def message_for(kind: ErrorKind) -> str:
    """Return the raw template registered for an error kind."""
    return MESSAGES[kind]


def describe(error: RailroadError) -> str:
    """Format an error for display using the catalog template.

    Args:
        error: Any RailroadError instance.

    Returns:
        The filled-in description.
    """
    values: Dict[str, Any] = {
        f.name: getattr(error, f.name) for f in fields(error) if f.name != "message"
    }
    return message_for(error.kind).format(**values)
