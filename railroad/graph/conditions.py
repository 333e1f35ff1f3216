"""Conditions selecting which routes are counted.

A route counting request carries exactly one condition from a closed
set. Each condition is turned into an assessor, a pure function of the
route state ``(node, stops, distance)`` returning two flags:

- ``halt``: the route can not meet the condition any more, so it is not
  extended further;
- ``count``: the route meets the condition and is counted if it ends at
  the finish node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, Union

from ..domain.errors import (
    InvalidInputTypeError,
    NoConditionSpecifiedError,
    TooManyConditionsSpecifiedError,
    UnknownConditionError,
)
from ..domain.models import Node

Assessor = Callable[[Node, int, int], Tuple[bool, bool]]


@dataclass(frozen=True, slots=True)
class StopsLessOrEqual:
    """Routes with at least one and at most ``max_stops`` stops."""

    max_stops: int

    def assessor(self) -> Assessor:
        max_stops = self.max_stops

        def assess(node: Node, stops: int, distance: int) -> Tuple[bool, bool]:
            return stops > max_stops, stops > 0

        return assess


@dataclass(frozen=True, slots=True)
class StopsEqual:
    """Routes with exactly ``stops`` stops.

    No one-stop floor applies here: with ``stops == 0`` the empty route
    is counted when start and finish are the same node.
    """

    stops: int

    def assessor(self) -> Assessor:
        exact_stops = self.stops

        def assess(node: Node, stops: int, distance: int) -> Tuple[bool, bool]:
            return stops > exact_stops, stops == exact_stops

        return assess


@dataclass(frozen=True, slots=True)
class DistanceLessThan:
    """Routes with at least one stop and a distance below ``max_distance``."""

    max_distance: int

    def assessor(self) -> Assessor:
        max_distance = self.max_distance

        def assess(node: Node, stops: int, distance: int) -> Tuple[bool, bool]:
            return distance >= max_distance, stops > 0

        return assess


Condition = Union[StopsLessOrEqual, StopsEqual, DistanceLessThan]

CONDITION_TYPES: Tuple[Type[Any], ...] = (StopsLessOrEqual, StopsEqual, DistanceLessThan)

# Keyword names accepted by ``Graph.routes_count_for``.
CONDITION_KEYS: Dict[str, Type[Any]] = {
    "stops_less_than_or_equal_to": StopsLessOrEqual,
    "stops_lower_than_or_equal_to": StopsLessOrEqual,
    "stops_equal_to": StopsEqual,
    "distance_less_than": DistanceLessThan,
}


def _check_bound(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInputTypeError(
            argument=f"condition {name}",
            expected="a non-negative integer",
            received=value,
        )
    return value


def resolve_condition(
    condition: Optional[Union[Condition, Mapping[str, Any]]] = None,
    **keywords: Any,
) -> Condition:
    """Turn the caller's condition into exactly one Condition.

    Args:
        condition: A Condition instance or a mapping of condition name to
            bound, e.g. ``{"stops_equal_to": 4}``.
        **keywords: Conditions given as keyword arguments.

    Returns:
        The single selected condition.

    Raises:
        InvalidInputTypeError: If the condition has the wrong type or its
            bound is not a non-negative integer.
        NoConditionSpecifiedError: If nothing was supplied.
        TooManyConditionsSpecifiedError: If more than one was supplied.
        UnknownConditionError: If a condition name is not recognised.
    """
    if isinstance(condition, CONDITION_TYPES):
        if keywords:
            raise TooManyConditionsSpecifiedError(
                names=(type(condition).__name__, *keywords)
            )
        for value in (getattr(condition, slot) for slot in condition.__slots__):
            _check_bound(type(condition).__name__, value)
        return condition

    if condition is None:
        requested: Dict[str, Any] = {}
    elif isinstance(condition, Mapping):
        requested = dict(condition)
    else:
        raise InvalidInputTypeError(
            argument="condition",
            expected="a condition or a mapping",
            received=condition,
        )
    requested.update(keywords)

    if not requested:
        raise NoConditionSpecifiedError()
    if len(requested) > 1:
        raise TooManyConditionsSpecifiedError(names=tuple(requested))

    ((name, value),) = requested.items()
    condition_type = CONDITION_KEYS.get(name)
    if condition_type is None:
        raise UnknownConditionError(name=str(name))
    return condition_type(_check_bound(name, value))
