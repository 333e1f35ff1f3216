"""Report service - Answers the canonical railroad problems.

The service runs a fixed list of queries against a graph and renders
their answers as text for the command line demo. It never catches
domain errors; a bad query propagates to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..domain.models import NoSuchRoute, RouteResult
from ..graph.network import RailroadGraph

Answer = Union[int, NoSuchRoute, RouteResult, None]

NO_ROUTE_TEXT = "NO SUCH ROUTE"


@dataclass(frozen=True, slots=True)
class Problem:
    """A described query against a railroad graph."""

    description: str
    solve: Callable[[RailroadGraph], Answer]


CANONICAL_PROBLEMS: Tuple[Problem, ...] = (
    Problem("The distance of the route A-B-C", lambda g: g.distance_of("A-B-C")),
    Problem("The distance of the route A-D", lambda g: g.distance_of("A-D")),
    Problem("The distance of the route A-D-C", lambda g: g.distance_of("A-D-C")),
    Problem(
        "The distance of the route A-E-B-C-D",
        lambda g: g.distance_of("A-E-B-C-D"),
    ),
    Problem("The distance of the route A-E-D", lambda g: g.distance_of("A-E-D")),
    Problem(
        "The number of trips starting at C and ending at C with a maximum of 3 stops",
        lambda g: g.routes_count_for("C", "C", stops_less_than_or_equal_to=3),
    ),
    Problem(
        "The number of trips starting at A and ending at C with exactly 4 stops",
        lambda g: g.routes_count_for("A", "C", stops_equal_to=4),
    ),
    Problem(
        "The length of the shortest route (in terms of distance to travel) from A to C",
        lambda g: g.length_for("A", "C"),
    ),
    Problem(
        "The length of the shortest route (in terms of distance to travel) from B to B",
        lambda g: g.length_for("B", "B"),
    ),
    Problem(
        "The number of different routes from C to C with a distance of less than 30",
        lambda g: g.routes_count_for("C", "C", distance_less_than=30),
    ),
)


def format_answer(answer: Answer) -> str:
    """Render a query result, including the no-route outcomes."""
    if answer is None or isinstance(answer, NoSuchRoute):
        return NO_ROUTE_TEXT
    if isinstance(answer, RouteResult):
        return f"{answer} ({answer.total_distance})"
    return str(answer)


@dataclass
class ReportService:
    """Solves a list of problems against one graph.

    Attributes:
        graph: The railroad network to query
        problems: Problems to solve, in display order
    """

    graph: RailroadGraph
    problems: Sequence[Problem] = CANONICAL_PROBLEMS

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self) -> List[Tuple[str, Answer]]:
        """Return each problem description with its answer."""
        self._logger.debug("Solving problems", extra={"problems": len(self.problems)})
        return [(problem.description, problem.solve(self.graph)) for problem in self.problems]

    def format_report(self, answers: Optional[List[Tuple[str, Answer]]] = None) -> str:
        """Format answers as numbered lines ``"<n>. <problem>: <answer>"``."""
        answers = self.solve() if answers is None else answers
        return "\n".join(
            f"{index}. {description}: {format_answer(answer)}"
            for index, (description, answer) in enumerate(answers, 1)
        )
