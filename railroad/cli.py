"""Command line demo for the railroad network.

Without a command, the canonical problems are solved against the
configured map and printed one per line. Commands run a single query:

    railroad distance A-B-C
    railroad count C C --max-stops 3
    railroad shortest B B
    railroad --graph "AB1, BC2, CA3" shortest A C
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, Iterable, Optional

from .config import get_config
from .domain.errors import RailroadError
from .domain.messages import describe
from .graph.network import RailroadGraph
from .logging_setup import configure_logging
from .services.report import ReportService, format_answer


def _report(graph: RailroadGraph, args: argparse.Namespace) -> str:
    return ReportService(graph).format_report()


def _distance(graph: RailroadGraph, args: argparse.Namespace) -> str:
    return format_answer(graph.distance_of(args.route))


def _count(graph: RailroadGraph, args: argparse.Namespace) -> str:
    conditions: Dict[str, Any] = {
        name: value
        for name, value in (
            ("stops_less_than_or_equal_to", args.max_stops),
            ("stops_equal_to", args.exact_stops),
            ("distance_less_than", args.max_distance),
        )
        if value is not None
    }
    return str(graph.routes_count_for(args.start, args.finish, conditions))


def _shortest(graph: RailroadGraph, args: argparse.Namespace) -> str:
    return format_answer(graph.shortest_route_for(args.start, args.finish))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="railroad", description="Query a directed, weighted railroad map"
    )
    parser.add_argument(
        "--graph",
        help="Graph specification such as 'AB5, BC4' (defaults to the configured map)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    parser.set_defaults(func=_report)

    subparsers = parser.add_subparsers(dest="command")

    distance_parser = subparsers.add_parser("distance", help="Length of a fully specified route")
    distance_parser.add_argument("route", help="Hyphen-separated nodes, e.g. A-B-C")
    distance_parser.set_defaults(func=_distance)

    count_parser = subparsers.add_parser("count", help="Number of routes meeting a condition")
    count_parser.add_argument("start", help="Start node")
    count_parser.add_argument("finish", help="Finish node")
    count_parser.add_argument("--max-stops", type=int, help="At most this many stops")
    count_parser.add_argument("--exact-stops", type=int, help="Exactly this many stops")
    count_parser.add_argument("--max-distance", type=int, help="Distance strictly below this")
    count_parser.set_defaults(func=_count)

    shortest_parser = subparsers.add_parser("shortest", help="Shortest route between two nodes")
    shortest_parser.add_argument("start", help="Start node")
    shortest_parser.add_argument("finish", help="Finish node")
    shortest_parser.set_defaults(func=_shortest)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    config = get_config()
    configure_logging(config.observability, level=args.log_level)

    try:
        graph = RailroadGraph(args.graph if args.graph is not None else config.graph.specification)
        print(args.func(graph, args))
    except RailroadError as e:
        print(f"Error: {describe(e)}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
