"""Tests for the report service and the command line demo."""

import logging

import pytest

from railroad.cli import main
from railroad.domain.models import NO_SUCH_ROUTE, RouteResult
from railroad.graph.network import RailroadGraph
from railroad.services.report import CANONICAL_PROBLEMS, Problem, ReportService, format_answer

TEST_INPUT = "AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7"


def test_report_solves_canonical_problems():
    answers = ReportService(RailroadGraph(TEST_INPUT)).solve()

    assert [answer for _, answer in answers] == [9, 5, 13, 22, NO_SUCH_ROUTE, 2, 3, 9, 9, 7]
    assert [description for description, _ in answers] == [
        problem.description for problem in CANONICAL_PROBLEMS
    ]


def test_report_formats_numbered_lines():
    report = ReportService(RailroadGraph(TEST_INPUT)).format_report()
    lines = report.splitlines()

    assert len(lines) == 10
    assert lines[0] == "1. The distance of the route A-B-C: 9"
    assert lines[4] == "5. The distance of the route A-E-D: NO SUCH ROUTE"
    assert lines[8].endswith("from B to B: 9")
    assert lines[9].startswith("10. The number of different routes from C to C")


def test_report_with_custom_problems():
    service = ReportService(
        RailroadGraph("AB1, BC2"),
        problems=[Problem("Back home", lambda g: g.length_for("C", "A"))],
    )

    assert service.format_report() == "1. Back home: NO SUCH ROUTE"


@pytest.mark.parametrize(
    "answer, expected",
    [
        (9, "9"),
        (0, "0"),
        (NO_SUCH_ROUTE, "NO SUCH ROUTE"),
        (None, "NO SUCH ROUTE"),
        (RouteResult(path=("B", "C", "E", "B"), total_distance=9), "B-C-E-B (9)"),
    ],
)
def test_format_answer(answer, expected):
    assert format_answer(answer) == expected


def test_cli_prints_report_by_default(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[0] == "1. The distance of the route A-B-C: 9"
    assert len(out.splitlines()) == 10


def test_cli_uses_configured_graph(monkeypatch, capsys):
    from railroad.config import reset_config

    monkeypatch.setenv("RAILROAD_GRAPH_SPECIFICATION", "AB1, BA2")
    reset_config()

    assert main(["distance", "A-B-A"]) == 0
    assert capsys.readouterr().out.strip() == "3"


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["distance", "A-B-C"], "9"),
        (["distance", "A-E-D"], "NO SUCH ROUTE"),
        (["count", "C", "C", "--max-stops", "3"], "2"),
        (["count", "A", "C", "--exact-stops", "4"], "3"),
        (["count", "C", "C", "--max-distance", "30"], "7"),
        (["shortest", "A", "C"], "A-B-C (9)"),
        (["shortest", "B", "B"], "B-C-E-B (9)"),
        (["--graph", "AB1, BC2", "shortest", "C", "A"], "NO SUCH ROUTE"),
    ],
)
def test_cli_single_queries(capsys, argv, expected):
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


@pytest.mark.parametrize(
    "argv, message",
    [
        (["count", "A", "C"], "No condition specified"),
        (["count", "A", "C", "--max-stops", "3", "--exact-stops", "4"], "Too many conditions"),
        (["distance", "A-X"], "Unknown route node: 'X'"),
        (["shortest", "X", "A"], "Unknown start node: 'X'"),
        (["--graph", "AB5, BB1"], "self-looped"),
        (["--graph", "nonsense"], "Malformed specification"),
    ],
)
def test_cli_reports_errors(capsys, argv, message):
    assert main(argv) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert message in captured.err


def test_queries_log_their_results(caplog):
    graph = RailroadGraph(TEST_INPUT)

    with caplog.at_level(logging.INFO, logger="railroad"):
        graph.distance_of("A-E-D")
        graph.length_for("A", "C")

    messages = [record.getMessage() for record in caplog.records]
    assert "No such route" in messages
    assert "Shortest route found" in messages
