"""Services layer - Application orchestration.

Available services:
- ReportService: Solves and formats the canonical railroad problems
"""

from .report import CANONICAL_PROBLEMS, Problem, ReportService, format_answer

__all__ = ["ReportService", "Problem", "CANONICAL_PROBLEMS", "format_answer"]
