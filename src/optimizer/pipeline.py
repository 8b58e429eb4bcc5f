"""
End-to-end run: problem file → cheapest assignment → printable string.

Usage:
    from src.optimizer.pipeline import optimize
    print(optimize("tests/data/test_input.txt"))   # "G G G G M "
"""

from __future__ import annotations

from pathlib import Path

from src.optimizer.search import ExhaustiveSearchSolver, SearchResult
from src.problem.config import OptimizerConfig
from src.problem.formatter import format_solution
from src.problem.parser import parse_file_input, read_file_contents
from src.problem.requirements import PaintProblem


def load_problem(file_name: str | Path, config: OptimizerConfig | None = None) -> PaintProblem:
    """Read and parse a problem file. Raises InputFormatError on bad input."""
    config = config or OptimizerConfig()
    return parse_file_input(
        read_file_contents(file_name),
        encoding=config.encoding,
        position_policy=config.search.position_policy,
    )


def optimize_with_diagnostics(
    file_name: str | Path,
    config: OptimizerConfig | None = None,
    solver: ExhaustiveSearchSolver | None = None,
) -> tuple[str, SearchResult]:
    """Like optimize(), but also returns the SearchResult behind the text."""
    config = config or OptimizerConfig()
    solver = solver or ExhaustiveSearchSolver(config.search)

    problem = load_problem(file_name, config)
    result = solver.solve_with_diagnostics(problem.colors, problem.requirements)
    return format_solution(result.solution, config.encoding), result


def optimize(file_name: str | Path, config: OptimizerConfig | None = None) -> str:
    """Solve the problem in file_name and return the formatted answer.

    Returns the letter string of the cheapest assignment, or the configured
    no-solution message when no assignment satisfies every client.
    """
    return optimize_with_diagnostics(file_name, config)[0]
