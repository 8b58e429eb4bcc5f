"""
Cheapest paint batch search.

Quick start:
    from src.optimizer.search import find_cheapest_solution
    from src.problem.requirements import RequirementSet
    find_cheapest_solution(2, RequirementSet.from_mapping({0: {0: "0", 1: "1"}, 1: {0: "1"}}))
    # "11"
"""

from src.optimizer.search import (
    ExhaustiveSearchSolver,
    SearchResult,
    SearchStatus,
    find_cheapest_solution,
)
from src.optimizer.pipeline import optimize

__all__ = [
    "ExhaustiveSearchSolver",
    "SearchResult",
    "SearchStatus",
    "find_cheapest_solution",
    "optimize",
]
