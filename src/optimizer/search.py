"""
Exhaustive cheapest-assignment search for the paint batch problem.

Every color is produced in exactly one finish: cheap ("0") or expensive
("1"). The cost of an assignment is its number of expensive digits. A client
is satisfied when ANY of its (position, value) pairs matches; an assignment
is a solution when EVERY client is satisfied.

Pipeline
────────
  create_possible_solutions   0 … 2^n − 1
  → convert to binary         minimal-width digit strings ("101")
  → rank_by_cost              stable sort, ascending expensive-digit count
  → pad_possible_solution     left-pad with the cheap digit to width n
  → first candidate satisfying all clients

Each stage is fully materialized before the next one starts. Because the
ranking covers the whole space and the scan stops at the first match, the
returned assignment has minimal cost. Among equal-cost solutions the one
with the smallest integer encoding wins (sort stability).

There is no pruning or propagation: time is O(2^n · n · clients) and memory
O(2^n · n). ExhaustiveSearchSolver refuses color counts above
SearchConfig.max_colors instead of running out of memory.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto
from functools import cmp_to_key

from src.problem.config import SearchConfig
from src.problem.requirements import (
    CHEAP_DIGIT,
    EXPENSIVE_DIGIT,
    ClientRequirement,
    RequirementSet,
)


# ─────────────────────────────────────────────────────────────────────────────
# Public types
# ─────────────────────────────────────────────────────────────────────────────


class SearchStatus(Enum):
    """Outcome of one search call"""

    OPTIMAL = auto()  # cheapest satisfying assignment found
    INFEASIBLE = auto()  # no assignment in the full space satisfies every client


@dataclass
class SearchResult:
    """Search output with diagnostics.

    solution is None exactly when status is INFEASIBLE.
    """

    solution: str | None
    status: SearchStatus
    search_space: int
    candidates_checked: int  # 1-based rank of the match, or search_space
    solve_time_ms: float
    cost: int | None = None


# ─────────────────────────────────────────────────────────────────────────────
# Pipeline stages
# ─────────────────────────────────────────────────────────────────────────────


def create_possible_solutions(colors: int) -> list[int]:
    """Every candidate assignment as an integer: [0, 1, …, 2^colors − 1].

    colors = 0 gives [0].
    """
    return list(range(2**colors))


def convert_decimal_solution_to_binary(decimal_encoded_solution: int) -> str:
    """Base-2 digits without leading zeros: 0 → "0", 5 → "101"."""
    return format(decimal_encoded_solution, "b")


def solution_cost(possible_solution: str, character_to_count: str = EXPENSIVE_DIGIT) -> int:
    """Number of times character_to_count occurs in possible_solution."""
    return possible_solution.count(character_to_count)


def compare_by_cost(
    first: str, second: str, character_to_sort_by: str = EXPENSIVE_DIGIT
) -> int:
    """Comparator ordering encodings by ascending count of character_to_sort_by.

    Negative, zero or positive like any cmp function; usable through
    functools.cmp_to_key with a stable sort.
    """
    return solution_cost(first, character_to_sort_by) - solution_cost(second, character_to_sort_by)


def rank_by_cost(
    possible_solutions: list[str], character_to_sort_by: str = EXPENSIVE_DIGIT
) -> list[str]:
    """Stable ascending sort by count of character_to_sort_by.

    Equal-cost encodings keep their input order.
    """
    return sorted(
        possible_solutions,
        key=cmp_to_key(lambda a, b: compare_by_cost(a, b, character_to_sort_by)),
    )


def pad_possible_solution(
    possible_solution: str, required_length: int, padding_character: str = CHEAP_DIGIT
) -> str:
    """Left-pad with padding_character up to required_length. Never truncates."""
    return possible_solution.rjust(required_length, padding_character)


def are_requirements_satisfied(possible_solution: str, requirements: ClientRequirement) -> bool:
    """True if ANY of the client's pairs matches possible_solution.

    Stops at the first match. A client with no pairs is never satisfied.
    Positions outside the assignment never match.
    """
    for pair in requirements:
        if 0 <= pair.position < len(possible_solution) and (
            possible_solution[pair.position] == pair.value
        ):
            return True
    return False


def satisfies_all_clients(possible_solution: str, all_requirements: RequirementSet) -> bool:
    """True if EVERY client is satisfied. Stops at the first failing client."""
    for client_requirements in all_requirements:
        if not are_requirements_satisfied(possible_solution, client_requirements):
            return False
    return True


def _ranked_candidates(colors: int) -> list[str]:
    """All 2^colors fixed-width candidates in non-decreasing cost order."""
    binary_encoded = [
        convert_decimal_solution_to_binary(s) for s in create_possible_solutions(colors)
    ]
    ranked = rank_by_cost(binary_encoded, EXPENSIVE_DIGIT)
    return [pad_possible_solution(s, colors, CHEAP_DIGIT) for s in ranked]


def find_cheapest_solution(colors: int, all_requirements: RequirementSet) -> str | None:
    """Cheapest assignment satisfying every client, or None if none exists.

    Args:
        colors: Number of color positions (n ≥ 0).
        all_requirements: Every client's acceptable (position, value) pairs.

    Returns:
        Fixed-width digit string of length colors, or None.
    """
    for possible_solution in _ranked_candidates(colors):
        if satisfies_all_clients(possible_solution, all_requirements):
            return possible_solution
    return None


# ─────────────────────────────────────────────────────────────────────────────
# Solver with diagnostics
# ─────────────────────────────────────────────────────────────────────────────


class ExhaustiveSearchSolver:
    """Runs find_cheapest_solution semantics and records diagnostics.

    Keeps running totals across calls so the CLI and benchmark can report
    aggregate solve time.
    """

    def __init__(self, search_config: SearchConfig | None = None) -> None:
        self.config = search_config or SearchConfig()
        self.total_solves: int = 0
        self.total_infeasible: int = 0
        self.total_solve_time_ms: float = 0.0

    def solve(self, colors: int, all_requirements: RequirementSet) -> str | None:
        """Cheapest solution only. Same contract as find_cheapest_solution."""

        return self.solve_with_diagnostics(colors, all_requirements).solution

    def solve_with_diagnostics(
        self, colors: int, all_requirements: RequirementSet
    ) -> SearchResult:
        """Solve with diagnostics"""

        if self.config.max_colors is not None and colors > self.config.max_colors:
            raise ValueError(
                f"{colors} colors means {2**colors} candidates; "
                f"the limit is {self.config.max_colors} colors (search.max_colors)."
            )

        t0 = time.perf_counter()
        candidates = _ranked_candidates(colors)
        solution = None
        checked = 0
        for checked, possible_solution in enumerate(candidates, start=1):
            if satisfies_all_clients(possible_solution, all_requirements):
                solution = possible_solution
                break

        ms = (time.perf_counter() - t0) * 1e3
        self.total_solves += 1
        self.total_solve_time_ms += ms

        if solution is None:
            self.total_infeasible += 1
            return SearchResult(
                solution=None,
                status=SearchStatus.INFEASIBLE,
                search_space=len(candidates),
                candidates_checked=len(candidates),
                solve_time_ms=ms,
            )
        return SearchResult(
            solution=solution,
            status=SearchStatus.OPTIMAL,
            search_space=len(candidates),
            candidates_checked=checked,
            solve_time_ms=ms,
            cost=solution_cost(solution),
        )

    @property
    def avg_solve_time_ms(self) -> float:
        """Mean solve time across all calls so far"""

        return self.total_solve_time_ms / self.total_solves if self.total_solves else 0.0
