"""
Optimizer configuration dataclasses and YAML loader.

All tunable parameters live here as typed, frozen dataclasses.
Load from YAML with `load_config()` or construct directly for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import yaml

from src.problem.requirements import CHEAP_DIGIT, EXPENSIVE_DIGIT

POSITION_POLICIES = ("reject", "ignore")


def check_position_policy(position_policy: str) -> None:
    """Raise ValueError unless position_policy is one of POSITION_POLICIES."""
    if position_policy not in POSITION_POLICIES:
        raise ValueError(
            f"Unknown position policy {position_policy!r}. Valid options: 'reject', 'ignore'."
        )


@dataclass(frozen=True)
class EncodingConfig:
    """Finish letters used in problem files and printed results.

    The cheap letter maps onto CHEAP_DIGIT and the expensive letter onto
    EXPENSIVE_DIGIT, the digits the search works with.
    """

    cheap_letter: str = "G"  # gloss
    expensive_letter: str = "M"  # matte
    separator: str = " "  # Appended after every letter, including the last
    no_solution_message: str = "No solution exists"

    def letter_to_digit(self) -> dict[str, str]:
        """Returns the letter → digit lookup used by the parser"""

        return {self.cheap_letter: CHEAP_DIGIT, self.expensive_letter: EXPENSIVE_DIGIT}

    def digit_to_letter(self) -> dict[str, str]:
        """Returns the digit → letter lookup used by the formatter"""

        return {CHEAP_DIGIT: self.cheap_letter, EXPENSIVE_DIGIT: self.expensive_letter}


@dataclass(frozen=True)
class SearchConfig:
    """Exhaustive search limits and input policies."""

    max_colors: int | None = 24  # 2^24 candidates; None disables the guard
    position_policy: Literal["reject", "ignore"] = "reject"  # out-of-range positions

    def __post_init__(self) -> None:
        check_position_policy(self.position_policy)


@dataclass(frozen=True)
class OptimizerConfig:
    """Top-level configuration aggregating all sub-configs."""

    encoding: EncodingConfig = field(default_factory=EncodingConfig)
    search: SearchConfig = field(default_factory=SearchConfig)


def load_config(path: str | Path) -> OptimizerConfig:
    """Load an OptimizerConfig from a YAML file.

    Args:
        path: Path to a YAML config file.

    Returns:
        Fully constructed OptimizerConfig; missing sections use defaults.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return OptimizerConfig(
        encoding=EncodingConfig(**raw.get("encoding", {})),
        search=SearchConfig(**raw.get("search", {})),
    )
