"""Render a search result as the letter string printed by the CLI."""

from __future__ import annotations

from src.problem.config import EncodingConfig


def format_solution(solution: str | None, encoding: EncodingConfig | None = None) -> str:
    """Map every digit back to its letter, each followed by the separator.

    "00001" → "G G G G M ". None (no assignment satisfies every client)
    renders as the configured no-solution message.
    """
    encoding = encoding or EncodingConfig()
    if solution is None:
        return encoding.no_solution_message

    digit_to_letter = encoding.digit_to_letter()
    return "".join(digit_to_letter[digit] + encoding.separator for digit in solution)
