"""
Problem file reading and parsing.

File format:
    line 1      number of colors
    line 2..    one client per line: "<position> <letter>" pairs, e.g. "1 M 3 G 5 G"

Positions are 1-indexed in the file and 0-indexed everywhere else. Letters
are mapped to search digits through EncodingConfig (G → "0", M → "1").
Malformed input raises InputFormatError before any search runs.
"""

from __future__ import annotations

from pathlib import Path

from src.problem.config import EncodingConfig, check_position_policy
from src.problem.requirements import (
    ClientRequirement,
    PaintProblem,
    RequirementPair,
    RequirementSet,
)

def _is_decimal(token: str) -> bool:
    """Plain ASCII digits only; rejects signs, underscores and non-ASCII digits."""
    return token.isascii() and token.isdigit()


class InputFormatError(ValueError):
    """Raised when a problem file does not follow the expected format."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def read_file_contents(file_name: str | Path) -> list[str]:
    """Read a problem file and break it into lines.

    Trailing blank lines are dropped so a final newline does not turn into
    an extra client with no requirements.
    """
    with open(file_name, encoding="utf-8") as f:
        lines = f.read().splitlines()

    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def parse_file_input_line(
    line: str,
    client_id: int = 0,
    colors: int | None = None,
    encoding: EncodingConfig | None = None,
    position_policy: str = "reject",
    line_number: int | None = None,
) -> ClientRequirement:
    """Parse one client line into a ClientRequirement.

    Args:
        line: Whitespace-separated "<position> <letter>" tokens.
        client_id: Identifier assigned to the client (its line order).
        colors: Number of colors; when given with the "reject" policy,
            positions beyond it raise InputFormatError.
        encoding: Letter → digit mapping. Defaults to G/M → 0/1.
        position_policy: "reject" out-of-range positions or "ignore" them
            (kept, but they can never match an assignment).
        line_number: 1-based file line, only used in error messages.

    Returns:
        ClientRequirement with pairs in first-seen position order. A position
        repeated on the same line takes the later letter.
    """
    check_position_policy(position_policy)
    encoding = encoding or EncodingConfig()
    letter_to_digit = encoding.letter_to_digit()

    tokens = line.split()
    if len(tokens) % 2:
        raise InputFormatError(
            f"expected '<position> <letter>' pairs, got {len(tokens)} tokens", line_number
        )

    requested: dict[int, str] = {}
    for color_id, color_type in zip(tokens[::2], tokens[1::2]):
        if not _is_decimal(color_id):
            raise InputFormatError(f"position {color_id!r} is not an integer", line_number)
        position = int(color_id) - 1
        if position < 0:
            raise InputFormatError(f"position {color_id} must be at least 1", line_number)
        if colors is not None and position >= colors and position_policy == "reject":
            raise InputFormatError(
                f"position {color_id} is out of range for {colors} colors", line_number
            )
        if color_type not in letter_to_digit:
            valid = ", ".join(sorted(letter_to_digit))
            raise InputFormatError(
                f"unknown finish {color_type!r} (expected one of {valid})", line_number
            )
        requested[position] = letter_to_digit[color_type]

    return ClientRequirement(
        client_id=client_id,
        pairs=tuple(RequirementPair(position, value) for position, value in requested.items()),
    )


def parse_file_input(
    file_lines: list[str],
    encoding: EncodingConfig | None = None,
    position_policy: str = "reject",
) -> PaintProblem:
    """Parse all lines of a problem file.

    The first line holds the number of colors; every following line is one
    client, numbered by line order starting at 0. The input list is not
    modified.
    """
    if not file_lines:
        raise InputFormatError("missing number of colors", 1)

    header = file_lines[0].strip()
    if not _is_decimal(header):
        raise InputFormatError(f"number of colors {header!r} is not an integer", 1)
    colors = int(header)
    if colors < 1:
        raise InputFormatError(f"number of colors must be positive, got {colors}", 1)

    clients = tuple(
        parse_file_input_line(
            line,
            client_id=client_id,
            colors=colors,
            encoding=encoding,
            position_policy=position_policy,
            line_number=client_id + 2,
        )
        for client_id, line in enumerate(file_lines[1:])
    )
    return PaintProblem(colors=colors, requirements=RequirementSet(clients=clients))
