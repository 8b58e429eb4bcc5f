"""
Client requirement records.

A paint batch has one position per color. Every client lists the
(position, finish) pairs it would be happy with; it is satisfied when at
least one of them matches the chosen assignment.

Usage:
    requirements = RequirementSet.from_mapping({0: {0: "1", 2: "0"}, 1: {4: "1"}})
    problem = PaintProblem(colors=5, requirements=requirements)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

CHEAP_DIGIT = "0"
EXPENSIVE_DIGIT = "1"  # Cost of an assignment = number of these


@dataclass(frozen=True)
class RequirementPair:
    """A single acceptable finish for one color.

    Attributes:
        position: 0-indexed color position in the assignment.
        value: Required digit at that position ("0" cheap, "1" expensive).
    """

    position: int
    value: str


@dataclass(frozen=True)
class ClientRequirement:
    """All acceptable finishes for one client, in input order."""

    client_id: int
    pairs: tuple[RequirementPair, ...] = ()

    def __iter__(self) -> Iterator[RequirementPair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    @classmethod
    def from_mapping(cls, client_id: int, pairs: Mapping[int, str]) -> ClientRequirement:
        """Build from a {position: value} mapping, keeping its iteration order."""
        return cls(
            client_id=client_id,
            pairs=tuple(RequirementPair(position, value) for position, value in pairs.items()),
        )


@dataclass(frozen=True)
class RequirementSet:
    """Every client of one search call. Client order does not affect the result."""

    clients: tuple[ClientRequirement, ...] = ()

    def __iter__(self) -> Iterator[ClientRequirement]:
        return iter(self.clients)

    def __len__(self) -> int:
        return len(self.clients)

    @classmethod
    def from_mapping(cls, all_requirements: Mapping[int, Mapping[int, str]]) -> RequirementSet:
        """Build from the keyed form {client_id: {position: value}}."""
        return cls(
            clients=tuple(
                ClientRequirement.from_mapping(client_id, pairs)
                for client_id, pairs in all_requirements.items()
            )
        )

    def positions(self) -> set[int]:
        """Every position referenced by any client."""
        return {pair.position for client in self.clients for pair in client}


@dataclass(frozen=True)
class PaintProblem:
    """A parsed problem: number of colors plus all client requirements."""

    colors: int
    requirements: RequirementSet

    @property
    def search_space(self) -> int:
        """Number of candidate assignments (2^colors)"""

        return 2**self.colors
