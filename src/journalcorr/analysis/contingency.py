"""Contingency Table Construction.

Tallies how often an event occurs in relation to the outcome flag. Each
entry lands in exactly one of four cells, indexed by a two-bit code:

    binary   index   meaning
    00       0       neither the event nor the outcome
    01       1       event, no outcome
    10       2       outcome, no event
    11       3       event and outcome
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from journalcorr.errors import InvalidTableError
from journalcorr.journal.models import Journal

logger = logging.getLogger(__name__)

EVENT_BIT = 1
OUTCOME_BIT = 2


@dataclass(frozen=True)
class ContingencyTable:
    """Four-cell table ``[n00, n01, n10, n11]`` for one event.

    Compares equal to a plain list or tuple of the same four counts, so
    ``build_contingency_table("pizza", journal) == [76, 9, 4, 1]`` holds.
    """

    n00: int
    n01: int
    n10: int
    n11: int

    def __post_init__(self) -> None:
        for count in self.counts:
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise InvalidTableError(
                    f"Table counts must be non-negative integers, got {list(self.counts)}",
                    details={"table": list(self.counts)},
                )

    @classmethod
    def from_counts(cls, counts: Sequence[int]) -> "ContingencyTable":
        """Build a table from any four-item sequence."""
        if isinstance(counts, ContingencyTable):
            return counts
        counts = list(counts)
        if len(counts) != 4:
            raise InvalidTableError(
                f"A contingency table has exactly 4 cells, got {len(counts)}",
                details={"table": counts},
            )
        return cls(*counts)

    @property
    def counts(self) -> Tuple[int, int, int, int]:
        return (self.n00, self.n01, self.n10, self.n11)

    @property
    def total(self) -> int:
        """Number of entries tallied."""
        return sum(self.counts)

    @property
    def marginals(self) -> Tuple[int, int, int, int]:
        """Outcome true, outcome false, event present, event absent."""
        return (
            self.n10 + self.n11,
            self.n00 + self.n01,
            self.n01 + self.n11,
            self.n00 + self.n10,
        )

    @property
    def is_degenerate(self) -> bool:
        """True when any marginal is zero and phi is undefined."""
        return 0 in self.marginals

    def as_list(self) -> list[int]:
        return list(self.counts)

    def __getitem__(self, index: int) -> int:
        return self.counts[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.counts)

    def __len__(self) -> int:
        return 4

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ContingencyTable):
            return self.counts == other.counts
        if isinstance(other, (list, tuple)):
            return list(self.counts) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.counts)


def build_contingency_table(event: str, journal: Journal) -> ContingencyTable:
    """Tally the contingency table of ``event`` against the outcome flag.

    Every entry is counted exactly once, so the cells always sum to
    ``len(journal)``. An event that never occurs yields ``[N, 0, 0, 0]``.

    Args:
        event: Event name, matched exactly
        journal: Entries to scan

    Returns:
        ContingencyTable for the event
    """
    frequency = [0, 0, 0, 0]
    for entry in journal:
        index = 0
        if event in entry.events:
            index += EVENT_BIT
        if entry.outcome:
            index += OUTCOME_BIT
        frequency[index] += 1

    logger.debug(f"Contingency table for '{event}': {frequency}")
    return ContingencyTable(*frequency)
