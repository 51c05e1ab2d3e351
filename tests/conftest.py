"""Shared test fixtures for journalcorr."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Sequence, Tuple

import pytest

from journalcorr.journal import JournalEntry, load_reference_journal


# ---------------------------------------------------------------------------
# Reference Journal Facts
# ---------------------------------------------------------------------------

REFERENCE_VOCABULARY = [
    "carrot", "exercise", "weekend", "bread", "pudding", "brushed teeth",
    "touched tree", "nachos", "cycling", "brussel sprouts", "ice cream",
    "computer", "potatoes", "candy", "dentist", "running", "pizza", "work",
    "beer", "cauliflower", "lasagna", "lettuce", "television", "spaghetti",
    "reading", "peanuts",
]

REFERENCE_SIGNIFICANT = [
    ("weekend", 0.13719886811400708),
    ("brushed teeth", -0.3805211953235953),
    ("candy", 0.12964074471043288),
    ("work", -0.13719886811400708),
    ("spaghetti", 0.242535625036333),
    ("reading", 0.11068280537595927),
    ("peanuts", 0.59026798116852),
]


@pytest.fixture
def reference_vocabulary() -> List[str]:
    """Vocabulary of the reference journal in first-appearance order."""
    return list(REFERENCE_VOCABULARY)


@pytest.fixture
def reference_significant() -> List[Tuple[str, float]]:
    """Events with |phi| > 0.1 on the reference journal, in vocabulary order."""
    return list(REFERENCE_SIGNIFICANT)


@pytest.fixture
def reference_journal() -> List[JournalEntry]:
    """Fresh copy of the bundled 90-entry reference journal."""
    return load_reference_journal()


@pytest.fixture
def make_journal() -> Callable[[Sequence[Tuple[Sequence[str], bool]]], List[JournalEntry]]:
    """Build a journal from ``(events, outcome)`` pairs."""

    def _make(rows: Sequence[Tuple[Sequence[str], bool]]) -> List[JournalEntry]:
        return [JournalEntry(events=list(events), outcome=outcome) for events, outcome in rows]

    return _make


@pytest.fixture
def small_journal(make_journal) -> List[JournalEntry]:
    """Six entries where 'coffee' leans towards the outcome."""
    return make_journal([
        (["coffee", "work"], True),
        (["coffee", "weekend"], True),
        (["tea", "work"], True),
        (["coffee", "work"], False),
        (["tea", "weekend"], False),
        (["work"], False),
    ])


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Settings path inside the test's temporary directory."""
    return tmp_path / "config.json"
