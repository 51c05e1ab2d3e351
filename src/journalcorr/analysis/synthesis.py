"""Derived Event Synthesis.

Tags journal entries with a new composite event defined by a predicate
over the events they already carry, so the composite hypothesis can be
analysed like any recorded event.

Example:
    >>> synthesize_event(
    ...     "peanuts-no-teeth",
    ...     all_of(has_event("peanuts"), lacks_event("brushed teeth")),
    ...     journal,
    ... )
"""

from __future__ import annotations

import logging
from typing import Callable

from journalcorr.errors import InvalidEventNameError
from journalcorr.journal.models import Journal, JournalEntry

logger = logging.getLogger(__name__)

EntryPredicate = Callable[[JournalEntry], bool]


def has_event(event: str) -> EntryPredicate:
    """Predicate matching entries tagged with ``event``."""

    def predicate(entry: JournalEntry) -> bool:
        return event in entry.events

    return predicate


def lacks_event(event: str) -> EntryPredicate:
    """Predicate matching entries not tagged with ``event``."""

    def predicate(entry: JournalEntry) -> bool:
        return event not in entry.events

    return predicate


def all_of(*predicates: EntryPredicate) -> EntryPredicate:
    """Predicate matching entries that satisfy every given predicate."""

    def predicate(entry: JournalEntry) -> bool:
        return all(p(entry) for p in predicates)

    return predicate


def any_of(*predicates: EntryPredicate) -> EntryPredicate:
    """Predicate matching entries that satisfy at least one given predicate."""

    def predicate(entry: JournalEntry) -> bool:
        return any(p(entry) for p in predicates)

    return predicate


def synthesize_event(name: str, predicate: EntryPredicate, journal: Journal) -> int:
    """Add ``name`` to the events of every entry matching ``predicate``.

    This is the only operation that mutates a journal. Tags are added with
    set semantics, so re-running with the same name never duplicates a tag.

    Args:
        name: Derived event name
        predicate: Test applied to each entry
        journal: Entries to tag in place

    Returns:
        Number of entries newly tagged (0 when re-run)

    Raises:
        InvalidEventNameError: If ``name`` is empty or whitespace
    """
    if not name or not name.strip():
        raise InvalidEventNameError(
            "Derived event name must not be empty",
            details={"name": name},
        )

    matched = 0
    added = 0
    for entry in journal:
        if predicate(entry):
            matched += 1
            if entry.add_event(name):
                added += 1

    logger.info(
        f"Synthesized '{name}': {matched} matching entries, {added} newly tagged"
    )
    return added
