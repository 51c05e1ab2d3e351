"""Event vocabulary extraction."""

from __future__ import annotations

from typing import List

from journalcorr.journal.models import Journal


def extract_vocabulary(journal: Journal) -> List[str]:
    """Return every distinct event name in order of first appearance.

    Entries are scanned in journal order and tags in entry order; a name
    is recorded the first time it is seen. No sorting is applied.
    """
    seen: set[str] = set()
    events: List[str] = []
    for entry in journal:
        for event in entry.events:
            if event not in seen:
                seen.add(event)
                events.append(event)
    return events
