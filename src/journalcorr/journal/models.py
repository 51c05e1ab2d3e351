"""Journal Entry Model.

Defines the record type analysed by the correlation pipeline:
- JournalEntry: one dated log record with its event tags and outcome flag
- Journal: ordered sequence of entries
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

from pydantic import AliasChoices, BaseModel, Field, field_validator


class JournalEntry(BaseModel):
    """A single journal record.

    ``events`` behaves as an ordered set: duplicates are collapsed on
    construction and ``add_event`` never appends a tag that is already
    present. Tag order is preserved because vocabulary order depends on it.

    Example:
        >>> entry = JournalEntry(events=["pizza", "work"], outcome=False)
        >>> entry.has_event("pizza")
        True
        >>> entry.add_event("pizza")
        False
    """

    events: List[str] = Field(
        default_factory=list,
        description="Event tags recorded for this entry, in recording order",
    )
    outcome: bool = Field(
        ...,
        validation_alias=AliasChoices("outcome", "squirrel"),
        description="Outcome flag the events are correlated against",
    )
    recorded_on: Optional[date] = Field(
        None,
        description="Date of the record (not used by the analysis)",
    )

    @field_validator("events")
    @classmethod
    def _dedupe_events(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))

    def has_event(self, event: str) -> bool:
        """Check whether ``event`` is tagged on this entry."""
        return event in self.events

    def add_event(self, event: str) -> bool:
        """Tag this entry with ``event``.

        Returns:
            True if the tag was added, False if it was already present
        """
        if event in self.events:
            return False
        self.events.append(event)
        return True


Journal = Sequence[JournalEntry]
"""Ordered journal; entries are never removed, only tagged."""
