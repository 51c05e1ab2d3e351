"""Journal data: entry model and loaders."""

from journalcorr.journal.models import Journal, JournalEntry
from journalcorr.journal.loader import (
    load_journal,
    load_reference_journal,
    parse_journal,
)

__all__ = [
    "Journal",
    "JournalEntry",
    "load_journal",
    "load_reference_journal",
    "parse_journal",
]
