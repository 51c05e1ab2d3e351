"""Journal loading.

Reads journals from JSON files and exposes the bundled reference journal.
"""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from journalcorr.errors import JournalLoadError
from journalcorr.journal.models import JournalEntry

logger = logging.getLogger(__name__)

_ADAPTER = TypeAdapter(List[JournalEntry])

REFERENCE_JOURNAL_RESOURCE = "data/journal.json"


def parse_journal(payload: str | bytes, *, source: str = "<string>") -> List[JournalEntry]:
    """Parse a JSON array of journal records.

    Args:
        payload: JSON text
        source: Label used in error details

    Raises:
        JournalLoadError: If the payload is not valid JSON or a record
            does not match the schema
    """
    try:
        entries = _ADAPTER.validate_json(payload)
    except ValidationError as exc:
        logger.error(f"Journal {source} failed validation: {exc.error_count()} errors")
        raise JournalLoadError(
            f"Journal {source} does not match the expected schema",
            details={"source": source, "errors": exc.error_count()},
        ) from exc

    logger.debug(f"Parsed {len(entries)} journal entries from {source}")
    return entries


def load_journal(path: Path | str) -> List[JournalEntry]:
    """Load a journal from a JSON file.

    The file holds an array of objects with an ``events`` list and an
    ``outcome`` (or ``squirrel``) boolean.

    Raises:
        JournalLoadError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        payload = path.read_bytes()
    except OSError as exc:
        logger.error(f"Cannot read journal at {path}: {exc}")
        raise JournalLoadError(
            f"Cannot read journal file {path}",
            details={"source": str(path)},
        ) from exc

    return parse_journal(payload, source=str(path))


def load_reference_journal() -> List[JournalEntry]:
    """Load a fresh copy of the bundled 90-entry reference journal.

    Each call returns new entry objects, so synthesis on one copy never
    leaks into another.
    """
    resource = resources.files("journalcorr.journal").joinpath(REFERENCE_JOURNAL_RESOURCE)
    return parse_journal(resource.read_bytes(), source="reference journal")
