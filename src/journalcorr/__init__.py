"""journalcorr: find which journal events correlate with an outcome."""

from journalcorr.analysis import (
    ContingencyTable,
    CorrelationAnalyzer,
    CorrelationConfig,
    CorrelationResult,
    DegeneratePolicy,
    all_of,
    any_of,
    build_contingency_table,
    extract_vocabulary,
    has_event,
    lacks_event,
    phi_coefficient,
    rank_events,
    synthesize_event,
)
from journalcorr.journal import JournalEntry, load_journal, load_reference_journal

__version__ = "0.1.0"

__all__ = [
    "ContingencyTable",
    "CorrelationAnalyzer",
    "CorrelationConfig",
    "CorrelationResult",
    "DegeneratePolicy",
    "JournalEntry",
    "all_of",
    "any_of",
    "build_contingency_table",
    "extract_vocabulary",
    "has_event",
    "lacks_event",
    "load_journal",
    "load_reference_journal",
    "phi_coefficient",
    "rank_events",
    "synthesize_event",
]
