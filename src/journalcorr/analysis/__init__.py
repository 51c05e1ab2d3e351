"""Correlation analysis of journal events against an outcome flag.

Pipeline stages:
- **Contingency tables**: tally one event against the outcome
- **Phi coefficient**: correlation of a 2x2 table in [-1, 1]
- **Vocabulary**: distinct events in first-appearance order
- **Synthesis**: derive composite events from existing tags
- **Driver**: rank and filter events by correlation magnitude
"""

from journalcorr.analysis.config import CorrelationConfig, DegeneratePolicy
from journalcorr.analysis.contingency import ContingencyTable, build_contingency_table
from journalcorr.analysis.coefficient import phi_coefficient
from journalcorr.analysis.vocabulary import extract_vocabulary
from journalcorr.analysis.synthesis import (
    EntryPredicate,
    all_of,
    any_of,
    has_event,
    lacks_event,
    synthesize_event,
)
from journalcorr.analysis.results import CorrelationResult
from journalcorr.analysis.driver import CorrelationAnalyzer, rank_events

__all__ = [
    # Driver
    "CorrelationAnalyzer",
    "rank_events",
    # Config
    "CorrelationConfig",
    "DegeneratePolicy",
    # Components
    "ContingencyTable",
    "build_contingency_table",
    "phi_coefficient",
    "extract_vocabulary",
    "synthesize_event",
    # Predicates
    "EntryPredicate",
    "has_event",
    "lacks_event",
    "all_of",
    "any_of",
    # Results
    "CorrelationResult",
]
