"""Correlation Analysis Driver.

Composes the pipeline stages over one journal:
- Extract the event vocabulary
- Build a contingency table per event
- Compute the phi coefficient
- Filter by magnitude and optionally order by it

The journal is held by reference. Vocabulary is recomputed on every call,
so events added with ``synthesize`` are visible to later queries.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from journalcorr.analysis.coefficient import phi_coefficient
from journalcorr.analysis.config import CorrelationConfig, DegeneratePolicy
from journalcorr.analysis.contingency import ContingencyTable, build_contingency_table
from journalcorr.analysis.results import CorrelationResult
from journalcorr.analysis.synthesis import EntryPredicate, synthesize_event
from journalcorr.analysis.vocabulary import extract_vocabulary
from journalcorr.errors import DegenerateTableError, UnknownEventError
from journalcorr.journal.models import Journal

logger = logging.getLogger(__name__)


class CorrelationAnalyzer:
    """Rank journal events by their correlation with the outcome.

    Example:
        >>> analyzer = CorrelationAnalyzer(load_reference_journal())

        >>> # Events whose |phi| exceeds 0.1, in vocabulary order
        >>> for result in analyzer.rank(threshold=0.1):
        ...     print(result.event, result.coefficient)

        >>> # Test a composite hypothesis
        >>> result = analyzer.synthesize(
        ...     "peanuts-no-teeth",
        ...     all_of(has_event("peanuts"), lacks_event("brushed teeth")),
        ... )
        >>> result.coefficient
        1.0
    """

    def __init__(
        self,
        journal: Journal,
        config: Optional[CorrelationConfig] = None,
    ):
        """Initialize the analyzer.

        Args:
            journal: Entries to analyse (held by reference)
            config: Optional configuration
        """
        self._journal = journal
        self._config = config or CorrelationConfig()

    @property
    def journal(self) -> Journal:
        return self._journal

    @property
    def config(self) -> CorrelationConfig:
        return self._config

    def vocabulary(self) -> List[str]:
        """Distinct events in first-appearance order."""
        return extract_vocabulary(self._journal)

    def table(self, event: str) -> ContingencyTable:
        """Contingency table for ``event``.

        Raises:
            UnknownEventError: If ``strict_events`` is set and the event
                never occurs
        """
        if self._config.strict_events and event not in self.vocabulary():
            raise UnknownEventError(event)
        return build_contingency_table(event, self._journal)

    def correlate(self, event: str) -> CorrelationResult:
        """Phi coefficient of ``event`` against the outcome.

        Raises:
            DegenerateTableError: If the coefficient is undefined and the
                policy is not ``nan``
            UnknownEventError: If ``strict_events`` is set and the event
                never occurs
        """
        table = self.table(event)
        try:
            coefficient = phi_coefficient(table, event=event)
        except DegenerateTableError:
            if self._config.degenerate_policy is not DegeneratePolicy.NAN:
                raise
            logger.debug(f"Degenerate table for '{event}': {table.as_list()}")
            return CorrelationResult(
                event=event,
                coefficient=float("nan"),
                table=table.as_list(),
                degenerate=True,
            )

        return CorrelationResult(
            event=event,
            coefficient=coefficient,
            table=table.as_list(),
        )

    def correlate_all(self) -> List[CorrelationResult]:
        """Correlate every vocabulary event, in vocabulary order.

        Degenerate events are dropped under the ``skip`` policy.
        """
        results: List[CorrelationResult] = []
        for event in self.vocabulary():
            try:
                results.append(self.correlate(event))
            except DegenerateTableError as e:
                if self._config.degenerate_policy is DegeneratePolicy.SKIP:
                    logger.warning(f"Skipping '{event}': {e.message}")
                    continue
                raise
        return results

    def rank(
        self,
        threshold: Optional[float] = None,
        sort_by_magnitude: Optional[bool] = None,
    ) -> List[CorrelationResult]:
        """Correlate every event and keep those above ``threshold``.

        Args:
            threshold: Magnitude that must be strictly exceeded. Pass 0 to
                keep every non-zero correlation. Default: from config.
            sort_by_magnitude: Order strongest first (stable, ties keep
                vocabulary order). Default: from config.

        Returns:
            Results in vocabulary order unless sorting was requested
        """
        if threshold is None:
            threshold = self._config.threshold
        if sort_by_magnitude is None:
            sort_by_magnitude = self._config.sort_by_magnitude

        results = [r for r in self.correlate_all() if r.exceeds(threshold)]
        if sort_by_magnitude:
            results.sort(key=lambda r: r.magnitude, reverse=True)

        logger.debug(
            f"Ranked {len(results)} events above |phi| > {threshold} "
            f"(sorted={sort_by_magnitude})"
        )
        return results

    def synthesize(self, name: str, predicate: EntryPredicate) -> CorrelationResult:
        """Tag entries matching ``predicate`` with ``name`` and correlate it."""
        synthesize_event(name, predicate, self._journal)
        return self.correlate(name)


def rank_events(
    journal: Journal,
    threshold: Optional[float] = None,
    config: Optional[CorrelationConfig] = None,
) -> List[CorrelationResult]:
    """Rank the events of ``journal`` in one call.

    See ``CorrelationAnalyzer.rank``.
    """
    return CorrelationAnalyzer(journal, config).rank(threshold=threshold)
