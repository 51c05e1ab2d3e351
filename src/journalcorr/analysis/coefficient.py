"""Phi coefficient of a 2x2 contingency table."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from journalcorr.analysis.contingency import ContingencyTable
from journalcorr.errors import DegenerateTableError


def phi_coefficient(
    table: ContingencyTable | Sequence[int],
    *,
    event: Optional[str] = None,
) -> float:
    """Compute the phi coefficient of ``[n00, n01, n10, n11]``.

    The numerator is the cross-product difference and the denominator
    normalizes by all four marginals, bounding the result to [-1, 1].
    Positive values mean the event occurs with the outcome more often than
    chance would suggest.

    Args:
        table: Contingency table or any four-item sequence of counts
        event: Event name, only used to annotate errors

    Raises:
        DegenerateTableError: If any marginal is zero
        InvalidTableError: If the table is not four non-negative integers

    Example:
        >>> round(phi_coefficient([76, 9, 4, 1]), 4)
        0.0686
    """
    table = ContingencyTable.from_counts(table)
    if table.is_degenerate:
        raise DegenerateTableError(table.as_list(), event=event)

    n00, n01, n10, n11 = table.counts
    return (n11 * n00 - n10 * n01) / math.sqrt(
        (n10 + n11) * (n00 + n01) * (n01 + n11) * (n00 + n10)
    )
