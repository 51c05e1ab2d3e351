"""Correlation Analysis Configuration.

Defines configuration for the analysis driver:
- DegeneratePolicy: what the driver does with an undefined coefficient
- CorrelationConfig: threshold, ordering and policy settings
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DegeneratePolicy(str, Enum):
    """Handling of tables whose phi coefficient is undefined."""

    RAISE = "raise"
    """Propagate DegenerateTableError to the caller."""

    NAN = "nan"
    """Report the event with a NaN coefficient."""

    SKIP = "skip"
    """Leave the event out of rankings."""


@dataclass
class CorrelationConfig:
    """Configuration for correlation ranking.

    Example:
        >>> config = CorrelationConfig(
        ...     threshold=0.2,            # Only strong correlations
        ...     sort_by_magnitude=True,   # Strongest first
        ... )
    """

    threshold: float = 0.1
    """Magnitude an event's coefficient must exceed to be kept. Default: 0.1."""

    sort_by_magnitude: bool = False
    """Order rankings by descending magnitude instead of vocabulary order."""

    degenerate_policy: DegeneratePolicy = DegeneratePolicy.SKIP
    """Handling of undefined coefficients. Default: skip in rankings."""

    strict_events: bool = False
    """Reject queries for events absent from the journal. Default: False."""

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError("threshold must be between 0.0 and 1.0")

        self.degenerate_policy = DegeneratePolicy(self.degenerate_policy)
