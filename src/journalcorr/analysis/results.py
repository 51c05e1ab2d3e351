"""Correlation Result Models."""

from __future__ import annotations

import math
from typing import List

from pydantic import BaseModel, Field, computed_field


class CorrelationResult(BaseModel):
    """Phi coefficient of one event against the outcome flag.

    Example:
        >>> result = CorrelationResult(
        ...     event="peanuts",
        ...     coefficient=0.59,
        ...     table=[77, 8, 0, 5],
        ... )
        >>> result.direction
        'positive'
    """

    event: str = Field(
        ...,
        description="Event name"
    )
    coefficient: float = Field(
        ...,
        description="Phi coefficient in [-1, 1], NaN when degenerate"
    )
    table: List[int] = Field(
        ...,
        min_length=4,
        max_length=4,
        description="Contingency counts [n00, n01, n10, n11]"
    )
    degenerate: bool = Field(
        default=False,
        description="True when the coefficient is undefined"
    )

    @computed_field
    @property
    def magnitude(self) -> float:
        """Absolute coefficient; NaN stays NaN."""
        return abs(self.coefficient)

    @computed_field
    @property
    def direction(self) -> str:
        """'positive', 'negative' or 'none'."""
        if math.isnan(self.coefficient) or self.coefficient == 0:
            return "none"
        return "positive" if self.coefficient > 0 else "negative"

    def exceeds(self, threshold: float) -> bool:
        """Check whether the magnitude is strictly above ``threshold``."""
        return not self.degenerate and self.magnitude > threshold
