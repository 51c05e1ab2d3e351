"""Centralized error definitions for journalcorr.

This module provides a unified error hierarchy and user-friendly error
handling for the analysis library and its command line.

Usage:
    from journalcorr.errors import (
        JournalCorrError,
        DegenerateTableError,
        handle_error,
    )

    try:
        coefficient = phi_coefficient(table)
    except JournalCorrError as e:
        print(handle_error(e))
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from journalcorr.errors.user_messages import (
    format_error_for_cli,
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class JournalCorrError(Exception):
    """Base exception for all journalcorr errors.

    Attributes:
        code: Error code for categorization
        user_message: User-friendly message (optional override)
        recoverable: Whether the error is potentially recoverable
        details: Additional error details for debugging
    """

    code: str = "JOURNALCORR_ERROR"
    default_message: str = "An unexpected error occurred"
    recoverable: bool = True

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        """Get recovery suggestion."""
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "recoverable": self.recoverable,
            "details": self.details,
        }


# =============================================================================
# Analysis Errors
# =============================================================================


class AnalysisError(JournalCorrError):
    """Base error for correlation analysis."""

    code = "ANALYSIS_ERROR"
    default_message = "Correlation analysis failed"


class DegenerateTableError(AnalysisError):
    """A contingency table has a zero marginal, so phi is undefined.

    Attributes:
        table: The four counts ``[n00, n01, n10, n11]``
        event: Event the table was built for, when known
    """

    code = "DEGENERATE_TABLE"
    default_message = "Phi coefficient is undefined for a table with a zero marginal"

    def __init__(
        self,
        table: Sequence[int],
        *,
        event: Optional[str] = None,
        message: str | None = None,
    ) -> None:
        self.table = list(table)
        self.event = event
        details: dict[str, Any] = {"table": self.table}
        if event is not None:
            details["event"] = event
        super().__init__(
            message or f"Phi coefficient is undefined for table {self.table}",
            details=details,
        )


class UnknownEventError(AnalysisError):
    """Requested event does not occur in the journal vocabulary."""

    code = "UNKNOWN_EVENT"
    default_message = "Event not found in journal"

    def __init__(self, event: str, *, message: str | None = None) -> None:
        self.event = event
        super().__init__(
            message or f"Event '{event}' does not occur in the journal",
            details={"event": event},
        )


class InvalidTableError(AnalysisError):
    """Contingency table is not four non-negative integer counts."""

    code = "INVALID_TABLE"
    default_message = "Invalid contingency table"
    recoverable = False


class InvalidEventNameError(AnalysisError):
    """Derived event name is empty."""

    code = "INVALID_EVENT_NAME"
    default_message = "Invalid event name"


# =============================================================================
# Journal Errors
# =============================================================================


class JournalError(JournalCorrError):
    """Base error for journal data."""

    code = "JOURNAL_ERROR"
    default_message = "Journal error"


class JournalLoadError(JournalError):
    """Journal file is missing, unreadable or does not match the schema."""

    code = "JOURNAL_LOAD_ERROR"
    default_message = "Failed to load journal"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(JournalCorrError):
    """Base error for configuration issues."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration error"
    recoverable = True


class InvalidConfigError(ConfigurationError):
    """Configuration is invalid."""

    code = "INVALID_CONFIG"
    default_message = "Invalid configuration"


class MissingConfigError(ConfigurationError):
    """Required configuration is missing."""

    code = "MISSING_CONFIG"
    default_message = "Missing required configuration"


# =============================================================================
# Error Handler
# =============================================================================


def handle_error(error: Exception) -> str:
    """Handle an error and return a user-friendly message.

    Args:
        error: The exception to handle

    Returns:
        User-friendly error message with recovery suggestion
    """
    return format_error_for_user(error)


def is_recoverable(error: Exception) -> bool:
    """Check if an error is potentially recoverable."""
    if isinstance(error, JournalCorrError):
        return error.recoverable
    return False


__all__ = [
    # Base
    "JournalCorrError",
    # Analysis
    "AnalysisError",
    "DegenerateTableError",
    "UnknownEventError",
    "InvalidTableError",
    "InvalidEventNameError",
    # Journal
    "JournalError",
    "JournalLoadError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigError",
    "MissingConfigError",
    # Handlers
    "handle_error",
    "is_recoverable",
    "format_error_for_cli",
]
