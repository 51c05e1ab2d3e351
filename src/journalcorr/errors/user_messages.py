"""User-friendly error messages for journalcorr.

Maps error codes to short, human-readable messages and recovery
suggestions so the command line never shows a bare traceback.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    # Analysis errors
    "ANALYSIS_ERROR": "The correlation analysis could not be completed.",
    "DEGENERATE_TABLE": "The correlation is undefined for this event.",
    "UNKNOWN_EVENT": "That event does not occur anywhere in the journal.",
    "INVALID_TABLE": "The contingency table is malformed.",
    "INVALID_EVENT_NAME": "The event name is not valid.",
    # Journal errors
    "JOURNAL_ERROR": "A journal issue occurred.",
    "JOURNAL_LOAD_ERROR": "The journal file could not be loaded.",
    # Configuration errors
    "CONFIGURATION_ERROR": "There's a configuration issue.",
    "INVALID_CONFIG": "The configuration is invalid. Check settings.",
    "MISSING_CONFIG": "Required configuration is missing.",
    # Generic
    "JOURNALCORR_ERROR": "An unexpected error occurred. Please try again.",
    "UNKNOWN_ERROR": "Something went wrong. Please try again.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    # Analysis errors
    "ANALYSIS_ERROR": "Check the journal contents and retry.",
    "DEGENERATE_TABLE": (
        "The event or the outcome never varies. Pick an event that is "
        "present in some entries and absent in others."
    ),
    "UNKNOWN_EVENT": "List the available events with: journalcorr analyze events",
    "INVALID_TABLE": "Pass exactly four non-negative integer counts.",
    "INVALID_EVENT_NAME": "Use a non-empty name for the derived event.",
    # Journal errors
    "JOURNAL_ERROR": "Check the journal file.",
    "JOURNAL_LOAD_ERROR": (
        "Make sure the file is a JSON array of objects with 'events' and "
        "'outcome' (or 'squirrel') fields."
    ),
    # Configuration errors
    "CONFIGURATION_ERROR": "Check config: journalcorr config show",
    "INVALID_CONFIG": "Recreate defaults: journalcorr config init",
    "MISSING_CONFIG": "Create the settings file: journalcorr config init",
    # Generic
    "JOURNALCORR_ERROR": "If this persists, please report the issue.",
    "UNKNOWN_ERROR": "Re-run with --verbose for details.",
}


# =============================================================================
# Helper Functions
# =============================================================================


def _error_code(error: Any) -> str:
    if hasattr(error, "code"):
        return error.code
    if isinstance(error, str):
        return error
    return type(error).__name__.upper()


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        User-friendly error message
    """
    return ERROR_MESSAGES.get(_error_code(error), ERROR_MESSAGES["UNKNOWN_ERROR"])


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        Recovery suggestion
    """
    return RECOVERY_SUGGESTIONS.get(
        _error_code(error), RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"]
    )


def format_error_for_user(error: Any) -> str:
    """Format a complete user-friendly error message."""
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)

    return f"{message}\n\nSuggestion: {suggestion}"


def format_error_for_cli(error: Any) -> str:
    """Format error for CLI output.

    Includes the error code, the underlying message and any details
    attached to the error.
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)
    code = getattr(error, "code", "ERROR")

    lines = [f"Error [{code}]: {message}"]

    detail_message = getattr(error, "message", None)
    if detail_message and detail_message != message:
        lines.append(f"  {detail_message}")

    lines.append("")
    lines.append(f"Suggestion: {suggestion}")

    if getattr(error, "details", None):
        lines.append("")
        lines.append("Details:")
        for key, value in error.details.items():
            lines.append(f"  {key}: {value}")

    return "\n".join(lines)
