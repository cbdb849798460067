"""User-facing messages for temps errors.

Maps error codes to short explanations and recovery suggestions so the CLI
(and any other caller) can show something friendlier than the raw exception
text. Lookups accept either an error instance or a bare error code.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    # Parse errors
    "PARSE_ERROR": "The time expression could not be parsed.",
    "UNRECOGNIZED_INPUT": "The time expression was not recognized.",
    "INVALID_NUMERIC_LITERAL": "A number in the time expression is malformed.",
    "INVALID_TIME_COMPONENT": "A date or time field is out of range.",
    "INCOMPLETE_COMPOSITE": "A time is missing after the connector word.",
    "TRAILING_INPUT": "Unexpected text follows the time expression.",
    # Resolve errors
    "RESOLVE_ERROR": "The time expression could not be turned into a date.",
    "OUT_OF_RANGE": "The resulting date is outside the supported calendar range.",
    "INVALID_CALENDAR_DATE": "That date does not exist in the calendar.",
    # Generic
    "TEMPS_ERROR": "An unexpected error occurred.",
    "UNKNOWN_ERROR": "Something went wrong.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    # Parse errors
    "PARSE_ERROR": "Check the expression against the supported formats.",
    "UNRECOGNIZED_INPUT": "Try forms like 'in 3 hours', 'next monday' or '15/03/2024'.",
    "INVALID_NUMERIC_LITERAL": "Write numbers as plain digits without separators, e.g. '1000'.",
    "INVALID_TIME_COMPONENT": "Hours run 0-23 (1-12 with am/pm), minutes and seconds 0-59.",
    "INCOMPLETE_COMPOSITE": "Add a clock time after the connector, e.g. 'tomorrow at 9:00'.",
    "TRAILING_INPUT": "Remove the extra text or use --partial to accept a prefix match.",
    # Resolve errors
    "RESOLVE_ERROR": "Try a different reference time or a smaller offset.",
    "OUT_OF_RANGE": "Use a smaller amount; years must stay between 1 and 9999.",
    "INVALID_CALENDAR_DATE": "Check the day against the length of the month.",
    # Generic
    "TEMPS_ERROR": "If this persists, please report the issue.",
    "UNKNOWN_ERROR": "If this persists, please report the issue.",
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
    """Format a complete user-friendly error message.

    Args:
        error: The error to format

    Returns:
        Complete error message with recovery suggestion
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)

    return f"{message}\n\nSuggestion: {suggestion}"
