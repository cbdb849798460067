"""Error hierarchy for temps.

Two disjoint families:

- ``ParseError`` and its subclasses are syntactic. They carry the input text
  and the character offset where parsing failed.
- ``ResolveError`` and its subclasses are semantic. They carry the name of the
  expression field that could not be turned into a calendar value.

Usage:
    from temps.errors import TempsError

    try:
        moment = parse_to_datetime(text, Language.ENGLISH, reference=now)
    except TempsError as e:
        print(e.user_message)
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from temps.errors.user_messages import (
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class TempsError(Exception):
    """Base exception for all temps errors.

    Attributes:
        code: Error code for categorization
        user_message: User-friendly message (optional override)
        recoverable: Whether retrying with different input can succeed
        details: Additional error details for debugging
    """

    code: str = "TEMPS_ERROR"
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
# Parse Errors
# =============================================================================


class ParseError(TempsError):
    """Base error for syntactic failures.

    ``position`` is a character offset into ``input_text``. It is ``None``
    when the error was raised while constructing an expression directly,
    outside the parser; the parser attaches both before re-raising.
    """

    code = "PARSE_ERROR"
    default_message = "Failed to parse time expression"

    def __init__(
        self,
        message: str | None = None,
        *,
        input_text: str = "",
        position: Optional[int] = None,
        details: dict | None = None,
    ) -> None:
        self.input_text = input_text
        self.position = position
        super().__init__(message, details=details)

    def locate(self, input_text: str, position: int) -> "ParseError":
        """Attach input and position, keeping an already known position."""
        self.input_text = input_text
        if self.position is None:
            self.position = position
        return self

    def excerpt(self) -> str:
        """Render the input with a caret under the failing position."""
        if self.position is None:
            return self.input_text
        return f"{self.input_text}\n{' ' * self.position}^"

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["input"] = self.input_text
        payload["position"] = self.position
        return payload


class UnrecognizedInputError(ParseError):
    """No grammar alternative matched at the failing position."""

    code = "UNRECOGNIZED_INPUT"
    default_message = "Unrecognized time expression"

    def __init__(
        self,
        message: str | None = None,
        *,
        expected: Iterable[str] = (),
        input_text: str = "",
        position: Optional[int] = None,
    ) -> None:
        self.expected = tuple(sorted(set(expected)))
        if message is None and self.expected:
            message = f"Unrecognized time expression, expected one of: {', '.join(self.expected)}"
        super().__init__(
            message,
            input_text=input_text,
            position=position,
            details={"expected": list(self.expected)},
        )


class InvalidNumericLiteralError(ParseError):
    """Digits are missing where required, overflow, or use grouping separators."""

    code = "INVALID_NUMERIC_LITERAL"
    default_message = "Invalid numeric literal"

    def __init__(
        self,
        message: str | None = None,
        *,
        literal: str = "",
        input_text: str = "",
        position: Optional[int] = None,
    ) -> None:
        self.literal = literal
        super().__init__(
            message,
            input_text=input_text,
            position=position,
            details={"literal": literal},
        )


class InvalidTimeComponentError(ParseError):
    """A date or time field lies outside its syntactic range."""

    code = "INVALID_TIME_COMPONENT"
    default_message = "Time component out of range"

    def __init__(
        self,
        field: str,
        value: Any,
        message: str | None = None,
        *,
        input_text: str = "",
        position: Optional[int] = None,
    ) -> None:
        self.field = field
        self.value = value
        if message is None:
            message = f"Invalid {field}: {value!r}"
        super().__init__(
            message,
            input_text=input_text,
            position=position,
            details={"field": field, "value": value},
        )


class IncompleteCompositeError(ParseError):
    """A connector keyword was not followed by a clock time."""

    code = "INCOMPLETE_COMPOSITE"
    default_message = "Expected a time after the connector"

    def __init__(
        self,
        connector: str,
        message: str | None = None,
        *,
        input_text: str = "",
        position: Optional[int] = None,
    ) -> None:
        self.connector = connector
        if message is None:
            message = f"Expected a time after {connector!r}"
        super().__init__(
            message,
            input_text=input_text,
            position=position,
            details={"connector": connector},
        )


class TrailingInputError(ParseError):
    """Text other than whitespace remains after a complete expression."""

    code = "TRAILING_INPUT"
    default_message = "Unexpected trailing input"

    def __init__(
        self,
        remainder: str,
        message: str | None = None,
        *,
        input_text: str = "",
        position: Optional[int] = None,
    ) -> None:
        self.remainder = remainder
        if message is None:
            message = f"Unexpected trailing input: {remainder!r}"
        super().__init__(
            message,
            input_text=input_text,
            position=position,
            details={"remainder": remainder},
        )


# =============================================================================
# Resolve Errors
# =============================================================================


class ResolveError(TempsError):
    """Base error for semantic failures during resolution.

    Attributes:
        field: Expression field that could not be resolved
    """

    code = "RESOLVE_ERROR"
    default_message = "Failed to resolve time expression"
    recoverable = False

    def __init__(
        self,
        field: str,
        message: str | None = None,
        *,
        details: dict | None = None,
    ) -> None:
        self.field = field
        payload = {"field": field}
        payload.update(details or {})
        super().__init__(message, details=payload)


class OutOfRangeError(ResolveError):
    """Arithmetic left the representable calendar range."""

    code = "OUT_OF_RANGE"
    default_message = "Date calculation is out of range"


class InvalidCalendarDateError(ResolveError):
    """Year, month and day are individually valid but do not form a date."""

    code = "INVALID_CALENDAR_DATE"
    default_message = "Invalid calendar date"

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        field: str = "day",
        message: str | None = None,
    ) -> None:
        self.year = year
        self.month = month
        self.day = day
        if message is None:
            message = f"Invalid date: year={year}, month={month}, day={day}"
        super().__init__(
            field,
            message,
            details={"year": year, "month": month, "day": day},
        )


__all__ = [
    "TempsError",
    "ParseError",
    "UnrecognizedInputError",
    "InvalidNumericLiteralError",
    "InvalidTimeComponentError",
    "IncompleteCompositeError",
    "TrailingInputError",
    "ResolveError",
    "OutOfRangeError",
    "InvalidCalendarDateError",
    "format_error_for_user",
    "get_recovery_suggestion",
    "get_user_message",
]
