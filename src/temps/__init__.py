"""temps: parse and resolve human-readable time expressions.

Usage:
    from datetime import datetime, timezone
    from temps import Language, parse, resolve

    expression = parse("in 3 hours", Language.ENGLISH)
    moment = resolve(expression, datetime(2024, 6, 1, 10, tzinfo=timezone.utc))
"""

from temps.api import ensure_complete, parse, parse_prefix, parse_to_datetime, resolve
from temps.errors import (
    IncompleteCompositeError,
    InvalidCalendarDateError,
    InvalidNumericLiteralError,
    InvalidTimeComponentError,
    OutOfRangeError,
    ParseError,
    ResolveError,
    TempsError,
    TrailingInputError,
    UnrecognizedInputError,
)
from temps.expression import (
    Absolute,
    Date,
    Day,
    DayTime,
    Direction,
    Language,
    Now,
    Relative,
    RelativeDay,
    Time,
    TimeExpression,
    TimeUnit,
    Weekday,
    WeekdayModifier,
    WeekdayReference,
)
from temps.grammar import ParseResult
from temps.resolution import WeekdayPolicy

__version__ = "0.1.0"

__all__ = [
    "Absolute",
    "Date",
    "Day",
    "DayTime",
    "Direction",
    "IncompleteCompositeError",
    "InvalidCalendarDateError",
    "InvalidNumericLiteralError",
    "InvalidTimeComponentError",
    "Language",
    "Now",
    "OutOfRangeError",
    "ParseError",
    "ParseResult",
    "Relative",
    "RelativeDay",
    "ResolveError",
    "TempsError",
    "Time",
    "TimeExpression",
    "TimeUnit",
    "TrailingInputError",
    "UnrecognizedInputError",
    "Weekday",
    "WeekdayModifier",
    "WeekdayPolicy",
    "WeekdayReference",
    "ensure_complete",
    "parse",
    "parse_prefix",
    "parse_to_datetime",
    "resolve",
]
