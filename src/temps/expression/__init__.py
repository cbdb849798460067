"""Time expression AST shared by the grammar and the resolver."""

from temps.expression.models import (
    # Enums
    Direction,
    Language,
    Meridiem,
    RelativeDay,
    TimeUnit,
    Weekday,
    WeekdayModifier,
    # Variants
    Absolute,
    Date,
    Day,
    DayReference,
    DayTime,
    Now,
    Relative,
    Time,
    TimeExpression,
    WeekdayReference,
)

__all__ = [
    # Enums
    "Direction",
    "Language",
    "Meridiem",
    "RelativeDay",
    "TimeUnit",
    "Weekday",
    "WeekdayModifier",
    # Variants
    "Absolute",
    "Date",
    "Day",
    "DayReference",
    "DayTime",
    "Now",
    "Relative",
    "Time",
    "TimeExpression",
    "WeekdayReference",
]
