"""Resolution of parsed expressions into concrete datetimes."""

from temps.resolution.calendar import WeekdayPolicy, shift_months, start_of_day, weekday_offset
from temps.resolution.resolver import resolve

__all__ = [
    "WeekdayPolicy",
    "resolve",
    "shift_months",
    "start_of_day",
    "weekday_offset",
]
