"""Resolution of time expressions against a reference instant.

``resolve`` is a pure function: the reference instant is always passed in
and no clock is read here. Results carry the reference's timezone, except
for ISO-8601 timestamps, which keep their own offset.

Relative arithmetic:
- Seconds through weeks are exact durations (``timedelta``)
- Months and years step through the calendar (``relativedelta``), so
  January 31 plus one month is the last day of February
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import assert_never

from temps.errors import InvalidCalendarDateError, OutOfRangeError
from temps.expression.models import (
    Absolute,
    Date,
    Day,
    DayTime,
    Now,
    Relative,
    RelativeDay,
    Time,
    TimeExpression,
    TimeUnit,
)
from temps.resolution.calendar import (
    WeekdayPolicy,
    shift_months,
    start_of_day,
    weekday_offset,
)

logger = logging.getLogger(__name__)

MIN_YEAR = datetime.min.year
MAX_YEAR = datetime.max.year


def resolve(
    expression: TimeExpression,
    reference: datetime,
    *,
    weekday_policy: WeekdayPolicy = WeekdayPolicy.STRICTLY_FUTURE,
) -> datetime:
    """Turn an expression into a timezone-aware datetime.

    Args:
        expression: Parsed time expression
        reference: Timezone-aware instant that relative forms are measured from
        weekday_policy: Rule for weekdays without "next"/"last"

    Returns:
        Aware datetime

    Raises:
        ValueError: If ``reference`` is naive
        OutOfRangeError: Arithmetic left the representable calendar range
        InvalidCalendarDateError: The date does not exist (e.g. February 30)
    """
    if reference.tzinfo is None or reference.utcoffset() is None:
        raise ValueError("Reference instant must be timezone-aware")

    if isinstance(expression, Now):
        result = reference
    elif isinstance(expression, Absolute):
        result = _resolve_absolute(expression)
    elif isinstance(expression, Relative):
        result = _resolve_relative(expression, reference)
    elif isinstance(expression, Day):
        result = _resolve_day(expression, reference, weekday_policy)
    elif isinstance(expression, Time):
        result = _at_time(reference, expression)
    elif isinstance(expression, DayTime):
        result = _at_time(_resolve_day(expression.day, reference, weekday_policy), expression.time)
    elif isinstance(expression, Date):
        result = _resolve_date(expression, reference)
    else:
        assert_never(expression)

    logger.debug(f"Resolved {expression!r} against {reference.isoformat()} to {result.isoformat()}")
    return result


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


def _resolve_absolute(expression: Absolute) -> datetime:
    try:
        return expression.to_datetime()
    except ValueError as exc:
        raise InvalidCalendarDateError(expression.year, expression.month, expression.day) from exc


def _resolve_relative(expression: Relative, reference: datetime) -> datetime:
    sign = expression.direction.sign
    try:
        if expression.unit.is_linear:
            return reference + sign * timedelta(seconds=expression.amount * expression.unit.seconds)
        months = expression.amount * (12 if expression.unit is TimeUnit.YEAR else 1)
        return shift_months(reference, sign * months)
    except (OverflowError, ValueError) as exc:
        raise OutOfRangeError(
            "amount",
            f"{expression.amount} {expression.unit.value}(s) from {reference.isoformat()} "
            "is outside the supported calendar range",
        ) from exc


def _resolve_day(expression: Day, reference: datetime, policy: WeekdayPolicy) -> datetime:
    today = reference.date()
    reference_day = expression.reference
    if isinstance(reference_day, RelativeDay):
        offset = reference_day.offset
    else:
        offset = weekday_offset(today.weekday(), reference_day.weekday, reference_day.modifier, policy)
    try:
        day = today + timedelta(days=offset)
    except OverflowError as exc:
        raise OutOfRangeError("day", f"Day {offset:+d} from {today.isoformat()} is out of range") from exc
    return start_of_day(day, reference.tzinfo)


def _at_time(moment: datetime, time: Time) -> datetime:
    return moment.replace(
        hour=time.hour,
        minute=time.minute,
        second=time.second or 0,
        microsecond=0,
    )


def _resolve_date(expression: Date, reference: datetime) -> datetime:
    if not MIN_YEAR <= expression.year <= MAX_YEAR:
        raise OutOfRangeError(
            "year", f"Year {expression.year} is outside {MIN_YEAR}-{MAX_YEAR}"
        )
    try:
        return datetime(expression.year, expression.month, expression.day, tzinfo=reference.tzinfo)
    except ValueError as exc:
        raise InvalidCalendarDateError(expression.year, expression.month, expression.day) from exc
