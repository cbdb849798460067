"""Calendar arithmetic helpers for the resolver."""

from __future__ import annotations

from datetime import date, datetime, time, tzinfo
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta

from temps.expression.models import Weekday, WeekdayModifier

DAYS_PER_WEEK = 7


class WeekdayPolicy(Enum):
    """How a weekday without "next"/"last" is resolved.

    STRICTLY_FUTURE: the first occurrence after the reference date, the same
        as "next monday"
    UPCOMING: the reference date itself when it already falls on that weekday
    """

    STRICTLY_FUTURE = "next"
    UPCOMING = "upcoming"


def weekday_offset(
    current: int,
    target: Weekday,
    modifier: Optional[WeekdayModifier],
    policy: WeekdayPolicy = WeekdayPolicy.STRICTLY_FUTURE,
) -> int:
    """Days to add to a date falling on ``current`` to reach ``target``.

    ``current`` is a ``date.weekday()`` index. "next" is always 1..7 days
    ahead and "last" always 1..7 days back, even when the reference date is
    already the target weekday.
    """
    if modifier is WeekdayModifier.LAST:
        return -((current - target.value) % DAYS_PER_WEEK or DAYS_PER_WEEK)
    ahead = (target.value - current) % DAYS_PER_WEEK
    if modifier is None and policy is WeekdayPolicy.UPCOMING:
        return ahead
    return ahead or DAYS_PER_WEEK


def shift_months(moment: datetime, months: int) -> datetime:
    """Step by calendar months, clamping to the last valid day.

    Raises ``ValueError`` or ``OverflowError`` when the result leaves the
    representable year range.
    """
    return moment + relativedelta(months=months)


def start_of_day(day: date, zone: Optional[tzinfo]) -> datetime:
    return datetime.combine(day, time(0, 0), tzinfo=zone)
