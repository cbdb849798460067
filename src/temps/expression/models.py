"""Time expression data models.

This module defines the closed set of expression shapes produced by the
grammar parser and consumed by the resolver:

- Enumerations shared by the lexical tables and the grammar
  (language, time units, directions, weekdays, modifiers)
- One frozen dataclass per expression variant
- The ``TimeExpression`` union tying the variants together

Expressions are immutable values. Field ranges are checked at construction
time; calendar validity (for example day 31 in April) is left to the
resolver.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union

from temps.errors import InvalidNumericLiteralError, InvalidTimeComponentError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Language(Enum):
    """Languages with a lexical table and grammar rules."""

    ENGLISH = "en"
    GERMAN = "de"

    @classmethod
    def from_code(cls, value: Union[str, "Language"]) -> "Language":
        """Look up a language by ISO-639-1 code or English name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for language in cls:
            if key in (language.value, language.name.lower()):
                return language
        supported = ", ".join(language.value for language in cls)
        raise ValueError(f"Unsupported language {value!r} (supported: {supported})")


class TimeUnit(Enum):
    """Units for relative expressions, ordered from shortest to longest."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def is_linear(self) -> bool:
        """Fixed-duration units; month and year lengths vary."""
        return self not in (TimeUnit.MONTH, TimeUnit.YEAR)

    @property
    def seconds(self) -> Optional[int]:
        """Exact length in seconds for linear units, ``None`` otherwise."""
        return _UNIT_SECONDS.get(self)


_UNIT_SECONDS = {
    TimeUnit.SECOND: 1,
    TimeUnit.MINUTE: 60,
    TimeUnit.HOUR: 3600,
    TimeUnit.DAY: 86400,
    TimeUnit.WEEK: 604800,
}


class Direction(Enum):
    """Whether a relative offset points backwards or forwards."""

    PAST = "past"
    FUTURE = "future"

    @property
    def sign(self) -> int:
        return -1 if self is Direction.PAST else 1


class Weekday(Enum):
    """Days of the week; values match ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class WeekdayModifier(Enum):
    """Modifier on a weekday reference. No modifier is ``None``."""

    NEXT = "next"
    LAST = "last"


class Meridiem(Enum):
    """AM/PM marker of a 12-hour clock time."""

    AM = "am"
    PM = "pm"

    def to_24_hour(self, hour: int) -> int:
        """Convert a 12-hour clock hour (1-12) to 0-23."""
        if not 1 <= hour <= 12:
            raise InvalidTimeComponentError("hour", hour, f"Invalid 12-hour clock hour: {hour}")
        if self is Meridiem.AM:
            return 0 if hour == 12 else hour
        return hour if hour == 12 else hour + 12


class RelativeDay(Enum):
    """Day keywords relative to the reference date."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"

    @property
    def offset(self) -> int:
        return _RELATIVE_DAY_OFFSETS[self]


_RELATIVE_DAY_OFFSETS = {
    RelativeDay.TODAY: 0,
    RelativeDay.YESTERDAY: -1,
    RelativeDay.TOMORROW: 1,
}


# ---------------------------------------------------------------------------
# Range checks
# ---------------------------------------------------------------------------


def _check_range(field: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise InvalidTimeComponentError(
            field, value, f"Invalid {field}: {value} (expected {low}-{high})"
        )


# ---------------------------------------------------------------------------
# Expression variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WeekdayReference:
    """A weekday with an optional next/last modifier (e.g. "next monday")."""

    weekday: Weekday
    modifier: Optional[WeekdayModifier] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weekday": self.weekday.name.lower(),
            "modifier": self.modifier.value if self.modifier else None,
        }


DayReference = Union[RelativeDay, WeekdayReference]


@dataclass(frozen=True)
class Now:
    """The reference instant itself ("now", "jetzt")."""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "now"}


@dataclass(frozen=True)
class Relative:
    """An offset from the reference instant ("in 3 hours", "5 minutes ago").

    The magnitude is never negative; the sign lives in ``direction``.
    """

    amount: int
    unit: TimeUnit
    direction: Direction

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise InvalidNumericLiteralError(
                f"Relative amount must not be negative: {self.amount}",
                literal=str(self.amount),
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "relative",
            "amount": self.amount,
            "unit": self.unit.value,
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class Absolute:
    """A fully specified ISO-8601 timestamp with a UTC or fixed offset.

    Components are kept as parsed; the aware ``datetime`` is built on demand
    so that a calendar-invalid date surfaces as a resolution error.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int = 0
    microsecond: int = 0
    offset_minutes: int = 0

    def __post_init__(self) -> None:
        _check_range("month", self.month, 1, 12)
        _check_range("day", self.day, 1, 31)
        _check_range("hour", self.hour, 0, 23)
        _check_range("minute", self.minute, 0, 59)
        _check_range("second", self.second, 0, 59)
        _check_range("microsecond", self.microsecond, 0, 999_999)
        _check_range("offset", self.offset_minutes, -(24 * 60 - 1), 24 * 60 - 1)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "Absolute":
        """Build from an aware datetime with a fixed UTC offset."""
        offset = moment.utcoffset()
        if offset is None:
            raise ValueError("Absolute timestamps require a timezone-aware datetime")
        return cls(
            year=moment.year,
            month=moment.month,
            day=moment.day,
            hour=moment.hour,
            minute=moment.minute,
            second=moment.second,
            microsecond=moment.microsecond,
            offset_minutes=int(offset.total_seconds() // 60),
        )

    @property
    def tzinfo(self) -> timezone:
        if self.offset_minutes == 0:
            return timezone.utc
        return timezone(timedelta(minutes=self.offset_minutes))

    def to_datetime(self) -> datetime:
        """Build the aware datetime; raises ``ValueError`` for impossible dates."""
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.microsecond,
            tzinfo=self.tzinfo,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "absolute",
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "microsecond": self.microsecond,
            "offset_minutes": self.offset_minutes,
        }


@dataclass(frozen=True)
class Day:
    """A whole day: today/yesterday/tomorrow or a weekday reference."""

    reference: DayReference

    def to_dict(self) -> Dict[str, Any]:
        if isinstance(self.reference, RelativeDay):
            return {"type": "day", "reference": self.reference.value}
        return {"type": "day", "reference": "weekday", **self.reference.to_dict()}


@dataclass(frozen=True)
class Time:
    """A 24-hour time of day. ``second`` is ``None`` when not written."""

    hour: int
    minute: int
    second: Optional[int] = None

    def __post_init__(self) -> None:
        _check_range("hour", self.hour, 0, 23)
        _check_range("minute", self.minute, 0, 59)
        if self.second is not None:
            _check_range("second", self.second, 0, 59)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "time",
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
        }


@dataclass(frozen=True)
class DayTime:
    """A day combined with a time of day ("tomorrow at 3:30 pm")."""

    day: Day
    time: Time

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "day_time", "day": self.day.to_dict(), "time": self.time.to_dict()}


@dataclass(frozen=True)
class Date:
    """A calendar date without time of day ("15/03/2024").

    Only the syntactic ranges are checked here; whether the day exists in
    that month is decided during resolution.
    """

    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        _check_range("day", self.day, 1, 31)
        _check_range("month", self.month, 1, 12)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "date", "day": self.day, "month": self.month, "year": self.year}


TimeExpression = Union[Now, Relative, Absolute, Day, Time, DayTime, Date]
