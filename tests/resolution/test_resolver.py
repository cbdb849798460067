"""Tests for resolving expressions against a reference instant.

Fixture instants (see conftest):
- ``reference``: Saturday 2024-06-01 10:00 UTC
- ``wednesday``: Wednesday 2024-06-05 14:30:15 UTC
"""

from datetime import datetime, timedelta, timezone

import pytest

from temps.api import parse
from temps.errors import InvalidCalendarDateError, OutOfRangeError
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
    TimeUnit,
    Weekday,
    WeekdayModifier,
    WeekdayReference,
)
from temps.grammar import MAX_AMOUNT
from temps.resolution import WeekdayPolicy, resolve

UTC = timezone.utc


def at(*args, tz=UTC):
    return datetime(*args, tzinfo=tz)


# ---------------------------------------------------------------------------
# Relative offsets
# ---------------------------------------------------------------------------


class TestRelative:
    def test_in_three_hours(self, reference):
        assert resolve(parse("in 3 hours", Language.ENGLISH), reference) == at(2024, 6, 1, 13, 0, 0)

    @pytest.mark.parametrize("unit", [u for u in TimeUnit if u.is_linear])
    @pytest.mark.parametrize("amount", [0, 1, 7, 1000])
    def test_linear_units_are_exact_durations(self, reference, unit, amount):
        duration = timedelta(seconds=amount * unit.seconds)
        future = Relative(amount, unit, Direction.FUTURE)
        past = Relative(amount, unit, Direction.PAST)
        assert resolve(future, reference) == reference + duration
        assert resolve(past, reference) == reference - duration

    @pytest.mark.parametrize(
        "start,expression,expected",
        [
            (at(2024, 1, 31, 12, 0), Relative(1, TimeUnit.MONTH, Direction.FUTURE), at(2024, 2, 29, 12, 0)),
            (at(2023, 1, 31, 12, 0), Relative(1, TimeUnit.MONTH, Direction.FUTURE), at(2023, 2, 28, 12, 0)),
            (at(2024, 5, 31), Relative(3, TimeUnit.MONTH, Direction.PAST), at(2024, 2, 29)),
            (at(2024, 2, 29), Relative(1, TimeUnit.YEAR, Direction.FUTURE), at(2025, 2, 28)),
            (at(2024, 2, 29), Relative(4, TimeUnit.YEAR, Direction.PAST), at(2020, 2, 29)),
            (at(2024, 11, 15), Relative(14, TimeUnit.MONTH, Direction.FUTURE), at(2026, 1, 15)),
        ],
    )
    def test_calendar_months_and_years(self, start, expression, expected):
        assert resolve(expression, start) == expected

    @pytest.mark.parametrize(
        "expression",
        [
            Relative(MAX_AMOUNT, TimeUnit.WEEK, Direction.FUTURE),
            Relative(MAX_AMOUNT, TimeUnit.SECOND, Direction.PAST),
            Relative(10_000, TimeUnit.YEAR, Direction.FUTURE),
            Relative(3_000, TimeUnit.YEAR, Direction.PAST),
            Relative(MAX_AMOUNT, TimeUnit.MONTH, Direction.FUTURE),
        ],
    )
    def test_overflow_is_out_of_range(self, reference, expression):
        with pytest.raises(OutOfRangeError) as exc_info:
            resolve(expression, reference)
        assert exc_info.value.field == "amount"


# ---------------------------------------------------------------------------
# Days and weekdays
# ---------------------------------------------------------------------------


class TestDays:
    @pytest.mark.parametrize(
        "day,expected",
        [
            (RelativeDay.TODAY, at(2024, 6, 1)),
            (RelativeDay.YESTERDAY, at(2024, 5, 31)),
            (RelativeDay.TOMORROW, at(2024, 6, 2)),
        ],
    )
    def test_relative_days_start_at_midnight(self, reference, day, expected):
        assert resolve(Day(day), reference) == expected

    @pytest.mark.parametrize(
        "weekday,modifier,expected",
        [
            (Weekday.MONDAY, WeekdayModifier.NEXT, at(2024, 6, 10)),
            (Weekday.WEDNESDAY, WeekdayModifier.NEXT, at(2024, 6, 12)),
            (Weekday.THURSDAY, WeekdayModifier.NEXT, at(2024, 6, 6)),
            (Weekday.WEDNESDAY, WeekdayModifier.LAST, at(2024, 5, 29)),
            (Weekday.MONDAY, WeekdayModifier.LAST, at(2024, 6, 3)),
            (Weekday.THURSDAY, WeekdayModifier.LAST, at(2024, 5, 30)),
        ],
    )
    def test_next_and_last_skip_reference_date(self, wednesday, weekday, modifier, expected):
        assert resolve(Day(WeekdayReference(weekday, modifier)), wednesday) == expected

    def test_next_never_returns_reference_date(self, wednesday):
        for weekday in Weekday:
            resolved = resolve(Day(WeekdayReference(weekday, WeekdayModifier.NEXT)), wednesday)
            assert wednesday.date() < resolved.date() <= wednesday.date() + timedelta(days=7)
            resolved = resolve(Day(WeekdayReference(weekday, WeekdayModifier.LAST)), wednesday)
            assert wednesday.date() - timedelta(days=7) <= resolved.date() < wednesday.date()

    def test_bare_weekday_defaults_to_strictly_future(self, wednesday):
        assert resolve(Day(WeekdayReference(Weekday.WEDNESDAY)), wednesday) == at(2024, 6, 12)

    def test_bare_weekday_upcoming_policy(self, wednesday):
        expression = Day(WeekdayReference(Weekday.WEDNESDAY))
        assert resolve(expression, wednesday, weekday_policy=WeekdayPolicy.UPCOMING) == at(2024, 6, 5)

    def test_policy_does_not_affect_modifiers(self, wednesday):
        expression = Day(WeekdayReference(Weekday.WEDNESDAY, WeekdayModifier.NEXT))
        assert resolve(expression, wednesday, weekday_policy=WeekdayPolicy.UPCOMING) == at(2024, 6, 12)

    def test_german_next_monday_from_wednesday(self, wednesday):
        assert resolve(parse("nächsten Montag", Language.GERMAN), wednesday) == at(2024, 6, 10)

    def test_day_past_calendar_end(self):
        last_day = at(9999, 12, 31, 12, 0)
        with pytest.raises(OutOfRangeError) as exc_info:
            resolve(Day(RelativeDay.TOMORROW), last_day)
        assert exc_info.value.field == "day"


# ---------------------------------------------------------------------------
# Times, composites and dates
# ---------------------------------------------------------------------------


class TestTimes:
    def test_time_keeps_reference_date(self, wednesday):
        assert resolve(Time(9, 15), wednesday) == at(2024, 6, 5, 9, 15, 0)

    def test_time_with_seconds(self, wednesday):
        assert resolve(Time(23, 59, 59), wednesday) == at(2024, 6, 5, 23, 59, 59)

    def test_time_drops_reference_microseconds(self):
        reference = at(2024, 6, 5, 8, 0, 0, 123456)
        assert resolve(Time(8, 0), reference).microsecond == 0

    def test_day_time(self, wednesday):
        expression = parse("tomorrow at 3:30 pm", Language.ENGLISH)
        assert resolve(expression, wednesday) == at(2024, 6, 6, 15, 30)

    def test_weekday_time(self, wednesday):
        expression = DayTime(Day(WeekdayReference(Weekday.FRIDAY, WeekdayModifier.LAST)), Time(18, 0))
        assert resolve(expression, wednesday) == at(2024, 5, 31, 18, 0)

    def test_german_composite(self, reference):
        expression = parse("morgen um 15:30 Uhr", Language.GERMAN)
        assert resolve(expression, reference) == at(2024, 6, 2, 15, 30)


class TestDates:
    def test_date_at_midnight(self, reference):
        assert resolve(parse("15/03/2024", Language.ENGLISH), reference) == at(2024, 3, 15)

    def test_leap_day(self, reference):
        assert resolve(Date(29, 2, 2024), reference) == at(2024, 2, 29)

    @pytest.mark.parametrize("day,month,year", [(30, 2, 2024), (29, 2, 2023), (31, 4, 2024)])
    def test_invalid_calendar_date(self, reference, day, month, year):
        with pytest.raises(InvalidCalendarDateError) as exc_info:
            resolve(Date(day, month, year), reference)
        assert exc_info.value.field == "day"
        assert (exc_info.value.year, exc_info.value.month, exc_info.value.day) == (year, month, day)

    @pytest.mark.parametrize("year", [0, 10_000])
    def test_year_out_of_range(self, reference, year):
        with pytest.raises(OutOfRangeError) as exc_info:
            resolve(Date(1, 1, year), reference)
        assert exc_info.value.field == "year"


# ---------------------------------------------------------------------------
# Reference handling
# ---------------------------------------------------------------------------


class TestReference:
    def test_now_is_reference(self, reference):
        assert resolve(Now(), reference) is reference

    def test_absolute_ignores_reference(self, reference, wednesday):
        expression = parse("2024-12-25T15:30:00Z", Language.ENGLISH)
        assert resolve(expression, reference) == resolve(expression, wednesday) == at(2024, 12, 25, 15, 30)

    def test_absolute_invalid_calendar_date(self, reference):
        with pytest.raises(InvalidCalendarDateError):
            resolve(Absolute(2023, 2, 30, 0, 0), reference)

    def test_naive_reference_rejected(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            resolve(Now(), datetime(2024, 6, 1, 10, 0))

    def test_reference_timezone_is_kept(self, berlin_summer):
        reference = at(2024, 6, 1, 0, 30, tz=berlin_summer)
        resolved = resolve(Day(RelativeDay.TODAY), reference)
        assert resolved == at(2024, 6, 1, tz=berlin_summer)
        assert resolved.utcoffset() == timedelta(hours=2)
        assert resolve(Date(15, 3, 2024), reference).tzinfo is berlin_summer

    def test_pure_function(self, reference):
        expression = parse("next monday at 9:00", Language.ENGLISH)
        assert resolve(expression, reference) == resolve(expression, reference)
