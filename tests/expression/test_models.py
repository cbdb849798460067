"""Tests for the time expression data model."""

from datetime import datetime, timedelta, timezone

import pytest

from temps.errors import InvalidNumericLiteralError, InvalidTimeComponentError
from temps.expression import (
    Absolute,
    Date,
    Day,
    DayTime,
    Direction,
    Language,
    Meridiem,
    Now,
    Relative,
    RelativeDay,
    Time,
    TimeUnit,
    Weekday,
    WeekdayModifier,
    WeekdayReference,
)


class TestEnums:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("en", Language.ENGLISH),
            ("DE", Language.GERMAN),
            ("german", Language.GERMAN),
            (" English ", Language.ENGLISH),
            (Language.GERMAN, Language.GERMAN),
        ],
    )
    def test_language_from_code(self, value, expected):
        assert Language.from_code(value) is expected

    def test_unknown_language(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            Language.from_code("fr")

    def test_linear_units(self):
        linear = [unit for unit in TimeUnit if unit.is_linear]
        assert linear == [TimeUnit.SECOND, TimeUnit.MINUTE, TimeUnit.HOUR, TimeUnit.DAY, TimeUnit.WEEK]
        assert TimeUnit.WEEK.seconds == 7 * 24 * 3600
        assert TimeUnit.MONTH.seconds is None

    def test_direction_sign(self):
        assert Direction.PAST.sign == -1
        assert Direction.FUTURE.sign == 1

    def test_weekday_matches_python_index(self):
        assert Weekday(datetime(2024, 6, 3).weekday()) is Weekday.MONDAY

    def test_relative_day_offsets(self):
        assert [day.offset for day in RelativeDay] == [0, -1, 1]


class TestMeridiem:
    @pytest.mark.parametrize(
        "meridiem,hour,expected",
        [
            (Meridiem.AM, 12, 0),
            (Meridiem.AM, 1, 1),
            (Meridiem.AM, 11, 11),
            (Meridiem.PM, 12, 12),
            (Meridiem.PM, 1, 13),
            (Meridiem.PM, 11, 23),
        ],
    )
    def test_to_24_hour(self, meridiem, hour, expected):
        assert meridiem.to_24_hour(hour) == expected

    @pytest.mark.parametrize("hour", [0, 13])
    def test_rejects_hours_outside_twelve_hour_clock(self, hour):
        with pytest.raises(InvalidTimeComponentError) as exc_info:
            Meridiem.PM.to_24_hour(hour)
        assert exc_info.value.field == "hour"


class TestRangeChecks:
    def test_negative_relative_amount(self):
        with pytest.raises(InvalidNumericLiteralError):
            Relative(-1, TimeUnit.DAY, Direction.PAST)

    @pytest.mark.parametrize(
        "kwargs,field",
        [
            ({"hour": 24, "minute": 0}, "hour"),
            ({"hour": 10, "minute": 60}, "minute"),
            ({"hour": 10, "minute": 0, "second": 60}, "second"),
        ],
    )
    def test_time_fields(self, kwargs, field):
        with pytest.raises(InvalidTimeComponentError) as exc_info:
            Time(**kwargs)
        assert exc_info.value.field == field
        assert exc_info.value.position is None

    def test_time_without_seconds(self):
        assert Time(23, 59).second is None

    @pytest.mark.parametrize("day,month,field", [(0, 1, "day"), (32, 1, "day"), (1, 13, "month")])
    def test_date_fields(self, day, month, field):
        with pytest.raises(InvalidTimeComponentError) as exc_info:
            Date(day, month, 2024)
        assert exc_info.value.field == field

    def test_date_defers_calendar_validity(self):
        assert Date(31, 4, 2024).day == 31

    def test_absolute_offset_bounds(self):
        with pytest.raises(InvalidTimeComponentError):
            Absolute(2024, 1, 1, 0, 0, offset_minutes=24 * 60)


class TestAbsolute:
    def test_round_trip_through_datetime(self):
        moment = datetime(2024, 12, 25, 15, 30, 5, 123456, tzinfo=timezone(timedelta(hours=-5)))
        absolute = Absolute.from_datetime(moment)
        assert absolute.offset_minutes == -300
        assert absolute.to_datetime() == moment
        assert absolute.to_datetime().utcoffset() == timedelta(hours=-5)

    def test_utc_uses_utc_singleton(self):
        assert Absolute(2024, 1, 1, 0, 0).tzinfo is timezone.utc

    def test_naive_datetime_rejected(self):
        with pytest.raises(ValueError):
            Absolute.from_datetime(datetime(2024, 1, 1))

    def test_impossible_date_fails_on_build(self):
        absolute = Absolute(2023, 2, 30, 0, 0)
        with pytest.raises(ValueError):
            absolute.to_datetime()


class TestSerialisation:
    def test_day_time(self):
        expression = DayTime(
            Day(WeekdayReference(Weekday.MONDAY, WeekdayModifier.NEXT)), Time(9, 0)
        )
        assert expression.to_dict() == {
            "type": "day_time",
            "day": {"type": "day", "reference": "weekday", "weekday": "monday", "modifier": "next"},
            "time": {"type": "time", "hour": 9, "minute": 0, "second": None},
        }

    def test_relative(self):
        assert Relative(3, TimeUnit.HOUR, Direction.FUTURE).to_dict() == {
            "type": "relative",
            "amount": 3,
            "unit": "hour",
            "direction": "future",
        }

    def test_simple_variants(self):
        assert Now().to_dict() == {"type": "now"}
        assert Day(RelativeDay.TOMORROW).to_dict() == {"type": "day", "reference": "tomorrow"}
        assert Date(15, 3, 2024).to_dict()["type"] == "date"

    def test_expressions_are_immutable_values(self):
        assert Time(9, 30) == Time(9, 30)
        with pytest.raises(AttributeError):
            Time(9, 30).hour = 10  # type: ignore[misc]
