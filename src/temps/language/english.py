"""English lexical table.

Supports expressions like "in 5 minutes", "3 days ago", "next monday",
"tomorrow at 3:30 pm" and "15/03/2024".
"""

from __future__ import annotations

from temps.expression.models import (
    Direction,
    Language,
    Meridiem,
    RelativeDay,
    TimeUnit,
    Weekday,
    WeekdayModifier,
)
from temps.language.lexicon import KeywordTable, Lexicon


UNITS = KeywordTable.from_mapping({
    "seconds": TimeUnit.SECOND,
    "second": TimeUnit.SECOND,
    "secs": TimeUnit.SECOND,
    "sec": TimeUnit.SECOND,
    "s": TimeUnit.SECOND,
    "minutes": TimeUnit.MINUTE,
    "minute": TimeUnit.MINUTE,
    "mins": TimeUnit.MINUTE,
    "min": TimeUnit.MINUTE,
    "m": TimeUnit.MINUTE,
    "hours": TimeUnit.HOUR,
    "hour": TimeUnit.HOUR,
    "hrs": TimeUnit.HOUR,
    "hr": TimeUnit.HOUR,
    "h": TimeUnit.HOUR,
    "days": TimeUnit.DAY,
    "day": TimeUnit.DAY,
    "d": TimeUnit.DAY,
    "weeks": TimeUnit.WEEK,
    "week": TimeUnit.WEEK,
    "wks": TimeUnit.WEEK,
    "wk": TimeUnit.WEEK,
    "w": TimeUnit.WEEK,
    "months": TimeUnit.MONTH,
    "month": TimeUnit.MONTH,
    "mos": TimeUnit.MONTH,
    "mo": TimeUnit.MONTH,
    "years": TimeUnit.YEAR,
    "year": TimeUnit.YEAR,
    "yrs": TimeUnit.YEAR,
    "yr": TimeUnit.YEAR,
    "y": TimeUnit.YEAR,
})

NUMBERS = KeywordTable.from_mapping({
    "an": 1,
    "a": 1,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
})

WEEKDAYS = KeywordTable.from_mapping({
    "monday": Weekday.MONDAY,
    "mon": Weekday.MONDAY,
    "tuesday": Weekday.TUESDAY,
    "tues": Weekday.TUESDAY,
    "tue": Weekday.TUESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "wed": Weekday.WEDNESDAY,
    "thursday": Weekday.THURSDAY,
    "thurs": Weekday.THURSDAY,
    "thur": Weekday.THURSDAY,
    "thu": Weekday.THURSDAY,
    "friday": Weekday.FRIDAY,
    "fri": Weekday.FRIDAY,
    "saturday": Weekday.SATURDAY,
    "sat": Weekday.SATURDAY,
    "sunday": Weekday.SUNDAY,
    "sun": Weekday.SUNDAY,
})

LEXICON = Lexicon(
    language=Language.ENGLISH,
    units=UNITS,
    numbers=NUMBERS,
    weekdays=WEEKDAYS,
    day_references=KeywordTable.from_mapping({
        "today": RelativeDay.TODAY,
        "yesterday": RelativeDay.YESTERDAY,
        "tomorrow": RelativeDay.TOMORROW,
    }),
    modifiers=KeywordTable.from_mapping({
        "next": WeekdayModifier.NEXT,
        "last": WeekdayModifier.LAST,
    }),
    connectors=KeywordTable.from_mapping({"at": "at"}),
    now=KeywordTable.from_mapping({"now": True}),
    relative_prefixes=KeywordTable.from_mapping({"in": Direction.FUTURE}),
    relative_suffixes=KeywordTable.from_mapping({
        "ago": Direction.PAST,
        "from now": Direction.FUTURE,
    }),
    meridiems=KeywordTable.from_mapping({
        "a.m.": Meridiem.AM,
        "am": Meridiem.AM,
        "p.m.": Meridiem.PM,
        "pm": Meridiem.PM,
    }),
    date_separators=("/", "-"),
)
