"""German lexical table.

Supports expressions like "in 5 Minuten", "vor 3 Tagen", "nächsten Montag",
"morgen um 15:30 Uhr" and "15.03.2024". German uses the 24-hour clock, so
there are no meridiem spellings.
"""

from __future__ import annotations

from temps.expression.models import (
    Direction,
    Language,
    RelativeDay,
    TimeUnit,
    Weekday,
    WeekdayModifier,
)
from temps.language.lexicon import KeywordTable, Lexicon


UNITS = KeywordTable.from_mapping({
    "Sekunden": TimeUnit.SECOND,
    "Sekunde": TimeUnit.SECOND,
    "Sek": TimeUnit.SECOND,
    "Minuten": TimeUnit.MINUTE,
    "Minute": TimeUnit.MINUTE,
    "Min": TimeUnit.MINUTE,
    "Stunden": TimeUnit.HOUR,
    "Stunde": TimeUnit.HOUR,
    "Std": TimeUnit.HOUR,
    "Tagen": TimeUnit.DAY,
    "Tage": TimeUnit.DAY,
    "Tag": TimeUnit.DAY,
    "Wochen": TimeUnit.WEEK,
    "Woche": TimeUnit.WEEK,
    "Monaten": TimeUnit.MONTH,
    "Monate": TimeUnit.MONTH,
    "Monat": TimeUnit.MONTH,
    "Jahren": TimeUnit.YEAR,
    "Jahre": TimeUnit.YEAR,
    "Jahr": TimeUnit.YEAR,
})

# Inflected indefinite articles all mean one
NUMBERS = KeywordTable.from_mapping({
    "einem": 1,
    "einer": 1,
    "einen": 1,
    "eine": 1,
    "ein": 1,
    "zwei": 2,
    "drei": 3,
    "vier": 4,
    "fünf": 5,
    "fuenf": 5,
    "sechs": 6,
    "sieben": 7,
    "acht": 8,
    "neun": 9,
    "zehn": 10,
})

WEEKDAYS = KeywordTable.from_mapping({
    "Montag": Weekday.MONDAY,
    "Mo": Weekday.MONDAY,
    "Dienstag": Weekday.TUESDAY,
    "Di": Weekday.TUESDAY,
    "Mittwoch": Weekday.WEDNESDAY,
    "Mi": Weekday.WEDNESDAY,
    "Donnerstag": Weekday.THURSDAY,
    "Do": Weekday.THURSDAY,
    "Freitag": Weekday.FRIDAY,
    "Fr": Weekday.FRIDAY,
    "Samstag": Weekday.SATURDAY,
    "Sonnabend": Weekday.SATURDAY,
    "Sa": Weekday.SATURDAY,
    "Sonntag": Weekday.SUNDAY,
    "So": Weekday.SUNDAY,
})

LEXICON = Lexicon(
    language=Language.GERMAN,
    units=UNITS,
    numbers=NUMBERS,
    weekdays=WEEKDAYS,
    day_references=KeywordTable.from_mapping({
        "heute": RelativeDay.TODAY,
        "gestern": RelativeDay.YESTERDAY,
        "morgen": RelativeDay.TOMORROW,
    }),
    modifiers=KeywordTable.from_mapping({
        "nächsten": WeekdayModifier.NEXT,
        "nächste": WeekdayModifier.NEXT,
        "naechsten": WeekdayModifier.NEXT,
        "naechste": WeekdayModifier.NEXT,
        "letzten": WeekdayModifier.LAST,
        "letzte": WeekdayModifier.LAST,
    }),
    connectors=KeywordTable.from_mapping({"um": "um"}),
    now=KeywordTable.from_mapping({"jetzt": True}),
    relative_prefixes=KeywordTable.from_mapping({
        "in": Direction.FUTURE,
        "vor": Direction.PAST,
    }),
    time_suffixes=KeywordTable.from_mapping({"Uhr": True}),
    date_separators=(".",),
)
