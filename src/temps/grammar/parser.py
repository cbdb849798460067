"""Recursive-descent grammar for locale-specific time expressions.

Alternatives are tried at the start of the input in a fixed order, most
specific first:

1. ISO-8601 timestamp ("2024-12-25T15:30:00Z")
2. Numeric date ("2024-03-15", "15/03/2024", "15.03.2024")
3. Day clause with optional time ("tomorrow", "next monday at 9:00")
4. Now keyword ("now", "jetzt")
5. Clock time ("3:30 pm", "15:30 Uhr")
6. Prefix relative ("in 3 hours", "vor 3 Tagen")
7. Suffix relative ("3 hours ago", "2 days from now")

An alternative that does not apply returns ``None`` and the next one is
tried. Errors that no other alternative could fix (an out-of-range hour,
a connector without a time) are raised immediately.

Usage:
    result = parse_prefix("tomorrow at 3:00 pm, maybe", Language.ENGLISH)
    result.expression, result.remaining
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from temps.errors import (
    IncompleteCompositeError,
    InvalidNumericLiteralError,
    UnrecognizedInputError,
)
from temps.expression.models import (
    Date,
    Day,
    DayTime,
    Language,
    Now,
    Relative,
    Time,
    TimeExpression,
    WeekdayReference,
)
from temps.grammar.iso8601 import parse_iso_datetime
from temps.grammar.scanner import Match, Scanner
from temps.language import get_lexicon
from temps.language.lexicon import Lexicon

logger = logging.getLogger(__name__)

# Largest relative amount accepted (signed 64-bit)
MAX_AMOUNT = 2**63 - 1

MAX_CLOCK_DIGITS = 2
MAX_DATE_FIELD_DIGITS = 2
YEAR_DIGITS = 4


@dataclass(frozen=True)
class ParseResult:
    """A parsed expression plus whatever input followed it."""

    expression: TimeExpression
    remaining: str
    end: int


def parse_prefix(text: str, language: Union[Language, str]) -> ParseResult:
    """Parse the longest time expression at the start of ``text``.

    Leading whitespace is skipped. Unconsumed input is returned in
    ``ParseResult.remaining`` rather than rejected.

    Raises:
        UnrecognizedInputError: No alternative matched
        InvalidNumericLiteralError: Malformed or overflowing digits
        InvalidTimeComponentError: A field is out of range
        IncompleteCompositeError: Connector without a following time
    """
    return TimeGrammar(text, get_lexicon(language)).parse()


class TimeGrammar:
    """Grammar rules bound to one input string and one lexicon."""

    def __init__(self, text: str, lexicon: Lexicon) -> None:
        self.text = text
        self.lexicon = lexicon
        self.scanner = Scanner(text)

    def parse(self) -> ParseResult:
        start = self.scanner.skip_space(0)
        if self.scanner.at_end(start):
            raise UnrecognizedInputError(
                "Empty time expression",
                expected=("time expression",),
                input_text=self.text,
                position=start,
            )

        alternatives: List[Callable[[int], Optional[Match[TimeExpression]]]] = [
            self.iso_timestamp,
            self.numeric_date,
            self.day_clause,
            self.now,
            self.clock_time,
            self.prefix_relative,
            self.suffix_relative,
        ]
        for alternative in alternatives:
            match = alternative(start)
            if match is not None:
                logger.debug(
                    f"Parsed {self.text[start:match.end]!r} as {type(match.value).__name__} "
                    f"({self.lexicon.language.value}) via {alternative.__name__}"
                )
                return ParseResult(match.value, self.text[match.end:], match.end)

        raise UnrecognizedInputError(
            expected=self.scanner.expected,
            input_text=self.text,
            position=self.scanner.furthest,
        )

    # -----------------------------------------------------------------------
    # Absolute forms
    # -----------------------------------------------------------------------

    def iso_timestamp(self, position: int) -> Optional[Match[TimeExpression]]:
        return parse_iso_datetime(self.scanner, position)

    def numeric_date(self, position: int) -> Optional[Match[TimeExpression]]:
        """``YYYY-MM-DD`` in every language, then the locale day-first form."""
        return self._year_first_date(position) or self._day_first_date(position)

    def _year_first_date(self, position: int) -> Optional[Match[TimeExpression]]:
        year = self._field(position, "year", YEAR_DIGITS, exact=True)
        if year is None:
            return None
        dash = self.scanner.char(year.end, "-")
        if dash is None:
            return None
        month = self._field(dash.end, "month", MAX_DATE_FIELD_DIGITS)
        if month is None:
            return None
        second_dash = self.scanner.char(month.end, "-")
        if second_dash is None:
            return None
        day = self._field(second_dash.end, "day", MAX_DATE_FIELD_DIGITS)
        if day is None:
            return None
        date = self.scanner.build(
            Date,
            position,
            {"month": dash.end, "day": second_dash.end},
            day=day.value,
            month=month.value,
            year=year.value,
        )
        return Match(date, day.end)

    def _day_first_date(self, position: int) -> Optional[Match[TimeExpression]]:
        separators = "".join(self.lexicon.date_separators)
        day = self._field(position, "day", MAX_DATE_FIELD_DIGITS)
        if day is None:
            return None
        separator = self.scanner.char(day.end, separators)
        if separator is None:
            return None
        month = self._field(separator.end, "month", MAX_DATE_FIELD_DIGITS)
        if month is None:
            return None
        # Mixed separators ("15/03-2024") are not a date
        closing = self.scanner.char(month.end, separator.value)
        if closing is None:
            return None
        year = self._field(closing.end, "year", YEAR_DIGITS, exact=True)
        if year is None:
            return None
        date = self.scanner.build(
            Date,
            position,
            {"day": position, "month": separator.end},
            day=day.value,
            month=month.value,
            year=year.value,
        )
        return Match(date, year.end)

    def _field(
        self, position: int, label: str, width: int, exact: bool = False
    ) -> Optional[Match[int]]:
        digits = self.scanner.digits(position, label)
        if digits is None:
            return None
        size = len(digits.value)
        if size > width or (exact and size != width):
            return self.scanner.fail(position, f"{width}-digit {label}")
        return Match(int(digits.value), digits.end)

    # -----------------------------------------------------------------------
    # Day references and composites
    # -----------------------------------------------------------------------

    def day_reference(self, position: int) -> Optional[Match[Day]]:
        lexicon = self.lexicon
        relative_day = self.scanner.keyword(position, lexicon.day_references, "day")
        if relative_day is not None:
            return Match(Day(relative_day.value), relative_day.end)

        modifier = self.scanner.keyword(position, lexicon.modifiers, "modifier")
        if modifier is not None:
            gap = self.scanner.space(modifier.end)
            if gap is None:
                return None
            weekday = self.scanner.keyword(gap, lexicon.weekdays, "weekday")
            if weekday is None:
                return None
            return Match(Day(WeekdayReference(weekday.value, modifier.value)), weekday.end)

        weekday = self.scanner.keyword(position, lexicon.weekdays, "weekday")
        if weekday is None:
            return None
        return Match(Day(WeekdayReference(weekday.value)), weekday.end)

    def day_clause(self, position: int) -> Optional[Match[TimeExpression]]:
        """A day, optionally followed by ``[connector] time``.

        Once a connector has matched, a clock time must follow.
        """
        day = self.day_reference(position)
        if day is None:
            return None

        gap = self.scanner.space(day.end)
        if gap is None:
            return day

        connector = self.scanner.keyword(gap, self.lexicon.connectors, "connector")
        if connector is not None:
            time_start = self.scanner.space(connector.end)
            time = self.clock_time(time_start) if time_start is not None else None
            if time is None:
                raise IncompleteCompositeError(
                    self.text[gap:connector.end],
                    input_text=self.text,
                    position=connector.end,
                )
            return Match(DayTime(day.value, time.value), time.end)

        time = self.clock_time(gap)
        if time is not None:
            return Match(DayTime(day.value, time.value), time.end)
        return day

    def now(self, position: int) -> Optional[Match[TimeExpression]]:
        match = self.scanner.keyword(position, self.lexicon.now, "now")
        if match is None:
            return None
        return Match(Now(), match.end)

    # -----------------------------------------------------------------------
    # Clock time
    # -----------------------------------------------------------------------

    def clock_time(self, position: int) -> Optional[Match[Time]]:
        """``H:MM[:SS]`` with an optional meridiem or time suffix."""
        hour = self.scanner.digits(position, "hour")
        if hour is None:
            return None
        if self.scanner.peek(hour.end) != ":":
            return self.scanner.fail(hour.end, "':'")
        self._check_clock_digits(hour, position, "hour")

        minute_start = hour.end + 1
        minute = self._clock_field(minute_start, "minute")
        second_start = None
        second = None
        end = minute.end
        if self.scanner.peek(end) == ":":
            second_start = end + 1
            second = self._clock_field(second_start, "second")
            end = second.end

        hour_value = int(hour.value)
        if self.lexicon.meridiems:
            meridiem = self.scanner.keyword(
                self.scanner.skip_space(end), self.lexicon.meridiems, "am/pm"
            )
            if meridiem is not None:
                hour_value = self.scanner.build(
                    meridiem.value.to_24_hour, position, hour=hour_value
                )
                end = meridiem.end

        if self.lexicon.time_suffixes:
            suffix = self.scanner.keyword(
                self.scanner.skip_space(end), self.lexicon.time_suffixes, "time suffix"
            )
            if suffix is not None:
                end = suffix.end

        time = self.scanner.build(
            Time,
            position,
            {"hour": position, "minute": minute_start, "second": second_start},
            hour=hour_value,
            minute=int(minute.value),
            second=int(second.value) if second is not None else None,
        )
        return Match(time, end)

    def _clock_field(self, position: int, label: str) -> Match[str]:
        digits = self.scanner.digits(position, label)
        if digits is None:
            raise InvalidNumericLiteralError(
                f"Expected {label} digits after ':'",
                input_text=self.text,
                position=position,
            )
        self._check_clock_digits(digits, position, label)
        return digits

    def _check_clock_digits(self, digits: Match[str], position: int, label: str) -> None:
        if len(digits.value) > MAX_CLOCK_DIGITS:
            raise InvalidNumericLiteralError(
                f"Too many digits for {label}: {digits.value!r}",
                literal=digits.value,
                input_text=self.text,
                position=position,
            )

    # -----------------------------------------------------------------------
    # Relative offsets
    # -----------------------------------------------------------------------

    def prefix_relative(self, position: int) -> Optional[Match[TimeExpression]]:
        direction = self.scanner.keyword(
            position, self.lexicon.relative_prefixes, "relative prefix"
        )
        if direction is None:
            return None
        start = self.scanner.space(direction.end)
        if start is None:
            return None
        quantity = self._quantity(start)
        if quantity is None:
            return None
        amount, unit = quantity.value
        relative = self.scanner.build(
            Relative, start, amount=amount, unit=unit, direction=direction.value
        )
        return Match(relative, quantity.end)

    def suffix_relative(self, position: int) -> Optional[Match[TimeExpression]]:
        if not self.lexicon.relative_suffixes:
            return None
        quantity = self._quantity(position)
        if quantity is None:
            return None
        gap = self.scanner.space(quantity.end)
        if gap is None:
            return None
        direction = self.scanner.keyword(
            gap, self.lexicon.relative_suffixes, "relative suffix"
        )
        if direction is None:
            return None
        amount, unit = quantity.value
        relative = self.scanner.build(
            Relative, position, amount=amount, unit=unit, direction=direction.value
        )
        return Match(relative, direction.end)

    def _quantity(self, position: int) -> Optional[Match[tuple]]:
        """An amount followed by a unit ("3 hours", "5min", "a week")."""
        amount = self.amount(position)
        if amount is None:
            return None
        unit = self.scanner.keyword(
            self.scanner.skip_space(amount.end), self.lexicon.units, "time unit"
        )
        if unit is None:
            return None
        return Match((amount.value, unit.value), unit.end)

    def amount(self, position: int) -> Optional[Match[int]]:
        digits = self.scanner.digits(position, "number")
        if digits is not None:
            value = int(digits.value)
            if value > MAX_AMOUNT:
                raise InvalidNumericLiteralError(
                    f"Amount too large: {digits.value}",
                    literal=digits.value,
                    input_text=self.text,
                    position=position,
                )
            return Match(value, digits.end)
        return self.scanner.keyword(position, self.lexicon.numbers, "number")
