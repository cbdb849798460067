"""ISO-8601 timestamp alternative.

Accepted form::

    YYYY-MM-DD(T|t| )HH:MM[:SS[(.|,)ffffff]](Z|z|+HH[:MM]|-HH[:MM]|+HHMM|-HHMM)

The decimal mark of the seconds fraction may be a full stop or a comma.

The offset designator is mandatory; there is no implicit local time. The
alternative backs off softly while the input could still be a plain date
("2024-01-15") and commits once a date followed by ``HH:`` has been seen.
"""

from __future__ import annotations

import logging
from typing import Optional

from temps.errors import InvalidNumericLiteralError, InvalidTimeComponentError, UnrecognizedInputError
from temps.expression.models import Absolute
from temps.grammar.scanner import Match, Scanner

logger = logging.getLogger(__name__)

MAX_FRACTION_DIGITS = 6


def _fixed(scanner: Scanner, position: int, width: int, label: str) -> Optional[Match[int]]:
    digits = scanner.digits(position, label)
    if digits is None:
        return None
    if len(digits.value) != width:
        return scanner.fail(position, f"{width}-digit {label}")
    return Match(int(digits.value), digits.end)


def _required(
    scanner: Scanner,
    position: int,
    width: int,
    label: str,
    reject_grouping: bool = True,
) -> Match[int]:
    digits = scanner.digits(position, label, reject_grouping)
    if digits is None or len(digits.value) != width:
        literal = digits.value if digits else ""
        raise InvalidNumericLiteralError(
            f"Expected a {width}-digit {label} in ISO-8601 timestamp",
            literal=literal,
            input_text=scanner.text,
            position=position,
        )
    return Match(int(digits.value), digits.end)


def parse_offset(scanner: Scanner, position: int) -> Optional[Match[int]]:
    """Parse ``Z``, ``±HH``, ``±HH:MM`` or ``±HHMM``, returned in minutes."""
    if scanner.peek(position) in ("Z", "z"):
        return Match(0, position + 1)
    sign = scanner.char(position, "+-")
    if sign is None:
        return None
    run = scanner.digits(sign.end, "offset hour")
    if run is not None and len(run.value) == 4:
        # Compact form: the four digits are HHMM
        hours = int(run.value[:2])
        minutes = int(run.value[2:])
        minutes_position = sign.end + 2
        end = run.end
    else:
        parsed_hours = _required(scanner, sign.end, 2, "offset hour")
        hours, minutes, end = parsed_hours.value, 0, parsed_hours.end
        minutes_position = end + 1
        if scanner.peek(end) == ":":
            parsed = _required(scanner, end + 1, 2, "offset minute")
            minutes, end = parsed.value, parsed.end
    if hours > 23:
        raise InvalidTimeComponentError(
            "offset", f"{sign.value}{hours:02d}",
            input_text=scanner.text, position=sign.end,
        )
    if minutes > 59:
        raise InvalidTimeComponentError(
            "offset", f"{sign.value}{hours:02d}:{minutes:02d}",
            input_text=scanner.text, position=minutes_position,
        )
    total = hours * 60 + minutes
    return Match(-total if sign.value == "-" else total, end)


def parse_iso_datetime(scanner: Scanner, position: int) -> Optional[Match[Absolute]]:
    """Parse a full ISO-8601 timestamp starting at ``position``."""
    year = _fixed(scanner, position, 4, "year")
    if year is None:
        return None
    dash = scanner.char(year.end, "-")
    if dash is None:
        return None
    month = _fixed(scanner, dash.end, 2, "month")
    if month is None:
        return None
    dash = scanner.char(month.end, "-")
    if dash is None:
        return None
    day = _fixed(scanner, dash.end, 2, "day")
    if day is None:
        return None
    separator = scanner.char(day.end, "Tt ")
    if separator is None:
        return None
    hour = _fixed(scanner, separator.end, 2, "hour")
    if hour is None:
        return None
    colon = scanner.char(hour.end, ":")
    if colon is None:
        return None

    # A date followed by "HH:" can only be a timestamp from here on
    minute = _required(scanner, colon.end, 2, "minute")
    second = Match(0, minute.end)
    microsecond = Match(0, minute.end)
    if scanner.peek(minute.end) == ":":
        second = _required(scanner, minute.end + 1, 2, "second", reject_grouping=False)
        microsecond = Match(0, second.end)
        if scanner.peek(second.end) in (".", ","):
            microsecond = _fraction(scanner, second.end + 1)

    offset = parse_offset(scanner, microsecond.end)
    if offset is None:
        raise UnrecognizedInputError(
            "ISO-8601 timestamp requires a UTC ('Z') or fixed-offset designator",
            expected=("Z", "+HH:MM", "-HH:MM"),
            input_text=scanner.text,
            position=microsecond.end,
        )

    absolute = scanner.build(
        Absolute,
        position,
        {
            "month": dash.end - 3,
            "day": dash.end,
            "hour": separator.end,
            "minute": colon.end,
            "second": minute.end + 1,
        },
        year=year.value,
        month=month.value,
        day=day.value,
        hour=hour.value,
        minute=minute.value,
        second=second.value,
        microsecond=microsecond.value,
        offset_minutes=offset.value,
    )
    logger.debug(f"Matched ISO-8601 timestamp {scanner.text[position:offset.end]!r}")
    return Match(absolute, offset.end)


def _fraction(scanner: Scanner, position: int) -> Match[int]:
    digits = scanner.digits(position, "fraction")
    if digits is None:
        raise InvalidNumericLiteralError(
            "Expected fractional seconds after the decimal mark",
            input_text=scanner.text,
            position=position,
        )
    if len(digits.value) > MAX_FRACTION_DIGITS:
        raise InvalidNumericLiteralError(
            f"Fractional seconds beyond microsecond precision: {digits.value!r}",
            literal=digits.value,
            input_text=scanner.text,
            position=position,
        )
    return Match(int(digits.value.ljust(MAX_FRACTION_DIGITS, "0")), digits.end)
