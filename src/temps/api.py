"""Top-level entry points.

Usage:
    from temps import Language, parse, parse_to_datetime

    expression = parse("next monday at 9:00", Language.ENGLISH)
    moment = parse_to_datetime("in 3 hours", "en", reference=reference)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Union

from temps.errors import TrailingInputError
from temps.expression.models import Language, TimeExpression
from temps.grammar.parser import ParseResult, parse_prefix
from temps.resolution.calendar import WeekdayPolicy
from temps.resolution.resolver import resolve

logger = logging.getLogger(__name__)


def parse(text: str, language: Union[Language, str]) -> TimeExpression:
    """Parse a complete time expression.

    Only whitespace may follow the expression.

    Raises:
        ParseError: Any syntactic failure, including ``TrailingInputError``
    """
    result = parse_prefix(text, language)
    ensure_complete(text, result)
    return result.expression


def ensure_complete(text: str, result: ParseResult) -> None:
    """Raise ``TrailingInputError`` if anything but whitespace follows."""
    remainder = result.remaining.strip()
    if remainder:
        position = result.end + (len(result.remaining) - len(result.remaining.lstrip()))
        raise TrailingInputError(remainder, input_text=text, position=position)


def parse_to_datetime(
    text: str,
    language: Union[Language, str],
    *,
    reference: Optional[datetime] = None,
    weekday_policy: WeekdayPolicy = WeekdayPolicy.STRICTLY_FUTURE,
) -> datetime:
    """Parse and resolve in one step.

    When ``reference`` is omitted the current UTC time is used.
    """
    expression = parse(text, language)
    if reference is None:
        reference = datetime.now(timezone.utc)
        logger.debug(f"No reference given, using current time {reference.isoformat()}")
    return resolve(expression, reference, weekday_policy=weekday_policy)


__all__ = ["ensure_complete", "parse", "parse_prefix", "parse_to_datetime", "resolve"]
