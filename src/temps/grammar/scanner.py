"""Position-based scanning primitives for the grammar.

The scanner never mutates a cursor; every primitive takes a start offset and
returns either a ``Match`` (value plus end offset) or ``None``. Returning
``None`` is a soft failure that lets the caller try the next alternative.
Each soft failure is recorded so that, when every alternative fails, the
parser can report the furthest offset reached and what was expected there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Set, TypeVar

from temps.errors import InvalidNumericLiteralError, ParseError
from temps.language.lexicon import Keyword, KeywordTable

T = TypeVar("T")

DIGITS = frozenset("0123456789")
GROUPING_SEPARATORS = frozenset(",_'")


@dataclass(frozen=True)
class Match(Generic[T]):
    """Successful match of a grammar element ending at ``end``."""

    value: T
    end: int


class Scanner:
    """Read-only view over one input string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.furthest = 0
        self._expected: Set[str] = set()

    # -----------------------------------------------------------------------
    # Failure bookkeeping
    # -----------------------------------------------------------------------

    def fail(self, position: int, expected: str) -> None:
        """Record a soft failure; always returns ``None``."""
        if position > self.furthest:
            self.furthest = position
            self._expected = {expected}
        elif position == self.furthest:
            self._expected.add(expected)
        return None

    @property
    def expected(self) -> List[str]:
        return sorted(self._expected)

    # -----------------------------------------------------------------------
    # Characters
    # -----------------------------------------------------------------------

    def at_end(self, position: int) -> bool:
        return position >= len(self.text)

    def peek(self, position: int) -> str:
        return self.text[position] if position < len(self.text) else ""

    def skip_space(self, position: int) -> int:
        while position < len(self.text) and self.text[position].isspace():
            position += 1
        return position

    def space(self, position: int) -> Optional[int]:
        """Require at least one whitespace character."""
        end = self.skip_space(position)
        if end == position:
            return self.fail(position, "whitespace")
        return end

    def char(self, position: int, choices: str) -> Optional[Match[str]]:
        """Match one character out of ``choices`` (case-sensitive)."""
        current = self.peek(position)
        if current and current in choices:
            return Match(current, position + 1)
        return self.fail(position, " or ".join(repr(choice) for choice in choices))

    # -----------------------------------------------------------------------
    # Numbers
    # -----------------------------------------------------------------------

    def digits(
        self,
        position: int,
        expected: str = "number",
        reject_grouping: bool = True,
    ) -> Optional[Match[str]]:
        """Match a run of ASCII digits, returned as text to keep leading zeros.

        A digit run continued by a grouping separator and more digits
        ("1,000") is rejected outright instead of matching its first group.
        Pass ``reject_grouping=False`` where a comma is a decimal mark.
        """
        end = position
        while end < len(self.text) and self.text[end] in DIGITS:
            end += 1
        if end == position:
            return self.fail(position, expected)
        if (
            reject_grouping
            and self.peek(end) in GROUPING_SEPARATORS
            and self.peek(end + 1) in DIGITS
        ):
            literal_end = end + 1
            while literal_end < len(self.text) and (
                self.text[literal_end] in DIGITS or self.text[literal_end] in GROUPING_SEPARATORS
            ):
                literal_end += 1
            literal = self.text[position:literal_end]
            raise InvalidNumericLiteralError(
                f"Grouping separators are not accepted in numbers: {literal!r}",
                literal=literal,
                input_text=self.text,
                position=position,
            )
        return Match(self.text[position:end], end)

    # -----------------------------------------------------------------------
    # Keywords
    # -----------------------------------------------------------------------

    def keyword(
        self,
        position: int,
        table: KeywordTable[T],
        expected: str,
    ) -> Optional[Match[T]]:
        """Match the first table entry, longest spelling first.

        Comparison is case-insensitive. A spelling ending in a letter or digit
        must not be followed by another letter or digit.
        """
        for entry in table.longest_first():
            end = self._match_words(position, entry)
            if end is not None:
                return Match(entry.value, end)
        return self.fail(position, expected)

    def _match_words(self, position: int, entry: Keyword) -> Optional[int]:
        end = position
        for index, word in enumerate(entry.words):
            if index:
                gap = self.skip_space(end)
                if gap == end:
                    return None
                end = gap
            candidate = self.text[end:end + len(word)]
            if len(candidate) != len(word) or candidate.lower() != word:
                return None
            end += len(word)
        if entry.spelling[-1].isalnum() and self.peek(end).isalnum():
            return None
        return end

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------

    def build(
        self,
        factory: Callable[..., T],
        position: int,
        field_positions: Optional[Dict[str, int]] = None,
        **fields: Any,
    ) -> T:
        """Construct an expression, locating construction errors in the input.

        Range checks live in the expression constructors; when one fails the
        error is re-raised pointing at the offending field if its offset is
        known, otherwise at ``position``.
        """
        try:
            return factory(**fields)
        except ParseError as exc:
            field = getattr(exc, "field", None)
            located = (field_positions or {}).get(field, position)
            raise exc.locate(self.text, located)
