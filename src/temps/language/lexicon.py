"""Keyword tables and per-language lexicons.

A ``KeywordTable`` maps surface spellings to values. Spellings are compared
case-insensitively, and a table hands them to the grammar longest first so
that a shorter spelling never wins over a longer one sharing its prefix
("ein" vs "einem", "mo" vs "montag").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, Mapping, Optional, Tuple, TypeVar

from temps.expression.models import (
    Direction,
    Language,
    Meridiem,
    RelativeDay,
    TimeUnit,
    Weekday,
    WeekdayModifier,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Keyword(Generic[T]):
    """A single spelling and the value it stands for."""

    spelling: str
    value: T

    @property
    def words(self) -> Tuple[str, ...]:
        """Lower-cased words; multi-word keywords match any whitespace run."""
        return tuple(self.spelling.lower().split())

    @property
    def length(self) -> int:
        return len(self.spelling)


class KeywordTable(Generic[T]):
    """Immutable set of keywords with longest-first match ordering."""

    def __init__(self, entries: Tuple[Keyword[T], ...]) -> None:
        spellings = [entry.spelling.lower() for entry in entries]
        if len(set(spellings)) != len(spellings):
            raise ValueError(f"Duplicate spellings in keyword table: {spellings}")
        self._entries = tuple(entries)
        # sorted() is stable, so equal-length spellings keep declaration order
        self._ordered = tuple(sorted(self._entries, key=lambda entry: -entry.length))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, T]) -> "KeywordTable[T]":
        return cls(tuple(Keyword(spelling, value) for spelling, value in mapping.items()))

    @classmethod
    def empty(cls) -> "KeywordTable[T]":
        return cls(())

    def longest_first(self) -> Tuple[Keyword[T], ...]:
        """Entries in the order the grammar must try them."""
        return self._ordered

    def lookup(self, spelling: str) -> Optional[T]:
        key = " ".join(spelling.lower().split())
        for entry in self._entries:
            if " ".join(entry.words) == key:
                return entry.value
        return None

    def spellings_for(self, value: T) -> Tuple[str, ...]:
        return tuple(entry.spelling for entry in self._entries if entry.value == value)

    def __iter__(self) -> Iterator[Keyword[T]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"KeywordTable({[entry.spelling for entry in self._ordered]!r})"


@dataclass(frozen=True)
class Lexicon:
    """All spellings one language contributes to the grammar.

    Attributes:
        language: Language this lexicon belongs to
        units: Unit names, plurals and abbreviations
        numbers: Number words usable as relative amounts ("a", "zwei")
        weekdays: Weekday names and abbreviations
        day_references: today / yesterday / tomorrow
        modifiers: next / last
        connectors: Word joining a day and a time ("at", "um")
        now: Words for the reference instant
        relative_prefixes: Direction words before the amount ("in", "vor")
        relative_suffixes: Direction words after the unit ("ago")
        meridiems: am / pm spellings; empty for 24-hour locales
        time_suffixes: Optional word after a clock time ("Uhr")
        date_separators: Separators of the day-first numeric date form
    """

    language: Language
    units: KeywordTable[TimeUnit]
    numbers: KeywordTable[int]
    weekdays: KeywordTable[Weekday]
    day_references: KeywordTable[RelativeDay]
    modifiers: KeywordTable[WeekdayModifier]
    connectors: KeywordTable[str]
    now: KeywordTable[bool]
    relative_prefixes: KeywordTable[Direction]
    relative_suffixes: KeywordTable[Direction] = field(default_factory=KeywordTable.empty)
    meridiems: KeywordTable[Meridiem] = field(default_factory=KeywordTable.empty)
    time_suffixes: KeywordTable[bool] = field(default_factory=KeywordTable.empty)
    date_separators: Tuple[str, ...] = ("/",)
