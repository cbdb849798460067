"""Lexical tables for every supported language.

Adding a language means adding a module with a ``LEXICON`` constant and
registering it here; the grammar itself does not change.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple, Union

from temps.expression.models import Language
from temps.language import english, german
from temps.language.lexicon import Keyword, KeywordTable, Lexicon


LEXICONS: Mapping[Language, Lexicon] = MappingProxyType({
    Language.ENGLISH: english.LEXICON,
    Language.GERMAN: german.LEXICON,
})


def get_lexicon(language: Union[Language, str]) -> Lexicon:
    """Return the lexical table for a language or language code."""
    return LEXICONS[Language.from_code(language)]


def supported_languages() -> Tuple[Language, ...]:
    return tuple(LEXICONS)


__all__ = [
    "Keyword",
    "KeywordTable",
    "LEXICONS",
    "Lexicon",
    "get_lexicon",
    "supported_languages",
]
