"""Grammar parser turning text into time expressions."""

from temps.grammar.parser import MAX_AMOUNT, ParseResult, TimeGrammar, parse_prefix
from temps.grammar.scanner import Match, Scanner

__all__ = [
    "MAX_AMOUNT",
    "Match",
    "ParseResult",
    "Scanner",
    "TimeGrammar",
    "parse_prefix",
]
