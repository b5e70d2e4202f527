"""
Module: parsing

Purpose:
    Ingestion path: converts loosely structured generated text into
    typed ParsedQuestion records.

    raw text -> detect_format -> dialect parser (+ fallback chain) -> ParseResult

Key Functions:
    - parse_questions(): Main entry point
    - detect_format(): Heuristic dialect guess
    - parse_multiple_choice() / parse_true_false() / parse_who_am_i()

Used By:
    - trivia_toolkit.engine
"""

from .detection import detect_format, DETECTION_RULES
from .dialects import parse_multiple_choice, parse_true_false, parse_who_am_i
from .pipeline import parse_questions, attempt_order, ParserEntry, DEFAULT_CHAIN

__all__ = [
    "detect_format",
    "DETECTION_RULES",
    "parse_multiple_choice",
    "parse_true_false",
    "parse_who_am_i",
    "parse_questions",
    "attempt_order",
    "ParserEntry",
    "DEFAULT_CHAIN",
]
