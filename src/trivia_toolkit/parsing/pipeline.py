"""
Module: parsing.pipeline

Purpose:
    Parsing orchestrator. Detect the dialect, run its parser and, when
    that yields nothing, fall back through the remaining parsers in a
    fixed priority order.

Key Functions:
    - parse_questions(): Main entry point (never raises)
    - attempt_order(): Parser order for a detected type

Key Classes:
    - ParserEntry: (question type, parser) pair forming the chain

The fallback order is the DEFAULT_CHAIN tuple, so it can be inspected
and tested without running detection:

    multiple-choice -> true-false -> who-am-i

Dependencies:
    - parsing.detection: Format detector
    - parsing.dialects: Dialect parsers

Used By:
    - engine.TriviaEngine.parse
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from trivia_toolkit.core.models import ParsedQuestion, ParseResult, QuestionType

from .detection import DEFAULT_FORMAT, detect_format
from .dialects import parse_multiple_choice, parse_true_false, parse_who_am_i

logger = logging.getLogger(__name__)

Parser = Callable[[str], List[ParsedQuestion]]


@dataclass(frozen=True)
class ParserEntry:
    """One link of the parser chain."""

    question_type: QuestionType
    parse: Parser


DEFAULT_CHAIN: Tuple[ParserEntry, ...] = (
    ParserEntry(QuestionType.MULTIPLE_CHOICE, parse_multiple_choice),
    ParserEntry(QuestionType.TRUE_FALSE, parse_true_false),
    ParserEntry(QuestionType.WHO_AM_I, parse_who_am_i),
)


def attempt_order(
    detected: QuestionType,
    chain: Sequence[ParserEntry] = DEFAULT_CHAIN,
) -> Tuple[ParserEntry, ...]:
    """
    Order parsers for a detected type: the matching entry first, then the
    rest of the chain in its own order.

    Example:
        >>> [e.question_type.value for e in attempt_order(QuestionType.TRUE_FALSE)]
        ['true-false', 'multiple-choice', 'who-am-i']
    """
    primary = tuple(e for e in chain if e.question_type == detected)
    rest = tuple(e for e in chain if e.question_type != detected)
    return primary + rest


def parse_questions(
    raw_text: str,
    *,
    chain: Sequence[ParserEntry] = DEFAULT_CHAIN,
    detector: Callable[[str], QuestionType] = detect_format,
) -> ParseResult:
    """
    Parse raw generated text into typed question records.

    Args:
        raw_text: Multi-block generated text
        chain: Ordered parser chain (fallback priority)
        detector: Format detector

    Returns:
        ParseResult with the detected type, records and the parser that
        produced them. Empty input or unparseable text gives an empty
        result, never an exception.

    Example:
        >>> result = parse_questions(text)
        >>> result.detected_type, len(result.questions)
        (<QuestionType.MULTIPLE_CHOICE: 'multiple-choice'>, 5)
    """
    if not raw_text or not raw_text.strip():
        logger.info("Parse requested for empty text")
        return ParseResult(detected_type=DEFAULT_FORMAT)

    detected = detector(raw_text)
    logger.info(f"Detected question format: {detected.value}")

    attempted: List[QuestionType] = []
    for entry in attempt_order(detected, chain):
        attempted.append(entry.question_type)
        questions = entry.parse(raw_text)
        if questions:
            if entry.question_type != detected:
                logger.info(
                    f"Primary parser {detected.value} found nothing; "
                    f"fallback {entry.question_type.value} parsed {len(questions)}"
                )
            else:
                logger.info(f"Parsed {len(questions)} {detected.value} questions")
            return ParseResult(
                detected_type=detected,
                questions=tuple(questions),
                parsed_by=entry.question_type,
                attempted=tuple(attempted),
            )

    logger.info("No valid questions found after trying all parsers")
    return ParseResult(detected_type=detected, attempted=tuple(attempted))
