"""
Module: parsing.detection

Purpose:
    Heuristic format detection. Inspects only the first block of the raw
    text and guesses which question dialect it encodes. The parsing
    pipeline compensates for wrong guesses with its fallback chain.

Key Functions:
    - detect_format(): Classify raw text as a QuestionType
    - looks_like_who_am_i(): Identity phrasing in the question line
    - looks_like_true_false(): Bare true/false answer, no lettered options

Rules are evaluated in DETECTION_RULES order; the first matching
predicate wins, multiple-choice is the default.

Used By:
    - parsing.pipeline
"""

from __future__ import annotations

import re
from typing import Callable, List, Tuple

from trivia_toolkit.core.models import QuestionType

from .blocks import first_block, has_option_lines, scan_block

_IDENTITY_RE = re.compile(r"^(?:i\s+am|i['’]m|i\s+represent)\b", re.IGNORECASE)
_TRUE_FALSE_VALUES = ("true", "false")


def looks_like_who_am_i(lines: List[str]) -> bool:
    fields = scan_block(lines)
    question = fields.question or fields.statement
    return bool(_IDENTITY_RE.match(question))


def looks_like_true_false(lines: List[str]) -> bool:
    if has_option_lines(lines):
        return False
    fields = scan_block(lines)
    answer = (fields.answer or fields.is_true).strip().lower()
    return answer in _TRUE_FALSE_VALUES


DetectionRule = Tuple[Callable[[List[str]], bool], QuestionType]

DETECTION_RULES: Tuple[DetectionRule, ...] = (
    (looks_like_who_am_i, QuestionType.WHO_AM_I),
    (looks_like_true_false, QuestionType.TRUE_FALSE),
)

DEFAULT_FORMAT = QuestionType.MULTIPLE_CHOICE


def detect_format(raw_text: str) -> QuestionType:
    """
    Guess the dialect of raw generated text.

    Args:
        raw_text: Multi-block text separated by "---" lines

    Returns:
        WHO_AM_I, TRUE_FALSE or MULTIPLE_CHOICE (the default)

    Example:
        >>> detect_format("**Question 1:** Water boils at 100C.\\n**Answer:** True")
        <QuestionType.TRUE_FALSE: 'true-false'>
    """
    lines = first_block(raw_text)
    if not lines:
        return DEFAULT_FORMAT
    for predicate, question_type in DETECTION_RULES:
        if predicate(lines):
            return question_type
    return DEFAULT_FORMAT
