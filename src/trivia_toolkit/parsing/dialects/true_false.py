"""
Module: parsing.dialects.true_false

Purpose:
    True/false dialect parser. Supports two layouts.

    Simple (blocks separated by ``---``)::

        **Question 1:** Messi has won the Ballon d'Or eight times.
        **Answer:** True
        **Explanation:** He won his eighth in 2023.

    Structured (blocks introduced by ``Question N:`` headers)::

        Question 1:
        statement: Pele played for Santos.
        is_true: TRUE
        correction:

    The structured layout is used when the text contains both
    ``statement:`` and ``is_true:`` fields.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from trivia_toolkit.core.models import ParsedQuestion, QuestionType, canonical_difficulty

from ..blocks import BlockFields, optional, scan_block, split_blocks

logger = logging.getLogger(__name__)

_STATEMENT_RE = re.compile(r"^\s*statement\s*:", re.IGNORECASE | re.MULTILINE)
_IS_TRUE_RE = re.compile(r"^\s*is_true\s*:", re.IGNORECASE | re.MULTILINE)
_HEADER_RE = re.compile(r"^\s*\*{0,2}question\s*\d+\s*:\*{0,2}\s*$", re.IGNORECASE | re.MULTILINE)


def parse_true_false(text: str) -> List[ParsedQuestion]:
    """
    Parse every complete true/false block in text.

    Args:
        text: Raw generated text

    Returns:
        Parsed records in block order; incomplete blocks are skipped
    """
    if is_structured(text):
        return _parse_structured(text)

    questions: List[ParsedQuestion] = []
    for index, lines in enumerate(split_blocks(text)):
        fields = scan_block(lines)
        question = _build(fields.question, fields.answer or fields.correct_answer, fields, index)
        if question is not None:
            questions.append(question)
    return questions


def is_structured(text: str) -> bool:
    return bool(_STATEMENT_RE.search(text or "")) and bool(_IS_TRUE_RE.search(text or ""))


def _parse_structured(text: str) -> List[ParsedQuestion]:
    questions: List[ParsedQuestion] = []
    chunks = [chunk for chunk in _HEADER_RE.split(text) if chunk.strip()]
    for index, chunk in enumerate(chunks):
        # Structured output may still use "---" between questions
        for lines in split_blocks(chunk):
            fields = scan_block(lines)
            question = _build(fields.statement, fields.is_true, fields, index)
            if question is not None:
                questions.append(question)
    return questions


def _build(
    statement: str,
    answer: str,
    fields: BlockFields,
    index: int,
) -> Optional[ParsedQuestion]:
    token = answer.strip().lower()
    if not statement:
        logger.debug(f"TF block {index}: no statement")
        return None
    if token not in ("true", "false"):
        logger.debug(f"TF block {index}: answer {answer!r} is not true/false")
        return None

    correct, wrong = ("True", "False") if token == "true" else ("False", "True")
    return ParsedQuestion(
        question_text=statement,
        correct_answer=correct,
        wrong_answers=(wrong,),
        question_type=QuestionType.TRUE_FALSE,
        theme=optional(fields.theme),
        tags=fields.tags,
        difficulty=canonical_difficulty(fields.difficulty),
        explanation=optional(fields.explanation),
    )
