"""
Module: parsing.dialects.who_am_i

Purpose:
    Who-am-i dialect parser. The answer is either given as text or as a
    letter pointing into an optional lettered option list::

        **Question 1:** I am a Brazilian forward who won three World Cups.
        **Answer:** Pele

        **Question 2:** I'm the club's record goalscorer.
        A) Rooney
        B) Charlton
        **Correct Answer:** A

    Records never carry wrong answers.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from trivia_toolkit.core.models import ParsedQuestion, QuestionType, canonical_difficulty

from ..blocks import BlockFields, is_bare_letter, optional, scan_block, split_blocks

logger = logging.getLogger(__name__)


def parse_who_am_i(text: str) -> List[ParsedQuestion]:
    """
    Parse every complete who-am-i block in text.

    Args:
        text: Raw generated text

    Returns:
        Parsed records in block order; incomplete blocks are skipped
    """
    questions: List[ParsedQuestion] = []
    for index, lines in enumerate(split_blocks(text)):
        question = _build(scan_block(lines), index)
        if question is not None:
            questions.append(question)
    return questions


def resolve_answer(fields: BlockFields) -> str:
    """
    Resolve the answer text for a block.

    "Correct Answer" wins over "Answer". A bare letter is resolved through
    the option list when one is present; an unmatched letter resolves to
    an empty answer.
    """
    raw = fields.correct_answer or fields.answer
    if fields.has_options and is_bare_letter(raw):
        return fields.options.get(raw.strip().upper(), "")
    return raw


def _build(fields: BlockFields, index: int) -> Optional[ParsedQuestion]:
    if not fields.question:
        logger.debug(f"WAI block {index}: no question line")
        return None
    answer = resolve_answer(fields)
    if not answer:
        logger.debug(f"WAI block {index}: no resolvable answer")
        return None

    return ParsedQuestion(
        question_text=fields.question,
        correct_answer=answer,
        wrong_answers=(),
        question_type=QuestionType.WHO_AM_I,
        theme=optional(fields.theme),
        tags=fields.tags,
        difficulty=canonical_difficulty(fields.difficulty),
        explanation=optional(fields.explanation),
    )
