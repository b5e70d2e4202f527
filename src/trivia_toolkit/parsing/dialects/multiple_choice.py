"""
Module: parsing.dialects.multiple_choice

Purpose:
    Multiple-choice dialect parser.

    Expected block::

        **Question 1:** Which club did he join in 2009?
        A) Real Madrid
        B) Barcelona
        C) Bayern Munich
        D) Juventus
        **Correct Answer:** A
        **Difficulty:** Medium

    A block is kept only with a question line, exactly four lettered
    options and a correct-answer letter that names one of them.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from trivia_toolkit.core.models import ParsedQuestion, QuestionType, canonical_difficulty

from ..blocks import OPTION_LETTERS, BlockFields, optional, option_letter, scan_block, split_blocks

logger = logging.getLogger(__name__)

REQUIRED_OPTIONS = 4


def parse_multiple_choice(text: str) -> List[ParsedQuestion]:
    """
    Parse every complete multiple-choice block in text.

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


def _build(fields: BlockFields, index: int) -> Optional[ParsedQuestion]:
    if not fields.question:
        logger.debug(f"MC block {index}: no question line")
        return None
    if len(fields.options) != REQUIRED_OPTIONS:
        logger.debug(f"MC block {index}: {len(fields.options)} options, need {REQUIRED_OPTIONS}")
        return None

    letter = option_letter(fields.correct_answer or fields.answer)
    if letter is None or letter not in fields.options:
        logger.debug(f"MC block {index}: unresolvable answer {fields.correct_answer!r}")
        return None

    wrong = tuple(
        fields.options[key] for key in OPTION_LETTERS if key != letter and key in fields.options
    )
    try:
        return ParsedQuestion(
            question_text=fields.question,
            correct_answer=fields.options[letter],
            wrong_answers=wrong,
            question_type=QuestionType.MULTIPLE_CHOICE,
            theme=optional(fields.theme),
            tags=fields.tags,
            difficulty=canonical_difficulty(fields.difficulty),
            explanation=optional(fields.explanation),
        )
    except ValueError as e:
        logger.debug(f"MC block {index}: {e}")
        return None
