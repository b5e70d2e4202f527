"""
Module: builder.assembly

Purpose:
    Turn a recipe and its selected records into the SetPayload handed to
    the store's create_set.

Key Functions:
    - build_set_payload(): Main entry point
    - difficulty_level(): "easy"/"medium"/"hard" -> 1..3
    - set_difficulty(): Set-level label from the mean question level

Used By:
    - builder.controller
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from trivia_toolkit.common import SCORING_THRESHOLDS, slugify
from trivia_toolkit.core.models import CandidateRecord, Recipe, SetPayload, SetQuestion

logger = logging.getLogger(__name__)

_LEVELS = {
    "easy": SCORING_THRESHOLDS.easy_level,
    "medium": SCORING_THRESHOLDS.medium_level,
    "hard": SCORING_THRESHOLDS.hard_level,
}


def difficulty_level(difficulty: Optional[str]) -> int:
    """Map a difficulty label to 1..3; unknown or missing counts as medium."""
    if not difficulty:
        return SCORING_THRESHOLDS.medium_level
    return _LEVELS.get(difficulty.strip().lower(), SCORING_THRESHOLDS.medium_level)


def set_difficulty(records: Sequence[CandidateRecord]) -> str:
    """
    Bucket the mean level of records with a recognised difficulty.

    Returns "medium" when no record carries one.
    """
    levels = [
        _LEVELS[r.difficulty.strip().lower()]
        for r in records
        if r.difficulty and r.difficulty.strip().lower() in _LEVELS
    ]
    if not levels:
        return "medium"
    mean = sum(levels) / len(levels)
    if mean <= SCORING_THRESHOLDS.easy_set_max_mean:
        return "easy"
    if mean <= SCORING_THRESHOLDS.medium_set_max_mean:
        return "medium"
    return "hard"


def _set_question(record: CandidateRecord, index: int, time_limit: int) -> SetQuestion:
    level = difficulty_level(record.difficulty)
    return SetQuestion(
        question_id=f"q-{record.id}-{index}",
        source_id=record.id,
        question_text=record.question_text,
        question_type=record.question_type,
        correct_answer=record.correct_answer,
        wrong_answers=tuple(record.wrong_answers),
        explanation=record.explanation,
        tags=tuple(record.tags),
        difficulty=level,
        points=level * SCORING_THRESHOLDS.points_per_level,
        time_limit=time_limit,
    )


def build_set_payload(
    recipe: Recipe,
    selected: Sequence[CandidateRecord],
    now: datetime,
    time_limit: int = SCORING_THRESHOLDS.time_limit_seconds,
) -> SetPayload:
    """
    Assemble set metadata and question entries in selection order.

    Args:
        recipe: Executed recipe
        selected: Records in final (shuffled) order
        now: Execution time, used for the title date and slug suffix
        time_limit: Seconds per question

    Returns:
        SetPayload ready for RecordStore.create_set
    """
    millis = int(now.timestamp() * 1000)
    payload = SetPayload(
        title=f"{recipe.name} - {now.date().isoformat()}",
        slug=f"{slugify(recipe.category)}-{millis}",
        description=recipe.description or f"Set built from recipe: {recipe.name}",
        category=recipe.category,
        theme=recipe.theme,
        difficulty=set_difficulty(selected),
        question_type=recipe.primary_type,
        recipe_id=recipe.id,
        questions=tuple(
            _set_question(record, index, time_limit)
            for index, record in enumerate(selected)
        ),
    )
    logger.debug(f"Assembled payload {payload.slug} with {payload.question_count} questions")
    return payload
