"""
Module: sets

Purpose:
    Payload handed to the external store when a trivia set is persisted.
    Built by builder.assembly from a recipe and its selected records.

Key Classes:
    - SetQuestion: One question entry inside a set
    - SetPayload: Set metadata plus ordered question entries

Dependencies:
    - dataclasses (std)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .questions import QuestionType


@dataclass(frozen=True)
class SetQuestion:
    """Question entry copied into a set at assembly time."""

    question_id: str
    source_id: Any
    question_text: str
    question_type: QuestionType
    correct_answer: str
    wrong_answers: Tuple[str, ...]
    explanation: Optional[str]
    tags: Tuple[str, ...]
    difficulty: int
    points: int
    time_limit: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question_id": self.question_id,
            "source_id": self.source_id,
            "question_text": self.question_text,
            "question_type": self.question_type.value,
            "correct_answer": self.correct_answer,
            "wrong_answers": list(self.wrong_answers),
            "explanation": self.explanation,
            "tags": list(self.tags),
            "difficulty": self.difficulty,
            "points": self.points,
            "time_limit": self.time_limit,
        }


@dataclass(frozen=True)
class SetPayload:
    """
    Metadata for a new trivia set (immutable).

    Attributes:
        title: "<recipe name> - <date>"
        slug: "<category slug>-<epoch millis>"
        description: Recipe description or a generated one
        category: Recipe category
        theme: Recipe theme (descriptive)
        difficulty: "easy", "medium" or "hard"
        question_type: Primary question type (decides the set family)
        recipe_id: Source recipe, None for inline recipes
        questions: Entries in final selection order
    """

    title: str
    slug: str
    description: str
    category: str
    theme: Optional[str]
    difficulty: str
    question_type: QuestionType
    recipe_id: Any
    questions: Tuple[SetQuestion, ...]

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def source_ids(self) -> Tuple[Any, ...]:
        return tuple(q.source_id for q in self.questions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "slug": self.slug,
            "description": self.description,
            "category": self.category,
            "theme": self.theme,
            "difficulty": self.difficulty,
            "question_type": self.question_type.value,
            "recipe_id": self.recipe_id,
            "question_count": self.question_count,
            "question_data": [q.to_dict() for q in self.questions],
        }
