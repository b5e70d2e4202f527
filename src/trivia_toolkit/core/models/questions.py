"""
Module: questions

Purpose:
    Provides the question-side data structures: the QuestionType enum,
    ParsedQuestion (output of the parsing path) and CandidateRecord (a
    stored question as read from the external store during assembly).

Key Functions:
    - QuestionType.from_label(): Resolve canonical names and short aliases
    - canonical_difficulty(): Normalise free-form difficulty text
    - CandidateRecord.most_recent_use: Latest usage timestamp
    - ParsedQuestion.to_dict(): Record payload for the ingestion store

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - parsing.dialects: Emits ParsedQuestion
    - builder.selection: Filters and samples CandidateRecord
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class QuestionType(str, Enum):
    """The three question dialects."""

    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"
    WHO_AM_I = "who-am-i"

    @classmethod
    def from_label(cls, label: str) -> Optional["QuestionType"]:
        """
        Resolve a canonical value or short alias.

        Args:
            label: "multiple-choice", "TMC", "true-false", "TFT", "who-am-i" or "WAI"

        Returns:
            Matching QuestionType, or None for unknown labels
        """
        if label in _ALIASES:
            return _ALIASES[label]
        try:
            return cls(label)
        except ValueError:
            return None

    @property
    def wrong_answer_count(self) -> int:
        """Number of wrong answers a complete record of this dialect carries."""
        return _WRONG_ANSWER_COUNTS[self]

    @property
    def display_label(self) -> str:
        return _DISPLAY_LABELS[self]


_ALIASES = {
    "TMC": QuestionType.MULTIPLE_CHOICE,
    "TFT": QuestionType.TRUE_FALSE,
    "WAI": QuestionType.WHO_AM_I,
}

_WRONG_ANSWER_COUNTS = {
    QuestionType.MULTIPLE_CHOICE: 3,
    QuestionType.TRUE_FALSE: 1,
    QuestionType.WHO_AM_I: 0,
}

_DISPLAY_LABELS = {
    QuestionType.MULTIPLE_CHOICE: "Multiple Choice",
    QuestionType.TRUE_FALSE: "True/False",
    QuestionType.WHO_AM_I: "Who Am I",
}

DIFFICULTIES = ("Easy", "Medium", "Hard")


def canonical_difficulty(value: Optional[str]) -> Optional[str]:
    """
    Normalise difficulty text to "Easy", "Medium" or "Hard".

    Returns:
        Canonical label, or None when the value is missing or unrecognised
    """
    if not value:
        return None
    lowered = value.strip().lower()
    for label in DIFFICULTIES:
        if lowered == label.lower():
            return label
    return None


@dataclass(frozen=True)
class ParsedQuestion:
    """
    Typed question produced by a dialect parser (immutable).

    Attributes:
        question_text: The question or statement
        correct_answer: Answer text ("True"/"False" for true-false)
        wrong_answers: Distractors; count fixed by question_type
        question_type: Dialect the record belongs to
        theme: Optional theme label from the source block
        tags: Free-form tags
        difficulty: "Easy", "Medium", "Hard" or None
        explanation: Optional explanation or correction text

    Invariants:
        - question_text and correct_answer are non-empty
        - len(wrong_answers) == question_type.wrong_answer_count
    """

    question_text: str
    correct_answer: str
    question_type: QuestionType
    wrong_answers: Tuple[str, ...] = ()
    theme: Optional[str] = None
    tags: Tuple[str, ...] = ()
    difficulty: Optional[str] = None
    explanation: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate dialect completeness on construction."""
        if not self.question_text:
            raise ValueError("question_text must be non-empty")
        if not self.correct_answer:
            raise ValueError("correct_answer must be non-empty")
        expected = self.question_type.wrong_answer_count
        if len(self.wrong_answers) != expected:
            raise ValueError(
                f"{self.question_type.value} requires {expected} wrong answers, "
                f"got {len(self.wrong_answers)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the ingestion store."""
        return {
            "questionText": self.question_text,
            "correctAnswer": self.correct_answer,
            "wrongAnswers": list(self.wrong_answers),
            "questionType": self.question_type.value,
            "theme": self.theme,
            "tags": list(self.tags),
            "difficulty": self.difficulty,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class CandidateRecord:
    """
    Stored question as seen by the assembly path (immutable).

    Owned by the external store. The engine reads it and, after a set is
    persisted, asks the store to append a usage timestamp.

    Attributes:
        id: Store identifier
        category: Exact-match category
        question_type: Dialect of the stored question
        question_text: Question text copied into set payloads
        correct_answer: Correct answer text
        wrong_answers: Distractors
        tags: Free-form tags
        difficulty: Free-form difficulty ("easy", "Hard", ...)
        explanation: Optional explanation
        last_used_timestamps: Dates of prior set inclusions
    """

    id: Any
    category: str
    question_type: QuestionType
    question_text: str = ""
    correct_answer: str = ""
    wrong_answers: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    difficulty: Optional[str] = None
    explanation: Optional[str] = None
    last_used_timestamps: Tuple[datetime, ...] = field(default=())

    @property
    def most_recent_use(self) -> Optional[datetime]:
        """Latest usage timestamp, or None if never used."""
        if not self.last_used_timestamps:
            return None
        return max(self.last_used_timestamps)
