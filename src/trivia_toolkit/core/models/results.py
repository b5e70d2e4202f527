"""
Module: results

Purpose:
    Result dataclasses returned to engine callers. None of these are
    persisted; the persisted artifact of an execution is the set record
    written through the external store.

Key Classes:
    - ParseResult: Output of the parsing orchestrator
    - ExecutionResult: Outcome of one recipe execution
    - PreviewResult: Dry-run availability for a recipe
    - CategoryStats: Per-category availability and usage counts

Dependencies:
    - dataclasses (std)
    - .questions: ParsedQuestion, QuestionType

Used By:
    - parsing.pipeline
    - builder.controller
    - engine
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from trivia_toolkit.errors import EngineError, FieldError, InsufficientCandidatesError, StoreError

from .questions import ParsedQuestion, QuestionType


@dataclass(frozen=True)
class ParseResult:
    """
    Parsed records plus detection metadata.

    Attributes:
        detected_type: What the format detector guessed
        questions: Records found (possibly empty)
        parsed_by: Dialect whose parser produced the records, None if empty
        attempted: Dialects tried, in order
    """

    detected_type: QuestionType
    questions: Tuple[ParsedQuestion, ...] = ()
    parsed_by: Optional[QuestionType] = None
    attempted: Tuple[QuestionType, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.questions

    @property
    def used_fallback(self) -> bool:
        """True when a parser other than the detected one produced the records."""
        return self.parsed_by is not None and self.parsed_by != self.detected_type

    def __len__(self) -> int:
        return len(self.questions)


@dataclass(frozen=True)
class ExecutionResult:
    """
    Outcome of one recipe execution (ephemeral).

    Partial fulfilment is success with warnings. Failures carry an
    error_kind so callers can tell not-found from validation from
    store problems.
    """

    success: bool
    questions_selected: int = 0
    questions_requested: int = 0
    selected_ids: Tuple[Any, ...] = ()
    trivia_set_id: Any = None
    warnings: Tuple[str, ...] = ()
    error: Optional[str] = None
    error_kind: Optional[str] = None
    failed_step: Optional[str] = None
    field_errors: Tuple[FieldError, ...] = ()

    @classmethod
    def from_error(cls, exc: EngineError, *, requested: int = 0) -> "ExecutionResult":
        """Build a failed result from an engine exception."""
        failed_step = None
        trivia_set_id = None
        field_errors: Tuple[FieldError, ...] = ()
        if isinstance(exc, StoreError):
            failed_step = exc.step
            trivia_set_id = exc.trivia_set_id
        if isinstance(exc, InsufficientCandidatesError):
            requested = exc.requested
        errors = getattr(exc, "errors", None)
        if errors:
            field_errors = tuple(errors)
        return cls(
            success=False,
            questions_requested=requested,
            trivia_set_id=trivia_set_id,
            error=str(exc),
            error_kind=exc.kind,
            failed_step=failed_step,
            field_errors=field_errors,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "success": self.success,
            "questionsSelected": self.questions_selected,
            "questionsRequested": self.questions_requested,
            "selectedIds": list(self.selected_ids),
        }
        if self.trivia_set_id is not None:
            data["triviaSetId"] = self.trivia_set_id
        if self.warnings:
            data["warnings"] = list(self.warnings)
        if self.error is not None:
            data["error"] = self.error
            data["errorKind"] = self.error_kind
        if self.failed_step is not None:
            data["failedStep"] = self.failed_step
        if self.field_errors:
            data["fieldErrors"] = [
                {"field": e.field, "message": e.message} for e in self.field_errors
            ]
        return data


@dataclass(frozen=True)
class PreviewResult:
    """
    Dry-run of a recipe execution (no persistence).

    Attributes:
        available: Candidates left after cooldown
        would_select: min(available, requested)
        requested: Clamped target quantity
        by_type: Available candidates per question type
        excluded_by_cooldown: Records removed by the cooldown window
    """

    available: int
    would_select: int
    requested: int
    by_type: Dict[QuestionType, int] = field(default_factory=dict)
    excluded_by_cooldown: int = 0

    @property
    def is_sufficient(self) -> bool:
        return self.available >= self.requested


@dataclass(frozen=True)
class CategoryStats:
    """
    Availability and recent usage for one category.

    Attributes:
        category: Category name
        question_counts: Records per question type
        by_difficulty: Records per canonical difficulty ("Unknown" for the rest)
        recent_short: Records used within the short window (7 days)
        recent_long: Records used within the long window (30 days)
    """

    category: str
    question_counts: Dict[QuestionType, int]
    by_difficulty: Dict[str, int]
    recent_short: int = 0
    recent_long: int = 0

    @property
    def total_available(self) -> int:
        return sum(self.question_counts.values())
