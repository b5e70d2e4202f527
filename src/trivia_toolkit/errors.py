"""
Module: errors

Purpose:
    Exception hierarchy for the assembly engine. Parsing never raises
    (malformed text yields an empty result), so everything here belongs
    to the recipe and execution path.

Key Classes:
    - EngineError: Base class for all engine failures
    - RecipeNotFoundError / RecipeArchivedError: Missing or soft-deleted recipe
    - RecipeValidationError: Field-level validation failure
    - InsufficientCandidatesError: Pool smaller than the requested quantity
    - StoreError / ExecutionLockError: External store or lock failure
    - ExecutionCancelled: Caller cancelled before a store round trip

Used By:
    - builder.controller: Raises during execution
    - engine: Converts to ExecutionResult.error_kind
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class FieldError:
    """
    Validation message bound to one input field.

    Attributes:
        field: Dotted field path like "quantity.default"
        message: Human-readable description of the problem
    """
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class EngineError(Exception):
    """Base class for assembly engine errors."""

    kind = "engine"


class RecipeNotFoundError(EngineError):
    """Recipe id did not resolve to a recipe."""

    kind = "not_found"

    def __init__(self, recipe_id: object, message: Optional[str] = None):
        super().__init__(message or f"Recipe not found: {recipe_id!r}")
        self.recipe_id = recipe_id


class RecipeArchivedError(RecipeNotFoundError):
    """Recipe exists but has been soft-deleted."""

    def __init__(self, recipe_id: object):
        super().__init__(recipe_id, f"Recipe {recipe_id!r} is archived")


class RecipeValidationError(EngineError):
    """Recipe payload failed validation."""

    kind = "validation"

    def __init__(self, errors: Iterable[FieldError]):
        self.errors = tuple(errors)
        summary = "; ".join(str(e) for e in self.errors) or "invalid recipe"
        super().__init__(f"Recipe validation failed: {summary}")

    def messages_by_field(self) -> dict[str, list[str]]:
        """Group messages per field for form highlighting."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


class InsufficientCandidatesError(EngineError):
    """Fewer eligible records than the execution requires."""

    kind = "insufficient_candidates"

    def __init__(self, requested: int, available: int, category: str = ""):
        self.requested = requested
        self.available = available
        self.category = category
        if available == 0:
            where = f' for category "{category}"' if category else ""
            message = f"No questions available{where} matching the criteria"
        else:
            message = (
                f"Insufficient questions. Requested {requested}, but only "
                f"{available} available (short by {self.shortfall})"
            )
        super().__init__(message)

    @property
    def shortfall(self) -> int:
        return max(self.requested - self.available, 0)


class StoreError(EngineError):
    """
    External store call failed.

    Attributes:
        step: Name of the store operation that failed
        trivia_set_id: Set id when the failure happened after persistence
    """

    kind = "store"

    def __init__(
        self,
        step: str,
        message: str,
        *,
        trivia_set_id: object = None,
    ):
        super().__init__(f"Store failure during {step}: {message}")
        self.step = step
        self.trivia_set_id = trivia_set_id


class ExecutionLockError(StoreError):
    """Per-recipe execution lock could not be acquired."""

    def __init__(self, recipe_id: object, timeout: float):
        super().__init__("lock", f"could not lock recipe {recipe_id!r} within {timeout}s")
        self.recipe_id = recipe_id


class ExecutionCancelled(EngineError):
    """Execution was cancelled by the caller."""

    kind = "cancelled"

    def __init__(self, step: str):
        super().__init__(f"Execution cancelled before {step}")
        self.step = step
