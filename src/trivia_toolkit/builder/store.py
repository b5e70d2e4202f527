"""
Module: builder.store

Purpose:
    Abstract interface for the external keyed-record store the engine
    consumes, plus an in-memory implementation used by tests and
    previews. The engine never implements storage itself.

Key Classes:
    - RecordFilter: Category + question-type filter for candidate queries
    - RecordStore: Abstract base class for store access
    - InMemoryRecordStore: Process-local reference implementation

Key Functions:
    - store_call(): Run one store operation with cancellation check and
      StoreError wrapping

Used By:
    - builder.selection.pool: Candidate queries and usage history
    - builder.controller: Recipe loading, set persistence, usage updates
"""

from __future__ import annotations

import itertools
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from trivia_toolkit.core.models import CandidateRecord, QuestionType, Recipe, RecipeUsage, SetPayload
from trivia_toolkit.errors import EngineError, StoreError

from .cancellation import CancellationToken

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RecordFilter:
    """
    Candidate query filter.

    Attributes:
        category: Exact-match category
        question_types: Allowed question types
    """

    category: str
    question_types: Tuple[QuestionType, ...]

    def matches(self, record: CandidateRecord) -> bool:
        return record.category == self.category and record.question_type in self.question_types


class RecordStore(ABC):
    """
    Abstract interface for the external keyed-record store.

    Implementations carry their own timeout and retry semantics. Any
    exception they raise aborts the current execution.
    """

    @abstractmethod
    def query(self, record_filter: RecordFilter) -> List[CandidateRecord]:
        """Return records matching the category and question types."""

    @abstractmethod
    def get_usage_history(self, record_ids: Sequence[Any]) -> Dict[Any, List[datetime]]:
        """Return prior set-inclusion timestamps per record id."""

    @abstractmethod
    def append_usage(self, record_ids: Sequence[Any], timestamp: datetime) -> None:
        """Record that the given records were included in a set at timestamp."""

    @abstractmethod
    def create_set(self, selected_ids: Sequence[Any], metadata: SetPayload) -> Any:
        """Persist a new set referencing the selected records; return its id."""

    @abstractmethod
    def load_recipe(self, recipe_id: Any) -> Optional[Recipe]:
        """Return the recipe, or None when it does not exist."""

    @abstractmethod
    def save_recipe_usage(self, recipe_id: Any, usage: RecipeUsage) -> None:
        """Write usage_count and last_used_at for a recipe."""


def store_call(
    step: str,
    operation: Callable[..., T],
    *args: Any,
    cancel: Optional[CancellationToken] = None,
    trivia_set_id: Any = None,
) -> T:
    """
    Run one store round trip.

    Checks the cancellation token first, then wraps any non-engine
    exception into a StoreError naming the step.

    Args:
        step: Operation name reported on failure ("query", "create_set", ...)
        operation: Bound store method
        cancel: Optional cancellation token
        trivia_set_id: Set id to attach when failing after persistence

    Raises:
        ExecutionCancelled: If the token is cancelled
        StoreError: If the store raises
    """
    if cancel is not None:
        cancel.raise_if_cancelled(step)
    try:
        return operation(*args)
    except EngineError:
        raise
    except Exception as e:
        logger.error(f"Store failure during {step}: {e}")
        raise StoreError(step, str(e) or type(e).__name__, trivia_set_id=trivia_set_id) from e


class InMemoryRecordStore(RecordStore):
    """
    Process-local store holding records, recipes and sets in dictionaries.

    Attributes:
        sets: Persisted sets keyed by id, as (selected_ids, metadata)

    Example:
        >>> store = InMemoryRecordStore()
        >>> store.add_recipe(recipe)
        >>> store.add_records(records)
    """

    def __init__(
        self,
        records: Iterable[CandidateRecord] = (),
        recipes: Iterable[Recipe] = (),
    ) -> None:
        self._records: Dict[Any, CandidateRecord] = {}
        self._recipes: Dict[Any, Recipe] = {}
        self.sets: Dict[Any, Tuple[Tuple[Any, ...], SetPayload]] = {}
        self._set_ids = itertools.count(1)
        self.add_records(records)
        for recipe in recipes:
            self.add_recipe(recipe)

    # ─────────────────────────────────────────────────────────────────────────
    # Seeding
    # ─────────────────────────────────────────────────────────────────────────

    def add_records(self, records: Iterable[CandidateRecord]) -> None:
        for record in records:
            self._records[record.id] = record

    def add_recipe(self, recipe: Recipe) -> None:
        self._recipes[recipe.id] = recipe

    def record(self, record_id: Any) -> CandidateRecord:
        return self._records[record_id]

    def recipe(self, recipe_id: Any) -> Recipe:
        return self._recipes[recipe_id]

    # ─────────────────────────────────────────────────────────────────────────
    # RecordStore
    # ─────────────────────────────────────────────────────────────────────────

    def query(self, record_filter: RecordFilter) -> List[CandidateRecord]:
        return [r for r in self._records.values() if record_filter.matches(r)]

    def get_usage_history(self, record_ids: Sequence[Any]) -> Dict[Any, List[datetime]]:
        return {
            rid: list(self._records[rid].last_used_timestamps)
            for rid in record_ids
            if rid in self._records
        }

    def append_usage(self, record_ids: Sequence[Any], timestamp: datetime) -> None:
        for rid in record_ids:
            record = self._records[rid]
            self._records[rid] = replace(
                record,
                last_used_timestamps=record.last_used_timestamps + (timestamp,),
            )

    def create_set(self, selected_ids: Sequence[Any], metadata: SetPayload) -> Any:
        set_id = next(self._set_ids)
        self.sets[set_id] = (tuple(selected_ids), metadata)
        return set_id

    def load_recipe(self, recipe_id: Any) -> Optional[Recipe]:
        return self._recipes.get(recipe_id)

    def save_recipe_usage(self, recipe_id: Any, usage: RecipeUsage) -> None:
        recipe = self._recipes[recipe_id]
        self._recipes[recipe_id] = replace(
            recipe,
            usage_count=usage.usage_count,
            last_used_at=usage.last_used_at,
        )
