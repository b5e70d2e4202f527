"""
Module: engine

Purpose:
    Caller-facing facade over parsing and recipe execution.

Key Classes:
    - TriviaEngine: Binds a store, a config, a clock and a random source

Execution methods never raise engine errors: every EngineError becomes a
failed ExecutionResult whose error_kind names the condition. The
builder.controller functions underneath raise instead.

Example:
    >>> engine = TriviaEngine(store, EngineConfig(seed=7))
    >>> result = engine.execute_recipe(1, allow_partial_sets=True)
    >>> result.success, result.warnings
    (True, ('Selected 8 questions instead of requested 10 (only 8 available)',))
"""

from __future__ import annotations

import logging
import random
from contextlib import nullcontext
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from trivia_toolkit.builder import controller
from trivia_toolkit.builder.cancellation import CancellationToken
from trivia_toolkit.builder.config import EngineConfig
from trivia_toolkit.builder.locking import recipe_lock
from trivia_toolkit.builder.stats import category_stats
from trivia_toolkit.builder.store import RecordStore
from trivia_toolkit.core.models import CategoryStats, ExecutionResult, ParseResult, PreviewResult
from trivia_toolkit.errors import EngineError, FieldError, RecipeValidationError
from trivia_toolkit.parsing import parse_questions
from trivia_toolkit.recipes import validate_recipe_input

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TriviaEngine:
    """
    Parse generated question text and execute recipes against a store.

    Args:
        store: External record store
        config: Engine settings (defaults used when None)
        clock: Returns the current time; injectable for tests
        rng: Random source; defaults to random.Random(config.seed)
    """

    def __init__(
        self,
        store: RecordStore,
        config: Optional[EngineConfig] = None,
        *,
        clock: Callable[[], datetime] = utc_now,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store
        self.config = config or EngineConfig()
        self.clock = clock
        self.rng = rng if rng is not None else random.Random(self.config.seed)

    def parse(self, raw_text: str) -> ParseResult:
        return parse_questions(raw_text)

    def _request(
        self,
        quantity_override: Optional[int],
        allow_partial_sets: bool,
        distribution: Optional[str],
    ) -> controller.ExecutionRequest:
        try:
            return controller.ExecutionRequest(
                quantity_override=quantity_override,
                allow_partial_sets=allow_partial_sets,
                distribution=distribution if distribution is not None else self.config.default_distribution,
            )
        except ValueError as e:
            raise RecipeValidationError([FieldError("distribution", str(e))]) from e

    def execute_recipe(
        self,
        recipe_id: Any,
        quantity_override: Optional[int] = None,
        allow_partial_sets: bool = False,
        distribution: Optional[str] = None,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> ExecutionResult:
        """
        Execute a saved recipe.

        Holds the per-recipe lock for the whole execution when
        config.lock_dir is set.

        Returns:
            ExecutionResult; failures have success=False and error_kind set
        """
        lock = (
            recipe_lock(self.config.lock_dir, recipe_id, self.config.lock_timeout)
            if self.config.lock_dir is not None
            else nullcontext()
        )
        try:
            request = self._request(quantity_override, allow_partial_sets, distribution)
            with lock:
                return controller.execute_recipe(
                    self.store, recipe_id, request,
                    rng=self.rng,
                    now=self.clock(),
                    cancel=cancel,
                    time_limit=self.config.time_limit_seconds,
                )
        except EngineError as e:
            logger.error(f"Execution of recipe {recipe_id!r} failed: {e}")
            return ExecutionResult.from_error(e, requested=quantity_override or 0)

    def execute_inline_recipe(
        self,
        payload: Any,
        quantity_override: Optional[int] = None,
        allow_partial_sets: bool = False,
        distribution: Optional[str] = None,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> ExecutionResult:
        """Execute an unsaved recipe payload; recipe usage stats are not written."""
        try:
            request = self._request(quantity_override, allow_partial_sets, distribution)
            return controller.execute_inline_recipe(
                self.store, payload, request,
                rng=self.rng,
                now=self.clock(),
                cancel=cancel,
                time_limit=self.config.time_limit_seconds,
            )
        except EngineError as e:
            logger.error(f"Inline execution failed: {e}")
            return ExecutionResult.from_error(e, requested=quantity_override or 0)

    def preview_recipe(self, recipe_id: Any, quantity_override: Optional[int] = None) -> PreviewResult:
        """
        Raises:
            RecipeNotFoundError: Missing or archived recipe
            StoreError: Any store failure
        """
        return controller.preview_recipe(
            self.store, recipe_id, quantity_override, now=self.clock()
        )

    def category_stats(self, category: str) -> CategoryStats:
        return category_stats(self.store, category, now=self.clock())

    def validate_recipe(self, payload: Any) -> List[FieldError]:
        return validate_recipe_input(payload)
