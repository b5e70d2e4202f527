"""
Module: builder.controller

Purpose:
    Orchestrate one recipe execution end to end.
    Load -> Pool -> Quantity -> Sample -> Persist -> Attribute usage

Key Functions:
    - execute_recipe(): Run a saved recipe
    - execute_inline_recipe(): Run an unsaved recipe payload
    - preview_recipe(): Dry run of steps 1-3, no persistence
    - load_recipe(): Resolve a recipe id (not found / archived)

Key Classes:
    - ExecutionRequest: Per-call execution options

Ordering:
    The set is persisted before usage is attributed. A failure after the
    set exists raises StoreError carrying the set id; usage is never
    attributed to a set that was not persisted.

Dependencies:
    - builder.selection: Pool, sampler, quotas
    - builder.assembly: Set payload
    - builder.store: Store interface

Used By:
    - engine.TriviaEngine
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Tuple

from trivia_toolkit.common import SCORING_THRESHOLDS
from trivia_toolkit.core.models import CandidateRecord, ExecutionResult, PreviewResult, Recipe
from trivia_toolkit.errors import (
    InsufficientCandidatesError,
    RecipeArchivedError,
    RecipeNotFoundError,
)
from trivia_toolkit.recipes.validation import build_recipe

from .assembly import build_set_payload
from .cancellation import CancellationToken
from .selection import (
    CandidatePool,
    distribute_quotas,
    sample,
    select_candidates,
    stratified_sample,
    validate_strategy,
)
from .store import RecordStore, store_call

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionRequest:
    """
    Options for one execution.

    Attributes:
        quantity_override: Requested count (clamped into the recipe range)
        allow_partial_sets: Accept fewer records than requested
        distribution: None for a plain sample, "even" or "weighted" for
            per-type quotas
    """

    quantity_override: Optional[int] = None
    allow_partial_sets: bool = False
    distribution: Optional[str] = None

    def __post_init__(self) -> None:
        validate_strategy(self.distribution)


def load_recipe(
    store: RecordStore,
    recipe_id: Any,
    *,
    cancel: Optional[CancellationToken] = None,
) -> Recipe:
    """
    Raises:
        RecipeNotFoundError: If the store has no such recipe
        RecipeArchivedError: If the recipe is soft-deleted
        StoreError: If the store call fails
    """
    recipe = store_call("load_recipe", store.load_recipe, recipe_id, cancel=cancel)
    if recipe is None:
        raise RecipeNotFoundError(recipe_id)
    if recipe.is_archived:
        raise RecipeArchivedError(recipe_id)
    logger.info(f"Loaded recipe {recipe_id!r} ({recipe.name})")
    return recipe


def resolve_count(
    pool: CandidatePool,
    target: int,
    allow_partial_sets: bool,
    category: str = "",
) -> Tuple[int, List[str]]:
    """
    Decide how many records to select.

    Returns:
        (count, warnings)

    Raises:
        InsufficientCandidatesError: Empty pool, or short pool without
            allow_partial_sets
    """
    available = pool.available
    if available == 0:
        raise InsufficientCandidatesError(target, 0, category)
    if available >= target:
        return target, []
    if not allow_partial_sets:
        raise InsufficientCandidatesError(target, available, category)
    warning = (
        f"Selected {available} questions instead of requested {target} "
        f"(only {available} available)"
    )
    return available, [warning]


def choose_records(
    pool: CandidatePool,
    count: int,
    distribution: Optional[str],
    rng: random.Random,
) -> List[CandidateRecord]:
    """Plain uniform sample, or per-type quotas when a distribution is set."""
    if distribution is None:
        return sample(pool.candidates, count, rng)
    quotas = distribute_quotas(pool.counts_by_type(), count, distribution)
    return stratified_sample(pool.partitions, quotas, rng)


def _run(
    store: RecordStore,
    recipe: Recipe,
    request: ExecutionRequest,
    *,
    rng: random.Random,
    now: datetime,
    cancel: Optional[CancellationToken],
    time_limit: int,
    attribute_recipe_usage: bool,
) -> ExecutionResult:
    pool = select_candidates(store, recipe, now=now, cancel=cancel)
    target = recipe.clamp_quantity(request.quantity_override)
    count, warnings = resolve_count(pool, target, request.allow_partial_sets, recipe.category)

    selected = choose_records(pool, count, request.distribution, rng)
    selected_ids = tuple(r.id for r in selected)
    logger.info(f"Selected {len(selected)} of {pool.available} candidates (target {target})")
    for warning in warnings:
        logger.warning(warning)

    payload = build_set_payload(recipe, selected, now, time_limit)
    set_id = store_call("create_set", store.create_set, selected_ids, payload, cancel=cancel)
    logger.info(f"Persisted set {set_id!r} ({payload.slug})")

    store_call(
        "append_usage", store.append_usage, selected_ids, now,
        cancel=cancel, trivia_set_id=set_id,
    )
    if attribute_recipe_usage:
        store_call(
            "save_recipe_usage", store.save_recipe_usage, recipe.id, recipe.usage_after_execution(now),
            cancel=cancel, trivia_set_id=set_id,
        )

    return ExecutionResult(
        success=True,
        questions_selected=len(selected),
        questions_requested=target,
        selected_ids=selected_ids,
        trivia_set_id=set_id,
        warnings=tuple(warnings),
    )


def execute_recipe(
    store: RecordStore,
    recipe_id: Any,
    request: Optional[ExecutionRequest] = None,
    *,
    rng: random.Random,
    now: datetime,
    cancel: Optional[CancellationToken] = None,
    time_limit: int = SCORING_THRESHOLDS.time_limit_seconds,
) -> ExecutionResult:
    """
    Execute a saved recipe.

    Pipeline:
    1. Load the recipe
    2. Build the candidate pool (category, types, cooldown)
    3. Resolve the target quantity (override or default, clamped)
    4. Check availability (partial sets add a warning)
    5. Sample
    6. Persist the set
    7. Append record usage, then save recipe usage

    Args:
        store: External record store
        recipe_id: Recipe to execute
        request: Execution options (defaults: no override, no partial sets)
        rng: Randomness source
        now: Execution time
        cancel: Optional cancellation token
        time_limit: Per-question seconds written to the set

    Returns:
        Successful ExecutionResult (warnings on partial fulfilment)

    Raises:
        RecipeNotFoundError: Missing or archived recipe
        InsufficientCandidatesError: Not enough eligible records
        StoreError: Any store failure (trivia_set_id set after persistence)
        ExecutionCancelled: Token cancelled before a store call

    Example:
        >>> result = execute_recipe(store, 1, ExecutionRequest(allow_partial_sets=True),
        ...                         rng=random.Random(7), now=now)
        >>> result.questions_selected
        8
    """
    request = request or ExecutionRequest()
    recipe = load_recipe(store, recipe_id, cancel=cancel)
    return _run(
        store, recipe, request,
        rng=rng, now=now, cancel=cancel, time_limit=time_limit,
        attribute_recipe_usage=True,
    )


def execute_inline_recipe(
    store: RecordStore,
    payload: Any,
    request: Optional[ExecutionRequest] = None,
    *,
    rng: random.Random,
    now: datetime,
    cancel: Optional[CancellationToken] = None,
    time_limit: int = SCORING_THRESHOLDS.time_limit_seconds,
) -> ExecutionResult:
    """
    Execute an unsaved recipe payload.

    The payload is validated first; nothing touches the store when it is
    invalid. Records still receive usage timestamps, the recipe usage
    stats are never written.

    Raises:
        RecipeValidationError: Invalid payload
        InsufficientCandidatesError / StoreError / ExecutionCancelled:
            As for execute_recipe
    """
    request = request or ExecutionRequest()
    recipe = build_recipe(payload)
    logger.info(f"Executing inline recipe {recipe.name!r}")
    return _run(
        store, recipe, request,
        rng=rng, now=now, cancel=cancel, time_limit=time_limit,
        attribute_recipe_usage=False,
    )


def preview_recipe(
    store: RecordStore,
    recipe_id: Any,
    quantity_override: Optional[int] = None,
    *,
    now: datetime,
    cancel: Optional[CancellationToken] = None,
) -> PreviewResult:
    """
    Report what an execution would select without persisting anything.

    Raises:
        RecipeNotFoundError: Missing or archived recipe
        StoreError: Any store failure
    """
    recipe = load_recipe(store, recipe_id, cancel=cancel)
    pool = select_candidates(store, recipe, now=now, cancel=cancel)
    target = recipe.clamp_quantity(quantity_override)
    return PreviewResult(
        available=pool.available,
        would_select=min(pool.available, target),
        requested=target,
        by_type=pool.counts_by_type(),
        excluded_by_cooldown=pool.excluded_by_cooldown,
    )
