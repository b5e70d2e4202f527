"""
Module: builder.selection.pool

Purpose:
    Candidate Pool Selector. Queries the store for records matching a
    recipe's category and question types, then drops records still
    inside the recipe's cooldown window. No randomisation happens here.

Key Functions:
    - select_candidates(): Main entry point
    - in_cooldown(): Cooldown test for a single usage timestamp

Key Classes:
    - CandidatePool: Eligible records plus per-type partitions

Algorithm:
    1. store.query(category, question_types)
    2. Discard records a lax store returned outside the filter
    3. If cooldown is active, fetch usage history and exclude records
       whose most recent use is at or after now - days
    4. Partition survivors by question type (recipe order)

Used By:
    - builder.controller: Execution and preview
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from trivia_toolkit.core.models import CandidateRecord, QuestionType, Recipe
from trivia_toolkit.core.utils import parse_timestamp

from ..cancellation import CancellationToken
from ..store import RecordFilter, RecordStore, store_call

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidatePool:
    """
    Records eligible for one execution.

    Attributes:
        candidates: Eligible records in store order
        excluded_ids: Records removed by the cooldown window
        partitions: Eligible records per recipe question type (empty
            partitions included, recipe order)
    """

    candidates: Tuple[CandidateRecord, ...]
    excluded_ids: Tuple[Any, ...]
    partitions: Dict[QuestionType, Tuple[CandidateRecord, ...]]

    @property
    def available(self) -> int:
        return len(self.candidates)

    @property
    def excluded_by_cooldown(self) -> int:
        return len(self.excluded_ids)

    def counts_by_type(self) -> Dict[QuestionType, int]:
        return {qtype: len(records) for qtype, records in self.partitions.items()}


def in_cooldown(last_used: Optional[datetime], now: datetime, days: int) -> bool:
    """
    True when a record used at last_used is still cooling down.

    The window boundary is inclusive: a use exactly `days` ago still
    excludes the record. Naive timestamps are read as UTC.
    """
    if last_used is None or days <= 0:
        return False
    return parse_timestamp(last_used) >= parse_timestamp(now) - timedelta(days=days)


def _latest_uses(
    records: Iterable[CandidateRecord],
    history: Mapping[Any, Iterable[datetime]],
) -> Dict[Any, Optional[datetime]]:
    latest: Dict[Any, Optional[datetime]] = {}
    for record in records:
        stamps = [parse_timestamp(s) for s in record.last_used_timestamps]
        stamps.extend(parse_timestamp(s) for s in history.get(record.id, ()))
        latest[record.id] = max(stamps) if stamps else None
    return latest


def partition_by_type(
    records: Iterable[CandidateRecord],
    question_types: Iterable[QuestionType],
) -> Dict[QuestionType, Tuple[CandidateRecord, ...]]:
    """Group records by question type, keeping one key per requested type."""
    buckets: Dict[QuestionType, List[CandidateRecord]] = {qt: [] for qt in question_types}
    for record in records:
        if record.question_type in buckets:
            buckets[record.question_type].append(record)
    return {qt: tuple(items) for qt, items in buckets.items()}


def select_candidates(
    store: RecordStore,
    recipe: Recipe,
    *,
    now: datetime,
    cancel: Optional[CancellationToken] = None,
) -> CandidatePool:
    """
    Build the eligible candidate pool for a recipe.

    Args:
        store: External record store
        recipe: Recipe being executed
        now: Reference time for the cooldown window
        cancel: Optional cancellation token

    Returns:
        CandidatePool with eligible records and per-type partitions

    Raises:
        StoreError: If the query or usage-history call fails
        ExecutionCancelled: If cancelled before a store call
    """
    record_filter = RecordFilter(recipe.category, tuple(recipe.question_types))
    fetched = store_call("query", store.query, record_filter, cancel=cancel)
    records = [r for r in fetched if record_filter.matches(r)]
    if len(records) != len(fetched):
        logger.debug(f"Discarded {len(fetched) - len(records)} records outside the filter")

    excluded: List[Any] = []
    if recipe.cooldown.is_active and records:
        days = recipe.cooldown.days
        history = store_call(
            "usage_history",
            store.get_usage_history,
            [r.id for r in records],
            cancel=cancel,
        )
        latest = _latest_uses(records, history or {})
        eligible = []
        for record in records:
            if in_cooldown(latest[record.id], now, days):
                excluded.append(record.id)
                logger.debug(f"Record {record.id!r} excluded by {days}-day cooldown")
            else:
                eligible.append(record)
        records = eligible

    pool = CandidatePool(
        candidates=tuple(records),
        excluded_ids=tuple(excluded),
        partitions=partition_by_type(records, recipe.question_types),
    )
    logger.info(
        f"Candidate pool for {recipe.category!r}: {pool.available} eligible, "
        f"{pool.excluded_by_cooldown} in cooldown"
    )
    return pool
