"""
Module: builder.stats

Purpose:
    Per-category availability and recent-usage counts, used by recipe
    editors to judge whether a recipe can be fulfilled.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Dict, Optional

from trivia_toolkit.common import USAGE_THRESHOLDS
from trivia_toolkit.core.models import CategoryStats, QuestionType, canonical_difficulty
from trivia_toolkit.core.utils import parse_timestamp

from .cancellation import CancellationToken
from .store import RecordFilter, RecordStore, store_call

logger = logging.getLogger(__name__)

UNKNOWN_DIFFICULTY = "Unknown"


def category_stats(
    store: RecordStore,
    category: str,
    *,
    now: datetime,
    cancel: Optional[CancellationToken] = None,
) -> CategoryStats:
    """
    Count records per type and difficulty, and records used recently.

    Recent usage counts records whose latest use falls within the last
    7 and 30 days respectively.

    Raises:
        StoreError: If a store call fails
    """
    record_filter = RecordFilter(category, tuple(QuestionType))
    records = [
        r for r in store_call("query", store.query, record_filter, cancel=cancel)
        if record_filter.matches(r)
    ]

    question_counts: Dict[QuestionType, int] = {qt: 0 for qt in QuestionType}
    by_difficulty: Dict[str, int] = {"Easy": 0, "Medium": 0, "Hard": 0, UNKNOWN_DIFFICULTY: 0}
    for record in records:
        question_counts[record.question_type] += 1
        label = canonical_difficulty(record.difficulty) or UNKNOWN_DIFFICULTY
        by_difficulty[label] += 1

    history = {}
    if records:
        history = store_call(
            "usage_history",
            store.get_usage_history,
            [r.id for r in records],
            cancel=cancel,
        ) or {}

    now = parse_timestamp(now)
    short_cutoff = now - timedelta(days=USAGE_THRESHOLDS.recent_short_days)
    long_cutoff = now - timedelta(days=USAGE_THRESHOLDS.recent_long_days)
    recent_short = recent_long = 0
    for record in records:
        stamps = [
            parse_timestamp(s)
            for s in (*record.last_used_timestamps, *history.get(record.id, ()))
        ]
        if not stamps:
            continue
        latest = max(stamps)
        if latest >= short_cutoff:
            recent_short += 1
        if latest >= long_cutoff:
            recent_long += 1

    stats = CategoryStats(
        category=category,
        question_counts=question_counts,
        by_difficulty=by_difficulty,
        recent_short=recent_short,
        recent_long=recent_long,
    )
    logger.info(f"Category {category!r}: {stats.total_available} records, {recent_short} used this week")
    return stats
