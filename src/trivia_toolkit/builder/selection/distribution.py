"""
Module: builder.selection.distribution

Purpose:
    Split a target quantity across question-type partitions for the
    stratified sampler.

Key Functions:
    - distribute_quotas(): Quotas per question type

Strategies:
    - even: equal split, remainder to the earliest types
    - weighted: proportional to partition size, rounded half up

Each quota is capped at its partition size. The result is then
reconciled so quotas sum to min(total, sum of sizes).
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")

STRATEGY_EVEN = "even"
STRATEGY_WEIGHTED = "weighted"
STRATEGIES = (STRATEGY_EVEN, STRATEGY_WEIGHTED)


def validate_strategy(strategy: Optional[str]) -> Optional[str]:
    """
    Raises:
        ValueError: If strategy is neither None nor a known strategy name
    """
    if strategy is not None and strategy not in STRATEGIES:
        raise ValueError(f"distribution must be one of {STRATEGIES}: {strategy!r}")
    return strategy


def _even(sizes: Mapping[K, int], total: int) -> Dict[K, int]:
    base, remainder = divmod(total, len(sizes))
    quotas: Dict[K, int] = {}
    for index, (key, size) in enumerate(sizes.items()):
        quotas[key] = min(base + (1 if index < remainder else 0), size)
    return quotas


def _weighted(sizes: Mapping[K, int], total: int) -> Dict[K, int]:
    available = sum(sizes.values())
    if available == 0:
        return {key: 0 for key in sizes}
    return {
        key: min(math.floor(total * size / available + 0.5), size)
        for key, size in sizes.items()
    }


def _reconcile(quotas: Dict[K, int], sizes: Mapping[K, int], goal: int) -> Dict[K, int]:
    current = sum(quotas.values())
    while current > goal:
        largest = max(quotas, key=lambda k: quotas[k])
        quotas[largest] -= 1
        current -= 1
    for key, size in sizes.items():
        if current >= goal:
            break
        spare = min(size - quotas[key], goal - current)
        if spare > 0:
            quotas[key] += spare
            current += spare
    return quotas


def distribute_quotas(
    partition_sizes: Mapping[K, int],
    total: int,
    strategy: str = STRATEGY_WEIGHTED,
) -> Dict[K, int]:
    """
    Compute per-partition quotas.

    Args:
        partition_sizes: Records available per key, in priority order
        total: Number of records wanted overall
        strategy: "even" or "weighted"

    Returns:
        Quotas per key summing to min(total, sum(partition_sizes))

    Raises:
        ValueError: Unknown strategy, negative total or negative size

    Example:
        >>> distribute_quotas({"mc": 6, "tf": 2}, 6, "even")
        {'mc': 4, 'tf': 2}
    """
    validate_strategy(strategy)
    if strategy is None:
        raise ValueError("strategy is required")
    if total < 0:
        raise ValueError(f"total must be non-negative: {total}")
    if any(size < 0 for size in partition_sizes.values()):
        raise ValueError(f"partition sizes must be non-negative: {dict(partition_sizes)}")
    if not partition_sizes:
        return {}

    if strategy == STRATEGY_EVEN:
        quotas = _even(partition_sizes, total)
    else:
        quotas = _weighted(partition_sizes, total)

    goal = min(total, sum(partition_sizes.values()))
    quotas = _reconcile(quotas, partition_sizes, goal)
    logger.debug(f"Quotas ({strategy}) for {total}: {quotas}")
    return quotas
