"""
Module: builder.selection.sampler

Purpose:
    Unbiased random sampling of candidate records.

Key Functions:
    - shuffle_in_place(): Fisher-Yates shuffle
    - sample(): Uniform sample without replacement
    - stratified_sample(): Per-partition quotas, combined and reshuffled

Every permutation is equally likely. The randomness source is always a
caller-supplied random.Random so tests can seed it.
"""

from __future__ import annotations

import random
from typing import List, Mapping, MutableSequence, Sequence, TypeVar

T = TypeVar("T")


def shuffle_in_place(items: MutableSequence[T], rng: random.Random) -> None:
    """
    Fisher-Yates shuffle.

    Walks i from the last index down to 1 and swaps items[i] with an
    index drawn uniformly from [0, i].
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def sample(pool: Sequence[T], quantity: int, rng: random.Random) -> List[T]:
    """
    Draw min(quantity, len(pool)) items without replacement.

    The pool itself is not modified.

    Raises:
        ValueError: If quantity is negative
    """
    if quantity < 0:
        raise ValueError(f"quantity must be non-negative: {quantity}")
    items = list(pool)
    shuffle_in_place(items, rng)
    return items[:quantity]


def stratified_sample(
    partitions: Mapping[object, Sequence[T]],
    quotas: Mapping[object, int],
    rng: random.Random,
) -> List[T]:
    """
    Sample each partition to its quota, then shuffle the combined list.

    Partitions without a quota contribute nothing. A quota larger than its
    partition takes the whole partition.

    Raises:
        ValueError: If any quota is negative
    """
    combined: List[T] = []
    for key, records in partitions.items():
        quota = quotas.get(key, 0)
        if quota < 0:
            raise ValueError(f"quota for {key} must be non-negative: {quota}")
        combined.extend(sample(records, quota, rng))
    shuffle_in_place(combined, rng)
    return combined
