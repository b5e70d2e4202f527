"""
Selection Package

Candidate pool construction and unbiased sampling for recipe execution.

Modules:
    - pool: Category/type query plus cooldown exclusion
    - sampler: Fisher-Yates shuffle, plain and stratified sampling
    - distribution: Quotas per question type (even / weighted)
"""

from .pool import CandidatePool, select_candidates, in_cooldown, partition_by_type
from .sampler import shuffle_in_place, sample, stratified_sample
from .distribution import distribute_quotas, validate_strategy, STRATEGIES

__all__ = [
    "CandidatePool",
    "select_candidates",
    "in_cooldown",
    "partition_by_type",
    "shuffle_in_place",
    "sample",
    "stratified_sample",
    "distribute_quotas",
    "validate_strategy",
    "STRATEGIES",
]
