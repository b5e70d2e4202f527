"""
Builder Package

Recipe execution: candidate pool, sampling, set assembly and the
store interface the engine consumes.

Usage:
    from trivia_toolkit.builder import execute_recipe, ExecutionRequest

    result = execute_recipe(store, recipe_id, ExecutionRequest(), rng=rng, now=now)
"""

from .cancellation import CancellationToken
from .config import EngineConfig, load_config
from .controller import (
    ExecutionRequest,
    execute_recipe,
    execute_inline_recipe,
    preview_recipe,
    load_recipe,
)
from .locking import recipe_lock
from .stats import category_stats
from .store import RecordFilter, RecordStore, InMemoryRecordStore

__all__ = [
    "CancellationToken",
    "EngineConfig",
    "load_config",
    "ExecutionRequest",
    "execute_recipe",
    "execute_inline_recipe",
    "preview_recipe",
    "load_recipe",
    "recipe_lock",
    "category_stats",
    "RecordFilter",
    "RecordStore",
    "InMemoryRecordStore",
]
