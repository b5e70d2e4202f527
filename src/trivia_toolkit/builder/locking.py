"""
Module: builder.locking

Purpose:
    Optional per-recipe execution lock so two executions of the same
    recipe cannot overlap. Uses portalocker for Mac, Windows, and Linux
    compatibility.

Key Functions:
    - recipe_lock(): Context manager holding an exclusive lock file
    - lock_path(): Lock file location for a recipe id

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - engine.TriviaEngine: When EngineConfig.lock_dir is set
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

import portalocker

from trivia_toolkit.errors import ExecutionLockError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


def lock_path(lock_dir: Path, recipe_id: Any) -> Path:
    """Lock file for a recipe: <lock_dir>/recipe-<id>.lock"""
    safe_id = _UNSAFE_CHARS.sub("_", str(recipe_id))
    return Path(lock_dir) / f"recipe-{safe_id}.lock"


@contextmanager
def recipe_lock(
    lock_dir: Path,
    recipe_id: Any,
    timeout: float = 10.0,
) -> Generator[Path, None, None]:
    """
    Hold an exclusive lock for one recipe.

    Args:
        lock_dir: Directory for lock files (created if missing)
        recipe_id: Recipe being executed
        timeout: Seconds to wait for the lock

    Yields:
        Path of the held lock file

    Raises:
        ExecutionLockError: If the lock is not acquired within timeout

    Example:
        >>> with recipe_lock(Path("locks"), 42):
        ...     execute_recipe(store, 42, request, rng=rng, now=now)
    """
    path = lock_path(lock_dir, recipe_id)
    path.parent.mkdir(parents=True, exist_ok=True)

    lock = portalocker.Lock(
        str(path),
        mode="a",
        timeout=timeout,
        flags=portalocker.LOCK_EX | portalocker.LOCK_NB,
    )
    try:
        lock.acquire()
    except portalocker.LockException as e:
        logger.warning(f"Could not lock recipe {recipe_id!r} within {timeout}s")
        raise ExecutionLockError(recipe_id, timeout) from e

    logger.debug(f"Acquired execution lock {path.name}")
    try:
        yield path
    finally:
        lock.release()
        logger.debug(f"Released execution lock {path.name}")
