"""
Module: builder.config

Purpose:
    Configuration dataclass for the assembly engine. Immutable
    configuration with validation on construction.

Key Classes:
    - EngineConfig: Engine-wide execution settings

Key Functions:
    - load_config(): Read an EngineConfig from a JSON file

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - engine.TriviaEngine
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from trivia_toolkit.common import SCORING_THRESHOLDS

from .selection.distribution import validate_strategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for recipe execution (immutable).

    Attributes:
        seed: Random seed for reproducible selection (None = system entropy)
        time_limit_seconds: Per-question answer window written to sets
        lock_dir: Directory for per-recipe lock files (None = no locking)
        lock_timeout: Seconds to wait for a recipe lock
        default_distribution: None, "even" or "weighted"

    Example:
        >>> config = EngineConfig(seed=7, lock_dir=Path("locks"))
    """

    seed: Optional[int] = None
    time_limit_seconds: int = SCORING_THRESHOLDS.time_limit_seconds
    lock_dir: Optional[Path] = None
    lock_timeout: float = 10.0
    default_distribution: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.time_limit_seconds <= 0:
            raise ValueError(f"time_limit_seconds must be positive: {self.time_limit_seconds}")
        if self.lock_timeout < 0:
            raise ValueError(f"lock_timeout must be non-negative: {self.lock_timeout}")
        validate_strategy(self.default_distribution)
        if self.lock_dir is not None and not isinstance(self.lock_dir, Path):
            object.__setattr__(self, "lock_dir", Path(self.lock_dir))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """
        Build from a camelCase or snake_case dictionary.

        Unknown keys are ignored.
        """
        def pick(snake: str, camel: str, default: Any) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        lock_dir = pick("lock_dir", "lockDir", None)
        return cls(
            seed=pick("seed", "seed", None),
            time_limit_seconds=pick(
                "time_limit_seconds", "timeLimitSeconds", SCORING_THRESHOLDS.time_limit_seconds
            ),
            lock_dir=Path(lock_dir) if lock_dir else None,
            lock_timeout=pick("lock_timeout", "lockTimeout", 10.0),
            default_distribution=pick("default_distribution", "defaultDistribution", None),
        )


def load_config(path: Path) -> EngineConfig:
    """
    Load an EngineConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON is invalid or a value fails validation
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    config = EngineConfig.from_dict(data)
    logger.info(f"Loaded engine config from {path.name}")
    return config
