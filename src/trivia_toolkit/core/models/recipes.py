"""
Module: recipes

Purpose:
    Provides the Recipe dataclass and its value objects. A recipe is a
    persisted policy describing what a future trivia set should look like:
    category, allowed question types, quantity bounds, cooldown window and
    execution mode.

Key Functions:
    - determine_bag_type(): Derive the bag label from question types
    - Recipe.bag_type: Calculated, never stored on the instance
    - Recipe.clamp_quantity(): Clamp a requested quantity into [min, max]
    - Recipe.record_usage(): New instance with bumped usage stats
    - Recipe.soft_delete(): New instance marked as archived

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .questions.QuestionType

Used By:
    - recipes.validation: Builds recipes from validated payloads
    - builder.controller: Execution orchestration
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

from trivia_toolkit.common.thresholds import QUANTITY_THRESHOLDS

from .questions import QuestionType


class BagType(str, Enum):
    """Label derived from a recipe's question types (descriptive only)."""

    CATEGORY_BOUND_MC = "category-bound-mc"
    CATEGORY_BOUND_TF = "category-bound-tf"
    CATEGORY_BOUND_MIX = "category-bound-mix"


class ExecutionMode(str, Enum):
    AUTO = "auto"
    MANUAL = "manual"


SELECTION_METHOD_RANDOM = "random"


def determine_bag_type(question_types: Sequence[QuestionType]) -> BagType:
    """
    Derive the bag type from selected question types.

    - Only multiple-choice -> category-bound-mc
    - Only true-false -> category-bound-tf
    - Who-am-i alone or several types -> category-bound-mix

    Raises:
        ValueError: If question_types is empty
    """
    if not question_types:
        raise ValueError("At least one question type is required")
    if len(question_types) == 1:
        if question_types[0] is QuestionType.MULTIPLE_CHOICE:
            return BagType.CATEGORY_BOUND_MC
        if question_types[0] is QuestionType.TRUE_FALSE:
            return BagType.CATEGORY_BOUND_TF
    return BagType.CATEGORY_BOUND_MIX


@dataclass(frozen=True)
class QuantityRange:
    """
    Quantity bounds for one execution.

    Invariants:
        - 1 <= min <= default <= max <= 20
    """

    min: int
    max: int
    default: int

    def __post_init__(self) -> None:
        lo = QUANTITY_THRESHOLDS.min_quantity
        hi = QUANTITY_THRESHOLDS.max_quantity
        if not lo <= self.min <= hi:
            raise ValueError(f"quantity.min must be between {lo} and {hi}: {self.min}")
        if not lo <= self.max <= hi:
            raise ValueError(f"quantity.max must be between {lo} and {hi}: {self.max}")
        if not self.min <= self.default <= self.max:
            raise ValueError(
                f"quantity.default ({self.default}) must be between "
                f"quantity.min ({self.min}) and quantity.max ({self.max})"
            )

    def clamp(self, value: int) -> int:
        return min(max(value, self.min), self.max)


@dataclass(frozen=True)
class Cooldown:
    """
    Re-selection cooldown window.

    A disabled cooldown, or one without days, excludes nothing.
    """

    enabled: bool = False
    days: Optional[int] = None

    def __post_init__(self) -> None:
        if self.days is not None and self.days < 0:
            raise ValueError(f"cooldown.days must be non-negative: {self.days}")

    @property
    def is_active(self) -> bool:
        """True when the window can exclude anything."""
        return self.enabled and bool(self.days)


@dataclass(frozen=True)
class RecipeUsage:
    """Usage statistics written back to the store after a successful execution."""

    usage_count: int
    last_used_at: datetime


@dataclass(frozen=True)
class Recipe:
    """
    Saved policy for assembling one trivia set (immutable).

    Attributes:
        id: Store identifier (None for inline, unsaved recipes)
        name: Display name
        category: Exact-match filter for candidate records
        question_types: Allowed dialects, non-empty and distinct
        quantity: Quantity bounds
        cooldown: Re-selection cooldown
        execution_mode: auto or manual
        theme: Reference only, never filters
        description: Optional free text
        selection_method: Always "random"
        usage_count: Number of successful executions
        last_used_at: Time of the latest successful execution
        created_at / updated_at / created_by: Audit fields
        deleted_at: Soft-delete marker

    Example:
        >>> recipe = Recipe(
        ...     id=1,
        ...     name="Players Weekly",
        ...     category="Players",
        ...     question_types=(QuestionType.MULTIPLE_CHOICE,),
        ...     quantity=QuantityRange(min=5, max=15, default=10),
        ... )
        >>> recipe.bag_type
        <BagType.CATEGORY_BOUND_MC: 'category-bound-mc'>
    """

    id: Any
    name: str
    category: str
    question_types: Tuple[QuestionType, ...]
    quantity: QuantityRange
    cooldown: Cooldown = field(default_factory=Cooldown)
    execution_mode: ExecutionMode = ExecutionMode.AUTO
    theme: Optional[str] = None
    description: Optional[str] = None
    selection_method: str = SELECTION_METHOD_RANDOM
    usage_count: int = 0
    last_used_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate recipe on construction."""
        if not self.name or not self.name.strip():
            raise ValueError("name is required")
        if not self.category or not self.category.strip():
            raise ValueError("category is required")
        if not self.question_types:
            raise ValueError("At least one question type is required")
        if len(set(self.question_types)) != len(self.question_types):
            raise ValueError(f"question_types must be distinct: {self.question_types}")
        if self.usage_count < 0:
            raise ValueError(f"usage_count must be non-negative: {self.usage_count}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def bag_type(self) -> BagType:
        return determine_bag_type(self.question_types)

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    @property
    def primary_type(self) -> QuestionType:
        """First selected question type; decides which set family is written."""
        return self.question_types[0]

    def clamp_quantity(self, requested: Optional[int] = None) -> int:
        """
        Resolve the target quantity for an execution.

        Args:
            requested: Optional override; None or 0 falls back to
                quantity.default

        Returns:
            Value clamped into [quantity.min, quantity.max]
        """
        if not requested:
            requested = self.quantity.default
        return self.quantity.clamp(requested)

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle (new instances only)
    # ─────────────────────────────────────────────────────────────────────────

    def usage_after_execution(self, now: datetime) -> RecipeUsage:
        return RecipeUsage(usage_count=self.usage_count + 1, last_used_at=now)

    def record_usage(self, now: datetime) -> "Recipe":
        usage = self.usage_after_execution(now)
        return replace(self, usage_count=usage.usage_count, last_used_at=usage.last_used_at)

    def soft_delete(self, now: datetime) -> "Recipe":
        return replace(self, deleted_at=now, updated_at=now)
