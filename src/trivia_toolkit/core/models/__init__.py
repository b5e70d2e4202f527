"""
Core Models Package

Immutable, validated data models shared by the parsing and assembly paths.

All models in this package are frozen dataclasses. Lifecycle changes
(usage stats, soft delete) produce new instances via ``dataclasses.replace``.
"""

from .questions import (
    QuestionType,
    ParsedQuestion,
    CandidateRecord,
    canonical_difficulty,
)
from .recipes import (
    BagType,
    ExecutionMode,
    QuantityRange,
    Cooldown,
    Recipe,
    RecipeUsage,
    determine_bag_type,
)
from .results import ParseResult, ExecutionResult, PreviewResult, CategoryStats
from .sets import SetQuestion, SetPayload

__all__ = [
    "QuestionType",
    "ParsedQuestion",
    "CandidateRecord",
    "canonical_difficulty",
    "BagType",
    "ExecutionMode",
    "QuantityRange",
    "Cooldown",
    "Recipe",
    "RecipeUsage",
    "determine_bag_type",
    "ParseResult",
    "ExecutionResult",
    "PreviewResult",
    "CategoryStats",
    "SetQuestion",
    "SetPayload",
]
