"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    QUANTITY_THRESHOLDS,
    SCORING_THRESHOLDS,
    USAGE_THRESHOLDS,
    QuantityThresholds,
    ScoringThresholds,
    UsageThresholds,
)
from .slugs import slugify

__all__ = [
    # thresholds
    "QUANTITY_THRESHOLDS",
    "SCORING_THRESHOLDS",
    "USAGE_THRESHOLDS",
    "QuantityThresholds",
    "ScoringThresholds",
    "UsageThresholds",
    # slugs
    "slugify",
]
