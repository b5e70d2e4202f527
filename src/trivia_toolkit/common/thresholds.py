"""Centralized threshold and magic number configuration.

This module contains the hardcoded limits, ratios and magic numbers used
throughout parsing and set assembly. Having these in one place makes tuning
easier and documents why each value was chosen.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class QuantityThresholds:
    """Bounds for recipe quantity ranges."""

    min_quantity: int = 1  # Smallest set a recipe may request
    max_quantity: int = 20  # Largest set a recipe may request
    update_default_min: int = 1  # Fill value when a partial form omits min
    update_default_max: int = 20  # Fill value when a partial form omits max
    update_default_default: int = 10  # Fill value when a partial form omits default


@dataclass
class ScoringThresholds:
    """Difficulty scoring used when assembling set payloads."""

    easy_level: int = 1
    medium_level: int = 2
    hard_level: int = 3
    points_per_level: int = 10  # Easy=10, Medium=20, Hard=30
    time_limit_seconds: int = 30  # Per-question answer window

    # Set difficulty is the mean question level, bucketed
    easy_set_max_mean: float = 1.3
    medium_set_max_mean: float = 2.3


@dataclass
class UsageThresholds:
    """Reporting windows for category usage statistics."""

    recent_short_days: int = 7
    recent_long_days: int = 30


# Global instances for easy import
QUANTITY_THRESHOLDS = QuantityThresholds()
SCORING_THRESHOLDS = ScoringThresholds()
USAGE_THRESHOLDS = UsageThresholds()
