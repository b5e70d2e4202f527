"""
Utilities Package

Serialization helpers for core models.
"""

from .serialization import (
    parse_timestamp,
    format_timestamp,
    recipe_to_dict,
    recipe_from_dict,
    candidate_to_dict,
    candidate_from_dict,
)

__all__ = [
    "parse_timestamp",
    "format_timestamp",
    "recipe_to_dict",
    "recipe_from_dict",
    "candidate_to_dict",
    "candidate_from_dict",
]
