"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    schema_errors,
    validate_recipe_schema,
    validate_candidate_schema,
)

__all__ = [
    "schema_errors",
    "validate_recipe_schema",
    "validate_candidate_schema",
]
