"""
Module: recipes.validation

Purpose:
    Field-level validation for recipe payloads. Structural checks run
    through the bundled JSON schema; cross-field rules live here.

Key Functions:
    - validate_recipe_input(): All FieldErrors for a payload (empty = valid)
    - build_recipe(): Validate and construct a Recipe

Rules beyond the schema:
    - name and category must not be blank after trimming
    - questionTypes must be distinct
    - quantity.min <= quantity.max
    - quantity.default within [min, max]

Used By:
    - recipes.forms: Update path
    - builder.controller: Inline recipe execution
    - engine.TriviaEngine.validate_recipe
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from trivia_toolkit.core.models import QuestionType, Recipe
from trivia_toolkit.core.schemas import validate_recipe_schema
from trivia_toolkit.core.utils import recipe_from_dict
from trivia_toolkit.errors import FieldError, RecipeValidationError

logger = logging.getLogger(__name__)


def normalize_question_types(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of the payload with short type aliases (TMC/TFT/WAI)
    replaced by canonical values. Unknown labels are left for the schema
    to report.
    """
    labels = data.get("questionTypes")
    if not isinstance(labels, list):
        return dict(data)
    normalized = []
    for label in labels:
        qtype = QuestionType.from_label(label) if isinstance(label, str) else None
        normalized.append(qtype.value if qtype else label)
    return {**data, "questionTypes": normalized}


def _semantic_errors(data: Dict[str, Any]) -> List[FieldError]:
    errors: List[FieldError] = []

    for key in ("name", "category"):
        value = data.get(key)
        if isinstance(value, str) and not value.strip():
            errors.append(FieldError(key, f"{key} is required"))

    types = data.get("questionTypes")
    if isinstance(types, list) and len(set(map(str, types))) != len(types):
        errors.append(FieldError("questionTypes", "Question types must be distinct"))

    quantity = data.get("quantity")
    if isinstance(quantity, dict):
        lo, hi, default = quantity.get("min"), quantity.get("max"), quantity.get("default")
        if all(isinstance(v, int) and not isinstance(v, bool) for v in (lo, hi, default)):
            if lo > hi:
                errors.append(FieldError("quantity.min", "Minimum must not exceed maximum"))
            elif not lo <= default <= hi:
                errors.append(
                    FieldError("quantity.default", "Default must be between minimum and maximum")
                )
    return errors


def validate_recipe_input(data: Any) -> List[FieldError]:
    """
    Validate a recipe payload.

    Args:
        data: camelCase recipe dictionary

    Returns:
        Every FieldError found, ordered by field (empty when valid)

    Example:
        >>> validate_recipe_input({"name": "x", "category": "Players",
        ...     "questionTypes": ["TMC"], "quantity": {"min": 5, "max": 3, "default": 4}})
        [FieldError(field='quantity.min', message='Minimum must not exceed maximum')]
    """
    if not isinstance(data, dict):
        return [FieldError("$", "Recipe payload must be an object")]
    normalized = normalize_question_types(data)
    errors = validate_recipe_schema(normalized) + _semantic_errors(normalized)
    errors.sort(key=lambda e: e.field)
    return errors


def build_recipe(data: Any) -> Recipe:
    """
    Validate a payload and construct the Recipe.

    Raises:
        RecipeValidationError: With every field error found
    """
    errors = validate_recipe_input(data)
    if errors:
        logger.info(f"Recipe payload rejected with {len(errors)} field errors")
        raise RecipeValidationError(errors)
    try:
        return recipe_from_dict(normalize_question_types(data))
    except (KeyError, ValueError) as e:
        raise RecipeValidationError([FieldError("$", str(e))]) from e
