"""
Recipes Package

Validation and form handling for recipe payloads.
"""

from .validation import validate_recipe_input, build_recipe, normalize_question_types
from .forms import (
    RecipeFormData,
    parse_recipe_form,
    parse_recipe_update_form,
    apply_recipe_update,
    format_recipe_for_display,
    recipe_to_form_data,
)

__all__ = [
    "validate_recipe_input",
    "build_recipe",
    "normalize_question_types",
    "RecipeFormData",
    "parse_recipe_form",
    "parse_recipe_update_form",
    "apply_recipe_update",
    "format_recipe_for_display",
    "recipe_to_form_data",
]
