"""
Module: recipes.forms

Purpose:
    Convert between flat editor form data and recipe payloads.

Key Classes:
    - RecipeFormData: Flat form fields as an editor submits them

Key Functions:
    - parse_recipe_form(): Form -> create payload
    - parse_recipe_update_form(): Partial form -> partial update payload
    - apply_recipe_update(): Merge an update into a Recipe (validated)
    - format_recipe_for_display(): Multi-line human summary
    - recipe_to_form_data(): Recipe -> form fields for editing

Used By:
    - Recipe editor front ends, via the trivia_toolkit.recipes exports
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from trivia_toolkit.common import QUANTITY_THRESHOLDS
from trivia_toolkit.core.models import QuestionType, Recipe, determine_bag_type
from trivia_toolkit.core.utils import recipe_to_dict

from .validation import build_recipe

logger = logging.getLogger(__name__)


@dataclass
class RecipeFormData:
    """
    Flat recipe fields as submitted by an editor form.

    question_types holds checkbox values, canonical or short aliases.
    """

    name: str
    category: str
    question_types: List[str] = field(default_factory=list)
    quantity_min: int = QUANTITY_THRESHOLDS.update_default_min
    quantity_max: int = QUANTITY_THRESHOLDS.update_default_max
    quantity_default: int = QUANTITY_THRESHOLDS.update_default_default
    cooldown_days: Optional[int] = None
    cooldown_enabled: bool = False
    execution_mode: str = "auto"
    description: Optional[str] = None
    theme: Optional[str] = None


def _normalize_types(labels: Iterable[str]) -> List[str]:
    # Unknown labels are dropped
    resolved = (QuestionType.from_label(label) for label in labels)
    return [qtype.value for qtype in resolved if qtype is not None]


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def _with_bag_type(types: List[str]) -> Dict[str, Any]:
    if not types:
        return {"questionTypes": types}
    bag = determine_bag_type([QuestionType(t) for t in types])
    return {"questionTypes": types, "bagType": bag.value}


def parse_recipe_form(form: RecipeFormData) -> Dict[str, Any]:
    """
    Build a create payload from form data.

    Strings are trimmed, type aliases resolved and the bag type derived.
    The payload still needs validation (see build_recipe).
    """
    return {
        "name": form.name.strip(),
        "description": _optional_text(form.description),
        "category": form.category.strip(),
        "theme": _optional_text(form.theme),
        **_with_bag_type(_normalize_types(form.question_types)),
        "quantity": {
            "min": form.quantity_min,
            "max": form.quantity_max,
            "default": form.quantity_default,
        },
        "cooldown": {
            "enabled": form.cooldown_enabled,
            "days": form.cooldown_days,
        },
        "selectionMethod": "random",
        "executionMode": form.execution_mode,
    }


def parse_recipe_update_form(partial: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build a partial update payload from the fields present in partial.

    Keys follow RecipeFormData attribute names. When any quantity field is
    present the missing ones default to 1/20/10; when any cooldown field is
    present a missing enabled flag defaults to True.
    """
    update: Dict[str, Any] = {}

    for key in ("name", "category"):
        if key in partial:
            update[key] = partial[key].strip()
    for key in ("description", "theme"):
        if key in partial:
            update[key] = _optional_text(partial[key])

    if "question_types" in partial:
        update.update(_with_bag_type(_normalize_types(partial["question_types"])))

    if any(k in partial for k in ("quantity_min", "quantity_max", "quantity_default")):
        t = QUANTITY_THRESHOLDS
        update["quantity"] = {
            "min": partial.get("quantity_min", t.update_default_min),
            "max": partial.get("quantity_max", t.update_default_max),
            "default": partial.get("quantity_default", t.update_default_default),
        }

    if "cooldown_days" in partial or "cooldown_enabled" in partial:
        update["cooldown"] = {
            "days": partial.get("cooldown_days"),
            "enabled": partial.get("cooldown_enabled", True),
        }

    if "execution_mode" in partial:
        update["executionMode"] = partial["execution_mode"]

    return update


def apply_recipe_update(recipe: Recipe, update: Mapping[str, Any], now: datetime) -> Recipe:
    """
    Merge an update payload into a recipe.

    Usage stats and audit fields are kept; updated_at becomes now.

    Raises:
        RecipeValidationError: If the merged payload is invalid
    """
    merged = {**recipe_to_dict(recipe), **update}
    merged.pop("bagType", None)
    updated = build_recipe(merged)
    logger.info(f"Updated recipe {recipe.id!r} ({', '.join(sorted(update)) or 'no fields'})")
    return Recipe(
        id=recipe.id,
        name=updated.name,
        category=updated.category,
        question_types=updated.question_types,
        quantity=updated.quantity,
        cooldown=updated.cooldown,
        execution_mode=updated.execution_mode,
        theme=updated.theme,
        description=updated.description,
        selection_method=updated.selection_method,
        usage_count=recipe.usage_count,
        last_used_at=recipe.last_used_at,
        created_at=recipe.created_at,
        updated_at=now,
        created_by=recipe.created_by,
        deleted_at=recipe.deleted_at,
    )


def format_recipe_for_display(recipe: Recipe) -> str:
    """Multi-line summary; the theme line is present only when a theme is set."""
    types = ", ".join(t.display_label for t in recipe.question_types)
    cooldown = f"{recipe.cooldown.days} days" if recipe.cooldown.enabled else "No cooldown"
    mode = "Automated" if recipe.execution_mode.value == "auto" else "Manual"
    q = recipe.quantity

    lines = [recipe.name, f"Category: {recipe.category}"]
    if recipe.theme:
        lines.append(f"Theme: {recipe.theme}")
    lines.extend([
        f"Types: {types}",
        f"Quantity: {q.min}-{q.max} (default: {q.default})",
        f"Cooldown: {cooldown}",
        f"Mode: {mode}",
    ])
    return "\n".join(lines)


def recipe_to_form_data(recipe: Recipe) -> RecipeFormData:
    return RecipeFormData(
        name=recipe.name,
        description=recipe.description or "",
        category=recipe.category,
        theme=recipe.theme or "",
        question_types=[t.value for t in recipe.question_types],
        quantity_min=recipe.quantity.min,
        quantity_max=recipe.quantity.max,
        quantity_default=recipe.quantity.default,
        cooldown_days=recipe.cooldown.days,
        cooldown_enabled=recipe.cooldown.enabled,
        execution_mode=recipe.execution_mode.value,
    )
