"""
Serialization Utilities

Provides to/from dictionary conversion for the core models at the store
and caller boundary.

Wire dictionaries use camelCase keys (``questionTypes``, ``usageCount``)
and ISO-8601 timestamps. Models use snake_case and timezone-aware
datetimes. Naive timestamps are read as UTC.

``bagType`` is written for consumers but ignored on read: it is always
re-derived from ``questionTypes``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..models.questions import CandidateRecord, QuestionType
from ..models.recipes import Cooldown, ExecutionMode, QuantityRange, Recipe


# ─────────────────────────────────────────────────────────────────────────────
# Timestamps
# ─────────────────────────────────────────────────────────────────────────────

def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 string (or pass through a datetime).

    Args:
        value: ISO string like "2025-01-15T10:00:00Z", a datetime, or None

    Returns:
        Timezone-aware datetime, or None for empty input

    Raises:
        ValueError: If the string is not ISO-8601
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


# ─────────────────────────────────────────────────────────────────────────────
# Recipe Serialization
# ─────────────────────────────────────────────────────────────────────────────

def recipe_to_dict(recipe: Recipe) -> Dict[str, Any]:
    """
    Serialize a Recipe to a camelCase dictionary.

    Returns:
        Dictionary that passes the recipe schema
    """
    return {
        "id": recipe.id,
        "name": recipe.name,
        "description": recipe.description,
        "category": recipe.category,
        "theme": recipe.theme,
        "questionTypes": [t.value for t in recipe.question_types],
        "bagType": recipe.bag_type.value,
        "quantity": {
            "min": recipe.quantity.min,
            "max": recipe.quantity.max,
            "default": recipe.quantity.default,
        },
        "cooldown": {
            "enabled": recipe.cooldown.enabled,
            "days": recipe.cooldown.days,
        },
        "selectionMethod": recipe.selection_method,
        "executionMode": recipe.execution_mode.value,
        "usageCount": recipe.usage_count,
        "lastUsedAt": format_timestamp(recipe.last_used_at),
        "createdAt": format_timestamp(recipe.created_at),
        "updatedAt": format_timestamp(recipe.updated_at),
        "createdBy": recipe.created_by,
        "deletedAt": format_timestamp(recipe.deleted_at),
    }


def recipe_from_dict(data: Dict[str, Any]) -> Recipe:
    """
    Deserialize a Recipe from a camelCase dictionary.

    The payload is expected to be validated already
    (see ``recipes.validation.build_recipe``).

    Raises:
        ValueError: If a value violates a model invariant
        KeyError: If a required key is missing
    """
    question_types = []
    for label in data["questionTypes"]:
        qtype = QuestionType.from_label(label)
        if qtype is None:
            raise ValueError(f"Unknown question type: {label!r}")
        question_types.append(qtype)

    quantity = data["quantity"]
    cooldown = data.get("cooldown") or {}

    return Recipe(
        id=data.get("id"),
        name=data["name"].strip(),
        description=_optional_text(data.get("description")),
        category=data["category"].strip(),
        theme=_optional_text(data.get("theme")),
        question_types=tuple(question_types),
        quantity=QuantityRange(
            min=quantity["min"],
            max=quantity["max"],
            default=quantity["default"],
        ),
        cooldown=Cooldown(
            enabled=bool(cooldown.get("enabled", False)),
            days=cooldown.get("days"),
        ),
        execution_mode=ExecutionMode(data.get("executionMode") or ExecutionMode.AUTO.value),
        selection_method=data.get("selectionMethod") or "random",
        usage_count=data.get("usageCount") or 0,
        last_used_at=parse_timestamp(data.get("lastUsedAt")),
        created_at=parse_timestamp(data.get("createdAt")),
        updated_at=parse_timestamp(data.get("updatedAt")),
        created_by=data.get("createdBy"),
        deleted_at=parse_timestamp(data.get("deletedAt")),
    )


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


# ─────────────────────────────────────────────────────────────────────────────
# Candidate Serialization
# ─────────────────────────────────────────────────────────────────────────────

def candidate_to_dict(record: CandidateRecord) -> Dict[str, Any]:
    return {
        "id": record.id,
        "category": record.category,
        "questionType": record.question_type.value,
        "questionText": record.question_text,
        "correctAnswer": record.correct_answer,
        "wrongAnswers": list(record.wrong_answers),
        "tags": list(record.tags),
        "difficulty": record.difficulty,
        "explanation": record.explanation,
        "lastUsedTimestamps": [format_timestamp(t) for t in record.last_used_timestamps],
    }


def candidate_from_dict(data: Dict[str, Any]) -> CandidateRecord:
    """
    Deserialize a stored question record.

    Raises:
        ValueError: If questionType is unknown or a timestamp is malformed
    """
    qtype = QuestionType.from_label(data["questionType"])
    if qtype is None:
        raise ValueError(f"Unknown question type: {data['questionType']!r}")
    return CandidateRecord(
        id=data["id"],
        category=data["category"],
        question_type=qtype,
        question_text=data.get("questionText", ""),
        correct_answer=data.get("correctAnswer", ""),
        wrong_answers=tuple(data.get("wrongAnswers") or ()),
        tags=tuple(data.get("tags") or ()),
        difficulty=data.get("difficulty"),
        explanation=data.get("explanation"),
        last_used_timestamps=tuple(
            parse_timestamp(t) for t in data.get("lastUsedTimestamps") or ()
        ),
    )
