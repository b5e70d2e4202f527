"""
Schema Validation Utilities

Validates wire dictionaries against the bundled JSON schemas.

Structural checks (required keys, types, enums, numeric bounds) live in
the ``*.schema.json`` files and run through jsonschema. Cross-field rules
(``min <= default <= max``) are not expressible there and live in
``recipes.validation``.

Every violation is reported, not just the first one, so a form can
highlight all offending inputs in one round trip.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

import jsonschema

from trivia_toolkit.errors import FieldError


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def _field_path(error: jsonschema.ValidationError) -> str:
    """Dotted path for an error; required-property errors point at the missing key."""
    parts = [str(p) for p in error.absolute_path]
    if error.validator == "required":
        missing = _missing_property(error)
        if missing:
            parts.append(missing)
    return ".".join(parts) or "$"


def _missing_property(error: jsonschema.ValidationError) -> str:
    # Message format: "'name' is a required property"
    message = error.message
    if message.startswith("'") and "' is a required property" in message:
        return message[1:message.index("' is a required property")]
    return ""


def _friendly_message(error: jsonschema.ValidationError, path: str) -> str:
    if error.validator == "required":
        return f"{path} is required"
    if error.validator == "minItems" and path == "questionTypes":
        return "At least one question type is required"
    if error.validator in ("minimum", "maximum"):
        return f"{path} {error.message}"
    return error.message


def schema_errors(data: Any, schema_name: str) -> List[FieldError]:
    """
    Collect all schema violations for a payload.

    Args:
        data: Decoded JSON payload
        schema_name: Schema file stem, e.g. "recipe" or "candidate"

    Returns:
        FieldError list ordered by field path (empty when valid)
    """
    schema = _load_schema(schema_name)
    validator = jsonschema.Draft7Validator(schema)
    errors: List[FieldError] = []
    for error in validator.iter_errors(data):
        path = _field_path(error)
        errors.append(FieldError(path, _friendly_message(error, path)))
    errors.sort(key=lambda e: e.field)
    return errors


def validate_recipe_schema(data: Any) -> List[FieldError]:
    """Structural validation of a recipe payload."""
    return schema_errors(data, "recipe")


def validate_candidate_schema(data: Any) -> List[FieldError]:
    """Structural validation of a stored question record."""
    return schema_errors(data, "candidate")
