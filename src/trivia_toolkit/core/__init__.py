"""
Trivia Toolkit Core Package

Shared data models, schema validation and serialization used by both the
parsing path (raw text -> ParsedQuestion) and the assembly path
(Recipe -> persisted set).

**CONVENTIONS:**

1. **Immutable Data Models**
   - Frozen dataclasses; new instances are created for any change

2. **Calculated Labels (Never Stored)**
   - ``Recipe.bag_type`` is always derived from ``question_types``

3. **Wire Format**
   - camelCase dictionaries at the store/caller boundary, converted in
     ``core.utils.serialization``
"""

from .models import (
    QuestionType,
    ParsedQuestion,
    CandidateRecord,
    Recipe,
    QuantityRange,
    Cooldown,
)

__all__ = [
    "QuestionType",
    "ParsedQuestion",
    "CandidateRecord",
    "Recipe",
    "QuantityRange",
    "Cooldown",
]
