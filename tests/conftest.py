import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add src to sys.path so we can import trivia_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from trivia_toolkit.builder.store import InMemoryRecordStore  # noqa: E402
from trivia_toolkit.core.models import (  # noqa: E402
    CandidateRecord,
    Cooldown,
    QuantityRange,
    QuestionType,
    Recipe,
)


NOW = datetime(2025, 3, 14, 12, 0, tzinfo=timezone.utc)


# Common test fixtures
@pytest.fixture
def now() -> datetime:
    """Fixed execution time."""
    return NOW


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


def make_record(
    record_id,
    category="Players",
    question_type=QuestionType.MULTIPLE_CHOICE,
    difficulty="medium",
    used_days_ago=None,
) -> CandidateRecord:
    """Build a candidate record, optionally used N days before NOW."""
    stamps = ()
    if used_days_ago is not None:
        stamps = (NOW - timedelta(days=used_days_ago),)
    wrong = ("w1", "w2", "w3") if question_type == QuestionType.MULTIPLE_CHOICE else ()
    return CandidateRecord(
        id=record_id,
        category=category,
        question_type=question_type,
        question_text=f"Question {record_id}?",
        correct_answer=f"Answer {record_id}",
        wrong_answers=wrong,
        difficulty=difficulty,
        last_used_timestamps=stamps,
    )


def make_recipe(
    recipe_id=1,
    question_types=(QuestionType.MULTIPLE_CHOICE,),
    quantity=(5, 15, 10),
    cooldown_days=7,
    **overrides,
) -> Recipe:
    lo, hi, default = quantity
    fields = dict(
        id=recipe_id,
        name="Players Weekly",
        category="Players",
        question_types=tuple(question_types),
        quantity=QuantityRange(min=lo, max=hi, default=default),
        cooldown=Cooldown(enabled=cooldown_days is not None, days=cooldown_days),
    )
    fields.update(overrides)
    return Recipe(**fields)


@pytest.fixture
def players_recipe() -> Recipe:
    """Players, multiple-choice, quantity 5/15/10, 7-day cooldown."""
    return make_recipe()


@pytest.fixture
def store(players_recipe) -> InMemoryRecordStore:
    """Store holding the players recipe and no records."""
    return InMemoryRecordStore(recipes=[players_recipe])


@pytest.fixture
def recipe_payload() -> dict:
    """Valid camelCase recipe payload."""
    return {
        "name": "Players Weekly",
        "category": "Players",
        "theme": "Legends",
        "questionTypes": ["multiple-choice"],
        "quantity": {"min": 5, "max": 15, "default": 10},
        "cooldown": {"enabled": True, "days": 7},
        "executionMode": "auto",
    }
