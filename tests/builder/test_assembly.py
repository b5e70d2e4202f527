"""
Unit tests for set payload assembly.
"""

import pytest

from conftest import make_recipe, make_record
from trivia_toolkit.builder.assembly import build_set_payload, difficulty_level, set_difficulty


class TestDifficulty:
    """Tests for difficulty mapping."""

    @pytest.mark.parametrize("label,level", [
        ("easy", 1), ("Medium", 2), ("HARD", 3), ("expert", 2), (None, 2),
    ])
    def test_difficulty_level(self, label, level):
        assert difficulty_level(label) == level

    def test_set_difficulty_when_mostly_easy_then_easy(self):
        records = [make_record(i, difficulty="easy") for i in range(3)]
        assert set_difficulty(records) == "easy"

    def test_set_difficulty_when_mixed_then_medium(self):
        records = [make_record(1, difficulty="easy"), make_record(2, difficulty="hard")]
        assert set_difficulty(records) == "medium"

    def test_set_difficulty_when_mostly_hard_then_hard(self):
        records = [make_record(i, difficulty="hard") for i in range(3)] + [
            make_record(9, difficulty="medium")
        ]
        assert set_difficulty(records) == "hard"

    def test_set_difficulty_ignores_unrecognised(self):
        records = [make_record(1, difficulty="easy"), make_record(2, difficulty="???")]
        assert set_difficulty(records) == "easy"

    def test_set_difficulty_when_none_recognised_then_medium(self):
        assert set_difficulty([make_record(1, difficulty=None)]) == "medium"


class TestBuildSetPayload:
    """Tests for build_set_payload."""

    def test_payload_metadata(self, now):
        recipe = make_recipe(category="Premier League Players", theme="Legends")
        selected = [make_record(7, difficulty="hard"), make_record(3, difficulty="easy")]

        payload = build_set_payload(recipe, selected, now)

        assert payload.title == "Players Weekly - 2025-03-14"
        assert payload.slug == f"premier-league-players-{int(now.timestamp() * 1000)}"
        assert payload.description == "Set built from recipe: Players Weekly"
        assert payload.theme == "Legends"
        assert payload.recipe_id == 1
        assert payload.source_ids == (7, 3)

    def test_payload_questions_keep_selection_order_and_score(self, now):
        selected = [make_record(7, difficulty="hard"), make_record(3, difficulty="easy")]

        payload = build_set_payload(make_recipe(), selected, now, time_limit=45)

        first, second = payload.questions
        assert first.question_id == "q-7-0"
        assert second.question_id == "q-3-1"
        assert (first.difficulty, first.points) == (3, 30)
        assert (second.difficulty, second.points) == (1, 10)
        assert first.time_limit == 45
        assert payload.to_dict()["question_count"] == 2

    def test_payload_uses_recipe_description_when_set(self, now):
        recipe = make_recipe(description="Weekly quiz")

        payload = build_set_payload(recipe, [make_record(1)], now)

        assert payload.description == "Weekly quiz"
