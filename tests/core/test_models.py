"""
Unit Tests for Core Models

Tests for question types, recipes and result dataclasses.
"""

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from conftest import make_recipe
from trivia_toolkit.core.models import (
    BagType,
    Cooldown,
    ExecutionResult,
    ParsedQuestion,
    QuantityRange,
    QuestionType,
    canonical_difficulty,
    determine_bag_type,
)
from trivia_toolkit.errors import (
    FieldError,
    InsufficientCandidatesError,
    RecipeValidationError,
    StoreError,
)


class TestQuestionType:
    """Tests for QuestionType labels."""

    @pytest.mark.parametrize("label,expected", [
        ("TMC", QuestionType.MULTIPLE_CHOICE),
        ("TFT", QuestionType.TRUE_FALSE),
        ("WAI", QuestionType.WHO_AM_I),
        ("true-false", QuestionType.TRUE_FALSE),
    ])
    def test_from_label_when_alias_or_value_then_resolves(self, label, expected):
        assert QuestionType.from_label(label) is expected

    def test_from_label_when_unknown_then_returns_none(self):
        assert QuestionType.from_label("essay") is None

    def test_wrong_answer_count_per_dialect(self):
        assert QuestionType.MULTIPLE_CHOICE.wrong_answer_count == 3
        assert QuestionType.TRUE_FALSE.wrong_answer_count == 1
        assert QuestionType.WHO_AM_I.wrong_answer_count == 0

    def test_canonical_difficulty_when_mixed_case_then_title_case(self):
        assert canonical_difficulty(" hard ") == "Hard"
        assert canonical_difficulty("impossible") is None


class TestParsedQuestion:
    """Tests for ParsedQuestion invariants."""

    def test_init_when_mc_with_two_wrong_answers_then_raises(self):
        with pytest.raises(ValueError, match="requires 3 wrong answers"):
            ParsedQuestion(
                question_text="Q?",
                correct_answer="A",
                question_type=QuestionType.MULTIPLE_CHOICE,
                wrong_answers=("B", "C"),
            )

    def test_init_when_empty_answer_then_raises(self):
        with pytest.raises(ValueError, match="correct_answer"):
            ParsedQuestion(question_text="Q?", correct_answer="", question_type=QuestionType.WHO_AM_I)

    def test_to_dict_uses_camel_case(self):
        question = ParsedQuestion(
            question_text="I am a striker.",
            correct_answer="Pele",
            question_type=QuestionType.WHO_AM_I,
            tags=("brazil",),
        )

        data = question.to_dict()

        assert data["questionType"] == "who-am-i"
        assert data["correctAnswer"] == "Pele"
        assert data["wrongAnswers"] == []
        assert data["tags"] == ["brazil"]


class TestBagType:
    """Tests for determine_bag_type."""

    def test_when_only_mc_then_category_bound_mc(self):
        assert determine_bag_type([QuestionType.MULTIPLE_CHOICE]) is BagType.CATEGORY_BOUND_MC

    def test_when_only_tf_then_category_bound_tf(self):
        assert determine_bag_type([QuestionType.TRUE_FALSE]) is BagType.CATEGORY_BOUND_TF

    def test_when_only_who_am_i_then_mix(self):
        assert determine_bag_type([QuestionType.WHO_AM_I]) is BagType.CATEGORY_BOUND_MIX

    def test_when_several_types_then_mix(self):
        types = [QuestionType.MULTIPLE_CHOICE, QuestionType.TRUE_FALSE]
        assert determine_bag_type(types) is BagType.CATEGORY_BOUND_MIX

    def test_when_empty_then_raises(self):
        with pytest.raises(ValueError):
            determine_bag_type([])


class TestQuantityRange:
    """Tests for QuantityRange bounds."""

    def test_init_when_default_above_max_then_raises(self):
        with pytest.raises(ValueError):
            QuantityRange(min=5, max=10, default=12)

    def test_init_when_max_above_twenty_then_raises(self):
        with pytest.raises(ValueError):
            QuantityRange(min=1, max=21, default=10)

    def test_clamp_when_outside_then_snaps_to_bounds(self):
        quantity = QuantityRange(min=5, max=15, default=10)
        assert quantity.clamp(50) == 15
        assert quantity.clamp(1) == 5
        assert quantity.clamp(7) == 7


class TestRecipe:
    """Tests for Recipe validation and lifecycle."""

    def test_init_when_blank_category_then_raises(self):
        with pytest.raises(ValueError, match="category is required"):
            make_recipe(category="  ")

    def test_init_when_duplicate_types_then_raises(self):
        with pytest.raises(ValueError, match="distinct"):
            make_recipe(question_types=(QuestionType.TRUE_FALSE, QuestionType.TRUE_FALSE))

    def test_clamp_quantity_when_no_override_then_default(self):
        assert make_recipe().clamp_quantity() == 10

    def test_clamp_quantity_when_override_above_max_then_max(self):
        assert make_recipe().clamp_quantity(99) == 15

    def test_clamp_quantity_when_override_zero_then_default(self):
        assert make_recipe().clamp_quantity(0) == 10

    def test_cooldown_when_enabled_without_days_then_inactive(self):
        assert Cooldown(enabled=True, days=None).is_active is False
        assert Cooldown(enabled=True, days=0).is_active is False
        assert Cooldown(enabled=True, days=3).is_active is True

    def test_record_usage_returns_new_instance(self, now):
        recipe = make_recipe(usage_count=2)

        updated = recipe.record_usage(now)

        assert updated.usage_count == 3
        assert updated.last_used_at == now
        assert recipe.usage_count == 2

    def test_soft_delete_marks_archived(self, now):
        recipe = make_recipe().soft_delete(now + timedelta(hours=1))
        assert recipe.is_archived

    def test_recipe_is_frozen(self):
        recipe = make_recipe()
        with pytest.raises(FrozenInstanceError):
            recipe.name = "Other"


class TestExecutionResult:
    """Tests for ExecutionResult.from_error."""

    def test_from_error_when_insufficient_then_kind_and_requested(self):
        result = ExecutionResult.from_error(InsufficientCandidatesError(10, 4))

        assert result.success is False
        assert result.error_kind == "insufficient_candidates"
        assert result.questions_requested == 10
        assert "short by 6" in result.error

    def test_from_error_when_store_failure_after_persist_then_carries_set_id(self):
        result = ExecutionResult.from_error(StoreError("append_usage", "boom", trivia_set_id=42))

        assert result.error_kind == "store"
        assert result.failed_step == "append_usage"
        assert result.trivia_set_id == 42

    def test_from_error_when_validation_then_field_errors(self):
        exc = RecipeValidationError([FieldError("quantity.default", "out of range")])

        result = ExecutionResult.from_error(exc)

        assert result.error_kind == "validation"
        assert result.field_errors == (FieldError("quantity.default", "out of range"),)
        assert result.to_dict()["fieldErrors"] == [
            {"field": "quantity.default", "message": "out of range"}
        ]

    def test_insufficient_when_zero_available_then_no_questions_message(self):
        exc = InsufficientCandidatesError(10, 0, "Players")
        assert str(exc) == 'No questions available for category "Players" matching the criteria'
