"""
Unit tests for format detection.
"""

from trivia_toolkit.core.models import QuestionType
from trivia_toolkit.parsing import DETECTION_RULES, detect_format


class TestDetectFormat:
    """Tests for detect_format heuristics."""

    def test_detect_when_bold_true_answer_and_no_options_then_true_false(self):
        text = "**Question 1:** Water boils at 100C at sea level.\n**Answer:** True"
        assert detect_format(text) is QuestionType.TRUE_FALSE

    def test_detect_when_false_answer_lowercase_then_true_false(self):
        text = "Question: The moon is made of cheese.\nAnswer: false"
        assert detect_format(text) is QuestionType.TRUE_FALSE

    def test_detect_when_options_present_then_not_true_false(self):
        text = (
            "**Question 1:** Is this true?\n"
            "A) Yes\nB) No\nC) Maybe\nD) Never\n"
            "**Answer:** True"
        )
        assert detect_format(text) is QuestionType.MULTIPLE_CHOICE

    def test_detect_when_identity_phrase_then_who_am_i(self):
        text = "**Question 1:** I am the top scorer in World Cup history.\n**Answer:** Miroslav Klose"
        assert detect_format(text) is QuestionType.WHO_AM_I

    def test_detect_when_contracted_identity_phrase_then_who_am_i(self):
        text = "**Question 1:** I'm a Dutch winger.\n**Answer:** Arjen Robben"
        assert detect_format(text) is QuestionType.WHO_AM_I

    def test_detect_only_inspects_first_block(self):
        text = (
            "**Question 1:** Which club?\nA) One\nB) Two\nC) Three\nD) Four\n**Correct Answer:** A\n"
            "---\n"
            "**Question 2:** Grass is green.\n**Answer:** True"
        )
        assert detect_format(text) is QuestionType.MULTIPLE_CHOICE

    def test_detect_when_empty_then_default_multiple_choice(self):
        assert detect_format("") is QuestionType.MULTIPLE_CHOICE
        assert detect_format("   \n---\n  ") is QuestionType.MULTIPLE_CHOICE

    def test_rules_checked_in_declared_order(self):
        assert [qtype for _, qtype in DETECTION_RULES] == [
            QuestionType.WHO_AM_I,
            QuestionType.TRUE_FALSE,
        ]
