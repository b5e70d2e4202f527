"""
Unit tests for the dialect parsers.
"""

import pytest

from trivia_toolkit.core.models import QuestionType
from trivia_toolkit.parsing import parse_multiple_choice, parse_true_false, parse_who_am_i
from trivia_toolkit.parsing.blocks import split_blocks


MC_BLOCK = """**Question 1:** Which club did Kaka join in 2009?
A) Real Madrid
B) Barcelona
C) Bayern Munich
D) Juventus
**Correct Answer:** A
**Difficulty:** medium
**Tags:** transfers, brazil
**Explanation:** He moved from Milan."""


class TestSplitBlocks:
    """Tests for block splitting."""

    def test_split_drops_blank_blocks_and_strips_lines(self):
        text = "  a  \n---\n\n---\nb\n-----\nc"
        assert split_blocks(text) == [["a"], ["b"], ["c"]]


class TestParseMultipleChoice:
    """Tests for parse_multiple_choice."""

    def test_parse_when_complete_block_then_one_record(self):
        questions = parse_multiple_choice(MC_BLOCK)

        assert len(questions) == 1
        q = questions[0]
        assert q.question_type is QuestionType.MULTIPLE_CHOICE
        assert q.question_text == "Which club did Kaka join in 2009?"
        assert q.correct_answer == "Real Madrid"
        assert q.wrong_answers == ("Barcelona", "Bayern Munich", "Juventus")
        assert q.difficulty == "Medium"
        assert q.tags == ("transfers", "brazil")
        assert q.explanation == "He moved from Milan."

    def test_parse_when_answer_label_used_then_letter_resolves(self):
        text = MC_BLOCK.replace("**Correct Answer:** A", "**Answer:** c")

        questions = parse_multiple_choice(text)

        assert questions[0].correct_answer == "Bayern Munich"
        assert "Bayern Munich" not in questions[0].wrong_answers

    def test_parse_when_three_options_then_dropped(self):
        text = MC_BLOCK.replace("D) Juventus\n", "")
        assert parse_multiple_choice(text) == []

    def test_parse_when_letter_not_in_options_then_dropped(self):
        text = MC_BLOCK.replace("**Correct Answer:** A", "**Correct Answer:** E")
        assert parse_multiple_choice(text) == []

    def test_parse_when_question_missing_then_dropped(self):
        text = MC_BLOCK.replace("**Question 1:** Which club did Kaka join in 2009?\n", "")
        assert parse_multiple_choice(text) == []

    def test_parse_keeps_good_blocks_around_bad_ones(self):
        bad = MC_BLOCK.replace("**Correct Answer:** A", "")
        text = "\n---\n".join([MC_BLOCK, bad, MC_BLOCK.replace("Question 1", "Question 3")])

        assert len(parse_multiple_choice(text)) == 2


class TestParseTrueFalse:
    """Tests for parse_true_false."""

    def test_parse_when_true_then_false_is_wrong_answer(self):
        text = "**Question 1:** Messi won the 2022 World Cup.\n**Answer:** True"

        questions = parse_true_false(text)

        assert len(questions) == 1
        assert questions[0].correct_answer == "True"
        assert questions[0].wrong_answers == ("False",)

    def test_parse_when_false_uppercase_then_normalised(self):
        text = "Question: Pele was Argentinian.\nAnswer: FALSE\nExplanation: Brazilian."

        questions = parse_true_false(text)

        assert questions[0].correct_answer == "False"
        assert questions[0].wrong_answers == ("True",)
        assert questions[0].explanation == "Brazilian."

    def test_parse_when_answer_not_boolean_then_dropped(self):
        text = "**Question 1:** Messi won the 2022 World Cup.\n**Answer:** Maybe"
        assert parse_true_false(text) == []

    def test_parse_structured_layout(self):
        text = (
            "Question 1:\n"
            "statement: Pele played for Santos.\n"
            "is_true: TRUE\n"
            "correction:\n"
            "Question 2:\n"
            "statement: Zidane is Italian.\n"
            "is_true: false\n"
            "correction: He is French.\n"
        )

        questions = parse_true_false(text)

        assert [q.question_text for q in questions] == [
            "Pele played for Santos.",
            "Zidane is Italian.",
        ]
        assert [q.correct_answer for q in questions] == ["True", "False"]
        assert questions[0].explanation is None
        assert questions[1].explanation == "He is French."


class TestParseWhoAmI:
    """Tests for parse_who_am_i."""

    def test_parse_when_text_answer_then_no_wrong_answers(self):
        text = "**Question 1:** I am a Brazilian forward with three World Cups.\n**Answer:** Pele"

        questions = parse_who_am_i(text)

        assert len(questions) == 1
        assert questions[0].correct_answer == "Pele"
        assert questions[0].wrong_answers == ()

    def test_parse_when_letter_answer_with_options_then_resolves_text(self):
        text = (
            "**Question 1:** I'm Manchester United's record scorer.\n"
            "A) Rooney\nB) Charlton\n"
            "**Correct Answer:** A"
        )

        assert parse_who_am_i(text)[0].correct_answer == "Rooney"

    def test_parse_when_correct_answer_and_answer_then_correct_answer_wins(self):
        text = "**Question 1:** I am a keeper.\n**Answer:** Buffon\n**Correct Answer:** Casillas"

        assert parse_who_am_i(text)[0].correct_answer == "Casillas"

    @pytest.mark.parametrize("answer_line", ["**Correct Answer:** D", ""])
    def test_parse_when_answer_unresolvable_then_dropped(self, answer_line):
        text = f"**Question 1:** I am a keeper.\nA) Buffon\nB) Casillas\n{answer_line}"

        assert parse_who_am_i(text) == []
