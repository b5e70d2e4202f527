"""
Unit tests for the parsing orchestrator and its fallback chain.
"""

from trivia_toolkit.core.models import ParsedQuestion, QuestionType
from trivia_toolkit.parsing import DEFAULT_CHAIN, ParserEntry, attempt_order, parse_questions


TF_BLOCK = "**Question 1:** The 1966 World Cup was held in England.\n**Answer:** True"
MALFORMED_MC_BLOCK = (
    "**Question 2:** Which club?\n"
    "A) One\nB) Two\nC) Three\n"
    "**Correct Answer:** B"
)


class TestAttemptOrder:
    """Tests for attempt_order."""

    def test_default_chain_order(self):
        assert [e.question_type for e in DEFAULT_CHAIN] == [
            QuestionType.MULTIPLE_CHOICE,
            QuestionType.TRUE_FALSE,
            QuestionType.WHO_AM_I,
        ]

    def test_detected_type_moves_to_front(self):
        order = [e.question_type for e in attempt_order(QuestionType.WHO_AM_I)]
        assert order == [
            QuestionType.WHO_AM_I,
            QuestionType.MULTIPLE_CHOICE,
            QuestionType.TRUE_FALSE,
        ]


class TestParseQuestions:
    """Tests for parse_questions."""

    def test_parse_when_good_tf_and_malformed_mc_then_one_tf_record(self):
        text = f"{TF_BLOCK}\n---\n{MALFORMED_MC_BLOCK}"

        result = parse_questions(text)

        assert result.detected_type is QuestionType.TRUE_FALSE
        assert len(result) == 1
        assert result.questions[0].question_type is QuestionType.TRUE_FALSE
        assert result.used_fallback is False

    def test_parse_when_malformed_mc_first_then_falls_back_to_tf(self):
        text = f"{MALFORMED_MC_BLOCK}\n---\n{TF_BLOCK}"

        result = parse_questions(text)

        assert result.detected_type is QuestionType.MULTIPLE_CHOICE
        assert result.parsed_by is QuestionType.TRUE_FALSE
        assert result.used_fallback is True
        assert result.attempted == (QuestionType.MULTIPLE_CHOICE, QuestionType.TRUE_FALSE)
        assert len(result) == 1

    def test_parse_when_nothing_parses_then_empty_without_raising(self):
        result = parse_questions("Some chatter from the generator.\nNo questions here.")

        assert result.is_empty
        assert result.parsed_by is None
        assert len(result.attempted) == 3

    def test_parse_when_empty_text_then_empty_result(self):
        result = parse_questions("")

        assert result.is_empty
        assert result.attempted == ()

    def test_parse_uses_injected_chain(self):
        calls = []

        def fake_parser(text):
            calls.append(text)
            return [ParsedQuestion("I am X", "X", QuestionType.WHO_AM_I)]

        chain = (ParserEntry(QuestionType.WHO_AM_I, fake_parser),)

        result = parse_questions("anything", chain=chain, detector=lambda _: QuestionType.WHO_AM_I)

        assert calls == ["anything"]
        assert result.parsed_by is QuestionType.WHO_AM_I
