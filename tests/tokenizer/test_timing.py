"""Tests for delay weight calculation."""

import pytest

from rsvp.services.tokenizer.constants import (
    CLAUSE_BREAK_DELAY,
    CLAUSE_BREAKERS,
    NORMAL_DELAY,
    PARAGRAPH_BREAK_DELAY,
    SENTENCE_END_DELAY,
    SENTENCE_ENDERS,
)
from rsvp.schemas.token import Token
from rsvp.services.playback.schedule import build_schedule
from rsvp.services.tokenizer import tokenize
from rsvp.services.tokenizer.timing import (
    TimingCalculator,
    calculate_base_duration_ms,
    estimate_reading_time_ms,
    get_terminal_punctuation,
)


@pytest.fixture
def calculator():
    return TimingCalculator()


class TestTerminalPunctuation:
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("hello.", "."),
            ("what?", "?"),
            ('said."', "."),
            ("(aside,)", ","),
            ("quote!\u201d", "!"),
            ("hello", None),
            ("", None),
            ('"', None),
            ("a-b", None),
        ],
    )
    def test_terminal_punctuation(self, word, expected):
        assert get_terminal_punctuation(word) == expected


class TestCalculateDelay:
    def test_plain_word(self, calculator):
        assert calculator.calculate_delay("hello") == NORMAL_DELAY

    def test_empty_word(self, calculator):
        assert calculator.calculate_delay("") == NORMAL_DELAY

    @pytest.mark.parametrize("punct", sorted(SENTENCE_ENDERS))
    def test_each_sentence_ender(self, calculator, punct):
        assert calculator.calculate_delay(f"word{punct}") == SENTENCE_END_DELAY

    @pytest.mark.parametrize("punct", sorted(CLAUSE_BREAKERS))
    def test_each_clause_breaker(self, calculator, punct):
        assert calculator.calculate_delay(f"word{punct}") == CLAUSE_BREAK_DELAY

    def test_ellipsis_is_sentence_end(self, calculator):
        assert calculator.calculate_delay("wait...") == SENTENCE_END_DELAY

    def test_paragraph_end_raises_weight(self, calculator):
        assert calculator.calculate_delay("word", is_paragraph_end=True) == PARAGRAPH_BREAK_DELAY
        assert calculator.calculate_delay("word.", is_paragraph_end=True) == PARAGRAPH_BREAK_DELAY

    def test_tier_ordering(self):
        assert NORMAL_DELAY < CLAUSE_BREAK_DELAY < SENTENCE_END_DELAY < PARAGRAPH_BREAK_DELAY


class TestEstimateReadingTime:
    def test_weighted_sum_at_rate(self):
        # 1.0 + 1.0 + 1.5 tiers at 1000ms per token
        assert estimate_reading_time_ms(tokenize("The quick fox."), 60) == 3500.0

    def test_no_tokens(self):
        assert estimate_reading_time_ms([], 60) == 0.0

    @pytest.mark.parametrize("rate", [10, 60, 123, 1000])
    def test_matches_schedule_total(self, rate):
        tokens = tokenize("One, two; three.\n\nFour five! Six? Seven")
        assert estimate_reading_time_ms(tokens, rate) == build_schedule(tokens, rate).total_duration_ms

    def test_scales_with_base_duration(self):
        tokens = [Token(text="word", delay_weight=2.0)] * 3
        assert estimate_reading_time_ms(tokens, 300) == 3 * 2.0 * calculate_base_duration_ms(300)

    def test_rejects_non_positive_rate(self):
        with pytest.raises(ValueError):
            estimate_reading_time_ms(tokenize("word"), 0)
