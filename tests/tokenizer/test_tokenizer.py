"""Tests for the whitespace tokenizer.

Covers paragraph splitting, line ending normalization, and the delay
weight assigned to each token.
"""

import pytest

from rsvp.schemas.token import Token
from rsvp.services.tokenizer import split_paragraphs, tokenize
from rsvp.services.tokenizer.constants import (
    CLAUSE_BREAK_DELAY,
    NORMAL_DELAY,
    PARAGRAPH_BREAK_DELAY,
    SENTENCE_END_DELAY,
)


def _pairs(tokens):
    return [(t.text, t.delay_weight) for t in tokens]


# =============================================================================
# Empty Input
# =============================================================================


class TestEmptyInput:
    @pytest.mark.parametrize("text", ["", "   ", "\n\n\n", "\t \r\n"])
    def test_blank_text_yields_no_tokens(self, text):
        assert tokenize(text) == []


# =============================================================================
# Word Splitting
# =============================================================================


class TestWordSplitting:
    def test_splits_on_whitespace(self):
        tokens = tokenize("The  quick\tbrown\nfox")
        assert [t.text for t in tokens] == ["The", "quick", "brown", "fox"]

    def test_returns_token_models(self):
        tokens = tokenize("Hello")
        assert tokens == [Token(text="Hello", delay_weight=NORMAL_DELAY)]

    def test_leading_and_trailing_whitespace_ignored(self):
        assert [t.text for t in tokenize("  Hello world  ")] == ["Hello", "world"]

    def test_single_newline_is_not_a_paragraph(self):
        tokens = tokenize("line one\nline two")
        assert all(t.delay_weight == NORMAL_DELAY for t in tokens)


# =============================================================================
# Delay Weights
# =============================================================================


class TestDelayWeights:
    def test_sentence_end_weight(self):
        assert _pairs(tokenize("The quick fox.")) == [
            ("The", NORMAL_DELAY),
            ("quick", NORMAL_DELAY),
            ("fox.", SENTENCE_END_DELAY),
        ]

    def test_clause_punctuation(self):
        tokens = tokenize("first, second; third: fourth")
        assert [t.delay_weight for t in tokens] == [
            CLAUSE_BREAK_DELAY,
            CLAUSE_BREAK_DELAY,
            CLAUSE_BREAK_DELAY,
            NORMAL_DELAY,
        ]

    def test_sentence_punctuation_inside_quotes(self):
        tokens = tokenize('He said "stop!" then left.')
        assert tokens[2].delay_weight == SENTENCE_END_DELAY

    def test_weights_never_below_one(self):
        tokens = tokenize("a, b. c! d? e; f: g\n\nh")
        assert all(t.delay_weight >= 1.0 for t in tokens)


# =============================================================================
# Paragraphs
# =============================================================================


class TestParagraphs:
    def test_last_word_of_paragraph_gets_paragraph_weight(self):
        tokens = tokenize("One two\n\nThree four")
        assert _pairs(tokens) == [
            ("One", NORMAL_DELAY),
            ("two", PARAGRAPH_BREAK_DELAY),
            ("Three", NORMAL_DELAY),
            ("four", NORMAL_DELAY),
        ]

    def test_sentence_end_is_raised_to_paragraph_weight(self):
        tokens = tokenize("Done.\n\nNext.")
        assert _pairs(tokens) == [
            ("Done.", PARAGRAPH_BREAK_DELAY),
            ("Next.", SENTENCE_END_DELAY),
        ]

    def test_crlf_paragraphs(self):
        tokens = tokenize("One\r\n\r\nTwo\r\rThree")
        assert _pairs(tokens) == [
            ("One", PARAGRAPH_BREAK_DELAY),
            ("Two", PARAGRAPH_BREAK_DELAY),
            ("Three", NORMAL_DELAY),
        ]

    def test_many_blank_lines_count_once(self):
        assert len(split_paragraphs("a\n\n\n\n\nb")) == 2

    def test_trailing_blank_lines_do_not_mark_last_word(self):
        # The trailing blank lines open an empty final paragraph
        tokens = tokenize("end\n\n")
        assert _pairs(tokens) == [("end", PARAGRAPH_BREAK_DELAY)]
