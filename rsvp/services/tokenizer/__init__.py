"""
Tokenizer package for RSVP text processing.

This package turns raw text into weighted tokens consumed by the playback
engine, and carries the ORP helpers used when rendering a token:
- tokenizer: ``tokenize`` entry point
- timing: Delay weight tiers per word and reading time estimates
- orp: Pivot character calculation
- constants: Punctuation sets and delay tiers

Primary usage:
    >>> from rsvp.services.tokenizer import tokenize
    >>> tokens = tokenize("Hello world.")
"""

from .constants import (
    CLAUSE_BREAK_DELAY,
    NORMAL_DELAY,
    PARAGRAPH_BREAK_DELAY,
    SENTENCE_END_DELAY,
)
from .orp import OrpSplit, calculate_orp, get_orp_index_in_original, split_word_by_orp
from .timing import (
    TimingCalculator,
    calculate_base_duration_ms,
    estimate_reading_time_ms,
    get_terminal_punctuation,
)
from .tokenizer import split_paragraphs, tokenize

__all__ = [
    # Main entry point
    "tokenize",
    "split_paragraphs",
    # Timing
    "TimingCalculator",
    "get_terminal_punctuation",
    "calculate_base_duration_ms",
    "estimate_reading_time_ms",
    # ORP
    "OrpSplit",
    "calculate_orp",
    "get_orp_index_in_original",
    "split_word_by_orp",
    # Delay tiers
    "NORMAL_DELAY",
    "CLAUSE_BREAK_DELAY",
    "SENTENCE_END_DELAY",
    "PARAGRAPH_BREAK_DELAY",
]
