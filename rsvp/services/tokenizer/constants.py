"""
Tokenizer constants for RSVP pacing.

This module contains the punctuation patterns and delay weight tiers
shared by the tokenizer and the playback navigation controller.
"""

import re

# -----------------------------------------------------------------------------
# Delay Weight Tiers
# -----------------------------------------------------------------------------

# Multiples of the base per-token duration
NORMAL_DELAY = 1.0
CLAUSE_BREAK_DELAY = 1.25  # , ; :
SENTENCE_END_DELAY = 1.5  # . ! ?
PARAGRAPH_BREAK_DELAY = 2.0  # last word before a blank line

# -----------------------------------------------------------------------------
# Punctuation Detection
# -----------------------------------------------------------------------------

SENTENCE_ENDERS = {'.', '!', '?'}
CLAUSE_BREAKERS = {',', ';', ':'}

# Quotes and brackets that may trail punctuation, e.g. `said."` or `(end.)`
TRAILING_CLOSERS = {
    '"',        # ASCII double quote
    "'",        # ASCII single quote
    ')', ']', '}',
    '\u201d',   # ” right double quotation mark
    '\u2019',   # ’ right single quotation mark
    '\u00bb',   # » right-pointing double angle quotation mark
    '\u203a',   # › single right-pointing angle quotation mark
}

# -----------------------------------------------------------------------------
# Paragraph Detection
# -----------------------------------------------------------------------------

# Two or more newlines separate paragraphs (after line ending normalization)
PARAGRAPH_SPLIT_PATTERN = re.compile(r'\n{2,}')
WHITESPACE_PATTERN = re.compile(r'\s+')
