"""
Whitespace tokenizer producing weighted tokens for RSVP playback.

Pipeline stages:
1. Line ending normalization (``\\r\\n`` and ``\\r`` become ``\\n``)
2. Paragraph splitting on blank lines
3. Word splitting on whitespace
4. Delay weight assignment (punctuation and paragraph tiers)

Example usage:
    >>> tokens = tokenize("Hello world.\\n\\nNext paragraph")
    >>> [(t.text, t.delay_weight) for t in tokens]
    [('Hello', 1.0), ('world.', 2.0), ('Next', 1.0), ('paragraph', 1.0)]
"""

import logging
from typing import List

from rsvp.schemas.token import Token

from .constants import PARAGRAPH_SPLIT_PATTERN, WHITESPACE_PATTERN
from .timing import TimingCalculator

logger = logging.getLogger(__name__)


def split_paragraphs(text: str) -> List[str]:
    """
    Normalize line endings and split text into paragraphs.

    Args:
        text: Raw text content.

    Returns:
        List of paragraph strings (may include empty strings for leading or
        trailing blank lines; callers drop empty words).
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return PARAGRAPH_SPLIT_PATTERN.split(normalized)


def tokenize(raw_text: str) -> List[Token]:
    """
    Tokenize raw text into weighted tokens.

    The last word of every paragraph except the final one receives at least
    the paragraph-break weight.

    Args:
        raw_text: Raw text content to tokenize.

    Returns:
        List of Token objects ready for playback. Empty for blank input.
    """
    if not raw_text or not raw_text.strip():
        return []

    calculator = TimingCalculator()
    paragraphs = split_paragraphs(raw_text)
    tokens: List[Token] = []

    for paragraph_index, paragraph in enumerate(paragraphs):
        words = [w for w in WHITESPACE_PATTERN.split(paragraph) if w]
        is_last_paragraph = paragraph_index == len(paragraphs) - 1

        for word_index, word in enumerate(words):
            is_paragraph_end = word_index == len(words) - 1 and not is_last_paragraph
            tokens.append(
                Token(
                    text=word,
                    delay_weight=calculator.calculate_delay(
                        word, is_paragraph_end=is_paragraph_end
                    ),
                )
            )

    logger.debug(
        "Tokenized %d paragraphs into %d tokens", len(paragraphs), len(tokens)
    )
    return tokens
