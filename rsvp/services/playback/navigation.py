"""
Sentence and token navigation over weighted token sequences.

A token whose delay weight is at or above the sentence-end tier closes a
sentence, so the token after it starts the next one. Paragraph-final
tokens carry a higher tier and therefore close sentences as well.

These functions only compute target indices; the engine applies them.
"""

from typing import Sequence

from rsvp.schemas.token import Token
from rsvp.services.tokenizer.constants import SENTENCE_END_DELAY


def is_sentence_boundary(token: Token, boundary_weight: float = SENTENCE_END_DELAY) -> bool:
    """Return True if ``token`` closes a sentence."""
    return token.delay_weight >= boundary_weight


def clamp_index(index: int, length: int) -> int:
    """Clamp ``index`` into ``[0, length-1]`` (0 for an empty sequence)."""
    if length <= 0:
        return 0
    return max(0, min(index, length - 1))


def find_next_sentence_start(
    tokens: Sequence[Token],
    position: int,
    boundary_weight: float = SENTENCE_END_DELAY,
) -> int:
    """
    Find the first sentence start after ``position``.

    Args:
        tokens: Token sequence.
        position: Current token index.
        boundary_weight: Weight tier that closes a sentence.

    Returns:
        Index of the next sentence start, or the last index if the current
        sentence runs to the end.

    Examples:
        >>> # "One two. Three four."
        >>> find_next_sentence_start(tokens, 0)
        2
    """
    for i in range(position + 1, len(tokens)):
        if is_sentence_boundary(tokens[i - 1], boundary_weight):
            return i
    return len(tokens) - 1


def find_sentence_start(
    tokens: Sequence[Token],
    position: int,
    boundary_weight: float = SENTENCE_END_DELAY,
) -> int:
    """
    Find the start of the sentence containing ``position``.

    Args:
        tokens: Token sequence.
        position: Current token index.
        boundary_weight: Weight tier that closes a sentence.

    Returns:
        Index of the first token of the sentence (0 if none precedes it).
    """
    for i in range(position - 1, -1, -1):
        if is_sentence_boundary(tokens[i], boundary_weight):
            return i + 1
    return 0


def find_previous_sentence_start(
    tokens: Sequence[Token],
    position: int,
    boundary_weight: float = SENTENCE_END_DELAY,
) -> int:
    """
    Find the target of a "previous sentence" skip.

    Behaves like a media player's previous button: from inside a sentence
    it returns to that sentence's start; from a sentence start (or index 0)
    it goes back to the start of the sentence before. The second scan
    begins two tokens before the current start so that it skips the
    boundary token closing the previous sentence.

    Args:
        tokens: Token sequence.
        position: Current token index.
        boundary_weight: Weight tier that closes a sentence.

    Returns:
        Target token index.

    Examples:
        >>> # "One two. Three four."
        >>> find_previous_sentence_start(tokens, 3)
        2
        >>> find_previous_sentence_start(tokens, 2)
        0
    """
    sentence_start = find_sentence_start(tokens, position, boundary_weight)

    if sentence_start != position and position != 0:
        return sentence_start

    for i in range(sentence_start - 2, -1, -1):
        if is_sentence_boundary(tokens[i], boundary_weight):
            return i + 1
    return 0
