"""
Delay weight calculation for RSVP tokens.

The delay weight determines how long to display a token relative to the
base duration derived from the reading rate. Every weight is one of the
tiers in ``constants``.
"""

from typing import Optional, Sequence

from rsvp.schemas.token import Token

from .constants import (
    CLAUSE_BREAK_DELAY,
    CLAUSE_BREAKERS,
    NORMAL_DELAY,
    PARAGRAPH_BREAK_DELAY,
    SENTENCE_END_DELAY,
    SENTENCE_ENDERS,
    TRAILING_CLOSERS,
)


def get_terminal_punctuation(word: str) -> Optional[str]:
    """
    Get the terminal punctuation character, ignoring trailing quotes/brackets.

    Args:
        word: The word to check.

    Returns:
        The terminal punctuation character, or None if the word does not
        end in sentence or clause punctuation.

    Examples:
        >>> get_terminal_punctuation("hello.")
        '.'
        >>> get_terminal_punctuation('said."')
        '.'
        >>> get_terminal_punctuation("hello")
        None
    """
    idx = len(word) - 1
    while idx >= 0 and word[idx] in TRAILING_CLOSERS:
        idx -= 1

    if idx < 0:
        return None

    char = word[idx]
    if char in SENTENCE_ENDERS or char in CLAUSE_BREAKERS:
        return char

    return None


class TimingCalculator:
    """
    Calculate delay weights for RSVP token display timing.

    Example usage:
        >>> calc = TimingCalculator()
        >>> calc.calculate_delay("hello")
        1.0
        >>> calc.calculate_delay("sentence.")
        1.5
        >>> calc.calculate_delay("word,")
        1.25
        >>> calc.calculate_delay("end", is_paragraph_end=True)
        2.0
    """

    def calculate_delay(self, word: str, *, is_paragraph_end: bool = False) -> float:
        """
        Calculate the delay weight for a word.

        Args:
            word: The word to calculate delay for.
            is_paragraph_end: Whether the word is the last one before a
                paragraph break. Raises the weight to at least the
                paragraph tier.

        Returns:
            Delay weight (1.0 = normal, >1.0 = longer display time).
        """
        terminal = get_terminal_punctuation(word) if word else None

        if terminal in SENTENCE_ENDERS:
            weight = SENTENCE_END_DELAY
        elif terminal in CLAUSE_BREAKERS:
            weight = CLAUSE_BREAK_DELAY
        else:
            weight = NORMAL_DELAY

        if is_paragraph_end:
            weight = max(weight, PARAGRAPH_BREAK_DELAY)

        return weight


def calculate_base_duration_ms(rate: int) -> float:
    """
    Calculate the base token display duration from the reading rate.

    Args:
        rate: Reading speed in tokens per minute.

    Returns:
        Base duration in milliseconds for one token of weight 1.0.

    Raises:
        ValueError: If rate is not positive.

    Examples:
        >>> calculate_base_duration_ms(60)
        1000.0
        >>> calculate_base_duration_ms(300)
        200.0
    """
    if rate <= 0:
        raise ValueError(f"Rate must be positive, got {rate}")

    # 60,000 ms per minute / tokens per minute = ms per token
    return 60_000.0 / rate


def estimate_reading_time_ms(tokens: Sequence[Token], rate: int) -> float:
    """
    Estimate total reading time for a token sequence.

    Sums the weighted duration of every token in presentation order, so the
    result equals the total duration of the playback schedule at ``rate``.

    Args:
        tokens: Weighted tokens from ``tokenize``.
        rate: Reading speed in tokens per minute.

    Returns:
        Estimated reading time in milliseconds (0.0 for no tokens).

    Examples:
        >>> estimate_reading_time_ms(tokenize("The quick fox."), 60)
        3500.0
    """
    base_duration = calculate_base_duration_ms(rate)
    return sum(base_duration * token.delay_weight for token in tokens)
