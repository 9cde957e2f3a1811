"""ORP (Optimal Recognition Point) helpers for rendering RSVP tokens."""

import re
from typing import NamedTuple

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_LEADING_NON_ALNUM = re.compile(r"^[^a-zA-Z0-9]*")

# Pivot position by alphanumeric length (0-indexed)
ORP_TABLE = {
    0: 0,
    1: 0,
    2: 0,
    3: 1,
    4: 1,
    5: 1,
    6: 2,
    7: 2,
    8: 2,
    9: 2,
    10: 3,
    11: 3,
    12: 3,
    13: 3,
}

# Very long words cap the pivot at the fifth character
MAX_ORP_INDEX = 4


class OrpSplit(NamedTuple):
    """A word split around its pivot character."""

    before: str
    pivot: str
    after: str


def calculate_orp(word: str) -> int:
    """
    Calculate the pivot index for a word.

    Punctuation is ignored when measuring the word length.

    Args:
        word: The word to calculate ORP for.

    Returns:
        The 0-indexed position of the pivot character.

    Examples:
        >>> calculate_orp("cat")
        1
        >>> calculate_orp("reading")
        2
    """
    length = len(_NON_ALNUM.sub("", word))
    return ORP_TABLE.get(length, MAX_ORP_INDEX)


def get_orp_index_in_original(word: str) -> int:
    """Return the pivot index shifted past any leading punctuation."""
    leading = _LEADING_NON_ALNUM.match(word)
    return len(leading.group(0)) + calculate_orp(word)


def split_word_by_orp(word: str) -> OrpSplit:
    """
    Split a word into the text before, at, and after its pivot.

    Args:
        word: The word to split.

    Returns:
        OrpSplit with empty strings for an empty word.

    Examples:
        >>> split_word_by_orp("reading")
        OrpSplit(before='re', pivot='a', after='ding')
    """
    if not word:
        return OrpSplit("", "", "")

    index = min(calculate_orp(word), len(word) - 1)
    return OrpSplit(word[:index], word[index], word[index + 1:])
