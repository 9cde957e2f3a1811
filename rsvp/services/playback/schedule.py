"""
Schedule table for RSVP playback.

The schedule maps each token index to the cumulative elapsed time at which
that token becomes due, for one (token sequence, rate) pair. It is rebuilt
from scratch whenever either input changes; a table is never patched.

Example usage:
    >>> table = build_schedule(tokens, rate=60)  # base duration 1000ms
    >>> table.cumulative
    (0.0, 1000.0, 2000.0)
    >>> table.resolve_index(2500.0)
    2
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Sequence, Tuple

from rsvp.schemas.token import Token
from rsvp.services.tokenizer.timing import calculate_base_duration_ms


def clamp_rate(rate: int, min_rate: int, max_rate: int) -> int:
    """Clamp a rate into ``[min_rate, max_rate]``."""
    return max(min_rate, min(max_rate, int(rate)))


@dataclass(frozen=True)
class ScheduleTable:
    """Cumulative due times for a token sequence at one rate.

    Attributes:
        rate: Rate the table was built for.
        base_duration_ms: Duration of a weight-1.0 token at ``rate``.
        durations: Weighted display duration of each token.
        cumulative: Due time of each token; ``cumulative[0] == 0``.
        total_duration_ms: Due time of the last token plus its duration.
    """

    rate: int
    base_duration_ms: float
    durations: Tuple[float, ...]
    cumulative: Tuple[float, ...]
    total_duration_ms: float

    def __len__(self) -> int:
        return len(self.cumulative)

    def resolve_index(self, elapsed_ms: float) -> int:
        """
        Return the index of the token due at ``elapsed_ms``.

        This is the largest ``i`` with ``cumulative[i] <= elapsed_ms``,
        clamped to ``[0, n-1]``. A token whose due time equals
        ``elapsed_ms`` exactly is due.

        Args:
            elapsed_ms: Scheduled time consumed so far.

        Returns:
            Due token index (0 for an empty table).
        """
        if not self.cumulative:
            return 0

        index = bisect_right(self.cumulative, elapsed_ms) - 1
        return max(0, min(index, len(self.cumulative) - 1))

    def due_time(self, index: int) -> float:
        """Return the due time of ``index`` (0 for an empty table)."""
        if not self.cumulative:
            return 0.0
        return self.cumulative[index]

    def remaining_after(self, index: int) -> float:
        """
        Return the scheduled time of all tokens after ``index``.

        Args:
            index: Current token index.

        Returns:
            Sum of weighted durations for tokens ``index+1 .. n-1`` in ms.
        """
        if index + 1 >= len(self.cumulative):
            return 0.0
        return self.total_duration_ms - self.cumulative[index + 1]


def build_schedule(tokens: Sequence[Token], rate: int) -> ScheduleTable:
    """
    Build the schedule table for a token sequence at a given rate.

    ``cumulative[i] = cumulative[i-1] + base * weight[i-1]``.

    Args:
        tokens: Token sequence in presentation order.
        rate: Reading speed in tokens per minute.

    Returns:
        A new ScheduleTable. Empty sequences yield an empty table with zero
        total duration.
    """
    base_ms = calculate_base_duration_ms(rate)
    durations = tuple(base_ms * token.delay_weight for token in tokens)

    cumulative = []
    elapsed = 0.0
    for duration in durations:
        cumulative.append(elapsed)
        elapsed += duration

    return ScheduleTable(
        rate=rate,
        base_duration_ms=base_ms,
        durations=durations,
        cumulative=tuple(cumulative),
        total_duration_ms=elapsed,
    )
