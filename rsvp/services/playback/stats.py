"""Completion statistics for a finished playback session."""

from rsvp.schemas.playback import CompletionStats


def compute_completion_stats(
    total_tokens: int,
    first_play_ms: float,
    completed_at_ms: float,
) -> CompletionStats:
    """
    Compute session statistics at the completion transition.

    Args:
        total_tokens: Number of tokens in the session.
        first_play_ms: Timestamp of the first play in this session.
        completed_at_ms: Timestamp of the completing step.

    Returns:
        CompletionStats with wall time in seconds (pauses included) and the
        average rate in tokens per minute. The average is 0 when no wall
        time elapsed.

    Examples:
        >>> compute_completion_stats(10, 0.0, 12_000.0)
        CompletionStats(total_tokens=10, total_time=12.0, average_rate=50)
    """
    total_time = (completed_at_ms - first_play_ms) / 1000
    average_rate = round(total_tokens / total_time * 60) if total_time > 0 else 0
    return CompletionStats(
        total_tokens=total_tokens,
        total_time=total_time,
        average_rate=average_rate,
    )
