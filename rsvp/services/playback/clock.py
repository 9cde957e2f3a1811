"""
Playback clock for RSVP sessions.

The clock is an immutable value. Each play, pause and seek boundary
replaces it with a new instance, so the reference timestamp and the
accumulated elapsed time always change together.

While running, elapsed time is ``now - reference_start``. While paused it
is frozen at ``accumulated_elapsed``. Starting re-anchors
``reference_start = now - accumulated_elapsed``, which is what keeps
resumed playback free of drift: elapsed time is always measured against
one reference point instead of summing per-frame deltas.
"""

import time
from dataclasses import dataclass
from typing import Protocol


class TimeSource(Protocol):
    """Monotonic millisecond clock."""

    def now_ms(self) -> float: ...


class MonotonicTimeSource:
    """TimeSource backed by ``time.perf_counter``."""

    def now_ms(self) -> float:
        return time.perf_counter() * 1000.0


@dataclass(frozen=True)
class PlaybackClock:
    """Elapsed reading time across run/pause cycles.

    Attributes:
        is_running: Whether scheduled time is advancing.
        reference_start: Timestamp (ms) that corresponds to elapsed 0 while
            running.
        accumulated_elapsed: Elapsed time (ms) captured at the last pause or
            seek boundary.
    """

    is_running: bool = False
    reference_start: float = 0.0
    accumulated_elapsed: float = 0.0

    def elapsed(self, now: float) -> float:
        """Return scheduled time consumed as of ``now``."""
        if self.is_running:
            return now - self.reference_start
        return self.accumulated_elapsed

    def started(self, now: float) -> "PlaybackClock":
        """Return a running clock that resumes from the accumulated time."""
        if self.is_running:
            return self
        return PlaybackClock(
            is_running=True,
            reference_start=now - self.accumulated_elapsed,
            accumulated_elapsed=self.accumulated_elapsed,
        )

    def paused(self, now: float) -> "PlaybackClock":
        """Return a stopped clock frozen at the elapsed time as of ``now``."""
        if not self.is_running:
            return self
        return PlaybackClock(
            is_running=False,
            reference_start=self.reference_start,
            accumulated_elapsed=now - self.reference_start,
        )

    def seeked(self, elapsed: float, now: float) -> "PlaybackClock":
        """Return a clock positioned at ``elapsed``, keeping the run state."""
        return PlaybackClock(
            is_running=self.is_running,
            reference_start=now - elapsed if self.is_running else self.reference_start,
            accumulated_elapsed=elapsed,
        )
