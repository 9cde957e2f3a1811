"""
Playback scheduling package for RSVP reading.

This package turns a weighted token sequence into a live presentation:
- schedule: Cumulative due times per token and the elapsed-time resolver
- clock: Immutable playback clock spanning run/pause cycles
- scheduler: Revocable frame callbacks that drive the loop
- navigation: Sentence and token seek targets
- stats: Completion statistics
- engine: PlaybackEngine tying them together

Primary usage:
    >>> from rsvp.services.playback import PlaybackEngine, ManualFrameScheduler
    >>> scheduler = ManualFrameScheduler()
    >>> engine = PlaybackEngine(scheduler, tokens=tokens)
    >>> engine.play()
"""

from .clock import MonotonicTimeSource, PlaybackClock, TimeSource
from .engine import PlaybackEngine
from .navigation import (
    find_next_sentence_start,
    find_previous_sentence_start,
    find_sentence_start,
    is_sentence_boundary,
)
from .schedule import ScheduleTable, build_schedule, calculate_base_duration_ms, clamp_rate
from .scheduler import (
    AsyncioFrameScheduler,
    FrameHandle,
    FrameScheduler,
    ManualFrameScheduler,
)
from .stats import compute_completion_stats

__all__ = [
    # Engine
    "PlaybackEngine",
    # Schedule
    "ScheduleTable",
    "build_schedule",
    "calculate_base_duration_ms",
    "clamp_rate",
    # Clock
    "PlaybackClock",
    "TimeSource",
    "MonotonicTimeSource",
    # Frame scheduling
    "FrameHandle",
    "FrameScheduler",
    "ManualFrameScheduler",
    "AsyncioFrameScheduler",
    # Navigation
    "is_sentence_boundary",
    "find_next_sentence_start",
    "find_sentence_start",
    "find_previous_sentence_start",
    # Stats
    "compute_completion_stats",
]
