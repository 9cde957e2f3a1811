"""
Playback scheduling engine for RSVP reading.

The engine turns a token sequence into a live, pausable, seekable
presentation. It never blocks: every public operation mutates in-memory
state and returns, and the scheduling loop advances one step per frame
callback requested from a FrameScheduler.

State machine:
    IDLE/PAUSED --play--> RUNNING
    COMPLETE    --play--> RUNNING (restarts from index 0)
    RUNNING     --pause--> PAUSED
    RUNNING     --step--> COMPLETE (last token's duration elapsed)
    any         --reset--> IDLE

Example usage:
    >>> scheduler = ManualFrameScheduler()
    >>> engine = PlaybackEngine(scheduler, on_complete=print)
    >>> engine.load_sequence(tokenize("Hello world."))
    >>> engine.play()
    >>> scheduler.run_frame()  # host calls this once per display refresh
"""

import logging
from typing import Callable, Optional, Sequence, Tuple, Union

from rsvp.config import get_settings
from rsvp.models.enums import PlaybackState, SkipDirection
from rsvp.schemas.playback import CompletionStats, EngineSnapshot
from rsvp.schemas.token import Token

from .clock import MonotonicTimeSource, PlaybackClock, TimeSource
from .navigation import (
    clamp_index,
    find_next_sentence_start,
    find_previous_sentence_start,
)
from .schedule import ScheduleTable, build_schedule, clamp_rate
from .scheduler import FrameHandle, FrameScheduler
from .stats import compute_completion_stats

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[CompletionStats], None]


class PlaybackEngine:
    """
    Presentation clock and scheduling loop for one reading session.

    All state belongs to a single logical session and is only touched from
    the frame callback or from direct calls, never concurrently.

    Args:
        scheduler: Source of frame callbacks that drive the loop.
        time_source: Millisecond clock. Defaults to ``time.perf_counter``.
        initial_rate: Starting rate; clamped to the rate bounds.
        min_rate: Lower rate bound. Defaults to settings.
        max_rate: Upper rate bound. Defaults to settings.
        on_complete: Called once per completion with the session stats.
        tokens: Optional initial token sequence.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        *,
        time_source: Optional[TimeSource] = None,
        initial_rate: Optional[int] = None,
        min_rate: Optional[int] = None,
        max_rate: Optional[int] = None,
        on_complete: Optional[CompletionCallback] = None,
        tokens: Optional[Sequence[Token]] = None,
    ) -> None:
        settings = get_settings()
        self.min_rate = settings.min_rate if min_rate is None else min_rate
        self.max_rate = settings.max_rate if max_rate is None else max_rate
        if self.min_rate <= 0 or self.min_rate > self.max_rate:
            raise ValueError(
                f"Invalid rate bounds [{self.min_rate}, {self.max_rate}]"
            )

        self._scheduler = scheduler
        self._time_source = time_source or MonotonicTimeSource()
        self._on_complete = on_complete

        rate = settings.default_rate if initial_rate is None else initial_rate
        self._rate = clamp_rate(rate, self.min_rate, self.max_rate)

        self._tokens: Tuple[Token, ...] = ()
        self._schedule: ScheduleTable = build_schedule(self._tokens, self._rate)
        self._pending: Optional[FrameHandle] = None
        self._first_play_ms: Optional[float] = None
        self._reset_session()
        self.last_stats: Optional[CompletionStats] = None

        if tokens is not None:
            self.load_sequence(tokens)

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is PlaybackState.RUNNING

    @property
    def is_complete(self) -> bool:
        return self._state is PlaybackState.COMPLETE

    @property
    def rate(self) -> int:
        return self._rate

    @property
    def schedule(self) -> ScheduleTable:
        return self._schedule

    @property
    def clock(self) -> PlaybackClock:
        return self._clock

    @property
    def current_index(self) -> Optional[int]:
        """Current token index, or None when no tokens are loaded."""
        if not self._tokens:
            return None
        return self._index

    @property
    def current_token(self) -> Optional[Token]:
        if not self._tokens:
            return None
        return self._tokens[self._index]

    @property
    def progress_percent(self) -> float:
        if len(self._tokens) <= 1:
            return 0.0
        return self._index / (len(self._tokens) - 1) * 100

    @property
    def tokens_remaining(self) -> int:
        if not self._tokens:
            return 0
        return len(self._tokens) - self._index - 1

    @property
    def estimated_seconds_remaining(self) -> float:
        """Scheduled time of the tokens after the current one, in seconds."""
        if not self._tokens:
            return 0.0
        return self._schedule.remaining_after(self._index) / 1000

    def elapsed_ms(self) -> float:
        """Scheduled time consumed so far according to the playback clock."""
        return self._clock.elapsed(self._time_source.now_ms())

    def snapshot(self) -> EngineSnapshot:
        """
        Return a read-only view of the session for the UI layer.

        Every field is already valid engine state, so the model is built
        without validation and shares the engine's token tuple.
        """
        return EngineSnapshot.model_construct(
            tokens=self._tokens,
            current_index=self.current_index,
            state=self._state,
            is_playing=self.is_playing,
            is_complete=self.is_complete,
            rate=self._rate,
            current_token=self.current_token,
            progress_percent=self.progress_percent,
            tokens_remaining=self.tokens_remaining,
            estimated_seconds_remaining=self.estimated_seconds_remaining,
        )

    # -------------------------------------------------------------------------
    # Session lifecycle
    # -------------------------------------------------------------------------

    def load_sequence(self, tokens: Sequence[Token]) -> None:
        """
        Replace the whole session with a new token sequence.

        Any pending step is cancelled first. Index, clock, completion and
        the first-play timestamp start over; the rate carries over.
        """
        self._cancel_pending()
        self._tokens = tuple(tokens)
        self._schedule = build_schedule(self._tokens, self._rate)
        self._reset_session()
        logger.info(
            "Loaded sequence of %d tokens (%.1fs at %d/min)",
            len(self._tokens),
            self._schedule.total_duration_ms / 1000,
            self._rate,
        )

    def close(self) -> None:
        """Tear down the session loop. Pending steps never fire afterwards."""
        self._cancel_pending()
        if self.is_playing:
            self._clock = self._clock.paused(self._time_source.now_ms())
            self._state = PlaybackState.PAUSED

    # -------------------------------------------------------------------------
    # Playback controls
    # -------------------------------------------------------------------------

    def play(self) -> None:
        """Start or resume playback. Restarts from the top when complete."""
        if not self._tokens or self.is_playing:
            return

        if self.is_complete:
            self._reset_session()

        now = self._time_source.now_ms()
        if self._first_play_ms is None:
            self._first_play_ms = now
        self._clock = self._clock.started(now)
        self._state = PlaybackState.RUNNING
        logger.debug(
            "Playing from index %d",
            self._index,
            extra={"extra_data": {"elapsed_ms": self._clock.accumulated_elapsed}},
        )
        self._request_step()

    def pause(self) -> None:
        """Pause playback, keeping the elapsed time for the next play."""
        if not self.is_playing:
            return

        self._cancel_pending()
        self._clock = self._clock.paused(self._time_source.now_ms())
        self._state = PlaybackState.PAUSED
        logger.debug(
            "Paused at index %d",
            self._index,
            extra={"extra_data": {"elapsed_ms": self._clock.accumulated_elapsed}},
        )

    def toggle(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def reset(self) -> None:
        """Stop playback and return to the first token with a zeroed clock."""
        self._cancel_pending()
        self._reset_session()
        logger.debug("Session reset")

    def set_rate(self, rate: int) -> None:
        """
        Change the reading rate, clamping it to the configured bounds.

        The schedule is rebuilt and the clock re-anchored at the current
        token's due time under the new rate, so the current index does not
        move and later steps run at the new pace.
        """
        clamped = clamp_rate(rate, self.min_rate, self.max_rate)
        if clamped == self._rate:
            return

        self._rate = clamped
        self._schedule = build_schedule(self._tokens, self._rate)
        if self._tokens:
            self._clock = self._clock.seeked(
                self._schedule.due_time(self._index), self._time_source.now_ms()
            )
        logger.info("Rate set to %d/min", self._rate)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def go_to_index(self, index: int) -> None:
        """
        Jump to ``index`` (clamped) and re-anchor the clock at its due time.

        Leaving the last token clears completion.
        """
        if not self._tokens:
            return

        target = clamp_index(index, len(self._tokens))
        self._index = target
        self._clock = self._clock.seeked(
            self._schedule.due_time(target), self._time_source.now_ms()
        )

        if self.is_complete and target < len(self._tokens) - 1:
            self._state = PlaybackState.PAUSED

    def skip_sentence_forward(self) -> None:
        if not self._tokens:
            return
        self.go_to_index(find_next_sentence_start(self._tokens, self._index))

    def skip_sentence_backward(self) -> None:
        if not self._tokens:
            return
        self.go_to_index(find_previous_sentence_start(self._tokens, self._index))

    def skip_token(self, direction: Union[SkipDirection, str]) -> None:
        """
        Move one token forward or backward (meant for use while paused).

        Raises:
            ValueError: If ``direction`` is not a SkipDirection value and
                tokens are loaded. With no tokens the call does nothing.
        """
        if not self._tokens:
            return
        step = 1 if SkipDirection(direction) is SkipDirection.FORWARD else -1
        self.go_to_index(self._index + step)

    # -------------------------------------------------------------------------
    # Scheduling loop
    # -------------------------------------------------------------------------

    def _step(self) -> None:
        """Advance the session to the token due now; re-arm unless complete."""
        self._pending = None
        if not self.is_playing or not self._tokens:
            return

        now = self._time_source.now_ms()
        elapsed = self._clock.elapsed(now)
        target = self._schedule.resolve_index(elapsed)
        last = len(self._tokens) - 1

        if target >= last and elapsed >= self._schedule.total_duration_ms:
            self._complete(now)
            return

        if target != self._index:
            logger.debug("Index %d -> %d", self._index, target)
            self._index = target

        self._request_step()

    def _complete(self, now: float) -> None:
        self._index = len(self._tokens) - 1
        self._clock = self._clock.paused(now)
        self._state = PlaybackState.COMPLETE

        stats = compute_completion_stats(
            len(self._tokens),
            self._first_play_ms if self._first_play_ms is not None else now,
            now,
        )
        self.last_stats = stats
        logger.info(
            "Completed %d tokens in %.1fs (%d/min average)",
            stats.total_tokens,
            stats.total_time,
            stats.average_rate,
        )

        if self._on_complete is not None:
            try:
                self._on_complete(stats)
            except Exception:
                logger.exception("Completion callback failed")

    def _request_step(self) -> None:
        self._pending = self._scheduler.request_frame(self._step)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _reset_session(self) -> None:
        self._index = 0
        self._state = PlaybackState.IDLE
        self._clock = PlaybackClock()
        self._first_play_ms = None
