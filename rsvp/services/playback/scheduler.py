"""
Recurring frame scheduling for the playback loop.

The engine never loops on its own. After each step it asks a
``FrameScheduler`` for exactly one future invocation and keeps the returned
handle; cancelling that handle is how playback stops. Any host timing
primitive that can honour ``request_frame`` and ``cancel`` can drive the
engine:

- ManualFrameScheduler: the host pumps frames explicitly (UI frame
  callbacks, tests, simulations).
- AsyncioFrameScheduler: fixed-interval ticks on an asyncio event loop.
"""

import asyncio
from typing import Callable, List, Optional, Protocol

from rsvp.config import get_settings

FrameCallback = Callable[[], None]


class FrameHandle(Protocol):
    """Revocable reference to one pending frame callback."""

    def cancel(self) -> None: ...

    def cancelled(self) -> bool: ...


class FrameScheduler(Protocol):
    """Source of one-shot frame callbacks."""

    def request_frame(self, callback: FrameCallback) -> FrameHandle: ...


class ManualFrameHandle:
    """Handle returned by ManualFrameScheduler."""

    __slots__ = ("callback", "_cancelled")

    def __init__(self, callback: FrameCallback) -> None:
        self.callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled


class ManualFrameScheduler:
    """
    Frame scheduler pumped by the host.

    Callbacks requested while a frame is being run are queued for the next
    call to ``run_frame``, mirroring how display-refresh callbacks behave.

    Example usage:
        >>> scheduler = ManualFrameScheduler()
        >>> handle = scheduler.request_frame(lambda: print("tick"))
        >>> scheduler.run_frame()
        tick
        1
    """

    def __init__(self) -> None:
        self._pending: List[ManualFrameHandle] = []

    @property
    def pending_count(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return sum(1 for handle in self._pending if not handle.cancelled())

    def request_frame(self, callback: FrameCallback) -> ManualFrameHandle:
        handle = ManualFrameHandle(callback)
        self._pending.append(handle)
        return handle

    def run_frame(self) -> int:
        """
        Run every callback pending at the start of this frame.

        Returns:
            Number of callbacks invoked (cancelled ones are skipped).
        """
        due, self._pending = self._pending, []
        fired = 0
        for handle in due:
            if handle.cancelled():
                continue
            handle.callback()
            fired += 1
        return fired


class AsyncioFrameScheduler:
    """
    Frame scheduler that ticks at a fixed interval on an asyncio loop.

    Handles are the loop's own ``asyncio.TimerHandle`` objects, which
    already provide idempotent ``cancel()`` and ``cancelled()``.
    """

    def __init__(
        self,
        interval_ms: Optional[float] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            interval_ms: Delay between a request and its callback. Defaults
                to the configured frame interval.
            loop: Event loop to schedule on. Defaults to the running loop
                at request time.
        """
        if interval_ms is None:
            interval_ms = get_settings().frame_interval_ms
        if interval_ms < 0:
            raise ValueError(f"interval_ms must not be negative, got {interval_ms}")
        self.interval_ms = interval_ms
        self._loop = loop

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(self.interval_ms / 1000.0, callback)
