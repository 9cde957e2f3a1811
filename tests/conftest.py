"""Shared pytest fixtures and test helpers."""

import pytest
from fastapi.testclient import TestClient

from rsvp.main import app
from rsvp.schemas.token import Token
from rsvp.services.playback import ManualFrameScheduler, PlaybackEngine


class FakeTimeSource:
    """Controllable millisecond clock."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def now_ms(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def time_source():
    return FakeTimeSource()


@pytest.fixture
def scheduler():
    return ManualFrameScheduler()


@pytest.fixture
def make_tokens():
    """Fixture providing a factory for token sequences.

    Usage:
        def test_example(make_tokens):
            tokens = make_tokens(["The", "fox."], [1.0, 1.5])
    """
    def _make_tokens(texts, weights=None):
        weights = weights or [1.0] * len(texts)
        return [Token(text=t, delay_weight=w) for t, w in zip(texts, weights)]
    return _make_tokens


@pytest.fixture
def make_engine(scheduler, time_source):
    """Fixture providing a factory for engines on the fake clock."""
    def _make_engine(tokens=None, rate=60, on_complete=None):
        return PlaybackEngine(
            scheduler,
            time_source=time_source,
            initial_rate=rate,
            min_rate=10,
            max_rate=1000,
            on_complete=on_complete,
            tokens=tokens,
        )
    return _make_engine


@pytest.fixture
def run_frames(scheduler, time_source):
    """Fixture advancing the fake clock frame by frame while pumping steps.

    Returns the number of frames that ran a callback.
    """
    def _run_frames(duration_ms, frame_ms=16.0):
        fired = 0
        elapsed = 0.0
        while elapsed < duration_ms:
            step = min(frame_ms, duration_ms - elapsed)
            time_source.advance(step)
            elapsed += step
            fired += scheduler.run_frame()
        return fired
    return _run_frames
