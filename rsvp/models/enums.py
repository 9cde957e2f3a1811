"""Enums for playback state, navigation and document sources."""

from enum import Enum


class PlaybackState(str, Enum):
    """Lifecycle state of a playback session."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETE = "complete"


class SkipDirection(str, Enum):
    """Direction for single-token skips."""

    FORWARD = "forward"
    BACKWARD = "backward"


class SourceType(str, Enum):
    """Where a processed document's text came from."""

    PASTE = "paste"
    TEXT_FILE = "txt"
