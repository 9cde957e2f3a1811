"""Domain enums for the RSVP reader."""

from rsvp.models.enums import PlaybackState, SkipDirection

__all__ = [
    "PlaybackState",
    "SkipDirection",
]
