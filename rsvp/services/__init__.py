"""Business logic services for the RSVP reader."""

from rsvp.services.playback import PlaybackEngine, ScheduleTable, build_schedule
from rsvp.services.tokenizer import TimingCalculator, tokenize

__all__ = [
    # Playback engine
    "PlaybackEngine",
    "ScheduleTable",
    "build_schedule",
    # Tokenizer collaborator
    "TimingCalculator",
    "tokenize",
]
