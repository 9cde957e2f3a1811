"""RSVP reader: tokenizer collaborator and playback scheduling engine."""

__version__ = "0.1.0"
