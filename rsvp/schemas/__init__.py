"""Pydantic schemas for the RSVP reader."""

from rsvp.schemas.document import DocumentFromTextRequest, ProcessedDocument
from rsvp.schemas.playback import CompletionStats, EngineSnapshot
from rsvp.schemas.token import Token

__all__ = [
    # Token schemas
    "Token",
    # Playback schemas
    "CompletionStats",
    "EngineSnapshot",
    # Document schemas
    "DocumentFromTextRequest",
    "ProcessedDocument",
]
