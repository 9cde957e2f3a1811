"""Pydantic schemas for playback state and completion statistics."""

from pydantic import BaseModel, ConfigDict

from rsvp.models.enums import PlaybackState
from rsvp.schemas.token import Token


class CompletionStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_tokens: int
    total_time: float  # seconds
    average_rate: int


class EngineSnapshot(BaseModel):
    """Read-only view of a playback session for the UI layer."""

    model_config = ConfigDict(frozen=True)

    tokens: tuple[Token, ...]
    current_index: int | None
    state: PlaybackState
    is_playing: bool
    is_complete: bool
    rate: int
    current_token: Token | None
    progress_percent: float
    tokens_remaining: int
    estimated_seconds_remaining: float
