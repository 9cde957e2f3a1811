"""Tests for enums and token schema."""

import pytest
from pydantic import ValidationError

from rsvp.models.enums import PlaybackState, SkipDirection, SourceType
from rsvp.schemas.token import Token


def test_enum_values():
    assert PlaybackState.IDLE.value == "idle"
    assert PlaybackState.COMPLETE.value == "complete"
    assert SkipDirection("forward") is SkipDirection.FORWARD
    assert SkipDirection.BACKWARD.value == "backward"
    assert SourceType.PASTE.value == "paste"
    assert SourceType("txt") is SourceType.TEXT_FILE


def test_token_defaults_to_normal_weight():
    assert Token(text="word").delay_weight == 1.0


def test_token_weight_must_be_at_least_one():
    with pytest.raises(ValidationError):
        Token(text="word", delay_weight=0.99)


def test_token_is_immutable():
    token = Token(text="word", delay_weight=1.5)
    with pytest.raises(ValidationError):
        token.text = "other"
    assert hash(token) == hash(Token(text="word", delay_weight=1.5))
