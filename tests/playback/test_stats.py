"""Tests for completion statistics."""

from rsvp.services.playback.stats import compute_completion_stats


def test_stats_from_wall_time():
    stats = compute_completion_stats(10, 1_000.0, 13_000.0)
    assert stats.total_tokens == 10
    assert stats.total_time == 12.0
    assert stats.average_rate == 50


def test_average_rate_is_rounded():
    stats = compute_completion_stats(10, 0.0, 18_000.0)
    assert stats.average_rate == 33


def test_zero_wall_time():
    stats = compute_completion_stats(1, 500.0, 500.0)
    assert stats.total_time == 0.0
    assert stats.average_rate == 0
