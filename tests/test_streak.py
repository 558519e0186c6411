"""
Unit tests for the pure streak rule (no DB).
"""
from datetime import datetime, timedelta

import pytest

from habitfield.services.streak import (
    DEFAULT_RESET_AFTER,
    Outcome,
    apply_streak_rule,
    is_same_day,
    should_reset,
)

NOW = datetime(2026, 3, 15, 12, 0, 0)


class TestSameDay:
    def test_same_date_different_time(self):
        assert is_same_day(datetime(2026, 3, 15, 0, 1), datetime(2026, 3, 15, 23, 59))

    def test_same_day_of_month_other_month_is_not_same_day(self):
        assert not is_same_day(datetime(2026, 2, 15, 12), NOW)

    def test_same_day_and_month_other_year_is_not_same_day(self):
        assert not is_same_day(datetime(2025, 3, 15, 12), NOW)

    def test_across_midnight(self):
        assert not is_same_day(datetime(2026, 3, 14, 23, 59), datetime(2026, 3, 15, 0, 1))


class TestShouldReset:
    def test_default_threshold_is_48_hours(self):
        assert DEFAULT_RESET_AFTER == timedelta(hours=48)

    def test_exactly_at_threshold_does_not_reset(self):
        assert not should_reset(NOW - timedelta(hours=48), NOW, DEFAULT_RESET_AFTER)

    def test_just_past_threshold_resets(self):
        assert should_reset(NOW - timedelta(hours=48, seconds=1), NOW, DEFAULT_RESET_AFTER)

    def test_future_timestamp_never_resets(self):
        assert not should_reset(NOW + timedelta(hours=30), NOW, DEFAULT_RESET_AFTER)


class TestApplyStreakRule:
    def test_same_day_is_rejected(self):
        assert apply_streak_rule(NOW.replace(hour=6), 4, NOW) is None

    def test_yesterday_continues(self):
        out = apply_streak_rule(NOW - timedelta(days=1), 4, NOW)
        assert out.streak == 5
        assert out.last_recorded_at == NOW
        assert out.outcome == Outcome.CONTINUED
        assert out.previous_streak == 4
        assert not out.was_reset

    def test_two_days_exactly_continues(self):
        out = apply_streak_rule(NOW - timedelta(days=2), 4, NOW)
        assert out.streak == 5
        assert out.outcome == Outcome.CONTINUED

    def test_a_week_ago_resets_to_one(self):
        out = apply_streak_rule(NOW - timedelta(days=7), 7, NOW)
        assert out.streak == 1
        assert out.last_recorded_at == NOW
        assert out.was_reset
        assert out.previous_streak == 7

    def test_custom_threshold(self):
        out = apply_streak_rule(NOW - timedelta(hours=30), 3, NOW, timedelta(hours=24))
        assert out.was_reset
        assert out.streak == 1

    def test_future_record_on_later_date_continues(self):
        # Clock skew: stored timestamp is tomorrow, today's record still counts
        out = apply_streak_rule(NOW + timedelta(hours=14), 2, NOW)
        assert out.streak == 3
        assert out.outcome == Outcome.CONTINUED

    def test_future_record_on_same_date_is_rejected(self):
        assert apply_streak_rule(NOW + timedelta(hours=1), 2, NOW) is None

    @pytest.mark.parametrize("streak", [0, 1, 10, 365])
    def test_continuation_adds_exactly_one(self, streak):
        out = apply_streak_rule(NOW - timedelta(hours=20), streak, NOW)
        assert out.streak == streak + 1
