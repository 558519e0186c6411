"""
Streak rule: decides what a new record does to an existing habit.

  1. SAME DAY
     Trigger : now falls on the same local calendar date as last_recorded_at
     Action  : reject (AlreadyRecordedTodayError), nothing changes

  2. RESET
     Trigger : now - last_recorded_at > reset_after
     Action  : streak restarts at 0, then counts today -> 1

  3. CONTINUE
     Otherwise (including a gap of exactly reset_after, and a
     last_recorded_at in the future on an earlier calendar date)
     Action  : streak + 1

Pure functions only. No DB access.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

DEFAULT_RESET_AFTER = timedelta(hours=48)


class Outcome:
    CONTINUED = "continued"
    RESET = "reset"


@dataclass(frozen=True)
class StreakOutcome:
    """New values for a habit after an accepted record."""
    streak: int
    last_recorded_at: datetime
    outcome: str            # Outcome.CONTINUED | Outcome.RESET
    previous_streak: int

    @property
    def was_reset(self) -> bool:
        return self.outcome == Outcome.RESET


def is_same_day(a: datetime, b: datetime) -> bool:
    return a.date() == b.date()


def should_reset(last_recorded_at: datetime, now: datetime, reset_after: timedelta) -> bool:
    return now - last_recorded_at > reset_after


def apply_streak_rule(
    last_recorded_at: datetime,
    streak: int,
    now: datetime,
    reset_after: timedelta = DEFAULT_RESET_AFTER,
) -> StreakOutcome | None:
    """
    Return the habit's next state, or None when `now` is on the same day
    as the last record and the update must be rejected.
    """
    if is_same_day(now, last_recorded_at):
        return None

    outcome = Outcome.CONTINUED
    next_streak = streak
    if should_reset(last_recorded_at, now, reset_after):
        outcome = Outcome.RESET
        next_streak = 0

    return StreakOutcome(
        streak=next_streak + 1,
        last_recorded_at=now,
        outcome=outcome,
        previous_streak=streak,
    )
