"""
Tracker service: the habit operations the CLI calls.

Public API
----------
Tracker.add(name)      -> Habit          (HabitAlreadyExistsError, StoreError)
Tracker.get(name)      -> Habit          (HabitNotFoundError, StoreError)
Tracker.update(name)   -> UpdateResult   (HabitNotFoundError, AlreadyRecordedTodayError, StoreError)
Tracker.record(name)   -> RecordResult   add if new, update otherwise
Tracker.list()         -> list[Habit]    (StoreError)

The store is passed in; the tracker never opens or closes it.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from habitfield.core.errors import AlreadyRecordedTodayError, HabitNotFoundError
from habitfield.db.store import HabitStore
from habitfield.models.habit import Habit
from habitfield.services.streak import DEFAULT_RESET_AFTER, StreakOutcome, apply_streak_rule

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class UpdateResult:
    habit: Habit
    outcome: StreakOutcome


@dataclass
class RecordResult:
    habit: Habit
    created: bool
    outcome: Optional[StreakOutcome] = None


# ---------------------------------------------------------------------------
# Tracker
# ---------------------------------------------------------------------------

class Tracker:
    def __init__(
        self,
        store: HabitStore,
        reset_after: timedelta = DEFAULT_RESET_AFTER,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.reset_after = reset_after
        self.clock = clock

    def add(self, name: str) -> Habit:
        habit = Habit(name=name, last_recorded_at=self.clock(), streak=1)
        habit = self.store.create(habit)
        logger.info("added habit %r (id=%s)", habit.name, habit.id)
        return habit

    def get(self, name: str) -> Habit:
        return self.store.find_by_name(name)

    def update(self, name: str) -> UpdateResult:
        """Apply the streak rule to an existing habit and persist the result."""
        habit = self.store.find_by_name(name)
        now = self.clock()

        outcome = apply_streak_rule(habit.last_recorded_at, habit.streak, now, self.reset_after)
        if outcome is None:
            logger.info("rejected same-day record for %r", habit.name)
            raise AlreadyRecordedTodayError(habit.name, habit.streak)

        habit.streak = outcome.streak
        habit.last_recorded_at = outcome.last_recorded_at
        habit = self.store.update(habit)

        if outcome.was_reset:
            logger.info(
                "streak for %r reset (previous streak %d)", habit.name, outcome.previous_streak
            )
        else:
            logger.info("streak for %r continued at %d", habit.name, habit.streak)
        return UpdateResult(habit=habit, outcome=outcome)

    def record(self, name: str) -> RecordResult:
        try:
            self.store.find_by_name(name)
        except HabitNotFoundError:
            return RecordResult(habit=self.add(name), created=True)
        result = self.update(name)
        return RecordResult(habit=result.habit, created=False, outcome=result.outcome)

    def list(self) -> list[Habit]:
        return self.store.list_all()
