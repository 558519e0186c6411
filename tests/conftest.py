"""
Shared pytest fixtures.

Each test gets its own SQLite file under tmp_path, so tests never share rows.
"""
from datetime import datetime

import pytest
from typer.testing import CliRunner

from habitfield.db.base import init_db, make_engine, make_session_factory
from habitfield.db.store import HabitStore
from habitfield.models.habit import Habit
from habitfield.services.tracker import Tracker

# Midday, so "one day earlier" and "same day" never straddle midnight
NOW = datetime(2026, 3, 15, 12, 0, 0)


class FixedClock:
    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'habits.db'}"


@pytest.fixture()
def engine(db_url):
    engine = make_engine(db_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def store(engine):
    store = HabitStore(make_session_factory(engine)())
    yield store
    store.close()


@pytest.fixture()
def clock():
    return FixedClock()


@pytest.fixture()
def tracker(store, clock):
    return Tracker(store, clock=clock)


@pytest.fixture()
def seed(store):
    """Insert a habit with an arbitrary history, bypassing the tracker."""
    def _seed(name: str, last_recorded_at: datetime, streak: int = 1) -> Habit:
        return store.create(Habit(name=name, last_recorded_at=last_recorded_at, streak=streak))
    return _seed


@pytest.fixture()
def runner(monkeypatch, db_url):
    monkeypatch.setenv("DATABASE_URL", db_url)
    monkeypatch.delenv("STREAK_RESET_HOURS", raising=False)
    return CliRunner()
