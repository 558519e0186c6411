"""
Habit store: the persistence seam under the tracker.

Public API
----------
HabitStore.create(habit)        -> Habit        (HabitAlreadyExistsError, StoreError)
HabitStore.find_by_name(name)   -> Habit        (HabitNotFoundError, StoreError)
HabitStore.update(habit)        -> Habit        (StoreError)
HabitStore.list_all()           -> list[Habit]  (StoreError)
HabitStore.close()              -> None         (idempotent)

open_store(url)                 -> context manager yielding a HabitStore

Every write commits on its own; a failed commit is rolled back before the
error leaves this module, so the stored row is never half-written.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from habitfield.core.errors import HabitAlreadyExistsError, HabitNotFoundError, StoreError
from habitfield.db.base import init_db, make_engine, make_session_factory
from habitfield.models.habit import Habit

logger = logging.getLogger(__name__)


class HabitStore:
    def __init__(self, db: Session, engine: Optional[Engine] = None):
        self.db = db
        self.engine = engine
        self.closed = False

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, habit: Habit) -> Habit:
        self.db.add(habit)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if self._name_taken(habit.name):
                raise HabitAlreadyExistsError(habit.name) from exc
            raise StoreError("save habit", exc) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError("save habit", exc) from exc
        self.db.refresh(habit)
        logger.debug("created habit id=%s name=%r", habit.id, habit.name)
        return habit

    def update(self, habit: Habit) -> Habit:
        """Write every column of `habit` back to its row."""
        try:
            habit = self.db.merge(habit)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError("update habit", exc) from exc
        self.db.refresh(habit)
        logger.debug("updated habit id=%s streak=%s", habit.id, habit.streak)
        return habit

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find_by_name(self, name: str) -> Habit:
        try:
            habit = self.db.query(Habit).filter(Habit.name == name).first()
        except SQLAlchemyError as exc:
            raise StoreError("get habit", exc) from exc
        if habit is None:
            raise HabitNotFoundError(name)
        return habit

    def list_all(self) -> list[Habit]:
        """All habits in whatever order the database returns them."""
        try:
            return self.db.query(Habit).all()
        except SQLAlchemyError as exc:
            raise StoreError("list habits", exc) from exc

    def _name_taken(self, name: str) -> bool:
        try:
            return self.db.query(Habit.id).filter(Habit.name == name).first() is not None
        except SQLAlchemyError as exc:
            raise StoreError("get habit", exc) from exc

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.db.close()
        if self.engine is not None:
            self.engine.dispose()
        logger.debug("habit store closed")


@contextmanager
def open_store(url: str) -> Iterator[HabitStore]:
    """Open the database at `url`, create missing tables, and close on exit."""
    try:
        engine = make_engine(url)
        init_db(engine)
    except (SQLAlchemyError, OSError) as exc:
        raise StoreError("open database", exc) from exc

    store = HabitStore(make_session_factory(engine)(), engine)
    logger.debug("habit store opened at %s", engine.url.render_as_string(hide_password=True))
    try:
        yield store
    finally:
        store.close()
