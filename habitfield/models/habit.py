"""
Habit: the one record this tool keeps.

`name` is the lookup key and is unique at the DB level. `last_recorded_at`
holds naive local wall-clock time, since "same day" is judged against the
user's local calendar.
"""
from datetime import datetime
from sqlalchemy import CheckConstraint, DateTime, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from habitfield.db.base import Base

NAME_MAX_LENGTH = 256


class Habit(Base):
    __tablename__ = "habits"
    __table_args__ = (
        UniqueConstraint("name", name="uq_habit_name"),
        CheckConstraint("streak >= 0", name="ck_habit_streak_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    last_recorded_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    streak: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return (
            f"Habit(id={self.id!r}, name={self.name!r}, "
            f"last_recorded_at={self.last_recorded_at!r}, streak={self.streak!r})"
        )
