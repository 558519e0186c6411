"""
Habit input / output schemas and the plain-text renderings the CLI prints.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from habitfield.models.habit import NAME_MAX_LENGTH

LISTING_DATE_FORMAT = "%d-%m-%Y"
EMPTY_LISTING = "No habits found."
LISTING_HEADER = "Habit streaks:"


class HabitName(BaseModel):
    """A habit name typed by the user, as one or more words."""
    name: Annotated[str, Field(min_length=1, max_length=NAME_MAX_LENGTH)]

    @field_validator("name", mode="before")
    @classmethod
    def strip_and_check_empty(cls, v: str) -> str:
        stripped = v.strip() if isinstance(v, str) else v
        if not stripped:
            raise ValueError("habit name must not be empty")
        return stripped

    @classmethod
    def from_words(cls, words: list[str]) -> "HabitName":
        return cls(name=" ".join(words))


class HabitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    last_recorded_at: datetime
    streak: int = Field(ge=0)

    def listing_line(self) -> str:
        return (
            f"Habit {self.id}: '{self.name}' | "
            f"Last Recorded On: {self.last_recorded_at.strftime(LISTING_DATE_FORMAT)} "
            f"with a streak of {self.streak}"
        )

    def summary(self) -> str:
        days = "day" if self.streak == 1 else "days"
        return f"{self.name}: {self.streak} {days} streak"


def render_listing(habits) -> str:
    """Text for `habit list`: a header and one line per habit, or the empty notice."""
    if not habits:
        return EMPTY_LISTING
    lines = [LISTING_HEADER]
    lines.extend(HabitRead.model_validate(h).listing_line() for h in habits)
    return "\n".join(lines)
