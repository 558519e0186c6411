"""
The `habit` command.

  habit <words...>   record today for the habit named by the words
                     (created on first use)
  habit list         show every habit with its streak
  habit help         show usage (also shown with no arguments); exits 1

All failures surface here as HabitFieldError subclasses and are turned into
a message on stderr plus the error's exit code.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import typer
from pydantic import ValidationError

from habitfield.core.config import get_settings
from habitfield.core.errors import EXIT_REJECTED, HabitFieldError, InvalidInputError
from habitfield.core.logging_config import configure_logging, logger
from habitfield.db.store import open_store
from habitfield.schemas.habit import HabitName, HabitRead, render_listing
from habitfield.services.tracker import Tracker

HELP_TEXT = (
    "Welcome to your personal habit tracker!!\n\n"
    "To add a habit, run `habit <habit>`.\n"
    "To list all habits, run `habit list`.\n"
)


class Action:
    HELP = "help"
    LIST = "list"
    RECORD = "record"


@dataclass
class Command:
    action: str
    name: Optional[str] = None


def parse_command(words: list[str]) -> Command:
    """Turn the words after `habit` into a Command, or raise InvalidInputError."""
    if not words:
        return Command(Action.HELP)

    for word in words:
        if word.startswith("-"):
            raise InvalidInputError(f"{word} is not a habit command", token=word)

    first = words[0]
    if first == Action.HELP:
        return Command(Action.HELP)
    if first == Action.LIST:
        return Command(Action.LIST)

    try:
        name = HabitName.from_words(words).name
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        raise InvalidInputError(f"invalid habit name: {reason}") from exc
    return Command(Action.RECORD, name=name)


def handle_error(exc: HabitFieldError) -> None:
    logger.debug("command failed: %s", exc.to_dict())
    typer.echo(exc.message, err=True)
    raise typer.Exit(code=exc.exit_code)


def _record(tracker: Tracker, name: str) -> None:
    result = tracker.record(name)
    if result.created:
        typer.echo(f"Habit {name} does not exist. Creating habit...")
    else:
        if result.outcome is not None and result.outcome.was_reset:
            typer.echo(
                f"Your streak for {name} has been reset! "
                f"Your previous streak was {result.outcome.previous_streak} days "
                "- Try to beat it!"
            )
        typer.echo("Habit updated!")
    typer.echo(HabitRead.model_validate(result.habit).summary())


app = typer.Typer(add_completion=False, help="Track daily habits and their streaks.")


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    words: Optional[List[str]] = typer.Argument(
        None, metavar="WORDS...", help="Habit name, or `list` / `help`."
    ),
    db_url: Optional[str] = typer.Option(
        None, "--db-url", help="Database URL. Defaults to DATABASE_URL from the environment."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr."),
) -> None:
    try:
        settings = get_settings()
        configure_logging("DEBUG" if verbose else settings.LOG_LEVEL)

        command = parse_command(list(words or []))
        if command.action == Action.HELP:
            typer.echo(HELP_TEXT)
            raise typer.Exit(code=EXIT_REJECTED)

        with open_store(db_url or settings.DATABASE_URL) as store:
            tracker = Tracker(store, reset_after=settings.streak_reset_after)
            if command.action == Action.LIST:
                typer.echo(render_listing(tracker.list()))
            else:
                _record(tracker, command.name)
    except HabitFieldError as exc:
        handle_error(exc)


if __name__ == "__main__":
    app()
