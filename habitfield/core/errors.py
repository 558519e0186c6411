"""
Exception hierarchy for habitfield.

Rule: every error has a machine-readable `code` string and a process
`exit_code`, so the CLI can present any failure without inspecting its type.
Errors are raised by the store and the tracker, and handled once, at the
CLI boundary.
"""
from __future__ import annotations

from typing import Any


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_REJECTED = 1
EXIT_USAGE = 2
EXIT_STORE = 3


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class HabitFieldError(Exception):
    """Base class for all application-level errors."""
    exit_code: int = EXIT_REJECTED
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidInputError(HabitFieldError):
    exit_code = EXIT_USAGE
    code = "INVALID_INPUT"

    def __init__(self, message: str, token: str | None = None):
        super().__init__(
            message=message,
            details={"token": token} if token is not None else {},
        )


class ConfigError(HabitFieldError):
    """A setting from the environment or `.env` failed validation."""
    exit_code = EXIT_USAGE
    code = "INVALID_CONFIG"

    def __init__(self, errors: list[dict[str, Any]]):
        fields = [".".join(str(loc) for loc in e["loc"]) for e in errors]
        reasons = "; ".join(f"{f}: {e['msg']}" for f, e in zip(fields, errors))
        super().__init__(
            message=f"invalid configuration: {reasons}",
            details={"fields": fields},
        )


class HabitAlreadyExistsError(HabitFieldError):
    code = "HABIT_ALREADY_EXISTS"

    def __init__(self, name: str):
        super().__init__(
            message=f"habit already exists: {name}",
            details={"name": name},
        )


class HabitNotFoundError(HabitFieldError):
    code = "HABIT_NOT_FOUND"

    def __init__(self, name: str):
        super().__init__(
            message=f"habit not found: {name}",
            details={"name": name},
        )


class AlreadyRecordedTodayError(HabitFieldError):
    """Business-rule rejection: the habit already has an entry for today."""
    code = "ALREADY_RECORDED_TODAY"

    def __init__(self, name: str, streak: int):
        super().__init__(
            message="habit already recorded for today",
            details={"name": name, "streak": streak},
        )


class StoreError(HabitFieldError):
    """Wraps any persistence failure coming from the database layer."""
    exit_code = EXIT_STORE
    code = "STORE_ERROR"

    def __init__(self, action: str, cause: Exception | None = None):
        reason = f": {cause}" if cause is not None else ""
        super().__init__(
            message=f"failed to {action}{reason}",
            details={"action": action},
        )
