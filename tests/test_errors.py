"""
Tests for the exception classes: codes, exit codes and dict payloads.
"""
from sqlalchemy.exc import OperationalError

from habitfield.core.errors import (
    EXIT_REJECTED,
    EXIT_STORE,
    EXIT_USAGE,
    AlreadyRecordedTodayError,
    HabitAlreadyExistsError,
    HabitFieldError,
    HabitNotFoundError,
    InvalidInputError,
    StoreError,
)


class TestExceptionClasses:
    def test_invalid_input_error(self):
        err = InvalidInputError("-x is not a habit command", token="-x")
        assert err.exit_code == EXIT_USAGE
        assert err.code == "INVALID_INPUT"
        assert err.to_dict()["details"]["token"] == "-x"

    def test_already_exists_error(self):
        err = HabitAlreadyExistsError("read")
        assert err.exit_code == EXIT_REJECTED
        assert err.code == "HABIT_ALREADY_EXISTS"
        assert err.message == "habit already exists: read"

    def test_not_found_error(self):
        err = HabitNotFoundError("read")
        assert err.code == "HABIT_NOT_FOUND"
        assert err.details == {"name": "read"}

    def test_already_recorded_today_error(self):
        err = AlreadyRecordedTodayError("read", streak=3)
        assert err.code == "ALREADY_RECORDED_TODAY"
        assert err.message == "habit already recorded for today"
        assert err.details["streak"] == 3

    def test_store_error_includes_cause(self):
        cause = OperationalError("SELECT 1", {}, Exception("database is locked"))
        err = StoreError("update habit", cause)
        assert err.exit_code == EXIT_STORE
        assert err.message.startswith("failed to update habit: ")
        assert "database is locked" in err.message

    def test_all_share_base_class(self):
        for err in (
            InvalidInputError("bad"),
            HabitAlreadyExistsError("a"),
            HabitNotFoundError("a"),
            AlreadyRecordedTodayError("a", 1),
            StoreError("list habits"),
        ):
            assert isinstance(err, HabitFieldError)

    def test_to_dict_details_only_when_present(self):
        d = StoreError("list habits").to_dict()
        assert d == {"code": "STORE_ERROR", "message": "failed to list habits", "details": {"action": "list habits"}}
        assert "details" not in InvalidInputError("bad").to_dict()
