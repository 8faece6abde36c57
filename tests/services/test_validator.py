"""Tests for TaskValidator."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from todopad.models import Priority, Task, ValidationErrorKind
from todopad.services.validator import normalize_title

FIXED_NOW = datetime(2024, 6, 1, 8, 0)

K = ValidationErrorKind


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------


class TestValidateTitle:
    def test_whitespace_title_reports_only_empty(self, validator):
        existing = [Task(title="  ")]
        result = validator.validate_title("  ", existing)
        assert not result.is_valid
        assert result.kinds == [K.EMPTY_TITLE]

    def test_title_too_long(self, validator):
        result = validator.validate_title("a" * 101, [])
        assert result.kinds == [K.TITLE_TOO_LONG]
        assert result.first_error.params == {"max_length": 100}

    def test_title_at_limit_is_valid(self, validator):
        assert validator.validate_title("a" * 100, []).is_valid

    def test_length_counts_trimmed_title(self, validator):
        assert validator.validate_title("  " + "a" * 100 + "  ", []).is_valid

    def test_duplicate_is_case_insensitive(self, validator):
        existing = [Task(title="Buy milk")]
        result = validator.validate_title("buy milk", existing)
        assert result.kinds == [K.DUPLICATE_TITLE]

    def test_duplicate_ignores_surrounding_whitespace(self, validator):
        existing = [Task(title="  Buy milk ")]
        assert validator.validate_title("BUY MILK", existing).kinds == [K.DUPLICATE_TITLE]

    def test_own_id_is_excluded(self, validator):
        task = Task(title="Buy milk")
        assert validator.validate_title("buy milk", [task], exclude_id=task.id).is_valid

    def test_long_duplicate_reports_both(self, validator):
        title = "b" * 101
        result = validator.validate_title(title, [Task(title=title)])
        assert result.kinds == [K.TITLE_TOO_LONG, K.DUPLICATE_TITLE]

    def test_normalize_title(self):
        assert normalize_title("  Buy Milk ") == "buy milk"


# ---------------------------------------------------------------------------
# Description / priority
# ---------------------------------------------------------------------------


def test_description_limit(validator):
    assert validator.validate_description("d" * 500).is_valid
    assert validator.validate_description(None).is_valid
    result = validator.validate_description("d" * 501)
    assert result.kinds == [K.DESCRIPTION_TOO_LONG]
    assert result.first_error.params == {"max_length": 500}


@pytest.mark.parametrize("value", [Priority.LOW, "medium", "HIGH", " high "])
def test_priority_accepted(validator, value):
    assert validator.validate_priority(value).is_valid


@pytest.mark.parametrize("value", ["urgent", "", None, 3])
def test_priority_rejected(validator, value):
    assert validator.validate_priority(value).kinds == [K.INVALID_PRIORITY]


# ---------------------------------------------------------------------------
# Time / date
# ---------------------------------------------------------------------------


class TestValidateTimeFormat:
    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_time_is_valid(self, validator, value):
        assert validator.validate_time_format(value).is_valid

    @pytest.mark.parametrize("value", ["7:5", "24:00", "12:60", "ab:cd", "12:3", "123:00"])
    def test_malformed_time(self, validator, value):
        assert validator.validate_time_format(value).kinds == [K.INVALID_TIME_FORMAT]

    def test_later_today_is_valid(self, validator):
        assert validator.validate_time_format("23:59").is_valid
        assert validator.validate_time_format("08:00").is_valid

    def test_elapsed_time_is_past(self, validator):
        assert validator.validate_time_format("07:59").kinds == [K.PAST_TIME]


class TestValidateDate:
    def test_yesterday_is_past(self, validator):
        yesterday = FIXED_NOW - timedelta(days=1)
        assert validator.validate_date(yesterday).kinds == [K.PAST_DATE]

    def test_earlier_today_is_valid(self, validator):
        assert validator.validate_date(datetime(2024, 6, 1, 0, 0)).is_valid

    def test_missing_optional_date(self, validator):
        assert validator.validate_date(None).is_valid

    def test_missing_required_date(self, validator):
        assert validator.validate_date(None, is_required=True).kinds == [K.PAST_DATE]


class TestValidateDueDateTime:
    def test_time_without_date(self, validator):
        result = validator.validate_due_date_time(None, "09:30")
        assert result.kinds == [K.TIME_WITHOUT_DATE]

    def test_date_and_time(self, validator):
        assert validator.validate_due_date_time(datetime(2024, 6, 2), "09:30").is_valid

    def test_errors_are_collected_in_order(self, validator):
        result = validator.validate_due_date_time(datetime(2024, 5, 1), "07:00")
        assert result.kinds == [K.PAST_DATE, K.PAST_TIME]

    def test_past_time_ignores_date(self, validator):
        # The time check compares against today's clock only.
        result = validator.validate_due_date_time(datetime(2024, 6, 5), "06:00")
        assert result.kinds == [K.PAST_TIME]


class TestValidateDailyTask:
    def test_valid(self, validator):
        result = validator.validate_daily_task("09:00", datetime(2024, 6, 30), FIXED_NOW)
        assert result.is_valid

    def test_end_before_start(self, validator):
        result = validator.validate_daily_task(
            None, datetime(2024, 6, 2), start_date=datetime(2024, 6, 10)
        )
        assert result.kinds == [K.DAILY_END_DATE_BEFORE_START]

    def test_end_in_past(self, validator):
        result = validator.validate_daily_task(
            None, datetime(2024, 5, 20), start_date=datetime(2024, 5, 1)
        )
        assert result.kinds == [K.INVALID_DAILY_END_DATE]

    def test_bad_time_and_end_before_start(self, validator):
        result = validator.validate_daily_task(
            "7am", datetime(2024, 5, 20), start_date=FIXED_NOW
        )
        assert result.kinds == [
            K.INVALID_TIME_FORMAT,
            K.DAILY_END_DATE_BEFORE_START,
            K.INVALID_DAILY_END_DATE,
        ]


# ---------------------------------------------------------------------------
# Whole task
# ---------------------------------------------------------------------------


class TestValidateSchedule:
    def test_daily_with_due_date_conflicts(self, validator):
        task = Task(title="x", is_daily=True, due_date=datetime(2024, 6, 2))
        assert validator.validate_schedule(task).kinds == [K.CONFLICTING_SCHEDULE_FIELDS]

    def test_one_off_with_daily_time_conflicts(self, validator):
        task = Task(title="x", daily_time="09:00")
        assert validator.validate_schedule(task).kinds == [K.CONFLICTING_SCHEDULE_FIELDS]

    def test_due_after_daily_end(self, validator):
        task = Task(
            title="x",
            is_daily=True,
            due_date=datetime(2024, 6, 10),
            daily_end_date=datetime(2024, 6, 5),
        )
        assert validator.validate_schedule(task).kinds == [
            K.CONFLICTING_SCHEDULE_FIELDS,
            K.DUE_DATE_AFTER_DAILY_END,
        ]

    def test_plain_tasks_are_fine(self, validator):
        assert validator.validate_schedule(Task(title="x")).is_valid
        assert validator.validate_schedule(
            Task(title="y", is_daily=True, daily_time="09:00")
        ).is_valid


class TestValidateAll:
    def test_valid_task(self, validator, make_task):
        task = make_task("Report", due_date=datetime(2024, 6, 3), due_time="17:00")
        assert validator.validate_all(task, []).is_valid

    def test_collects_errors_across_fields(self, validator, make_task):
        task = make_task(
            "buy milk",
            description="d" * 501,
            due_date=datetime(2024, 5, 1),
        )
        result = validator.validate_all(task, [Task(title="Buy milk")])
        assert result.kinds == [K.DUPLICATE_TITLE, K.DESCRIPTION_TOO_LONG, K.PAST_DATE]

    def test_updating_task_does_not_clash_with_itself(self, validator, make_task):
        task = make_task("Report")
        assert validator.validate_all(task, [task]).is_valid

    def test_daily_end_date_checked_against_creation(self, validator):
        task = Task(
            title="Stretch",
            is_daily=True,
            created_at=datetime(2024, 6, 10),
            daily_end_date=datetime(2024, 6, 5),
        )
        assert K.DAILY_END_DATE_BEFORE_START in validator.validate_all(task, []).kinds

    def test_non_daily_skips_daily_checks(self, validator, make_task):
        task = make_task("Report")
        assert validator.validate_all(task, []).is_valid
