"""Tests for todopad.utils.exit_codes."""

from __future__ import annotations

import pytest

from todopad.models import TaskErrorKind
from todopad.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
    SUCCESS,
    exit_code_for,
    get_exit_code_name,
)


def test_constants():
    assert SUCCESS == 0
    assert ERROR_GENERAL == 1
    assert ERROR_INVALID_ARGS == 2
    assert ERROR_STORAGE == 3
    assert ERROR_NOT_FOUND == 5


def test_names():
    assert get_exit_code_name(ERROR_NOT_FOUND) == "ERROR_NOT_FOUND"
    assert get_exit_code_name(99) == "UNKNOWN(99)"


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        (TaskErrorKind.INVALID_TITLE, ERROR_INVALID_ARGS),
        (TaskErrorKind.CONFLICTING_SCHEDULE_FIELDS, ERROR_INVALID_ARGS),
        (TaskErrorKind.VALIDATION_FAILED, ERROR_INVALID_ARGS),
        (TaskErrorKind.NOT_FOUND, ERROR_NOT_FOUND),
        (TaskErrorKind.LOAD_FAILED, ERROR_STORAGE),
        (TaskErrorKind.DELETE_FAILED, ERROR_STORAGE),
        (TaskErrorKind.UNEXPECTED, ERROR_GENERAL),
    ],
)
def test_exit_code_for(kind, code):
    assert exit_code_for(kind) == code


def test_every_kind_is_mapped():
    known = (ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_STORAGE, ERROR_NOT_FOUND)
    for kind in TaskErrorKind:
        assert exit_code_for(kind) in known
