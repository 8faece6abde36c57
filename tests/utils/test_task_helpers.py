"""Tests for task id resolution and unique suffixes."""

from __future__ import annotations

import pytest

from todopad.models import NotFoundError, Task
from todopad.utils.task_helpers import resolve_task
from todopad.utils.ui.formatters import calculate_unique_suffixes, short_id


def _tasks(*ids):
    return [Task(id=task_id, title=f"task {task_id}") for task_id in ids]


class TestUniqueSuffixes:
    def test_empty(self):
        assert calculate_unique_suffixes([]) == {}

    def test_grows_until_unique(self):
        result = calculate_unique_suffixes(["aaa1", "bbb1", "ccc2"])
        assert result == {"aaa1": 2, "bbb1": 2, "ccc2": 1}

    def test_id_that_is_suffix_of_another(self):
        result = calculate_unique_suffixes(["abc", "xabc"])
        assert result["xabc"] == 4
        assert result["abc"] == 3

    def test_short_id(self):
        assert short_id("abcdef123", {"abcdef123": 2}) == "23"
        assert short_id("abcdef123") == "def123"


class TestResolveTask:
    def test_exact_id(self):
        tasks = _tasks("abc", "xabc")
        assert resolve_task(tasks, "abc").id == "abc"

    def test_unique_suffix(self):
        tasks = _tasks("aaa1", "bbb2")
        assert resolve_task(tasks, "2").id == "bbb2"
        assert resolve_task(tasks, " a1 ").id == "aaa1"

    def test_no_match(self):
        with pytest.raises(NotFoundError):
            resolve_task(_tasks("aaa1"), "zz")

    def test_empty_reference(self):
        with pytest.raises(NotFoundError):
            resolve_task(_tasks("aaa1"), "")

    def test_ambiguous_suffix_lists_choices(self):
        tasks = _tasks("aaa1", "bbb1")
        with pytest.raises(ValueError) as exc_info:
            resolve_task(tasks, "1")
        message = str(exc_info.value)
        assert "[a1] task aaa1" in message
        assert "[b1] task bbb1" in message
