"""Tests for the Debouncer helper."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest

from todopad.utils.debounce import Debouncer


def test_zero_delay_runs_immediately_without_loop():
    callback = MagicMock()
    debouncer = Debouncer(callback, 0)

    debouncer.call()

    callback.assert_called_once_with()
    assert debouncer.scheduled is False


@pytest.mark.asyncio
async def test_burst_of_calls_runs_once():
    callback = MagicMock()
    debouncer = Debouncer(callback, 0.05)

    for _ in range(5):
        debouncer.call()
    assert debouncer.scheduled is True
    callback.assert_not_called()

    await asyncio.sleep(0.1)

    callback.assert_called_once_with()
    assert debouncer.scheduled is False


@pytest.mark.asyncio
async def test_flush_and_cancel():
    callback = MagicMock()
    debouncer = Debouncer(callback, 10)

    debouncer.flush()
    callback.assert_not_called()

    debouncer.call()
    debouncer.flush()
    callback.assert_called_once_with()

    debouncer.call()
    debouncer.cancel()
    await asyncio.sleep(0)
    assert callback.call_count == 1
    assert debouncer.scheduled is False


def test_positive_delay_needs_running_loop():
    debouncer = Debouncer(MagicMock(), 0.1)
    with pytest.raises(RuntimeError):
        debouncer.call()
