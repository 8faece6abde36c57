"""In-memory key-value storage."""

from __future__ import annotations

import json
from typing import Any

from todopad.models import StorageError
from todopad.repositories import StorageService


class InMemoryStorage(StorageService):
    """Key-value store kept in a dict.

    Values are JSON-encoded on save and decoded on load so that round-trips
    behave exactly like the durable backends.
    """

    def __init__(self):
        self._data: dict[str, str] = {}

    def save(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Failed to encode value for '{key}': {e}") from e

    def load(self, key: str) -> Any | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Failed to decode value for '{key}': {e}") from e

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def exists(self, key: str) -> bool:
        return key in self._data

    def clear(self) -> None:
        """Remove every key."""
        self._data.clear()
