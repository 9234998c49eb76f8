"""Thread-safe string key-value store."""

from __future__ import annotations

import threading


class KeyValueStore:
    """A concurrent map from string keys to string values."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        if not isinstance(value, str):
            raise TypeError("value must be a string")
        with self._lock:
            self._values[key] = value

    def get(self, key: str) -> str:
        """Return the value for ``key``; raise KeyError if it is not stored."""
        with self._lock:
            try:
                return self._values[key]
            except KeyError:
                raise KeyError(
                    f"error getting value from map, key: {key} not found"
                ) from None