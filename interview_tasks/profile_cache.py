"""In-memory cache of user profiles with a time-to-live and background cleanup."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

TTL_SEC = 2.0


@dataclass
class Order:
    """An order that belongs to a profile."""

    uuid: str = ""
    value: Any = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Profile:
    """A user profile together with its orders."""

    uuid: str = ""
    name: str = ""
    orders: list[Order] = field(default_factory=list)


@dataclass(frozen=True)
class _CacheItem:
    profile: Profile
    expires_at: float


class ProfileCache:
    """Thread-safe profile cache keyed by user uuid; entries live ``ttl`` seconds."""

    def __init__(
        self, ttl: float = TTL_SEC, clock: Callable[[], float] = time.monotonic
    ) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.ttl = ttl
        self._clock = clock
        self._items: dict[str, Any] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._cleaner: threading.Thread | None = None
        self.automatic_cleanup()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __enter__(self) -> ProfileCache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_profile(self, uuid: str) -> Profile | None:
        """Return the profile under ``uuid``, or None if absent or expired."""
        with self._lock:
            item = self._items.get(uuid)
        if isinstance(item, _CacheItem) and self._clock() < item.expires_at:
            return item.profile
        return None

    def set_update_profile(self, uuid: str, profile: Profile) -> None:
        """Store the profile under ``uuid`` and restart its lifetime."""
        with self._lock:
            self._items[uuid] = _CacheItem(profile, self._clock() + self.ttl)

    def delete_profile(self, uuid: str) -> None:
        with self._lock:
            self._items.pop(uuid, None)

    def automatic_cleanup(self) -> None:
        """Start the background thread that purges expired entries."""
        if self._cleaner is not None and self._cleaner.is_alive():
            return
        self._stop.clear()
        self._cleaner = threading.Thread(target=self._cleanup_loop, daemon=True)
        self._cleaner.start()

    def close(self) -> None:
        """Stop the background cleanup thread."""
        self._stop.set()
        if self._cleaner is not None:
            self._cleaner.join()
            self._cleaner = None

    def _cleanup_loop(self) -> None:
        while not self._stop.wait(self.ttl):
            now = self._clock()
            with self._lock:
                self._items = {
                    key: item
                    for key, item in self._items.items()
                    if not (isinstance(item, _CacheItem) and now > item.expires_at)
                }