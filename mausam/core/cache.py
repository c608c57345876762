from __future__ import annotations

import time
from threading import Lock
from typing import Any, Dict, Tuple


DEFAULT_TTL = 10 * 60


def coord_key(latitude: float, longitude: float) -> str:
    """Normalize coordinates to four decimals so nearby requests share a slot."""
    return f"{float(latitude):.4f},{float(longitude):.4f}"


class WeatherCache:
    """Process-local TTL cache with lazy expiry on read.

    Expired entries stay in memory until they are read again or overwritten;
    there is no background sweep and no size bound.
    """

    def __init__(self, time_func=time.monotonic, default_ttl: float = DEFAULT_TTL) -> None:
        self._time_func = time_func
        self._default_ttl = default_ttl
        self._storage: Dict[str, Tuple[float, Any]] = {}
        self._lock = Lock()

    def get(self, key: str) -> Any:
        with self._lock:
            item = self._storage.get(key)
            if not item:
                return None
            expires_at, value = item
            if self._time_func() > expires_at:
                self._storage.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        if ttl is None:
            ttl = self._default_ttl
        with self._lock:
            self._storage[key] = (self._time_func() + ttl, value)

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()

    def __len__(self) -> int:
        return len(self._storage)


__all__ = ["DEFAULT_TTL", "WeatherCache", "coord_key"]
