"""
Memo of recommendation responses.

Ranking is a pure function of the resolved inputs (state + templates), so a
response can be reused for an identical body until it ages out.  Entries
expire after ``ttl`` seconds and the oldest are evicted past ``max_entries``.
"""

from __future__ import annotations

import hashlib
import json
import time
from collections import OrderedDict
from typing import Any

_DEFAULT_TTL = 300  # 5 minutes
_DEFAULT_MAX_ENTRIES = 256


class ResponseCache:
    def __init__(self, ttl: float = _DEFAULT_TTL, max_entries: int = _DEFAULT_MAX_ENTRIES) -> None:
        self.ttl = ttl
        self.max_entries = max_entries
        self._entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def make_key(inputs: dict[str, Any]) -> str:
        normalized = json.dumps(inputs, sort_keys=True, default=str)
        return hashlib.sha256(normalized.encode()).hexdigest()[:16]

    def get(self, inputs: dict[str, Any]) -> Any | None:
        key = self.make_key(inputs)
        entry = self._entries.get(key)
        if entry is not None and time.time() - entry[0] < self.ttl:
            self._entries.move_to_end(key)
            self.hits += 1
            return entry[1]
        if entry is not None:
            del self._entries[key]
        self.misses += 1
        return None

    def set(self, inputs: dict[str, Any], value: Any) -> None:
        key = self.make_key(inputs)
        self._entries[key] = (time.time(), value)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def stats(self) -> dict[str, Any]:
        total = self.hits + self.misses
        return {
            "size": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": round(self.hits / total * 100, 1) if total > 0 else 0.0,
        }

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0


_response_cache = ResponseCache()


def cache_get(inputs: dict[str, Any]) -> Any | None:
    return _response_cache.get(inputs)


def cache_set(inputs: dict[str, Any], value: Any) -> None:
    _response_cache.set(inputs, value)


def get_cache_stats() -> dict[str, Any]:
    return _response_cache.stats()


def clear_cache() -> None:
    _response_cache.clear()
