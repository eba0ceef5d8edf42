from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, TypeVar
import threading

from loguru import logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class CacheResult(Generic[V]):
    value: V | None
    hit: bool


@dataclass
class CacheStats:
    name: str
    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int


class BoundedCache(Generic[K, V]):
    """Thread-safe LRU map with a fixed capacity.

    Keys compare by plain equality, so text keys must match exactly. A
    capacity of 0 stores nothing.
    """

    def __init__(self, capacity: int, name: str = "cache"):
        if capacity < 0:
            raise ValueError("cache capacity must be non-negative")
        self.name = name
        self.capacity = capacity
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: K) -> CacheResult[V]:
        with self._lock:
            if key not in self._entries:
                self._misses += 1
                return CacheResult(value=None, hit=False)
            self._entries.move_to_end(key)
            self._hits += 1
            return CacheResult(value=self._entries[key], hit=True)

    def set(self, key: K, value: V) -> None:
        if self.capacity == 0:
            return
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            self._entries[key] = value
            while len(self._entries) > self.capacity:
                self._entries.popitem(last=False)
                self._evictions += 1
                logger.bind(cache_name=self.name).debug("Evicted least recently used entry")

    def get_or_compute(self, key: K, compute: Callable[[K], V]) -> V:
        cached = self.get(key)
        if cached.hit:
            return cached.value  # type: ignore[return-value]
        # Computed outside the lock; a concurrent miss may compute too and the last write wins.
        value = compute(key)
        self.set(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[K]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._entries)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                name=self.name,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._entries),
                capacity=self.capacity,
            )

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
