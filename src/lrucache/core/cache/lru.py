from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, Iterator, TypeVar

from lrucache.core.cache.recency import NIL, RecencyList
from lrucache.core.cache.schemas import MISSING, CacheEntry

K = TypeVar("K")
V = TypeVar("V")

MIN_CAPACITY = 10

logger = logging.getLogger("lrucache.cache")


class LeastRecentlyUsedCache(Generic[K, V]):
    """Fixed-capacity cache that evicts the least recently used entry.

    A ``dict`` maps each key to its slot in a :class:`RecencyList`, so lookup,
    insertion, removal and promotion never walk the list. Reads count as use:
    ``get`` moves the entry to the most recently used end, ``contains`` does not.

    Capacities below ``MIN_CAPACITY`` are raised to it rather than rejected.
    Not thread-safe; callers sharing an instance must lock around every call,
    ``get`` included.
    """

    def __init__(self, capacity: int = MIN_CAPACITY, *, name: str = "default") -> None:
        requested = int(capacity)
        self._capacity = requested if requested >= MIN_CAPACITY else MIN_CAPACITY
        self.name = name
        self._index: dict[K, int] = {}
        self._recency: RecencyList[K, V] = RecencyList()
        if requested < MIN_CAPACITY:
            logger.debug(
                "capacity raised to floor",
                extra={
                    "extra_fields": {
                        "cache_name": name,
                        "requested_capacity": requested,
                        "capacity": self._capacity,
                    }
                },
            )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return len(self._index)

    def get(self, key: K, default: object = MISSING) -> V | object:
        slot = self._index.get(key)
        if slot is None:
            return default
        self._recency.move_to_front(slot)
        return self._recency.value_at(slot)

    def put(self, key: K, value: V) -> None:
        slot = self._index.get(key)
        if slot is not None:
            self._recency.set_value(slot, value)
            self._recency.move_to_front(slot)
            return

        if len(self._index) >= self._capacity:
            self._evict()

        self._index[key] = self._recency.push_front(key, value)

    def get_or_set(self, key: K, fn: Callable[[], V]) -> V:
        value = self.get(key)
        if value is not MISSING:
            return value  # type: ignore[return-value]
        value = fn()
        self.put(key, value)
        return value

    def remove(self, key: K) -> None:
        slot = self._index.pop(key, None)
        if slot is None:
            return
        self._recency.release(slot)

    def contains(self, key: K) -> bool:
        return key in self._index

    def most_recently_used(self) -> CacheEntry[K, V] | None:
        return self._entry_at(self._recency.head)

    def least_recently_used(self) -> CacheEntry[K, V] | None:
        return self._entry_at(self._recency.tail)

    def clear(self) -> None:
        dropped = len(self._index)
        self._index.clear()
        self._recency.clear()
        logger.debug(
            "cache cleared",
            extra={"extra_fields": {"cache_name": self.name, "dropped": dropped}},
        )

    def items(self) -> list[CacheEntry[K, V]]:
        recency = self._recency
        return [CacheEntry(recency.key_at(slot), recency.value_at(slot)) for slot in recency]

    def keys(self) -> list[K]:
        return [self._recency.key_at(slot) for slot in self._recency]

    def _evict(self) -> None:
        tail = self._recency.tail
        evicted = self._recency.release(tail)
        del self._index[evicted]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "evicted least recently used entry",
                extra={
                    "extra_fields": {
                        "cache_name": self.name,
                        "evicted_key": repr(evicted),
                        "capacity": self._capacity,
                    }
                },
            )

    def _entry_at(self, slot: int) -> CacheEntry[K, V] | None:
        if slot == NIL:
            return None
        return CacheEntry(self._recency.key_at(slot), self._recency.value_at(slot))

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, capacity={self._capacity}, count={self.count})"
