from __future__ import annotations

from typing import Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")

NIL = -1


class RecencyList(Generic[K, V]):
    """Doubly linked list of cache slots, most recently used first.

    Nodes live in parallel arrays addressed by slot index, so a handle is a
    plain ``int`` that stays valid until the slot is freed. Freed slots are
    pushed on a free list and reused before the arena grows.
    """

    __slots__ = ("_keys", "_values", "_prev", "_next", "_free", "head", "tail", "size")

    def __init__(self) -> None:
        self._keys: list[K | None] = []
        self._values: list[V | None] = []
        self._prev: list[int] = []
        self._next: list[int] = []
        self._free: list[int] = []
        self.head = NIL
        self.tail = NIL
        self.size = 0

    @property
    def slots(self) -> int:
        return len(self._keys)

    def key_at(self, slot: int) -> K:
        return self._keys[slot]  # type: ignore[return-value]

    def value_at(self, slot: int) -> V:
        return self._values[slot]  # type: ignore[return-value]

    def set_value(self, slot: int, value: V) -> None:
        self._values[slot] = value

    def push_front(self, key: K, value: V) -> int:
        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
            self._values[slot] = value
        else:
            slot = len(self._keys)
            self._keys.append(key)
            self._values.append(value)
            self._prev.append(NIL)
            self._next.append(NIL)
        self._link_front(slot)
        self.size += 1
        return slot

    def move_to_front(self, slot: int) -> None:
        if slot == self.head:
            return
        self._unlink(slot)
        self._link_front(slot)

    def release(self, slot: int) -> K:
        """Unlink ``slot`` and return it to the free list, returning its key."""
        key = self._keys[slot]
        self._unlink(slot)
        self._keys[slot] = None
        self._values[slot] = None
        self._free.append(slot)
        self.size -= 1
        return key  # type: ignore[return-value]

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()
        self._prev.clear()
        self._next.clear()
        self._free.clear()
        self.head = NIL
        self.tail = NIL
        self.size = 0

    def __iter__(self) -> Iterator[int]:
        slot = self.head
        while slot != NIL:
            yield slot
            slot = self._next[slot]

    def _link_front(self, slot: int) -> None:
        self._prev[slot] = NIL
        self._next[slot] = self.head
        if self.head != NIL:
            self._prev[self.head] = slot
        self.head = slot
        if self.tail == NIL:
            self.tail = slot

    def _unlink(self, slot: int) -> None:
        prev_slot = self._prev[slot]
        next_slot = self._next[slot]
        if prev_slot != NIL:
            self._next[prev_slot] = next_slot
        else:
            self.head = next_slot
        if next_slot != NIL:
            self._prev[next_slot] = prev_slot
        else:
            self.tail = prev_slot
        self._prev[slot] = NIL
        self._next[slot] = NIL
