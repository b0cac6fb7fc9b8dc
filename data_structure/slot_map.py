"""
Slot map (generational arena).

Values live in a flat list of slots addressed by `SlotKey(index, generation)`.
Removing a value frees its slot and bumps the slot's generation, so keys held
elsewhere become stale instead of silently pointing at a later value stored
in the recycled slot.

Operations:
- insert(value) -> key      O(1)
- map[key], map[key] = v    O(1), KeyError on stale keys
- remove(key) -> value      O(1), None on stale keys
"""

from collections.abc import Iterator
from typing import Generic, NamedTuple, TypeVar

V = TypeVar("V")


class SlotKey(NamedTuple):
    index: int
    generation: int


class _Slot(Generic[V]):
    __slots__ = ("generation", "occupied", "value")

    def __init__(self) -> None:
        self.generation = 0
        self.occupied = False
        self.value: V | None = None


class SlotMap(Generic[V]):
    """
    Arena of values addressed by generational keys.

    Example:
        >>> slots = SlotMap[str]()
        >>> key = slots.insert("a")
        >>> slots[key]
        'a'
        >>> slots.remove(key)
        'a'
        >>> key in slots
        False
    """

    def __init__(self) -> None:
        self._slots: list[_Slot[V]] = []
        self._free: list[int] = []
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __contains__(self, key: object) -> bool:
        return isinstance(key, SlotKey) and self._live_slot(key) is not None

    def __getitem__(self, key: SlotKey) -> V:
        slot = self._live_slot(key)
        if slot is None:
            raise KeyError(key)
        return slot.value  # type: ignore[return-value]

    def __setitem__(self, key: SlotKey, value: V) -> None:
        slot = self._live_slot(key)
        if slot is None:
            raise KeyError(key)
        slot.value = value

    def get(self, key: SlotKey, default: V | None = None) -> V | None:
        slot = self._live_slot(key)
        return default if slot is None else slot.value

    def insert(self, value: V) -> SlotKey:
        """Stores value in a free slot (or a new one) and returns its key."""
        if self._free:
            index = self._free.pop()
            slot = self._slots[index]
        else:
            index = len(self._slots)
            slot = _Slot()
            self._slots.append(slot)

        slot.occupied = True
        slot.value = value
        self._len += 1
        return SlotKey(index, slot.generation)

    def remove(self, key: SlotKey) -> V | None:
        """Removes and returns the value for key, or None if the key is stale."""
        slot = self._live_slot(key)
        if slot is None:
            return None

        value = slot.value
        slot.value = None
        slot.occupied = False
        slot.generation += 1
        self._free.append(key.index)
        self._len -= 1
        return value

    def keys(self) -> Iterator[SlotKey]:
        for index, slot in enumerate(self._slots):
            if slot.occupied:
                yield SlotKey(index, slot.generation)

    def _live_slot(self, key: SlotKey) -> _Slot[V] | None:
        if not 0 <= key.index < len(self._slots):
            return None
        slot = self._slots[key.index]
        if not slot.occupied or slot.generation != key.generation:
            return None
        return slot
