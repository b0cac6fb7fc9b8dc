"""
Doubly-linked list stored in a slot map.

Nodes live in a `SlotMap` and link to each other by key. A `Cursor` is just
a key: it does not hold on to the list, it can be copied and compared freely,
and it stays valid while other nodes are inserted, removed or have their
values swapped. This is what lets quick sort walk a linked list with several
cursors while swapping values underneath them.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from typing_extensions import Self

from data_structure.slot_map import SlotKey, SlotMap

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    prev: SlotKey | None = None
    next: SlotKey | None = None


@dataclass(frozen=True, slots=True)
class Cursor:
    """Position of a node in a LinkedList."""

    key: SlotKey

    def __repr__(self) -> str:
        return f"Cursor({self.key.index}v{self.key.generation})"


class LinkedList(Generic[T]):
    """
    Doubly-linked list with list-independent cursors.

    Example:
        >>> items = LinkedList[int]()
        >>> first = items.push_back(1)
        >>> _ = items.push_back(3)
        >>> _ = items.insert_after(first, 2)
        >>> list(items)
        [1, 2, 3]
    """

    def __init__(self) -> None:
        self._nodes: SlotMap[_Node[T]] = SlotMap()
        self._head: SlotKey | None = None
        self._tail: SlotKey | None = None

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> Self:
        linked_list = cls()
        for value in values:
            linked_list.push_back(value)
        return linked_list

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        cursor = self.begin()
        while cursor is not None:
            yield self.get(cursor)
            cursor = self.next_cursor(cursor)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"

    def size(self) -> int:
        return len(self._nodes)

    # Insertion

    def push_back(self, value: T) -> Cursor:
        new_key = self._nodes.insert(_Node(value))
        if self._tail is None:
            self._head = self._tail = new_key
        else:
            self._link(self._tail, new_key)
            self._tail = new_key
        return Cursor(new_key)

    def push_front(self, value: T) -> Cursor:
        new_key = self._nodes.insert(_Node(value))
        if self._head is None:
            self._head = self._tail = new_key
        else:
            self._link(new_key, self._head)
            self._head = new_key
        return Cursor(new_key)

    def insert_after(self, cursor: Cursor, value: T) -> Cursor:
        """(cursor -> next) becomes (cursor -> new -> next)."""
        following = self._node(cursor).next
        new_key = self._nodes.insert(_Node(value))

        self._link(cursor.key, new_key)
        if following is None:
            self._tail = new_key
        else:
            self._link(new_key, following)
        return Cursor(new_key)

    def insert_before(self, cursor: Cursor, value: T) -> Cursor:
        """(prev -> cursor) becomes (prev -> new -> cursor)."""
        preceding = self._node(cursor).prev
        new_key = self._nodes.insert(_Node(value))

        self._link(new_key, cursor.key)
        if preceding is None:
            self._head = new_key
        else:
            self._link(preceding, new_key)
        return Cursor(new_key)

    # Removal

    def remove_at(self, cursor: Cursor) -> T | None:
        """
        Unlinks the node at cursor and returns its value.

        Returns None if the cursor is stale (its node was already removed).
        """
        node = self._nodes.remove(cursor.key)
        if node is None:
            return None

        if node.prev is None:
            self._head = node.next
        else:
            self._nodes[node.prev].next = node.next

        if node.next is None:
            self._tail = node.prev
        else:
            self._nodes[node.next].prev = node.prev

        return node.value

    # Access

    def begin(self) -> Cursor | None:
        return None if self._head is None else Cursor(self._head)

    def end(self) -> Cursor | None:
        """Cursor at the last element (not past it)."""
        return None if self._tail is None else Cursor(self._tail)

    def get(self, cursor: Cursor) -> T:
        return self._node(cursor).value

    def set(self, cursor: Cursor, value: T) -> None:
        self._node(cursor).value = value

    def swap(self, a: Cursor, b: Cursor) -> bool:
        """
        Swaps the values at two cursors.

        Returns False (and does nothing) if the cursors are equal or stale.
        """
        if a == b or a.key not in self._nodes or b.key not in self._nodes:
            return False
        node_a = self._nodes[a.key]
        node_b = self._nodes[b.key]
        node_a.value, node_b.value = node_b.value, node_a.value
        return True

    def next_cursor(self, cursor: Cursor) -> Cursor | None:
        following = self._node(cursor).next
        return None if following is None else Cursor(following)

    def prev_cursor(self, cursor: Cursor) -> Cursor | None:
        preceding = self._node(cursor).prev
        return None if preceding is None else Cursor(preceding)

    def cursors(self) -> Iterator[Cursor]:
        cursor = self.begin()
        while cursor is not None:
            yield cursor
            cursor = self.next_cursor(cursor)

    def is_valid(self) -> bool:
        """Checks head/tail boundaries, back links, and that every node is linked exactly once."""
        if self._head is None or self._tail is None:
            return self._head is None and self._tail is None and len(self._nodes) == 0

        if self._nodes[self._head].prev is not None:
            return False
        if self._nodes[self._tail].next is not None:
            return False

        visited: set[SlotKey] = set()
        current: SlotKey | None = self._head
        while current is not None:
            if current in visited:
                return False
            visited.add(current)
            following = self._nodes[current].next
            if following is not None and self._nodes[following].prev != current:
                return False
            current = following

        return len(visited) == len(self._nodes)

    def _node(self, cursor: Cursor) -> _Node[T]:
        """Raises KeyError for a stale cursor."""
        return self._nodes[cursor.key]

    def _link(self, left: SlotKey, right: SlotKey) -> None:
        self._nodes[left].next = right
        self._nodes[right].prev = left
