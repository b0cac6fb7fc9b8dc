"""Tests for data_structure/slot_map.py and data_structure/linked_list.py"""

import pytest

from data_structure.linked_list import LinkedList
from data_structure.slot_map import SlotKey, SlotMap


class TestSlotMap:
    def test_insert_and_get(self):
        slots = SlotMap()
        a = slots.insert("a")
        b = slots.insert("b")
        assert slots[a] == "a"
        assert slots[b] == "b"
        assert len(slots) == 2

    def test_set_item(self):
        slots = SlotMap()
        key = slots.insert(1)
        slots[key] = 2
        assert slots[key] == 2

    def test_remove_makes_key_stale(self):
        slots = SlotMap()
        key = slots.insert("a")
        assert slots.remove(key) == "a"
        assert key not in slots
        assert slots.remove(key) is None
        assert slots.get(key) is None
        with pytest.raises(KeyError):
            slots[key]
        with pytest.raises(KeyError):
            slots[key] = "b"

    def test_recycled_slot_does_not_alias(self):
        """A freed slot is reused with a new generation."""
        slots = SlotMap()
        old = slots.insert("old")
        slots.remove(old)
        new = slots.insert("new")

        assert new.index == old.index
        assert new.generation == old.generation + 1
        assert slots[new] == "new"
        assert old not in slots

    def test_unknown_key(self):
        slots = SlotMap()
        assert SlotKey(5, 0) not in slots
        assert "not a key" not in slots
        assert slots.get(SlotKey(5, 0), "default") == "default"

    def test_keys(self):
        slots = SlotMap()
        keys = [slots.insert(i) for i in range(4)]
        slots.remove(keys[1])
        assert list(slots.keys()) == [keys[0], keys[2], keys[3]]


class TestLinkedList:
    def test_push_back_and_front(self):
        items = LinkedList()
        items.push_back(2)
        items.push_back(3)
        items.push_front(1)
        assert list(items) == [1, 2, 3]
        assert len(items) == 3
        assert items.size() == 3
        assert items.is_valid()

    def test_empty_list(self):
        items = LinkedList()
        assert items.begin() is None
        assert items.end() is None
        assert list(items) == []
        assert items.is_valid()

    def test_insert_after_and_before(self):
        items = LinkedList.from_iterable([1, 4])
        first = items.begin()
        last = items.end()
        items.insert_after(first, 2)
        items.insert_before(last, 3)
        items.insert_before(first, 0)
        items.insert_after(last, 5)
        assert list(items) == [0, 1, 2, 3, 4, 5]
        assert items.get(items.begin()) == 0
        assert items.get(items.end()) == 5
        assert items.is_valid()

    def test_remove_at(self):
        items = LinkedList.from_iterable(["a", "b", "c"])
        cursors = list(items.cursors())

        assert items.remove_at(cursors[1]) == "b"
        assert list(items) == ["a", "c"]
        assert items.remove_at(cursors[1]) is None

        assert items.remove_at(cursors[0]) == "a"
        assert items.remove_at(cursors[2]) == "c"
        assert list(items) == []
        assert items.is_valid()

    def test_cursors_survive_other_changes(self):
        items = LinkedList.from_iterable([1, 2, 3])
        middle = list(items.cursors())[1]
        items.remove_at(items.begin())
        items.push_front(0)
        items.push_back(4)
        assert items.get(middle) == 2
        assert items.prev_cursor(middle) == items.begin()

    def test_stale_cursor_raises(self):
        items = LinkedList.from_iterable([1])
        cursor = items.begin()
        items.remove_at(cursor)
        with pytest.raises(KeyError):
            items.get(cursor)

    def test_get_set(self):
        items = LinkedList.from_iterable([1, 2])
        cursor = items.end()
        items.set(cursor, 20)
        assert list(items) == [1, 20]

    def test_swap(self):
        items = LinkedList.from_iterable([1, 2, 3])
        first, _, last = items.cursors()
        assert items.swap(first, last)
        assert list(items) == [3, 2, 1]
        # Cursors keep pointing at their nodes, not at the values
        assert items.get(first) == 3

    def test_swap_same_or_stale(self):
        items = LinkedList.from_iterable([1, 2])
        first, second = items.cursors()
        assert not items.swap(first, first)
        items.remove_at(second)
        assert not items.swap(first, second)
        assert list(items) == [1]

    def test_navigation(self):
        items = LinkedList.from_iterable("abc")
        cursor = items.begin()
        seen = []
        while cursor is not None:
            seen.append(items.get(cursor))
            cursor = items.next_cursor(cursor)
        assert seen == ["a", "b", "c"]
        assert items.prev_cursor(items.begin()) is None
        assert items.next_cursor(items.end()) is None

    def test_is_valid_detects_broken_links(self):
        items = LinkedList.from_iterable([1, 2, 3])
        first = items.begin()
        items._nodes[first.key].prev = items.end().key
        assert not items.is_valid()
