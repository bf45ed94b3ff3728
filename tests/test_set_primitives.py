"""
Tests for primitive Set operations.

Covers contains, insert, remove, remove_all, arbitrary access, extension and
copies.
"""

import copy
import pytest

from hashset import Set, EmptySetError, SetError


class TestInsertRemove:
    """insert / remove / remove_all."""

    def test_insert(self):
        s = Set()
        s.insert(1)
        assert s.contains(1)
        assert 1 in s
        assert s.count == 1

    def test_insert_idempotent(self):
        once = Set()
        once.insert("x")
        twice = Set()
        twice.insert("x")
        twice.insert("x")
        assert once == twice
        assert twice.count == 1

    def test_remove(self):
        s = Set([1, 2, 3])
        s.remove(2)
        assert not s.contains(2)
        assert s == Set([1, 3])

    def test_remove_absent_is_noop(self):
        s = Set([1, 2])
        s.remove(99)
        assert s == Set([1, 2])

    def test_remove_from_empty(self):
        s = Set()
        s.remove(1)
        assert s.is_empty

    def test_remove_all(self):
        s = Set(range(5))
        s.remove_all()
        assert s.is_empty
        assert s.count == 0

    def test_equal_elements_are_one(self):
        """1 and 1.0 are equal and hash equal, so they share one slot."""
        s = Set([1, 1.0, True])
        assert s.count == 1


class TestArbitraryAccess:
    """pick_arbitrary / insert_arbitrary."""

    def test_pick_returns_member(self):
        s = Set(["a", "b", "c"])
        assert s.pick_arbitrary() in s

    def test_pick_does_not_remove(self):
        s = Set([7])
        assert s.pick_arbitrary() == 7
        assert s.count == 1

    def test_pick_empty_raises(self):
        with pytest.raises(EmptySetError):
            Set().pick_arbitrary()

    def test_pick_empty_error_classes(self):
        """EmptySetError is both a SetError and a KeyError."""
        with pytest.raises(SetError):
            Set().pick_arbitrary()
        with pytest.raises(KeyError):
            Set().pick_arbitrary()

    def test_insert_arbitrary(self):
        s = Set()
        s.insert_arbitrary(5)
        assert s == Set([5])
        assert s.pick_arbitrary() == 5


class TestExtend:
    """extend / append / +=."""

    def test_extend(self):
        s = Set([1])
        s.extend([2, 3, 3])
        assert s == Set([1, 2, 3])

    def test_append(self):
        s = Set()
        s.append(1)
        s.append(1)
        assert s == Set([1])

    def test_iadd(self):
        s = Set([1])
        original = s
        s += [2, 3]
        assert s is original
        assert s == Set([1, 2, 3])

    def test_extend_with_self(self):
        s = Set([1, 2])
        s.extend(s)
        assert s == Set([1, 2])

    def test_extend_from_derived_generator(self):
        s = Set([1, 2, 3])
        s.extend(x + 10 for x in s)
        assert s == Set([1, 2, 3, 11, 12, 13])

    def test_reserve_capacity_keeps_contents(self):
        s = Set([1, 2])
        s.reserve_capacity(1000)
        assert s == Set([1, 2])
        assert s.capacity_hint == 1000


class TestCopies:
    """Copies never share storage."""

    def test_copy_is_independent(self):
        a = Set([1, 2])
        b = a.copy()
        b.insert(3)
        a.remove(1)
        assert a == Set([2])
        assert b == Set([1, 2, 3])

    def test_copy_module(self):
        a = Set([1, 2])
        b = copy.copy(a)
        b.remove_all()
        assert a.count == 2

    def test_deepcopy(self):
        a = Set([(1, 2), (3, 4)])
        b = copy.deepcopy(a)
        b.insert((5, 6))
        assert a == Set([(1, 2), (3, 4)])
        assert b.count == 3
