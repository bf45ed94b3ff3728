"""
Tests for Set construction.

Covers empty, capacity-hinted, sequence and literal construction.
"""

import pytest

from hashset import Set


class TestEmptyConstruction:
    """Empty sets."""

    def test_default_is_empty(self):
        s = Set()
        assert s.is_empty
        assert s.count == 0
        assert len(s) == 0

    def test_empty_classmethod(self):
        assert Set.empty() == Set()

    def test_minimum_capacity(self):
        """Capacity hint leaves the set empty."""
        s = Set(minimum_capacity=4)
        assert s.is_empty
        assert s.count == 0
        assert s.capacity_hint == 4

    def test_with_capacity(self):
        s = Set.with_capacity(100)
        assert s.is_empty
        assert s == Set()

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            Set(minimum_capacity=-1)


class TestSequenceConstruction:
    """Construction from iterables."""

    def test_from_list(self):
        s = Set([1, 2, 3])
        assert s.count == 3
        assert all(s.contains(x) for x in (1, 2, 3))

    def test_duplicates_collapse(self):
        s = Set([1, 1, 2, 2, 2, 3])
        assert s.count == 3

    def test_from_generator(self):
        s = Set.from_sequence(x * x for x in range(-3, 4))
        assert s == Set([0, 1, 4, 9])

    def test_from_string(self):
        assert Set("hello") == Set(["h", "e", "l", "o"])

    def test_round_trip(self):
        """Iterating a set built from a sequence yields its distinct elements."""
        seq = [5, 3, 5, 1, 3, 3, 9]
        assert sorted(Set(seq)) == sorted(set(seq))

    def test_capacity_and_elements(self):
        s = Set([1, 2], minimum_capacity=10)
        assert s.count == 2
        assert s.capacity_hint == 10


class TestLiteralConstruction:
    """Variadic construction with Set.of."""

    def test_single(self):
        assert Set.of(1) == Set([1])

    def test_several(self):
        assert Set.of(1, 2, 3) == Set([1, 2, 3])

    def test_no_arguments(self):
        assert Set.of() == Set()

    def test_tuple_is_one_element(self):
        s = Set.of((1, 2))
        assert s.count == 1
        assert s.contains((1, 2))
