"""
Core Set Module for hashset

Set is an unordered collection of unique hashable elements.

Storage:
    _storage      Dict[Element, None]  - keys are the elements, values unused
    _generation   int                  - renewed whenever _storage changes
    _keys         tuple or None        - cached key order for Index lookups
    capacity_hint int                  - largest reservation requested

Hash table mechanics are left entirely to dict. Iteration order is whatever
the dict yields and is not part of the contract; it may change after any
mutation.

Value semantics:
    Algebraic operations and transforms always return a new Set. copy() (and
    copy.copy) gives a Set with its own storage, so mutating the copy never
    affects the original.

Hashing:
    Set is hashable so sets can be nested. The hash is order independent and
    consistent with ==. As with any mutable key, a set must not be mutated
    while it is stored inside another set or dict.

Not thread safe; callers synchronize externally.
"""
from copy import deepcopy
from typing import Callable, Collection, Dict, Iterable, Iterator, Optional, TypeVar

from hashset import algebra, transforms
from hashset.cursor import Index, next_generation
from hashset.errors import EmptySetError, InvalidIndexError, StaleIndexError
from hashset.hashing import set_hash

Element = TypeVar('Element')
Into = TypeVar('Into')


class Set(Collection[Element]):
    """A set of unique elements."""

    def __init__(self, iterable: Optional[Iterable[Element]] = None, *,
                 minimum_capacity: Optional[int] = None):
        """
        Initialize a set.

        Args:
            iterable: Elements to insert; later duplicates collapse silently
            minimum_capacity: Expected number of elements (hint only)
        """
        self._storage: Dict[Element, None] = {}
        self._generation = next_generation()
        self._keys = None
        self.capacity_hint = 0
        if minimum_capacity is not None:
            self.reserve_capacity(minimum_capacity)
        if iterable is not None:
            self.extend(iterable)

    @classmethod
    def empty(cls) -> 'Set[Element]':
        return cls()

    @classmethod
    def with_capacity(cls, minimum_capacity: int) -> 'Set[Element]':
        """Empty set sized for at least minimum_capacity elements."""
        return cls(minimum_capacity=minimum_capacity)

    @classmethod
    def from_sequence(cls, iterable: Iterable[Element]) -> 'Set[Element]':
        return cls(iterable)

    @classmethod
    def of(cls, *elements: Element) -> 'Set[Element]':
        """Literal construction: Set.of(1, 2, 3) == Set([1, 2, 3])."""
        return cls(elements)

    # ========================================================================
    # Size
    # ========================================================================

    @property
    def count(self) -> int:
        """The number of elements in the set."""
        return len(self._storage)

    @property
    def is_empty(self) -> bool:
        """True iff count == 0."""
        return not self._storage

    @property
    def generation(self) -> int:
        return self._generation

    def __len__(self) -> int:
        return len(self._storage)

    # ========================================================================
    # Primitive operations
    # ========================================================================

    def _touch(self):
        """Record a change to storage, invalidating every issued Index."""
        self._generation = next_generation()
        self._keys = None

    def contains(self, element: Element) -> bool:
        return element in self._storage

    def __contains__(self, element) -> bool:
        return element in self._storage

    def insert(self, element: Element):
        """Add element unless an equal element is already present."""
        if element not in self._storage:
            self._storage[element] = None
            self._touch()

    def remove(self, element: Element):
        """Remove the element equal to element, if any."""
        if element in self._storage:
            del self._storage[element]
            self._touch()

    def remove_all(self):
        if self._storage:
            self._storage.clear()
            self._touch()

    def pick_arbitrary(self) -> Element:
        """
        Return some element of the set without removing it.

        Which element is unspecified. Calling this on an empty set is a
        caller error and raises EmptySetError.
        """
        for each in self._storage:
            return each
        raise EmptySetError("pick_arbitrary() called on an empty set")

    def insert_arbitrary(self, element: Element):
        """Counterpart of pick_arbitrary; same as insert."""
        self.insert(element)

    # ========================================================================
    # Extension
    # ========================================================================

    def extend(self, iterable: Iterable[Element]):
        """Insert each element of iterable."""
        # Drain first so extending from a view of self cannot change the dict mid-iteration
        for each in list(iterable):
            self.insert(each)

    def append(self, element: Element):
        self.insert(element)

    def __iadd__(self, iterable: Iterable[Element]) -> 'Set[Element]':
        self.extend(iterable)
        return self

    def reserve_capacity(self, n: int):
        """
        Hint that the set will hold about n elements.

        dict cannot preallocate, so this only records the hint. Contents are
        never changed and no Index is invalidated.
        """
        if n < 0:
            raise ValueError(f"capacity must be non-negative, got {n}")
        self.capacity_hint = max(self.capacity_hint, n)

    def copy(self) -> 'Set[Element]':
        """Independent copy with its own storage."""
        result = self.__class__()
        result._storage = dict(self._storage)
        result.capacity_hint = self.capacity_hint
        return result

    __copy__ = copy

    def __deepcopy__(self, memo) -> 'Set[Element]':
        result = self.__class__(deepcopy(list(self._storage), memo))
        result.capacity_hint = self.capacity_hint
        return result

    def __getstate__(self):
        return {'elements': list(self._storage), 'capacity_hint': self.capacity_hint}

    def __setstate__(self, state):
        # Generations are process local; an unpickled set always starts a new one
        self._storage = dict.fromkeys(state['elements'])
        self._generation = next_generation()
        self._keys = None
        self.capacity_hint = state['capacity_hint']

    # ========================================================================
    # Iteration & indexing
    # ========================================================================

    def __iter__(self) -> Iterator[Element]:
        return iter(self._storage)

    def _snapshot(self) -> tuple:
        if self._keys is None:
            self._keys = tuple(self._storage)
        return self._keys

    def _check(self, index: Index):
        if not isinstance(index, Index):
            raise TypeError(f"Set indices must be Index, not {type(index).__name__}")
        if index.generation != self._generation:
            raise StaleIndexError(f"{index!r} was issued before the set was last mutated")

    @property
    def start_index(self) -> Index:
        return Index(self._generation, 0)

    @property
    def end_index(self) -> Index:
        """Position one past the last element."""
        return Index(self._generation, len(self._storage))

    def index_after(self, index: Index) -> Index:
        self._check(index)
        if not 0 <= index.position < len(self._storage):
            raise InvalidIndexError(f"cannot advance past {index!r}")
        return Index(self._generation, index.position + 1)

    def indices(self) -> Iterator[Index]:
        """Every valid Index, from start_index up to (not including) end_index."""
        generation = self._generation
        for position in range(len(self._storage)):
            yield Index(generation, position)

    def __getitem__(self, index: Index) -> Element:
        self._check(index)
        keys = self._snapshot()
        if not 0 <= index.position < len(keys):
            raise InvalidIndexError(f"{index!r} does not point at an element")
        return keys[index.position]

    # ========================================================================
    # Algebra
    # ========================================================================

    def union(self, other: 'Set[Element]') -> 'Set[Element]':
        return algebra.union(self, other)

    def intersection(self, other: 'Set[Element]') -> 'Set[Element]':
        return algebra.intersection(self, other)

    def complement(self, other: 'Set[Element]') -> 'Set[Element]':
        """Elements of self that are not in other."""
        return algebra.complement(self, other)

    def difference(self, other: 'Set[Element]') -> 'Set[Element]':
        """Elements in exactly one of self and other."""
        return algebra.difference(self, other)

    def subset(self, other: 'Set[Element]') -> bool:
        return algebra.subset(self, other)

    def strict_subset(self, other: 'Set[Element]') -> bool:
        return algebra.strict_subset(self, other)

    def superset(self, other: 'Set[Element]') -> bool:
        return algebra.superset(self, other)

    def strict_superset(self, other: 'Set[Element]') -> bool:
        return algebra.strict_superset(self, other)

    def __or__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.complement(other)

    def __xor__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.difference(other)

    def __le__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.subset(other)

    def __lt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.strict_subset(other)

    def __ge__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.superset(other)

    def __gt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.strict_superset(other)

    # ========================================================================
    # Transforms
    # ========================================================================

    def filter(self, predicate: Callable[[Element], bool]) -> 'Set[Element]':
        return transforms.filter_set(self, predicate)

    def map(self, transform: Callable) -> 'Set':
        """Set of transform(e) for every element e; equal results collapse."""
        return transforms.map_set(self, transform)

    def flat_map(self, transform: Callable[[Element], Iterable]) -> 'Set':
        return transforms.flat_map(self, transform)

    def reduce(self, initial: Into, combine: Callable[[Into, Element], Into]) -> Into:
        """Fold in unspecified order; combine should be commutative and associative."""
        return transforms.reduce_set(self, initial, combine)

    # ========================================================================
    # Equality, hashing, rendering
    # ========================================================================

    def __eq__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self._storage.keys() == other._storage.keys()

    def __hash__(self):
        return set_hash(self._storage)

    @property
    def description(self) -> str:
        if not self._storage:
            return "{}"
        joined = ", ".join(str(each) for each in self._storage)
        return f"{{ {joined} }}"

    def __str__(self):
        return self.description

    def __repr__(self):
        return f"{type(self).__name__}({list(self._storage)!r})"
