"""
Index Module for hashset

An Index is an opaque position into a set's iteration order.

Validity:
    Every Set carries a generation number drawn from a process-wide counter.
    The generation is renewed whenever the set's storage changes, so an Index
    issued before a mutation (or issued by a different set) no longer matches
    and is rejected with StaleIndexError instead of reading the wrong element.

Range:
    start_index and end_index bound a half-open range. end_index never points
    at an element; dereferencing it raises InvalidIndexError.
"""
import itertools
from dataclasses import dataclass

_generations = itertools.count(1)


def next_generation() -> int:
    """Draw a fresh, process-unique generation number."""
    return next(_generations)


@dataclass(frozen=True, order=True)
class Index:
    """Opaque cursor into a Set."""
    generation: int
    position: int

    def __repr__(self):
        return f"Index({self.position}@{self.generation})"
