"""
Algebra Module for hashset

Pure set algebra over two operands. Every function returns a new Set (or a
bool) and never mutates either operand.

Operations:
- union: elements in a or b
- intersection: elements in both (iterates the smaller operand)
- complement: elements in a but not in b
- difference: elements in exactly one of a, b
- subset / strict_subset / superset / strict_superset

The empty set is the identity for union and difference and the absorbing
element for intersection.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hashset.core import Set


def union(a: 'Set', b: 'Set') -> 'Set':
    """Elements in a or b. Equivalent to extending a copy of a with b."""
    result = a.copy()
    result.extend(b)
    return result


def intersection(a: 'Set', b: 'Set') -> 'Set':
    """Elements in both a and b."""
    smaller, larger = (a, b) if a.count <= b.count else (b, a)
    return a.__class__(each for each in smaller if larger.contains(each))


def complement(a: 'Set', b: 'Set') -> 'Set':
    """Elements of a that are not in b. Not symmetric."""
    return a.__class__(each for each in a if not b.contains(each))


def difference(a: 'Set', b: 'Set') -> 'Set':
    """Elements in exactly one of a and b."""
    return complement(union(a, b), intersection(a, b))


def subset(a: 'Set', b: 'Set') -> bool:
    """True iff every element of a is in b."""
    return complement(a, b).is_empty


def strict_subset(a: 'Set', b: 'Set') -> bool:
    return subset(a, b) and a != b


def superset(a: 'Set', b: 'Set') -> bool:
    return subset(b, a)


def strict_superset(a: 'Set', b: 'Set') -> bool:
    return strict_subset(b, a)
