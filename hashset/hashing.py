"""
Hash combination for sets.

Based on Bob Jenkins' one-at-a-time hash, computed in 64-bit signed wrapping
arithmetic:

    per element:  h = h + element_hash; h += h << 10; h ^= h >> 6
    avalanche:    h += h << 3; h ^= h >> 11; h += h << 15

The mix is order sensitive, but set equality is not. set_hash therefore folds
the element hashes in sorted order, so equal sets always hash equal no matter
how they were built.
"""
from typing import Iterable

_MASK = (1 << 64) - 1
_SIGN = 1 << 63


def wrap64(value: int) -> int:
    """Reduce an unbounded int to a signed 64-bit value."""
    value &= _MASK
    if value & _SIGN:
        value -= 1 << 64
    return value


def mix(h: int, element_hash: int) -> int:
    """Fold one element hash into the running hash."""
    h = wrap64(h + element_hash)
    h = wrap64(h + (h << 10))
    h ^= h >> 6
    return h


def avalanche(h: int) -> int:
    """Final scramble applied after every element has been mixed in."""
    h = wrap64(h + (h << 3))
    h ^= h >> 11
    h = wrap64(h + (h << 15))
    return h


def combine_hashes(hashes: Iterable[int]) -> int:
    """One-at-a-time hash over hashes, in the order given."""
    h = 0
    for each in hashes:
        h = mix(h, each)
    return avalanche(h)


def set_hash(elements: Iterable) -> int:
    """Order-independent hash of a collection of distinct hashable elements."""
    return combine_hashes(sorted(hash(each) for each in elements))
