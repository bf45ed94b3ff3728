"""
Higher-order transforms over a Set.

map is flat_map with each result wrapped in a one-element sequence, so a
transform that sends two elements to the same value shrinks the result.

reduce folds in iteration order, which is unspecified. The combinator must be
commutative and associative for the result to be well defined; this is left
to the caller.
"""
import functools
from typing import Callable, Iterable, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from hashset.core import Set

Into = TypeVar('Into')


def filter_set(s: 'Set', predicate: Callable) -> 'Set':
    """Elements of s for which predicate returns a truthy value."""
    return s.__class__(each for each in s if predicate(each))


def flat_map(s: 'Set', transform: Callable[..., Iterable]) -> 'Set':
    """Union of transform(element) over every element of s."""
    result = s.__class__()
    for each in s:
        result.extend(transform(each))
    return result


def map_set(s: 'Set', transform: Callable) -> 'Set':
    """Set of transform(element) over every element of s."""
    return flat_map(s, lambda each: (transform(each),))


def reduce_set(s: 'Set', initial: Into, combine: Callable[[Into, object], Into]) -> Into:
    """Left fold of combine over s, starting from initial."""
    return functools.reduce(combine, s, initial)
