"""
hashset Package

An unordered collection of unique hashable elements, kept as the keys of a
single owned dict.

Package Structure:
    hashset/
    ├── __init__.py      # Package exports (this file)
    ├── core.py          # Set: storage, mutation, indexing, equality, rendering
    ├── algebra.py       # union, intersection, complement, difference, subset tests
    ├── transforms.py    # filter, map, flat_map, reduce
    ├── cursor.py        # Index and generation numbers
    ├── hashing.py       # One-at-a-time hash combination
    ├── errors.py        # SetError hierarchy
    ├── diagnostics.py   # Trace output, stats dumps, invariant checks
    └── config.py        # setcalc configuration (TOML)
"""

from hashset.core import Set
from hashset.cursor import Index
from hashset.errors import (
    SetError, EmptySetError, StaleIndexError, InvalidIndexError,
    ConfigError, InputError,
)
from hashset.diagnostics import SetDiagnostics

__all__ = [
    'Set',
    'Index',
    'SetError',
    'EmptySetError',
    'StaleIndexError',
    'InvalidIndexError',
    'ConfigError',
    'InputError',
    'SetDiagnostics',
]
