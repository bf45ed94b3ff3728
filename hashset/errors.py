"""
Exceptions raised by the hashset package.

Inserting or removing elements never raises. The errors below signal caller
contract violations (empty-set picks, stale or out-of-range indices) and
problems with setcalc configuration or input files.
"""


class SetError(Exception):
    """Base exception for hashset errors"""
    pass


class EmptySetError(SetError, KeyError):
    """An arbitrary element was requested from an empty set"""
    pass


class StaleIndexError(SetError, IndexError):
    """Index was issued before the set was last mutated, or by another set"""
    pass


class InvalidIndexError(SetError, IndexError):
    """Index does not point at an element (end index or out of range)"""
    pass


class ConfigError(SetError):
    """Error parsing or validating a setcalc config file"""
    pass


class InputError(SetError):
    """Error reading or parsing a setcalc element file"""
    pass
