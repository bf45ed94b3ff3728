"""
hashset Diagnostics Module

Provides debugging and diagnostic helpers for sets:
- trace: Conditional trace output
- set_trace_level: Set trace verbosity
- dump_stats: Print set statistics
- dump_set: Print every index and element
- validate: Check set invariants

Trace levels:
    0 - silent (default)
    1 - operations (setcalc steps)
    2 - per-element detail
"""

import sys
from typing import List, TextIO, TYPE_CHECKING

if TYPE_CHECKING:
    from hashset.core import Set


TRACE_OFF = 0
TRACE_OPS = 1
TRACE_DETAIL = 2


class SetDiagnostics:
    """Prints diagnostic output about sets to a stream."""

    def __init__(self, trace_level: int = TRACE_OFF, stream: TextIO = None):
        """Initialize diagnostics.

        Args:
            trace_level: Messages at or below this level are printed
            stream: Output stream (default: sys.stderr at call time)
        """
        self.trace_level = trace_level
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def set_trace_level(self, level: int):
        if level < 0:
            raise ValueError(f"trace level must be non-negative, got {level}")
        self.trace_level = level

    def trace(self, level: int, msg: str):
        """Print msg if the current trace level is high enough"""
        if self.trace_level >= level:
            print(f"[SET:TRACE] {msg}", file=self.stream)

    def dump_stats(self, s: 'Set', name: str = "set"):
        """Print count, generation and capacity hint for s"""
        out = self.stream
        print(f"[SET:STATS] === {name} ===", file=out)
        print(f"[SET:STATS] count: {s.count}, empty: {str(s.is_empty).lower()}", file=out)
        print(f"[SET:STATS] generation: {s.generation}, capacity_hint: {s.capacity_hint}", file=out)

    def dump_set(self, s: 'Set', name: str = "set"):
        """Print one line per element, with its current index position"""
        out = self.stream
        print(f"[SET:DUMP] {name}: {s.count} element(s)", file=out)
        for index in s.indices():
            print(f"[SET:DUMP]   [{index.position}] {s[index]!r}", file=out)

    def validate(self, s: 'Set') -> List[str]:
        """
        Check the invariants of s.

        Elements whose hash or equality changed after insertion, and a
        cached index snapshot that no longer matches storage, are reported.

        Returns:
            A list of problems found; empty when the set is consistent.
        """
        problems = []
        elements = list(s)
        for i, each in enumerate(elements):
            try:
                first = hash(each)
            except TypeError as e:
                problems.append(f"element {each!r} is no longer hashable: {e}")
                continue
            if hash(each) != first:
                problems.append(f"element {each!r} hashes inconsistently")
            if not s.contains(each):
                problems.append(f"element {each!r} is iterated but not found by lookup")
            for other in elements[i + 1:]:
                if each == other:
                    problems.append(f"duplicate elements {each!r} and {other!r}")
        if s._keys is not None and s._keys != tuple(elements):
            problems.append("index snapshot does not match storage")
        for problem in problems:
            self.trace(TRACE_OPS, f"invalid: {problem}")
        return problems
