"""
Instrumentation
===============
A list that counts element reads and writes, so sorting strategies can be
compared by the work they do rather than by wall-clock time alone.

Slice access counts one operation per element touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass
class AccessCounts:
    """Snapshot of the counters of an InstrumentedList."""
    reads: int = 0
    writes: int = 0

    @property
    def total(self) -> int:
        return self.reads + self.writes


class InstrumentedList(list):
    """
    list subclass recording item reads and writes.

    Only indexed access through __getitem__/__setitem__ is counted;
    iteration and len() are free.
    """

    def __init__(self, items: Optional[Iterable] = None):
        super().__init__(items if items is not None else ())
        self.reads = 0
        self.writes = 0

    def __getitem__(self, index):
        result = super().__getitem__(index)
        if isinstance(index, slice):
            self.reads += len(result)
        else:
            self.reads += 1
        return result

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = list(value)
            self.writes += len(value)
        else:
            self.writes += 1
        super().__setitem__(index, value)

    def counts(self) -> AccessCounts:
        return AccessCounts(reads=self.reads, writes=self.writes)

    def reset_counts(self):
        self.reads = 0
        self.writes = 0
