"""
Sort library errors.
"""

from __future__ import annotations


class InvalidRange(ValueError):
    """
    Raised when a bounded search is given an inverted or out-of-bounds range.
    """

    def __init__(self, lo: int, hi: int, message: str | None = None) -> None:
        if message is None:
            message = f"invalid inclusive range [{lo}, {hi}]: hi must be >= lo"
        super().__init__(message)
        self.lo = lo
        self.hi = hi
