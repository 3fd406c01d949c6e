"""
Runtime defaults for the demo driver and benchmark.
"""

from __future__ import annotations

import os
from typing import Optional

DEFAULT_SEED = "greedisgood"
DEFAULT_ARRAY_SIZE = 10
DEFAULT_STRATEGY = "hoare_quicksort"


def resolve_seed(seed: Optional[str] = None) -> str:
    """
    Resolve the shuffle seed.

    Priority:
    1) explicit argument
    2) env SORTLAB_SEED
    3) DEFAULT_SEED
    """
    if seed is not None:
        return seed
    raw = os.getenv("SORTLAB_SEED")
    if raw:
        return raw
    return DEFAULT_SEED


def resolve_array_size(size: Optional[int] = None) -> int:
    """
    Resolve the demo array size.

    Priority:
    1) explicit argument
    2) env SORTLAB_ARRAY_SIZE
    3) DEFAULT_ARRAY_SIZE
    """
    raw = size
    if raw is None:
        raw = os.getenv("SORTLAB_ARRAY_SIZE")
    if raw is None:
        return DEFAULT_ARRAY_SIZE

    try:
        value = int(raw)
        if value >= 0:
            return value
    except (TypeError, ValueError):
        pass
    return DEFAULT_ARRAY_SIZE


def resolve_strategy_name(name: Optional[str] = None) -> str:
    """Explicit name, then env SORTLAB_STRATEGY, then DEFAULT_STRATEGY."""
    if name:
        return name
    return os.getenv("SORTLAB_STRATEGY") or DEFAULT_STRATEGY
