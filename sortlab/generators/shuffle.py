"""
Shuffle
=======
Seeded Fisher-Yates shuffle for building reproducible test input.

The seed goes through random.Random's own seeding (str and bytes are hashed
with SHA-512), so a given seed always yields the same permutation on any
current CPython.  Index draws use randint(0, i), which is rejection sampled
and therefore free of modulo bias.
"""

from __future__ import annotations

import logging
import random
from typing import List, MutableSequence, TypeVar, Union

T = TypeVar("T")

Seed = Union[str, bytes, int]

logger = logging.getLogger(__name__)


def consecutive_array(size: int, start: int = 0) -> List[int]:
    """[start, start + 1, ..., start + size - 1]"""
    return list(range(start, start + size))


def shuffle(arr: MutableSequence[T], seed: Seed) -> None:
    """
    Permute arr in place, deterministically for a given seed.

    Walks i from the last index down to 1, swapping arr[i] with a uniformly
    chosen arr[j], 0 <= j <= i.  After each swap arr[i] is final.
    """
    # private generator, global random state is left alone
    rng = random.Random(seed)
    logger.debug("Shuffling %d items with seed %r", len(arr), seed)

    for i in range(len(arr) - 1, 0, -1):
        j = rng.randint(0, i)
        arr[i], arr[j] = arr[j], arr[i]
