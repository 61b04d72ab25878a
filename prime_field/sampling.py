"""Uniform field element samples for tests and benchmarks."""

from itertools import pairwise
from typing import Iterable, Iterator, List, Tuple

import numpy as np

from prime_field.constants import P64


def random_elements(n: int, rng: np.random.Generator | int | None = None) -> List[int]:
    """Return exactly n + 1 independent uniform samples in [0, p).

    n + 1 samples give n consecutive operand pairs (see `operand_pairs`).
    Samples come only from the given generator, so threads that each pass
    their own generator draw independent streams.

    Args:
        n: Number of operations the samples will feed
        rng: numpy Generator or integer seed; None draws fresh OS entropy

    Returns:
        List of n + 1 canonical field elements as Python ints
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    gen = np.random.default_rng(rng)
    return [int(v) for v in gen.integers(0, P64, size=n + 1, dtype=np.uint64)]


def operand_pairs(values: Iterable[int]) -> Iterator[Tuple[int, int]]:
    """Yield consecutive (x, y) windows: (v0, v1), (v1, v2), ..."""
    return pairwise(values)
