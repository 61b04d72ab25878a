"""Goldilocks base field and reference arithmetic.

`add` and `mul` are the correctness oracle: they reduce the exact sum or
product with integer remainder and are never optimized. Every fast variant in
this package is checked against them.

The galois field type `FF` is used for constants that need field inversion
and as an independent oracle in the tests.
"""

import galois

from prime_field.constants import LOWER_MASK, P64, P128
from prime_field.u64 import overflowing_sub, wrapping_add

# --- Field Construction ---

FF = galois.GF(P64)
"""Base field GF(p) - Goldilocks prime field."""


# --- Reference Arithmetic ---

def add(x: int, y: int) -> int:
    """Canonical addition: (x + y) mod p via the widened sum."""
    return (x + y) % P128


def mul(x: int, y: int) -> int:
    """Canonical multiplication: (x * y) mod p via the full 128-bit product."""
    return (x * y) % P128


def canonicalize(x: int) -> int:
    """Map a 64-bit representation to its canonical value in [0, p).

    Since 2^64 < 2p, a single conditional subtraction is enough. The
    subtraction is undone with the borrow flag instead of a branch.
    """
    diff, borrow = overflowing_sub(x, P64)
    return wrapping_add(diff, P64 * borrow)


# --- Montgomery Radix ---
# R = 2^64, so R mod p = 2^32 - 1.

R = LOWER_MASK
R2 = int(FF(R) ** 2)
R_INV = int(FF(R) ** -1)
