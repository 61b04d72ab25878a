"""Goldilocks prime field arithmetic, p = 2^64 - 2^32 + 1.

Reference operations (`add`, `mul`) reduce with integer remainder; the fast
variants reach the same results with carry and borrow tricks specific to
this prime. All operations take canonical operands in [0, p); passing
anything else is a caller error and gives unspecified results.

Usage:
    from prime_field import mul, mul_reduce159, operand_pairs, random_elements

    xs = random_elements(1000, rng=42)
    assert all(mul(x, y) == mul_reduce159(x, y) for x, y in operand_pairs(xs))
"""

from prime_field.constants import LOWER_MASK, P64, P128
from prime_field.fast_add import add_fast, add_winterfell
from prime_field.fast_mul import (
    from_montgomery,
    mul_reduce159,
    mul_reduce_montgomery,
    to_montgomery,
)
from prime_field.field import FF, R, R2, R_INV, add, canonicalize, mul
from prime_field.reduce import montgomery_equals, reduce159, reduce_montgomery
from prime_field.sampling import operand_pairs, random_elements

__all__ = [
    # Constants
    "P64",
    "P128",
    "LOWER_MASK",
    "R",
    "R2",
    "R_INV",
    # Field
    "FF",
    "add",
    "mul",
    "canonicalize",
    # Fast addition
    "add_fast",
    "add_winterfell",
    # Fast multiplication
    "mul_reduce159",
    "mul_reduce_montgomery",
    "reduce159",
    "reduce_montgomery",
    "to_montgomery",
    "from_montgomery",
    # Equality
    "montgomery_equals",
    # Sampling
    "random_elements",
    "operand_pairs",
]
