"""Reduction of 128-bit products modulo the Goldilocks prime.

Both reducers exploit the shape of p = 2^64 - 2^32 + 1:

    2^64 = 2^32 - 1  (mod p)
    2^96 = -1        (mod p)

so the high limbs of a product fold into the low word with a handful of
shifts, subtractions and carry corrections instead of a division.
"""

from prime_field.constants import LOWER_MASK, U64_MASK
from prime_field.field import canonicalize
from prime_field.u64 import (
    as_i64,
    hi64,
    lo64,
    overflowing_add,
    overflowing_sub,
    split_limbs,
    wrapping_add,
    wrapping_neg,
    wrapping_sub,
    wrapping_sub_u32,
)


def reduce159(x: int) -> int:
    """Reduce a 128-bit value to its canonical residue.

    x is viewed as four 32-bit limbs a, b, c, d (a least significant):

    - ab: low 64 bits
    - c:  bits 64..95, weight 2^64 = 2^32 - 1
    - d:  bits 96..127, weight 2^96 = -1

    so x = ab - d + c * (2^32 - 1) (mod p).
    """
    a, b, c, d = split_limbs(x)
    ab = (b << 32) | a

    # ab - d; d may be greater than ab, on underflow the wrap of 2^64 is
    # worth 2^32 - 1 too much
    tmp0, is_under = overflowing_sub(ab, d)
    tmp1 = wrapping_sub(tmp0, LOWER_MASK * is_under)

    # c * 2^32 - c never underflows
    tmp2 = (c << 32) - c

    # both terms may use all 64 bits; an overflow drops 2^64 = 2^32 - 1
    result, is_over = overflowing_add(tmp1, tmp2)
    result = wrapping_add(result, LOWER_MASK * is_over)

    # the fold leaves a value in [0, 2^64), which can still be >= p
    return canonicalize(result)


def reduce_montgomery(x: int) -> int:
    """One Montgomery REDC step with radix R = 2^64.

    Returns a value congruent to x * R^-1 mod p. The result is NOT canonical:
    it lies in [0, 2^64) and may be the canonical value plus p. Use
    `canonicalize` before comparing against other representations.
    """
    xl = lo64(x)
    xh = hi64(x)

    # a = xl * p^-1 mod 2^64, with p^-1 = 2^32 + 1
    a, e = overflowing_add(xl, (xl << 32) & U64_MASK)

    # b = high word of a * p
    b = wrapping_sub(wrapping_sub(a, a >> 32), e)

    # on borrow, subtracting 2^32 - 1 turns the 2^64 wrap into +p
    r, c = overflowing_sub(xh, b)
    return wrapping_sub(r, wrapping_sub_u32(0, c))


def montgomery_equals(lhs: int, rhs: int) -> bool:
    """Branchless bit-for-bit equality of two 64-bit representations.

    t = lhs ^ rhs is zero iff the words match. For any non-zero t either t or
    -t has the sign bit set, so an arithmetic shift of (t | -t) by 63 gives
    all ones exactly when the words differ.

    Only exact equality is detected: a value and the same value plus p
    compare unequal. Canonicalize both sides first when comparing outputs of
    `reduce_montgomery`.
    """
    t = lhs ^ rhs
    differ = as_i64(t | wrapping_neg(t)) >> 63
    return U64_MASK == (~differ & U64_MASK)
