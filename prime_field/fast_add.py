"""Division-free modular addition.

Both variants require x, y in [0, p) and return a canonical sum.
"""

from prime_field.constants import P64, P128
from prime_field.u64 import overflowing_sub, wrapping_sub, wrapping_sub_u32


def add_fast(x: int, y: int) -> int:
    """Addition with a single conditional subtraction.

    The widened sum lies in [0, 2p). It is reduced when it reaches p, so a sum
    of exactly p maps to 0.
    """
    total = x + y
    if total >= P128:
        total -= P128
    return total


def add_winterfell(x: int, y: int) -> int:
    """Branchless addition using x + y = x - (p - y).

    When the subtraction borrows, the raw result carries an extra 2^64.
    Subtracting the all-ones 32-bit mask removes 2^32 - 1 more, and since
    2^64 - (2^32 - 1) = p this leaves exactly x + y. Without a borrow the raw
    result x + y - p is already reduced.
    """
    x1, borrow = overflowing_sub(x, P64 - y)
    adj = wrapping_sub_u32(0, borrow)
    return wrapping_sub(x1, adj)
