"""Fixed-width unsigned word helpers.

Python integers never overflow, so every 64-bit wrap and carry/borrow flag
the reduction code depends on is emulated here with masks. Flags are returned
as ``int`` (0 or 1) so they can be multiplied into correction terms.
"""

from typing import Tuple

from prime_field.constants import U32_MASK, U64_MASK, U64_SIGN_BIT


def wrapping_add(a: int, b: int) -> int:
    """a + b mod 2^64."""
    return (a + b) & U64_MASK


def wrapping_sub(a: int, b: int) -> int:
    """a - b mod 2^64."""
    return (a - b) & U64_MASK


def wrapping_neg(a: int) -> int:
    """-a mod 2^64."""
    return -a & U64_MASK


def wrapping_sub_u32(a: int, b: int) -> int:
    """a - b mod 2^32.

    ``wrapping_sub_u32(0, flag)`` turns a carry/borrow flag into an all-ones
    or all-zeros 32-bit mask.
    """
    return (a - b) & U32_MASK


def overflowing_add(a: int, b: int) -> Tuple[int, int]:
    """Return (a + b mod 2^64, carry)."""
    total = a + b
    return total & U64_MASK, total >> 64


def overflowing_sub(a: int, b: int) -> Tuple[int, int]:
    """Return (a - b mod 2^64, borrow)."""
    diff = a - b
    return diff & U64_MASK, int(diff < 0)


def as_i64(a: int) -> int:
    """Reinterpret a 64-bit word as a two's complement signed integer."""
    return ((a & U64_MASK) ^ U64_SIGN_BIT) - U64_SIGN_BIT


def lo64(x: int) -> int:
    return x & U64_MASK


def hi64(x: int) -> int:
    return (x >> 64) & U64_MASK


def split_limbs(x: int) -> Tuple[int, int, int, int]:
    """Split a 128-bit value into 32-bit limbs (a, b, c, d), least significant first."""
    return (
        x & U32_MASK,
        (x >> 32) & U32_MASK,
        (x >> 64) & U32_MASK,
        (x >> 96) & U32_MASK,
    )
