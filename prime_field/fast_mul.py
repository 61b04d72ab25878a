"""Division-free modular multiplication and Montgomery form conversion."""

from prime_field.field import R, canonicalize, mul
from prime_field.reduce import reduce159, reduce_montgomery


def mul_reduce159(x: int, y: int) -> int:
    """Canonical product via 32-bit limb folding."""
    return reduce159(x * y)


def mul_reduce_montgomery(x: int, y: int) -> int:
    """Montgomery product x * y * R^-1 mod p, not canonical.

    With both operands in Montgomery form (a * R, b * R) the result is the
    Montgomery form of a * b.
    """
    return reduce_montgomery(x * y)


def to_montgomery(x: int) -> int:
    """Map a canonical value to its Montgomery form x * R mod p."""
    return mul(x, R)


def from_montgomery(x: int) -> int:
    """Map a Montgomery-form word (canonical or not) back to a canonical value."""
    return canonicalize(reduce_montgomery(x))
