"""Elementwise fast arithmetic over numpy uint64 arrays.

numpy unsigned arrays wrap at 2^64 natively, so the carry and borrow flags
are recovered by comparison (a sum wrapped iff it is smaller than an addend,
a difference borrowed iff the minuend was smaller). Each function agrees
elementwise with its scalar counterpart in `prime_field.fast_add`,
`prime_field.reduce` and `prime_field.fast_mul`.

Inputs are 1-D array-likes of canonical values.
"""

from typing import Tuple

import numpy as np

from prime_field.constants import LOWER_MASK, P64, U32_MASK, U64_MASK

_P = np.uint64(P64)
_LOWER = np.uint64(LOWER_MASK)
_M32 = np.uint64(U32_MASK)
_ONES = np.uint64(U64_MASK)
_ZERO = np.uint64(0)
_S32 = np.uint64(32)


def _u64(a) -> np.ndarray:
    return np.asarray(a, dtype=np.uint64)


def _flag(mask: np.ndarray) -> np.ndarray:
    return mask.astype(np.uint64)


# --- Addition ---

def add_fast_array(x, y) -> np.ndarray:
    """Single conditional subtraction; the sum may wrap past 2^64."""
    x, y = _u64(x), _u64(y)
    total = x + y
    carry = total < x
    return np.where(carry | (total >= _P), total - _P, total)


def add_winterfell_array(x, y) -> np.ndarray:
    """Overflow-flag addition x - (p - y) with the borrow turned into a 32-bit mask."""
    x, y = _u64(x), _u64(y)
    t = _P - y
    x1 = x - t
    adj = (_ZERO - _flag(x < t)) & _LOWER
    return x1 - adj


# --- Multiplication ---

def widening_mul_array(x, y) -> Tuple[np.ndarray, np.ndarray]:
    """Full 64x64 -> 128-bit product as (low word, high word).

    Built from four 32x32 partial products, each of which fits in 64 bits.
    """
    x, y = _u64(x), _u64(y)
    x0, x1 = x & _M32, x >> _S32
    y0, y1 = y & _M32, y >> _S32

    p00 = x0 * y0
    p01 = x0 * y1
    p10 = x1 * y0
    p11 = x1 * y1

    # at most 3 * (2^32 - 1)
    mid = (p00 >> _S32) + (p01 & _M32) + (p10 & _M32)

    lo = (p00 & _M32) | ((mid & _M32) << _S32)
    hi = p11 + (p01 >> _S32) + (p10 >> _S32) + (mid >> _S32)
    return lo, hi


def reduce159_array(lo, hi) -> np.ndarray:
    lo, hi = _u64(lo), _u64(hi)
    c = hi & _M32
    d = hi >> _S32

    tmp0 = lo - d
    tmp1 = tmp0 - _LOWER * _flag(lo < d)

    tmp2 = (c << _S32) - c

    result = tmp1 + tmp2
    result = result + _LOWER * _flag(result < tmp1)

    return np.where(result >= _P, result - _P, result)


def reduce_montgomery_array(lo, hi) -> np.ndarray:
    """Montgomery REDC per element; results are not canonical."""
    lo, hi = _u64(lo), _u64(hi)
    a = lo + (lo << _S32)
    e = _flag(a < lo)

    b = a - (a >> _S32) - e

    r = hi - b
    return r - ((_ZERO - _flag(hi < b)) & _LOWER)


def mul_reduce159_array(x, y) -> np.ndarray:
    return reduce159_array(*widening_mul_array(x, y))


def mul_reduce_montgomery_array(x, y) -> np.ndarray:
    return reduce_montgomery_array(*widening_mul_array(x, y))


# --- Equality ---

def montgomery_equals_array(lhs, rhs) -> np.ndarray:
    """Elementwise exact equality using the sign-bit mask trick."""
    lhs, rhs = _u64(lhs), _u64(rhs)
    t = lhs ^ rhs
    v = t | (_ZERO - t)
    differ = (v.view(np.int64) >> np.int64(63)).view(np.uint64)
    return ~differ == _ONES
