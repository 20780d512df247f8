"""Multiplication of :class:`UInt` values."""

from __future__ import annotations

from ctbigint.encoding import concat
from ctbigint.uint import LIMB_BITS, WORD_MAX, UInt


def _check_pair(a: UInt, b: UInt) -> int:
    if not isinstance(a, UInt) or not isinstance(b, UInt):
        raise TypeError("operands must be UInt values")
    if len(a.limbs) != len(b.limbs):
        raise ValueError(f"limb count mismatch: {len(a.limbs)} != {len(b.limbs)}")
    return len(a.limbs)


def _from_int(value: int, limbs: int) -> UInt:
    return UInt.from_words((value >> (LIMB_BITS * i)) & WORD_MAX for i in range(limbs))


def mul_wide(a: UInt, b: UInt) -> tuple[UInt, UInt]:
    """Multiply into a product twice the input width, returned as ``(lo, hi)``."""
    limbs = _check_pair(a, b)
    product = int(a) * int(b)
    width = LIMB_BITS * limbs
    return _from_int(product, limbs), _from_int(product >> width, limbs)


def saturating_mul(a: UInt, b: UInt) -> UInt:
    """Multiply, returning the maximum value on overflow."""
    lo, hi = mul_wide(a, b)
    return lo if hi.is_zero() else UInt.max(len(a.limbs))


def wrapping_mul(a: UInt, b: UInt) -> UInt:
    """Multiply, discarding any overflow."""
    return mul_wide(a, b)[0]


def checked_mul(a: UInt, b: UInt) -> UInt | None:
    """Multiply, returning None on overflow."""
    lo, hi = mul_wide(a, b)
    return lo if hi.is_zero() else None


def square(a: UInt) -> UInt:
    """Square a value, returning a result twice its width."""
    lo, hi = mul_wide(a, a)
    return concat(hi, lo)