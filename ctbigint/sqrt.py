"""Integer square roots of :class:`UInt` values."""

from __future__ import annotations

import math

from ctbigint.mul import wrapping_mul
from ctbigint.uint import LIMB_BITS, WORD_MAX, UInt


def _from_int(value: int, limbs: int) -> UInt:
    return UInt.from_words((value >> (LIMB_BITS * i)) & WORD_MAX for i in range(limbs))


def sqrt(a: UInt) -> UInt:
    """Return the floor of the square root of ``a``."""
    if not isinstance(a, UInt):
        raise TypeError(f"expected UInt, got {type(a).__name__}")
    return _from_int(math.isqrt(int(a)), len(a.limbs))


def wrapping_sqrt(a: UInt) -> UInt:
    """Square root; it can never wrap."""
    return sqrt(a)


def checked_sqrt(a: UInt) -> UInt | None:
    """Return the square root of ``a`` if ``a`` is a perfect square, else None."""
    root = sqrt(a)
    return root if wrapping_mul(root, root) == a else None