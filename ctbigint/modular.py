"""Modular arithmetic on :class:`UInt` values."""

from __future__ import annotations

from ctbigint.uint import LIMB_BITS, WORD_MAX, UInt


def _from_int(value: int, limbs: int) -> UInt:
    return UInt.from_words((value >> (LIMB_BITS * i)) & WORD_MAX for i in range(limbs))


def _check_same(*values: UInt) -> int:
    for value in values:
        if not isinstance(value, UInt):
            raise TypeError(f"expected UInt, got {type(value).__name__}")
    counts = {len(value.limbs) for value in values}
    if len(counts) != 1:
        raise ValueError(f"limb count mismatch: {sorted(counts)}")
    return counts.pop()


def inv_mod2k(a: UInt, k: int) -> UInt:
    """Compute ``1 / a mod 2**k``.

    Requires ``a`` odd and ``a < 2**k``; other inputs give a meaningless value.
    """
    limbs = _check_same(a)
    if k < 0:
        raise ValueError("k must be non-negative")
    width = LIMB_BITS * limbs
    mask = (1 << width) - 1
    value = int(a)
    x = 0
    b = 1
    for i in range(k):
        bit = b & 1
        if i < width:
            x |= bit << i
        if bit:
            b = (b - value) & mask
        b >>= 1
    return _from_int(x, limbs)


def sub_mod(a: UInt, b: UInt, p: UInt) -> UInt:
    """Compute ``a - b mod p``, assuming ``a - b`` lies in ``[-p, p)``."""
    limbs = _check_same(a, b, p)
    out, borrow = a.sbb(b, 0)
    correction = int(p) if borrow else 0
    return _from_int(int(out) + correction, limbs)


def neg_mod(a: UInt, p: UInt) -> UInt:
    """Compute ``-a mod p``."""
    limbs = _check_same(a, p)
    return sub_mod(UInt.zero(limbs), a, p)