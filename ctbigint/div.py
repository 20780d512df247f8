"""Division and remainder of :class:`UInt` values."""

from __future__ import annotations

from ctbigint.uint import LIMB_BITS, WORD_MAX, UInt


def _check_pair(a: UInt, b: UInt) -> int:
    if not isinstance(a, UInt) or not isinstance(b, UInt):
        raise TypeError("operands must be UInt values")
    if len(a.limbs) != len(b.limbs):
        raise ValueError(f"limb count mismatch: {len(a.limbs)} != {len(b.limbs)}")
    return len(a.limbs)


def _from_int(value: int, limbs: int) -> UInt:
    return UInt.from_words((value >> (LIMB_BITS * i)) & WORD_MAX for i in range(limbs))


def div_rem(a: UInt, b: UInt) -> tuple[UInt, UInt] | None:
    """Return ``(quotient, remainder)`` of ``a / b``, or None if ``b`` is zero."""
    limbs = _check_pair(a, b)
    if b.is_zero():
        return None
    q, r = divmod(int(a), int(b))
    return _from_int(q, limbs), _from_int(r, limbs)


def reduce(a: UInt, b: UInt) -> UInt | None:
    """Return ``a % b``, or None if ``b`` is zero."""
    limbs = _check_pair(a, b)
    if b.is_zero():
        return None
    return _from_int(int(a) % int(b), limbs)


def reduce2k(a: UInt, k: int) -> UInt:
    """Return ``a % 2**k``; for ``k`` at or beyond the width, ``a`` itself."""
    if k < 0:
        raise ValueError("k must be non-negative")
    limbs = len(a.limbs)
    if k >= LIMB_BITS * limbs:
        return a
    return _from_int(int(a) & ((1 << k) - 1), limbs)


def wrapping_div(a: UInt, b: UInt) -> UInt:
    """Return ``a / b``; raises ZeroDivisionError if ``b`` is zero."""
    result = div_rem(a, b)
    if result is None:
        raise ZeroDivisionError("divide by zero")
    return result[0]


def checked_div(a: UInt, b: UInt) -> UInt | None:
    """Return ``a / b``, or None if ``b`` is zero."""
    result = div_rem(a, b)
    return None if result is None else result[0]


def wrapping_rem(a: UInt, b: UInt) -> UInt:
    """Return ``a % b``; raises ZeroDivisionError if ``b`` is zero."""
    result = reduce(a, b)
    if result is None:
        raise ZeroDivisionError("modulo zero")
    return result


def checked_rem(a: UInt, b: UInt) -> UInt | None:
    """Return ``a % b``, or None if ``b`` is zero."""
    return reduce(a, b)