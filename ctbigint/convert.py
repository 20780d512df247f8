"""Conversions between machine-sized integers and :class:`UInt` values."""

from __future__ import annotations

from ctbigint.uint import LIMB_BITS, WORD_MAX, UInt

_WIDE_WORD_MAX = (1 << (2 * LIMB_BITS)) - 1


def _build(n: int, limbs: int, bit_size: int, min_limbs: int) -> UInt:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if not 0 <= n < (1 << bit_size):
        raise ValueError(f"value does not fit in {bit_size} bits: {n!r}")
    if limbs < min_limbs:
        if min_limbs == 1:
            raise ValueError("number of limbs must be greater than zero")
        raise ValueError(f"number of limbs must be {min_limbs} or greater")
    return UInt.from_words((n >> (LIMB_BITS * i)) & WORD_MAX for i in range(limbs))


def from_u8(n: int, limbs: int) -> UInt:
    """Create a value from an 8-bit unsigned integer."""
    return _build(n, limbs, 8, 1)


def from_u16(n: int, limbs: int) -> UInt:
    """Create a value from a 16-bit unsigned integer."""
    return _build(n, limbs, 16, 1)


def from_u32(n: int, limbs: int) -> UInt:
    """Create a value from a 32-bit unsigned integer."""
    return _build(n, limbs, 32, 1)


def from_u64(n: int, limbs: int) -> UInt:
    """Create a value from a 64-bit unsigned integer."""
    return _build(n, limbs, 64, -(-64 // LIMB_BITS))


def from_u128(n: int, limbs: int) -> UInt:
    """Create a value from a 128-bit unsigned integer."""
    return _build(n, limbs, 128, 128 // LIMB_BITS)


def from_word(n: int, limbs: int) -> UInt:
    """Create a value from a single limb-sized word."""
    return _build(n, limbs, LIMB_BITS, 1)


def from_wide_word(n: int, limbs: int) -> UInt:
    """Create a value from a word twice the size of a limb."""
    return _build(n, limbs, 2 * LIMB_BITS, 2)


def to_u64(n: UInt) -> int:
    """Convert a 64-bit value to a Python int."""
    if len(n.limbs) * LIMB_BITS != 64:
        raise ValueError("value must be exactly 64 bits wide")
    return n.limbs[0]


def to_u128(n: UInt) -> int:
    """Convert a 128-bit value to a Python int."""
    if len(n.limbs) * LIMB_BITS != 128:
        raise ValueError("value must be exactly 128 bits wide")
    lo, hi = n.limbs
    return (hi << LIMB_BITS) | lo


def to_words(n: UInt) -> tuple[int, ...]:
    """The words of a value, least significant first."""
    return n.words()