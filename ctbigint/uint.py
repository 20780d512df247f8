"""Fixed-width unsigned big integers stored as 64-bit limbs."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable

LIMB_BITS = 64
WORD_MAX = (1 << LIMB_BITS) - 1


@total_ordering
@dataclass(frozen=True, eq=False)
class UInt:
    """An unsigned integer with a fixed number of 64-bit limbs.

    ``limbs`` holds the words from least to most significant.
    """

    limbs: tuple[int, ...]

    def __post_init__(self) -> None:
        limbs = tuple(self.limbs)
        if not limbs:
            raise ValueError("number of limbs must be greater than zero")
        for word in limbs:
            if not isinstance(word, int) or not 0 <= word <= WORD_MAX:
                raise ValueError(f"limb out of range: {word!r}")
        object.__setattr__(self, "limbs", limbs)

    # Construction -------------------------------------------------------

    @classmethod
    def _from_int(cls, value: int, limbs: int) -> UInt:
        """Build a value from a Python int, wrapping modulo the width."""
        if limbs < 1:
            raise ValueError("number of limbs must be greater than zero")
        value &= (1 << (LIMB_BITS * limbs)) - 1
        return cls(tuple((value >> (LIMB_BITS * i)) & WORD_MAX for i in range(limbs)))

    @classmethod
    def zero(cls, limbs: int) -> UInt:
        """The value 0 with the given number of limbs."""
        return cls._from_int(0, limbs)

    @classmethod
    def one(cls, limbs: int) -> UInt:
        """The value 1 with the given number of limbs."""
        return cls._from_int(1, limbs)

    @classmethod
    def max(cls, limbs: int) -> UInt:
        """The largest value representable with the given number of limbs."""
        return cls._from_int(-1, limbs)

    @classmethod
    def from_words(cls, words: Iterable[int]) -> UInt:
        """Build a value from words ordered least significant first."""
        return cls(tuple(words))

    def words(self) -> tuple[int, ...]:
        """The words of this value, least significant first."""
        return self.limbs

    # Helpers ------------------------------------------------------------

    @property
    def _width(self) -> int:
        return LIMB_BITS * len(self.limbs)

    def _same(self, rhs: UInt) -> UInt:
        if not isinstance(rhs, UInt):
            raise TypeError(f"expected UInt, got {type(rhs).__name__}")
        if len(rhs.limbs) != len(self.limbs):
            raise ValueError(
                f"limb count mismatch: {len(self.limbs)} != {len(rhs.limbs)}"
            )
        return rhs

    def _wrap(self, value: int) -> UInt:
        return UInt._from_int(value, len(self.limbs))

    def __int__(self) -> int:
        return sum(word << (LIMB_BITS * i) for i, word in enumerate(self.limbs))

    def __repr__(self) -> str:
        digits = len(self.limbs) * LIMB_BITS // 4
        return f"UInt(0x{int(self):0{digits}x})"

    # Bits and predicates -----------------------------------------------

    def bits(self) -> int:
        """Number of bits needed to represent this value."""
        return int(self).bit_length()

    def is_zero(self) -> bool:
        return not any(self.limbs)

    def is_odd(self) -> bool:
        return bool(self.limbs[0] & 1)

    # Comparisons --------------------------------------------------------

    def ct_eq(self, other: UInt) -> bool:
        other = self._same(other)
        diff = 0
        for a, b in zip(self.limbs, other.limbs):
            diff |= a ^ b
        return diff == 0

    def ct_gt(self, other: UInt) -> bool:
        other = self._same(other)
        _, borrow = other.sbb(self, 0)
        return borrow != 0

    def ct_lt(self, other: UInt) -> bool:
        other = self._same(other)
        _, borrow = self.sbb(other, 0)
        return borrow != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UInt):
            return NotImplemented
        if len(other.limbs) != len(self.limbs):
            return False
        return self.ct_eq(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UInt):
            return NotImplemented
        return self.ct_lt(other)

    def __hash__(self) -> int:
        return hash(self.limbs)

    # Shifts -------------------------------------------------------------

    def shl_vartime(self, n: int) -> UInt:
        """Compute ``self << n``, discarding bits shifted past the width."""
        if n < 0:
            raise ValueError("shift amount must be non-negative")
        if n >= self._width:
            return UInt.zero(len(self.limbs))
        return self._wrap(int(self) << n)

    def shr_vartime(self, shift: int) -> UInt:
        """Compute ``self >> shift``."""
        if shift < 0:
            raise ValueError("shift amount must be non-negative")
        if shift > self._width:
            return UInt.zero(len(self.limbs))
        return self._wrap(int(self) >> shift)

    def __lshift__(self, n: int) -> UInt:
        return self.shl_vartime(n)

    def __rshift__(self, shift: int) -> UInt:
        return self.shr_vartime(shift)

    # Subtraction --------------------------------------------------------

    def sbb(self, rhs: UInt, borrow: int) -> tuple[UInt, int]:
        """Compute ``self - (rhs + borrow)``.

        ``borrow`` is a limb whose top bit marks an incoming borrow. The
        returned borrow is ``WORD_MAX`` on underflow and 0 otherwise.
        """
        rhs = self._same(rhs)
        if not 0 <= borrow <= WORD_MAX:
            raise ValueError(f"borrow out of range: {borrow!r}")
        total = int(self) - int(rhs) - (borrow >> (LIMB_BITS - 1))
        return self._wrap(total), (WORD_MAX if total < 0 else 0)

    def saturating_sub(self, rhs: UInt) -> UInt:
        """Subtract, returning zero on underflow."""
        result, underflow = self.sbb(rhs, 0)
        return UInt.zero(len(self.limbs)) if underflow else result

    def wrapping_sub(self, rhs: UInt) -> UInt:
        """Subtract, wrapping around the width of the type."""
        return self.sbb(rhs, 0)[0]

    def checked_sub(self, rhs: UInt) -> UInt | None:
        """Subtract, returning None on underflow."""
        result, underflow = self.sbb(rhs, 0)
        return None if underflow else result

    # Exclusive or -------------------------------------------------------

    def bitxor(self, rhs: UInt) -> UInt:
        """Compute bitwise ``self ^ rhs``."""
        rhs = self._same(rhs)
        return UInt(tuple(a ^ b for a, b in zip(self.limbs, rhs.limbs)))

    def wrapping_xor(self, rhs: UInt) -> UInt:
        """Bitwise xor; it can never wrap."""
        return self.bitxor(rhs)

    def checked_xor(self, rhs: UInt) -> UInt:
        """Bitwise xor; the result is always present."""
        return self.bitxor(rhs)

    def __xor__(self, rhs: UInt) -> UInt:
        if not isinstance(rhs, UInt):
            return NotImplemented
        return self.bitxor(rhs)