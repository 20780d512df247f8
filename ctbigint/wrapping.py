"""A wrapper marking intentionally wrapped arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ctbigint.div import wrapping_div, wrapping_rem
from ctbigint.mul import wrapping_mul
from ctbigint.uint import UInt

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Wrapping(Generic[T]):
    """Holds a value whose arithmetic wraps around its width."""

    value: T

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    def ct_eq(self, other: Wrapping[Any]) -> bool:
        """Compare the wrapped values in constant time."""
        return self.value.ct_eq(other.value)  # type: ignore[attr-defined]

    @classmethod
    def conditional_select(cls, a: Wrapping[T], b: Wrapping[T], choice: int) -> Wrapping[T]:
        """Return ``b`` if ``choice`` is 1 and ``a`` if it is 0."""
        if choice not in (0, 1):
            raise ValueError(f"choice must be 0 or 1, got {choice!r}")
        return cls(b.value if choice else a.value)

    def _uint(self) -> UInt:
        if not isinstance(self.value, UInt):
            raise TypeError("wrapping arithmetic needs a UInt value")
        return self.value

    def __sub__(self, rhs: Wrapping[Any]) -> Wrapping[UInt]:
        if not isinstance(rhs, Wrapping):
            return NotImplemented
        return Wrapping(self._uint().wrapping_sub(rhs._uint()))

    def __mul__(self, rhs: Wrapping[Any]) -> Wrapping[UInt]:
        if not isinstance(rhs, Wrapping):
            return NotImplemented
        return Wrapping(wrapping_mul(self._uint(), rhs._uint()))

    def __xor__(self, rhs: Wrapping[Any]) -> Wrapping[UInt]:
        if not isinstance(rhs, Wrapping):
            return NotImplemented
        return Wrapping(self._uint().wrapping_xor(rhs._uint()))

    def __floordiv__(self, rhs: UInt) -> Wrapping[UInt]:
        if not isinstance(rhs, UInt):
            return NotImplemented
        return Wrapping(wrapping_div(self._uint(), rhs))

    def __mod__(self, rhs: UInt) -> Wrapping[UInt]:
        if not isinstance(rhs, UInt):
            return NotImplemented
        return Wrapping(wrapping_rem(self._uint(), rhs))