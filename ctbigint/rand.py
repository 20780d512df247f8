"""Random generation of :class:`UInt` values."""

from __future__ import annotations

from typing import Protocol

from ctbigint.uint import LIMB_BITS, WORD_MAX, UInt


class _Rng(Protocol):
    def getrandbits(self, k: int) -> int: ...

    def randrange(self, stop: int) -> int: ...


def random_uint(rng: _Rng, limbs: int) -> UInt:
    """Draw a uniformly random value with ``limbs`` limbs.

    ``rng`` is any object offering ``getrandbits`` and ``randrange``, such as
    :class:`random.SystemRandom`.
    """
    if limbs < 1:
        raise ValueError("number of limbs must be greater than zero")
    return UInt.from_words(rng.getrandbits(LIMB_BITS) for _ in range(limbs))


def random_mod(rng: _Rng, modulus: UInt) -> UInt:
    """Draw a uniformly random value below ``modulus`` by rejection sampling."""
    if not isinstance(modulus, UInt):
        raise TypeError(f"expected UInt, got {type(modulus).__name__}")
    if modulus.is_zero():
        raise ValueError("modulus must be non-zero")

    limbs = len(modulus.limbs)
    n_limbs = modulus.bits() // LIMB_BITS
    if n_limbs < limbs:
        n_limbs += 1

    # One past the highest limb of the modulus, saturating at the word maximum.
    top = min(modulus.limbs[n_limbs - 1] + 1, WORD_MAX)

    def draw(index: int) -> int:
        if index + 1 == n_limbs and top != WORD_MAX:
            return rng.randrange(top)
        return rng.getrandbits(LIMB_BITS)

    padding = [0] * (limbs - n_limbs)
    while True:
        candidate = UInt.from_words([draw(i) for i in range(n_limbs)] + padding)
        if candidate.ct_lt(modulus):
            return candidate