"""Byte and hex encodings of :class:`UInt` values, plus concat and split."""

from __future__ import annotations

from ctbigint.uint import LIMB_BITS, WORD_MAX, UInt

LIMB_BYTES = LIMB_BITS // 8
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _from_int(value: int, limbs: int) -> UInt:
    return UInt.from_words((value >> (LIMB_BITS * i)) & WORD_MAX for i in range(limbs))


def _check_slice(data: bytes, limbs: int) -> bytes:
    data = bytes(data)
    if limbs < 1:
        raise ValueError("number of limbs must be greater than zero")
    if len(data) != LIMB_BYTES * limbs:
        raise ValueError("bytes are not the expected size")
    return data


def _decode_hex(text: str, limbs: int) -> bytes:
    if limbs < 1:
        raise ValueError("number of limbs must be greater than zero")
    if len(text) != LIMB_BYTES * limbs * 2:
        raise ValueError("hex string is not the expected size")
    if not set(text) <= _HEX_DIGITS:
        raise ValueError("invalid hex byte")
    return bytes.fromhex(text)


def from_be_slice(data: bytes, limbs: int) -> UInt:
    """Decode big-endian bytes of exactly ``8 * limbs`` length."""
    return _from_int(int.from_bytes(_check_slice(data, limbs), "big"), limbs)


def from_le_slice(data: bytes, limbs: int) -> UInt:
    """Decode little-endian bytes of exactly ``8 * limbs`` length."""
    return _from_int(int.from_bytes(_check_slice(data, limbs), "little"), limbs)


def from_be_hex(text: str, limbs: int) -> UInt:
    """Decode a big-endian hex string of exactly ``16 * limbs`` digits."""
    return _from_int(int.from_bytes(_decode_hex(text, limbs), "big"), limbs)


def from_le_hex(text: str, limbs: int) -> UInt:
    """Decode a little-endian hex string of exactly ``16 * limbs`` digits."""
    return _from_int(int.from_bytes(_decode_hex(text, limbs), "little"), limbs)


def to_be_bytes(n: UInt) -> bytes:
    """Serialize as big-endian bytes."""
    return b"".join(word.to_bytes(LIMB_BYTES, "big") for word in reversed(n.limbs))


def to_le_bytes(n: UInt) -> bytes:
    """Serialize as little-endian bytes."""
    return b"".join(word.to_bytes(LIMB_BYTES, "little") for word in n.limbs)


def concat(hi: UInt, lo: UInt) -> UInt:
    """Join two equal-width values into one twice as wide, ``hi`` on top."""
    if len(hi.limbs) != len(lo.limbs):
        raise ValueError(f"limb count mismatch: {len(hi.limbs)} != {len(lo.limbs)}")
    return UInt.from_words(lo.limbs + hi.limbs)


def split(n: UInt) -> tuple[UInt, UInt]:
    """Split a value into its ``(hi, lo)`` halves."""
    count = len(n.limbs)
    if count % 2:
        raise ValueError("value must have an even number of limbs to split")
    half = count // 2
    return UInt.from_words(n.limbs[half:]), UInt.from_words(n.limbs[:half])