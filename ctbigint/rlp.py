"""Recursive Length Prefix encoding of :class:`UInt` values."""

from __future__ import annotations

from ctbigint.encoding import LIMB_BYTES, from_be_slice, to_be_bytes
from ctbigint.uint import UInt

_SHORT_LIMIT = 55


class RlpDecodeError(ValueError):
    """Raised when RLP input does not hold a valid integer."""


def rlp_encode(n: UInt) -> bytes:
    """Encode a value as an RLP byte string with leading zeros stripped."""
    payload = to_be_bytes(n).lstrip(b"\x00")
    if len(payload) == 1 and payload[0] < 0x80:
        return payload
    if len(payload) <= _SHORT_LIMIT:
        return bytes([0x80 + len(payload)]) + payload
    length = len(payload).to_bytes((len(payload).bit_length() + 7) // 8, "big")
    return bytes([0xB7 + len(length)]) + length + payload


def _decode_string(data: bytes) -> bytes:
    if not data:
        raise RlpDecodeError("input is too short")
    prefix = data[0]
    if prefix < 0x80:
        payload, end = data[:1], 1
    elif prefix <= 0x80 + _SHORT_LIMIT:
        length = prefix - 0x80
        end = 1 + length
        if len(data) < end:
            raise RlpDecodeError("input is too short")
        payload = data[1:end]
        if length == 1 and payload[0] < 0x80:
            raise RlpDecodeError("invalid indirection")
    elif prefix <= 0xBF:
        length_size = prefix - 0xB7
        if len(data) < 1 + length_size:
            raise RlpDecodeError("input is too short")
        length_bytes = data[1 : 1 + length_size]
        if length_bytes[0] == 0:
            raise RlpDecodeError("length has leading zeros")
        length = int.from_bytes(length_bytes, "big")
        if length <= _SHORT_LIMIT:
            raise RlpDecodeError("invalid indirection")
        start = 1 + length_size
        end = start + length
        if len(data) < end:
            raise RlpDecodeError("input is too short")
        payload = data[start:end]
    else:
        raise RlpDecodeError("expected data, found a list")
    if end != len(data):
        raise RlpDecodeError("trailing bytes after value")
    return payload


def rlp_decode(data: bytes, limbs: int) -> UInt:
    """Decode an RLP byte string into a value with ``limbs`` limbs."""
    if limbs < 1:
        raise ValueError("number of limbs must be greater than zero")
    payload = _decode_string(bytes(data))
    if payload[:1] == b"\x00":
        raise RlpDecodeError("invalid indirection")
    size = LIMB_BYTES * limbs
    if len(payload) > size:
        raise RlpDecodeError("value is too big")
    return from_be_slice(payload.rjust(size, b"\x00"), limbs)