import pytest

from ctbigint.encoding import from_be_hex
from ctbigint.rlp import RlpDecodeError, rlp_decode, rlp_encode
from ctbigint.uint import UInt

U256_VECTORS = [
    (UInt.zero(4), bytes.fromhex("80")),
    (
        from_be_hex("0000000000000000000000000000000000000000000000000000000001000000", 4),
        bytes.fromhex("8401000000"),
    ),
    (
        from_be_hex("00000000000000000000000000000000000000000000000000000000ffffffff", 4),
        bytes.fromhex("84ffffffff"),
    ),
    (
        from_be_hex("8090a0b0c0d0e0f00910203040506077000000000000000100000000000012f0", 4),
        bytes.fromhex("a08090a0b0c0d0e0f00910203040506077000000000000000100000000000012f0"),
    ),
]


@pytest.mark.parametrize("value, encoded", U256_VECTORS)
def test_round_trip(value, encoded):
    assert rlp_encode(value) == encoded
    assert rlp_decode(encoded, 4) == value


def test_small_value_is_single_byte():
    value = UInt.from_words((0x7F, 0, 0, 0))
    assert rlp_encode(value) == b"\x7f"
    assert rlp_decode(b"\x7f", 4) == value


def test_long_string():
    value = UInt.max(8)
    encoded = rlp_encode(value)
    assert encoded == b"\xb8\x40" + b"\xff" * 64
    assert rlp_decode(encoded, 8) == value


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\x00",
        b"\x82\x00\x01",
        b"\x81\x05",
        b"\x84\x01\x00",
        b"\xc0",
        b"\x80\x00",
        b"\xb8\x05hello",
        b"\xb8\x00",
    ],
)
def test_invalid_input(data):
    with pytest.raises(RlpDecodeError):
        rlp_decode(data, 4)


def test_too_big():
    encoded = bytes([0x80 + 33]) + b"\x01" * 33
    with pytest.raises(RlpDecodeError, match="too big"):
        rlp_decode(encoded, 4)


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        rlp_decode(b"\xc0", 4)