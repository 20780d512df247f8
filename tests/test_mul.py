import pytest
from hypothesis import given
from hypothesis import strategies as st

from ctbigint.convert import from_u8, from_u32, from_u64
from ctbigint.encoding import from_le_slice, split, to_le_bytes
from ctbigint.mul import checked_mul, mul_wide, saturating_mul, square, wrapping_mul
from ctbigint.uint import UInt

ZERO = UInt.zero(1)
ONE = UInt.one(1)

uint256 = st.binary(min_size=32, max_size=32).map(lambda b: from_le_slice(b, 4))


def test_mul_wide_zero_and_one():
    assert mul_wide(ZERO, ZERO) == (ZERO, ZERO)
    assert mul_wide(ZERO, ONE) == (ZERO, ZERO)
    assert mul_wide(ONE, ZERO) == (ZERO, ZERO)
    assert mul_wide(ONE, ONE) == (ONE, ZERO)


@pytest.mark.parametrize("a_int", [3, 5, 17, 256, 65537])
@pytest.mark.parametrize("b_int", [3, 5, 17, 256, 65537])
def test_mul_wide_lo_only(a_int, b_int):
    lo, hi = mul_wide(from_u32(a_int, 1), from_u32(b_int, 1))
    assert lo == from_u64(a_int * b_int, 1)
    assert hi.is_zero()


def test_checked_mul_ok():
    n = from_u32(0xFFFF_FFFF, 1)
    assert checked_mul(n, n) == from_u64(0xFFFF_FFFE_0000_0001, 1)


def test_checked_mul_overflow():
    n = from_u64(0xFFFF_FFFF_FFFF_FFFF, 1)
    assert checked_mul(n, n) is None


def test_saturating_mul_no_overflow():
    n = from_u8(8, 1)
    assert saturating_mul(n, n) == from_u8(64, 1)


def test_saturating_mul_overflow():
    a = from_u64(0xFFFF_FFFF_FFFF_FFFF, 1)
    b = from_u8(2, 1)
    assert saturating_mul(a, b) == UInt.max(1)


def test_square():
    n = from_u64(0xFFFF_FFFF_FFFF_FFFF, 1)
    hi, lo = split(square(n))
    assert lo == from_u64(1, 1)
    assert hi == from_u64(0xFFFF_FFFF_FFFF_FFFE, 1)


def test_mismatched_widths_rejected():
    with pytest.raises(ValueError):
        mul_wide(UInt.one(1), UInt.one(2))


@given(uint256, uint256)
def test_wrapping_mul_matches_reference(a, b):
    expected = (int(a) * int(b)) % (1 << 256)
    actual = wrapping_mul(a, b)
    assert int(actual) == expected
    assert from_le_slice(to_le_bytes(actual), 4) == actual