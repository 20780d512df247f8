# ctbigint

Fixed-width unsigned big integers made of 64-bit limbs. Every value has a
fixed number of limbs, chosen when it is created: a 256-bit value has four.
Results of operations keep the width of their operands, and operands of
different widths are rejected with `ValueError`.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Modules

- `ctbigint.uint.UInt` is the integer type, an immutable value whose `limbs`
  tuple holds the words least significant first.
  - Construction: `UInt.zero(limbs)`, `UInt.one(limbs)`, `UInt.max(limbs)`,
    `UInt.from_words(words)`; `words()` returns the limbs and `int(value)`
    gives the Python integer.
  - Inspection: `bits()`, `is_zero()`, `is_odd()`.
  - Comparison: `ct_eq`, `ct_lt`, `ct_gt`, plus `==`, `<`, `<=`, `>`, `>=`.
  - Shifts: `shl_vartime(n)` / `<<` and `shr_vartime(shift)` / `>>`; bits
    shifted past the width are dropped.
  - Subtraction: `sbb(rhs, borrow)` returns the difference and a borrow limb
    (all ones on underflow, zero otherwise); `wrapping_sub`,
    `saturating_sub` (zero on underflow) and `checked_sub` (`None` on
    underflow).
  - Exclusive or: `bitxor`, `wrapping_xor`, `checked_xor` and `^`.
- `ctbigint.convert` builds values from native integers of a given size
  (`from_u8`, `from_u16`, `from_u32`, `from_u64`, `from_u128`, `from_word`,
  `from_wide_word`) and converts back (`to_u64`, `to_u128`, `to_words`).
  Out-of-range inputs or too few limbs raise `ValueError`.
- `ctbigint.encoding` decodes exact-length big- and little-endian bytes and
  hex (`from_be_slice`, `from_le_slice`, `from_be_hex`, `from_le_hex`),
  encodes bytes (`to_be_bytes`, `to_le_bytes`), and joins or halves values
  with `concat(hi, lo)` and `split(n)`, which returns `(hi, lo)`.
- `ctbigint.mul` holds `mul_wide` (returns `(lo, hi)`), `wrapping_mul`,
  `saturating_mul` (maximum value on overflow), `checked_mul` (`None` on
  overflow) and `square` (a result twice as wide).
- `ctbigint.div` holds `div_rem` and `reduce` (`None` for a zero divisor),
  `reduce2k(a, k)` for `a % 2**k`, `wrapping_div` and `wrapping_rem`
  (`ZeroDivisionError` for a zero divisor), and `checked_div` and
  `checked_rem` (`None` for a zero divisor).
- `ctbigint.sqrt` holds `sqrt` and `wrapping_sqrt` (floor of the square
  root) and `checked_sqrt` (`None` unless the input is a perfect square).
- `ctbigint.modular` holds `inv_mod2k(a, k)` for `1 / a mod 2**k` with `a`
  odd, `sub_mod(a, b, p)` and `neg_mod(a, p)`.
- `ctbigint.rand` provides `random_uint(rng, limbs)` and
  `random_mod(rng, modulus)`, which draws a value below a non-zero modulus by
  rejection sampling. `rng` is any object with `getrandbits` and `randrange`,
  such as `random.SystemRandom()`.
- `ctbigint.rlp` encodes and decodes integers as RLP byte strings
  (`rlp_encode`, `rlp_decode(data, limbs)`); malformed or oversized input
  raises `RlpDecodeError`, a subclass of `ValueError`.
- `ctbigint.wrapping.Wrapping` wraps a value to mark its arithmetic as
  intentionally wrapping. Around a `UInt` it supports `-`, `*` and `^` with
  another `Wrapping`, and `//` and `%` with a `UInt`; it also offers
  `ct_eq` and `Wrapping.conditional_select(a, b, choice)`.

## Example

```python
from ctbigint.encoding import from_be_hex, to_be_bytes
from ctbigint.modular import neg_mod

p = from_be_hex("928334a4e4be0843ec225a4c9c61df34bdc7a81513e4b6f76f2bfa3148e2e1b5", 4)
x = from_be_hex("8d16e171674b4e6d8529edba4593802bf30b8cb161dd30aa8e550d41380007c2", 4)
print(to_be_bytes(neg_mod(x, p)).hex())
# 056c53337d72b9d666f86c9256ce5f08cabc1b63b207864ce0d6ecf010e2d9f3
```

## What this package does not do

- There is no addition: no `wrapping_add`, no `add_mod`, and no `+` on
  `UInt` or `Wrapping`.
- There is no bitwise AND, OR or NOT.
- There is no ASN.1 DER encoding and no serialization support beyond bytes,
  hex and RLP.
- The `ct_` names describe the comparisons they provide; the code is plain
  Python integer arithmetic and makes no guarantee about timing.
- There is no command-line tool; the package is used as a library.