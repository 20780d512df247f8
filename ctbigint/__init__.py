"""Fixed-width unsigned big integers built from 64-bit limbs."""

__version__ = "0.1.0"
__all__ = [
    "convert",
    "div",
    "encoding",
    "modular",
    "mul",
    "rand",
    "rlp",
    "sqrt",
    "uint",
    "wrapping",
]