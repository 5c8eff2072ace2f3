"""
Reference implementations.

Bit-per-limb variant used to cross-check the radix-2^32 arithmetic.
"""

from src.limbint.reference.binary import (
    BinaryBigInt,
    BinaryParseError,
    binary_product,
    binary_sum,
    from_bigint,
    from_binary_string,
)

__all__ = [
    "BinaryBigInt",
    "BinaryParseError",
    "binary_product",
    "binary_sum",
    "from_bigint",
    "from_binary_string",
]
