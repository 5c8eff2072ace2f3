"""
Domain models and limb primitives.

Contains the BigInt value type and the radix-2^32 limb operations it is built on.
"""

from src.limbint.domain.bigint import BigInt, Limb
from src.limbint.domain.limbs import (
    BASE,
    LIMB_BITS,
    LIMB_MAX,
    WIDE_BITS,
    WIDE_MAX,
    LimbOverflowError,
    add_with_carry,
    check_wide,
    max_wide_product,
    mul_with_carry,
    split_wide,
    validate_limb,
)

__all__ = [
    # Limbs — Constants
    "BASE",
    "LIMB_BITS",
    "LIMB_MAX",
    "WIDE_BITS",
    "WIDE_MAX",
    # Limbs — Exceptions
    "LimbOverflowError",
    # Limbs — Functions
    "add_with_carry",
    "check_wide",
    "max_wide_product",
    "mul_with_carry",
    "split_wide",
    "validate_limb",
    # BigInt model
    "BigInt",
    "Limb",
]
