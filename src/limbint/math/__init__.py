"""
Arithmetic modules для limbint

Десятичный парсер, сложение и умножение BigInt в radix 2^32.
"""

# Decimal Parser
from src.limbint.math.parsing import (
    # Parser constants
    DEFAULT_CHUNK_DIGITS,
    MAX_CHUNK_DIGITS,
    # Exceptions
    DecimalParseError,
    # Config
    ParserConfig,
    # Helpers
    all_zero,
    apply_carry,
    chunk_widths,
    find_invalid_digit,
    split_decimal,
    # Entry point
    from_string,
)

# Addition
from src.limbint.math.addition import add_into, sum

# Multiplication
from src.limbint.math.multiplication import atomic_product, product, shift_limbs

__all__ = [
    # Decimal Parser — Constants
    "DEFAULT_CHUNK_DIGITS",
    "MAX_CHUNK_DIGITS",
    # Decimal Parser — Exceptions
    "DecimalParseError",
    # Decimal Parser — Config
    "ParserConfig",
    # Decimal Parser — Functions
    "all_zero",
    "apply_carry",
    "chunk_widths",
    "find_invalid_digit",
    "from_string",
    "split_decimal",
    # Addition
    "add_into",
    "sum",
    # Multiplication
    "atomic_product",
    "product",
    "shift_limbs",
]
