"""
limbint — беззнаковые целые произвольной точности на 32-битных limbs.

Публичная поверхность:
- zero() / from_string(text) — конструирование
- sum(a, b) / product(a, b) — арифметика
- == — равенство, не зависящее от хвостовых нулевых limbs
"""

from src.limbint.domain import BigInt, LimbOverflowError
from src.limbint.math import DecimalParseError, ParserConfig, from_string, product, sum


def zero() -> BigInt:
    """Ноль (пустая последовательность limbs)."""
    return BigInt.zero()


__all__ = [
    "BigInt",
    "DecimalParseError",
    "LimbOverflowError",
    "ParserConfig",
    "from_string",
    "product",
    "sum",
    "zero",
]
