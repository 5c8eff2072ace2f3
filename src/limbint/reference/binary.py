"""
Binary Reference — эталонная реализация с одним битом на limb

Намеренно простая, неоптимизированная реализация для перекрёстной проверки
основной арифметики в radix 2^32:
- from_binary_string: символы строки берутся по порядку как биты,
  первый символ — младший разряд
- times_two: удвоение вставкой нулевого бита в начало
- binary_sum: поразрядное сложение с переносом
- binary_product: сдвиг-и-сложение
"""

from typing import Annotated, Final

from pydantic import BaseModel, Field

from src.limbint.domain.bigint import BigInt
from src.limbint.domain.limbs import LIMB_BITS

Bit = Annotated[int, Field(strict=True, ge=0, le=1)]

_BITS: Final[dict[str, int]] = {"0": 0, "1": 1}


class BinaryParseError(ValueError):
    """Строка содержит символ кроме '0' и '1'."""

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(f"Invalid binary digit {text[position]!r} at position {position}")


# =============================================================================
# BINARY BIGINT MODEL
# =============================================================================


class BinaryBigInt(BaseModel):
    """Беззнаковое целое, по одному биту на limb (младший первым)."""

    bits: tuple[Bit, ...] = Field(default=(), description="Биты от младшего к старшему")

    model_config = {"frozen": True}

    @classmethod
    def zero(cls) -> "BinaryBigInt":
        return cls(bits=())

    def get(self, i: int) -> int:
        if i < len(self.bits):
            return self.bits[i]
        return 0

    def times_two(self) -> "BinaryBigInt":
        return BinaryBigInt(bits=(0,) + self.bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryBigInt):
            return NotImplemented
        for i in range(max(len(self.bits), len(other.bits))):
            if self.get(i) != other.get(i):
                return False
        return True

    def __hash__(self) -> int:
        n = len(self.bits)
        while n > 0 and self.bits[n - 1] == 0:
            n -= 1
        return hash(self.bits[:n])


# =============================================================================
# CONSTRUCTION
# =============================================================================


def from_binary_string(text: str) -> BinaryBigInt:
    """
    Разбор строки из '0'/'1'; первый символ — младший бит.

    Raises:
        BinaryParseError: Если встречен иной символ

    Examples:
        >>> from_binary_string("1011").bits
        (1, 0, 1, 1)
    """
    bits = []
    for i, c in enumerate(text):
        if c not in _BITS:
            raise BinaryParseError(text, i)
        bits.append(_BITS[c])
    return BinaryBigInt(bits=tuple(bits))


def from_bigint(value: BigInt) -> BinaryBigInt:
    """Разворачивание каждого 32-битного limb в 32 бита."""
    bits = []
    for limb in value.limbs:
        for shift in range(LIMB_BITS):
            bits.append((limb >> shift) & 1)
    return BinaryBigInt(bits=tuple(bits))


# =============================================================================
# ARITHMETIC
# =============================================================================


def binary_sum(b1: BinaryBigInt, b2: BinaryBigInt) -> BinaryBigInt:
    result = []
    carry = 0
    for i in range(max(len(b1.bits), len(b2.bits))):
        total = b1.get(i) + b2.get(i) + carry
        result.append(total % 2)
        carry = total // 2

    if carry == 1:
        result.append(1)

    return BinaryBigInt(bits=tuple(result))


def binary_product(b1: BinaryBigInt, b2: BinaryBigInt) -> BinaryBigInt:
    result = BinaryBigInt.zero()
    temp = b1
    for bit in b2.bits:
        if bit == 1:
            result = binary_sum(result, temp)
        temp = temp.times_two()
    return result
