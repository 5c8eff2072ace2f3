"""
Addition — сложение BigInt с распространением переноса

Для каждой позиции i в [0, max(len(a), len(b))):
    digit_sum = a[i] + b[i] + carry   (отсутствующий limb = 0)
    digit_sum >= 2^32 → limb = digit_sum - 2^32, carry = 1
    иначе            → limb = digit_sum,         carry = 0
Финальный перенос 1 → дописывается ещё один limb со значением 1.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Длина результата = max(len(a), len(b)) или на 1 больше при финальном переносе
2. Перенос всегда 0 или 1
3. Входы не изменяются
"""

from src.limbint.domain.bigint import BigInt
from src.limbint.domain.limbs import add_with_carry


def sum(b1: BigInt, b2: BigInt) -> BigInt:
    """
    Сумма двух BigInt.

    Args:
        b1: Первое слагаемое
        b2: Второе слагаемое

    Returns:
        b1 + b2

    Examples:
        >>> sum(BigInt(limbs=[4294967295, 1]), BigInt(limbs=[1, 1, 1])).limbs
        (0, 3, 1)
    """
    result: list[int] = []
    largest = max(len(b1.limbs), len(b2.limbs))
    carry = 0
    for i in range(largest):
        limb, carry = add_with_carry(b1.get(i), b2.get(i), carry)
        result.append(limb)

    if carry == 1:
        result.append(1)

    return BigInt(limbs=tuple(result))


def add_into(buffer: list[int], addend: list[int], offset: int = 0) -> None:
    """
    Прибавление addend к buffer на месте, начиная с позиции offset.

    Эквивалентно buffer += addend · 2^(32·offset). Перенос распространяется
    дальше конца addend; при выходе за конец buffer он расширяется.

    Args:
        buffer: Изменяемый список limbs (аккумулятор)
        addend: Limbs слагаемого
        offset: Сдвиг в limbs

    Raises:
        ValueError: Если offset < 0
    """
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    if len(buffer) < offset:
        buffer.extend([0] * (offset - len(buffer)))

    carry = 0
    i = offset
    for limb in addend:
        current = buffer[i] if i < len(buffer) else 0
        new_limb, carry = add_with_carry(current, limb, carry)
        if i < len(buffer):
            buffer[i] = new_limb
        else:
            buffer.append(new_limb)
        i += 1

    while carry:
        current = buffer[i] if i < len(buffer) else 0
        new_limb, carry = add_with_carry(current, 0, carry)
        if i < len(buffer):
            buffer[i] = new_limb
        else:
            buffer.append(new_limb)
        i += 1
