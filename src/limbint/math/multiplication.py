"""
Multiplication — умножение BigInt (schoolbook)

Для каждого ненулевого limb d с индексом i множителя b:
1. atomic_product(a, d): a · d через mul_with_carry по всем limbs a
2. Частичное произведение записывается со сдвигом i limbs
   (умножение на 2^(32·i)) прямо в предвыделенный буфер результата
3. Накопление через сложение с переносом (add_into)

Нулевые limbs множителя пропускаются (оптимизация, на результат не влияет).

Сложность: O(len(a)·len(b)) умножений limb на limb.
"""

from src.limbint.domain.bigint import BigInt
from src.limbint.domain.limbs import mul_with_carry, validate_limb
from src.limbint.math.addition import add_into


def atomic_product(b1: BigInt, d: int) -> BigInt:
    """
    Произведение BigInt на один limb.

    Args:
        b1: Множимое
        d: Limb-множитель в [0, 2^32 - 1]

    Returns:
        b1 · d; финальный ненулевой перенос дописывается старшим limb

    Raises:
        ValueError: Если d не является допустимым limb
    """
    validate_limb(d)
    result: list[int] = []
    carry = 0
    for d1 in b1.limbs:
        limb, carry = mul_with_carry(d1, d, carry)
        result.append(limb)

    if carry > 0:
        result.append(carry)

    return BigInt(limbs=tuple(result))


def shift_limbs(b1: BigInt, k: int) -> BigInt:
    """
    Сдвиг на k limbs влево (умножение на 2^(32·k)).

    Raises:
        ValueError: Если k < 0
    """
    if k < 0:
        raise ValueError(f"Shift must be non-negative, got {k}")
    return BigInt(limbs=(0,) * k + b1.limbs)


def product(b1: BigInt, b2: BigInt) -> BigInt:
    """
    Произведение двух BigInt.

    Args:
        b1: Множимое
        b2: Множитель

    Returns:
        b1 · b2 (может содержать хвостовые нулевые limbs)

    Examples:
        >>> product(BigInt(limbs=[35454, 2]), BigInt(limbs=[4294967295, 4, 1])).limbs
        (4294931842, 177267, 35464, 2, 0)
    """
    if not b1.limbs or not b2.limbs:
        return BigInt.zero()

    buffer = [0] * (len(b1.limbs) + len(b2.limbs))
    for i, d in enumerate(b2.limbs):
        if d > 0:
            add_into(buffer, list(atomic_product(b1, d).limbs), offset=i)

    return BigInt(limbs=tuple(buffer))
