"""
Limbs — атомарные операции над 32-битными limbs

Базис всей арифметики limbint: radix 2^32, limbs хранятся как int в [0, 2^32 - 1],
а все промежуточные вычисления выполняются в "широком" аккумуляторе (64 бита).

Модуль обеспечивает:
- Валидацию limb-значений
- Разложение широкого значения на (limb, carry)
- Шаг сложения с переносом (add_with_carry)
- Шаг умножения на limb с переносом (mul_with_carry)
- Проверку инварианта ширины аккумулятора (check_wide)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ширина limb и radix фиксированы: 32 бита, BASE = 2^32
2. Максимальное промежуточное значение (2^32-1)^2 + (2^32-1) < 2^64
3. Перенос при сложении всегда 0 или 1
4. Все операции детерминированы, без состояния
"""

from typing import Final

# =============================================================================
# RADIX-ПАРАМЕТРЫ
# =============================================================================

# Ширина одного limb в битах
LIMB_BITS: Final[int] = 32

# Основание системы счисления (radix)
BASE: Final[int] = 1 << LIMB_BITS

# Максимальное значение limb
LIMB_MAX: Final[int] = BASE - 1

# Ширина аккумулятора для промежуточных вычислений
WIDE_BITS: Final[int] = 64

# Максимальное значение широкого аккумулятора
WIDE_MAX: Final[int] = (1 << WIDE_BITS) - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LimbOverflowError(ArithmeticError):
    """
    Промежуточное значение вышло за пределы 64-битного аккумулятора.

    Для валидных limbs структурно невозможно: (2^32-1)^2 + (2^32-1) < 2^64.
    Возникновение означает, что на вход попали невалидные limbs.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_limb(value: int) -> int:
    """
    Проверка, что значение является допустимым limb.

    Args:
        value: Проверяемое значение

    Returns:
        value без изменений

    Raises:
        ValueError: Если value не int (bool не допускается) или вне [0, LIMB_MAX]

    Examples:
        >>> validate_limb(0)
        0
        >>> validate_limb(4294967295)
        4294967295
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Limb must be int, got {type(value).__name__}")
    if value < 0 or value > LIMB_MAX:
        raise ValueError(f"Limb {value} out of range [0, {LIMB_MAX}]")
    return value


def check_wide(value: int) -> int:
    """
    Проверка инварианта ширины аккумулятора.

    Args:
        value: Промежуточное значение

    Returns:
        value без изменений

    Raises:
        LimbOverflowError: Если value > WIDE_MAX
    """
    if value > WIDE_MAX:
        raise LimbOverflowError(
            f"Accumulator value {value} exceeds {WIDE_BITS}-bit range (max {WIDE_MAX})"
        )
    return value


def max_wide_product() -> int:
    """Максимальное значение limb * limb + carry, которое встречается в системе."""
    return LIMB_MAX * LIMB_MAX + LIMB_MAX


# =============================================================================
# АТОМАРНЫЕ ШАГИ
# =============================================================================


def split_wide(value: int) -> tuple[int, int]:
    """
    Разложение широкого значения на младший limb и перенос.

    Args:
        value: Значение в [0, WIDE_MAX]

    Returns:
        (value mod 2^32, value div 2^32)

    Examples:
        >>> split_wide(4294967296)
        (0, 1)
        >>> split_wide(5)
        (5, 0)
    """
    check_wide(value)
    return (value % BASE, value // BASE)


def add_with_carry(a: int, b: int, carry: int) -> tuple[int, int]:
    """
    Один шаг сложения: a + b + carry.

    Если сумма достигает BASE, limb = сумма - BASE и перенос 1,
    иначе limb = сумма и перенос 0.

    Args:
        a: Limb первого слагаемого
        b: Limb второго слагаемого
        carry: Входящий перенос (0 или 1)

    Returns:
        (limb, carry_out)

    Examples:
        >>> add_with_carry(4294967295, 1, 0)
        (0, 1)
        >>> add_with_carry(1, 1, 1)
        (3, 0)
    """
    digit_sum = check_wide(a + b + carry)
    if digit_sum >= BASE:
        return (digit_sum - BASE, 1)
    return (digit_sum, 0)


def mul_with_carry(a: int, d: int, carry: int) -> tuple[int, int]:
    """
    Один шаг умножения на limb: a * d + carry.

    Args:
        a: Limb множимого
        d: Limb-множитель
        carry: Входящий перенос (< BASE)

    Returns:
        (limb, carry_out), carry_out < BASE

    Examples:
        >>> mul_with_carry(4294967295, 4294967295, 4294967295)
        (0, 4294967295)
    """
    return split_wide(a * d + carry)
