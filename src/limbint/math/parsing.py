"""
Decimal Parser — конверсия десятичной строки в limbs

Алгоритм: chunked long division по основанию 2^32.

1. Строка разбивается слева направо на чанки по chunk_digits цифр
   (последний чанк может быть короче), каждый чанк декодируется в int.
2. Пока не все чанки нулевые:
   - проход по чанкам слева направо с переносом остатка;
   - перенос дописывается к текущему значению чанка как десятичный префикс,
     при этом значение чанка дополняется нулями слева до ИСХОДНОЙ ширины чанка;
   - комбинированное значение делится на 2^32: частное заменяет чанк,
     остаток становится переносом для следующего чанка;
   - финальный перенос после последнего чанка — очередной (более старший) limb.

Разбиение на чанки ограничивает стоимость шага числом чанков,
а не длиной всей строки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Дополнение нулями — до исходной ширины чанка, НЕ до текущей
   (иначе смещается разрядность на границах чанков и результат молча портится)
2. Цикл выполняется минимум один раз: from_string("") == [0] == zero()
3. Любой символ кроме ASCII 0-9 → DecimalParseError до начала деления
4. carry · 10^w + chunk < 2^64 для любой допустимой ширины w (1..9)
"""

from dataclasses import dataclass
from typing import Final

from src.limbint.domain.bigint import BigInt
from src.limbint.domain.limbs import BASE, check_wide
from src.limbint.log import get_logger

log = get_logger(__name__)

# =============================================================================
# PARSER-ПАРАМЕТРЫ
# =============================================================================

# Ширина чанка по умолчанию (цифр)
DEFAULT_CHUNK_DIGITS: Final[int] = 8

# Максимальная ширина чанка: 10^w <= 2^32, иначе carry · 10^w + chunk >= 2^64
MAX_CHUNK_DIGITS: Final[int] = 9

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalParseError(ValueError):
    """
    Строка не является корректной десятичной записью.

    Attributes:
        text: Исходная строка
        position: Индекс первого недопустимого символа
    """

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(
            f"Invalid decimal digit {text[position]!r} at position {position}"
        )


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация десятичного парсера.

    chunk_digits: ширина чанка в цифрах (1..MAX_CHUNK_DIGITS).
    """

    chunk_digits: int = DEFAULT_CHUNK_DIGITS

    def __post_init__(self):
        if isinstance(self.chunk_digits, bool) or not isinstance(self.chunk_digits, int):
            raise ValueError(f"chunk_digits must be int, got {self.chunk_digits!r}")
        if not 1 <= self.chunk_digits <= MAX_CHUNK_DIGITS:
            raise ValueError(
                f"chunk_digits must be in [1, {MAX_CHUNK_DIGITS}], got {self.chunk_digits}"
            )


# =============================================================================
# HELPERS
# =============================================================================


def find_invalid_digit(text: str) -> int | None:
    """Индекс первого символа вне ASCII 0-9, либо None."""
    for i, c in enumerate(text):
        if c not in _DIGITS:
            return i
    return None


def chunk_widths(text: str, chunk_digits: int) -> list[int]:
    """
    Исходные ширины чанков (в цифрах).

    Examples:
        >>> chunk_widths("12345678901", 8)
        [8, 3]
        >>> chunk_widths("", 8)
        []
    """
    return [
        min(chunk_digits, len(text) - i) for i in range(0, len(text), chunk_digits)
    ]


def split_decimal(text: str, chunk_digits: int) -> list[int]:
    """
    Разбиение строки цифр на чанки слева направо.

    Examples:
        >>> split_decimal("12345678901", 8)
        [12345678, 901]
    """
    return [int(text[i : i + chunk_digits]) for i in range(0, len(text), chunk_digits)]


def apply_carry(value: int, carry: int, width: int) -> int:
    """
    Приписывание переноса как десятичного префикса к значению чанка.

    Значение чанка дополняется нулями слева до исходной ширины width,
    т.е. результат равен carry · 10^width + value.

    Examples:
        >>> apply_carry(5, 3, 4)
        30005
        >>> apply_carry(1234, 7, 4)
        71234
    """
    value_str = str(value)
    if len(value_str) < width:
        value_str = "0" * (width - len(value_str)) + value_str
    return check_wide(int(str(carry) + value_str))


def all_zero(chunks: list[int]) -> bool:
    """True если все чанки нулевые (в т.ч. для пустого списка)."""
    for chunk in chunks:
        if chunk > 0:
            return False
    return True


# =============================================================================
# FROM STRING
# =============================================================================


def from_string(text: str, config: ParserConfig | None = None) -> BigInt:
    """
    Конверсия десятичной строки в BigInt.

    Args:
        text: Строка из ASCII цифр (пустая строка — ноль)
        config: Конфигурация парсера (default: ParserConfig())

    Returns:
        BigInt; для "" — один нулевой limb (равен zero())

    Raises:
        TypeError: Если text не str
        DecimalParseError: Если в строке есть символ вне 0-9

    Examples:
        >>> from_string("4294967296").limbs
        (0, 1)
    """
    if not isinstance(text, str):
        raise TypeError(f"Decimal input must be str, got {type(text).__name__}")

    config = config or ParserConfig()

    bad = find_invalid_digit(text)
    if bad is not None:
        log.debug("parsing.rejected", position=bad, length=len(text))
        raise DecimalParseError(text, bad)

    widths = chunk_widths(text, config.chunk_digits)
    chunks = split_decimal(text, config.chunk_digits)

    limbs: list[int] = []
    while True:
        carry = 0
        for i in range(len(chunks)):
            if carry > 0:
                temp = apply_carry(chunks[i], carry, widths[i])
            else:
                temp = chunks[i]
            chunks[i] = temp // BASE
            carry = temp % BASE
        limbs.append(carry)

        if all_zero(chunks):
            break

    log.debug(
        "parsing.parsed",
        digits=len(text),
        chunks=len(widths),
        limbs=len(limbs),
    )
    return BigInt(limbs=tuple(limbs))
