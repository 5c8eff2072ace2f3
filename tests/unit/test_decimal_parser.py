"""
Тесты для Decimal Parser (chunked long division)

Проверяет:
1. Известные значения, включая границу основания 2^32
2. Пустую строку и ведущие нули
3. Дополнение нулями до исходной ширины чанка
4. Отклонение недопустимых символов
5. ParserConfig и независимость результата от ширины чанка
"""

import pytest

from src.limbint import BigInt, DecimalParseError, ParserConfig, from_string, zero
from src.limbint.math.parsing import (
    MAX_CHUNK_DIGITS,
    all_zero,
    apply_carry,
    chunk_widths,
    find_invalid_digit,
    split_decimal,
)


def _value(b: BigInt) -> int:
    """Значение BigInt как Python int (только как оракул в тестах)."""
    total = 0
    for i, limb in enumerate(b.limbs):
        total += limb << (32 * i)
    return total


# =============================================================================
# HELPERS
# =============================================================================


class TestHelpers:
    """Тесты вспомогательных функций парсера"""

    def test_split_decimal(self) -> None:
        assert split_decimal("12345678901", 8) == [12345678, 901]
        assert split_decimal("0000000012", 8) == [0, 12]
        assert split_decimal("", 8) == []

    def test_chunk_widths_last_shorter(self) -> None:
        assert chunk_widths("12345678901", 8) == [8, 3]

    def test_chunk_widths_exact_multiple(self) -> None:
        """Длина кратна ширине: последний чанк полной ширины"""
        assert chunk_widths("1234567812345678", 8) == [8, 8]

    def test_apply_carry_pads_to_original_width(self) -> None:
        assert apply_carry(5, 3, 4) == 30005
        assert apply_carry(0, 1, 8) == 100000000

    def test_apply_carry_full_width(self) -> None:
        assert apply_carry(1234, 7, 4) == 71234

    def test_all_zero(self) -> None:
        assert all_zero([])
        assert all_zero([0, 0])
        assert not all_zero([0, 1])

    def test_find_invalid_digit(self) -> None:
        assert find_invalid_digit("123") is None
        assert find_invalid_digit("12a3") == 2


# =============================================================================
# ИЗВЕСТНЫЕ ЗНАЧЕНИЯ
# =============================================================================


class TestKnownValues:
    """Тесты from_string на известных значениях"""

    def test_single_digit(self) -> None:
        assert from_string("4") == BigInt(limbs=[4])

    def test_empty_is_zero(self) -> None:
        assert from_string("") == zero()
        assert from_string("") == BigInt(limbs=[0, 0])

    def test_empty_yields_single_zero_limb(self) -> None:
        assert from_string("").limbs == (0,)

    def test_limb_max(self) -> None:
        assert from_string("4294967295") == BigInt(limbs=[4294967295])

    def test_base_boundary(self) -> None:
        assert from_string("4294967296") == BigInt(limbs=[0, 1])

    def test_two_limbs(self) -> None:
        assert from_string("922337203685477580") == BigInt(
            limbs=[3435973836, 214748364]
        )

    def test_three_limbs(self) -> None:
        assert from_string("9223372036854775803949") == BigInt(
            limbs=[4294963245, 4294967295, 499]
        )

    def test_four_limbs(self) -> None:
        assert from_string("42949672963434342343243324343232890890") == BigInt(
            limbs=[3461744650, 2330743505, 1228788904, 542101086]
        )

    def test_length_multiple_of_chunk(self) -> None:
        """16 цифр: последний чанк полной ширины, дополнение всё равно нужно"""
        assert from_string("1234567890123456") == BigInt(limbs=[1015724736, 287445])

    def test_leading_zeros(self) -> None:
        assert from_string("0000000000000042") == BigInt(limbs=[42])

    def test_all_zeros(self) -> None:
        assert from_string("000000000000000000000") == zero()

    def test_342(self) -> None:
        assert from_string("342") == BigInt(limbs=[342, 0, 0])

    def test_large_power_of_two(self) -> None:
        """2^256"""
        text = str(2**256)
        assert from_string(text) == BigInt(limbs=[0] * 8 + [1])

    def test_hundreds_of_digits(self) -> None:
        text = "7" * 500
        assert _value(from_string(text)) == int(text)

    def test_classmethod_matches_function(self) -> None:
        assert BigInt.from_string("123456789012345678901234567890") == from_string(
            "123456789012345678901234567890"
        )


# =============================================================================
# НЕДОПУСТИМЫЙ ВВОД
# =============================================================================


class TestMalformedInput:
    """Тесты отклонения недопустимых строк"""

    def test_letter_rejected(self) -> None:
        with pytest.raises(DecimalParseError) as exc_info:
            from_string("12a3")
        assert exc_info.value.position == 2
        assert exc_info.value.text == "12a3"

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_string("12a3")

    @pytest.mark.parametrize(
        "text",
        ["-1", "+1", " 1", "1 ", "1_000", "1.5", "0x10", "٣", "1\n"],
    )
    def test_non_ascii_digit_characters_rejected(self, text: str) -> None:
        with pytest.raises(DecimalParseError):
            from_string(text)

    def test_invalid_after_long_valid_prefix(self) -> None:
        with pytest.raises(DecimalParseError) as exc_info:
            from_string("1" * 100 + "z")
        assert exc_info.value.position == 100

    def test_non_str_rejected(self) -> None:
        with pytest.raises(TypeError):
            from_string(123)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            from_string(b"123")  # type: ignore[arg-type]


# =============================================================================
# CONFIG
# =============================================================================


class TestParserConfig:
    """Тесты ParserConfig"""

    def test_default_chunk(self) -> None:
        assert ParserConfig().chunk_digits == 8

    @pytest.mark.parametrize("chunk_digits", [0, -1, MAX_CHUNK_DIGITS + 1])
    def test_out_of_range_rejected(self, chunk_digits: int) -> None:
        with pytest.raises(ValueError):
            ParserConfig(chunk_digits=chunk_digits)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(ValueError):
            ParserConfig(chunk_digits=True)

    @pytest.mark.parametrize("chunk_digits", range(1, MAX_CHUNK_DIGITS + 1))
    def test_result_independent_of_chunk_width(self, chunk_digits: int) -> None:
        text = "98765432109876543210987654321098765432109876543210123"
        config = ParserConfig(chunk_digits=chunk_digits)
        assert from_string(text, config) == from_string(text)
        assert _value(from_string(text, config)) == int(text)

    def test_max_chunk_with_max_digits(self) -> None:
        """Максимальный комбинированный шаг: все девятки при ширине 9"""
        text = "9" * 45
        config = ParserConfig(chunk_digits=MAX_CHUNK_DIGITS)
        assert _value(from_string(text, config)) == int(text)
