"""
Тесты для логирования limbint

Проверяет:
1. Арифметика ничего не пишет в stdout/stderr без настройки logging
2. События парсера доходят до stdlib logging при включённом уровне DEBUG
"""

import logging

import pytest

from src.limbint import DecimalParseError, from_string, product
from src.limbint.log import get_logger
from src.limbint.math.addition import sum as bigint_sum


class TestQuietByDefault:
    """Библиотека не пишет в стандартные потоки"""

    def test_product_writes_nothing(self, capsys) -> None:
        product(from_string("123"), from_string("456"))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_sum_writes_nothing(self, capsys) -> None:
        bigint_sum(from_string("9" * 40), from_string("1"))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_rejected_input_writes_nothing(self, capsys) -> None:
        with pytest.raises(DecimalParseError):
            from_string("12a3")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestStdlibRouting:
    """События проксируются в stdlib logging"""

    def test_parse_event_recorded_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.limbint.math.parsing"):
            from_string("4294967296")
        assert "parsing.parsed" in caplog.text
        assert "limbs=2" in caplog.text

    def test_rejection_event_recorded_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.limbint.math.parsing"):
            with pytest.raises(DecimalParseError):
                from_string("12a3")
        assert "parsing.rejected" in caplog.text
        assert "position=2" in caplog.text

    def test_debug_suppressed_at_default_level(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="src.limbint.math.parsing"):
            from_string("42")
        assert "parsing.parsed" not in caplog.text

    def test_logger_bound_to_named_stdlib_logger(self) -> None:
        log = get_logger("src.limbint.test")
        assert log.name == "src.limbint.test"
