"""
Структурированное логирование limbint

structlog поверх стандартного logging: события рендерятся в key=value строку
и передаются именованному logging.Logger. Библиотека не устанавливает
handlers и не меняет уровни — этим управляет приложение
(logging.basicConfig / logging.getLogger("src.limbint").setLevel(...)).

Без настройки со стороны приложения debug-события отбрасываются
до рендеринга (filter_by_level), stdout не используется.
"""

import logging

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Логгер limbint, привязанный к logging.getLogger(name).

    Args:
        name: Имя stdlib логгера (обычно __name__ модуля)

    Returns:
        structlog BoundLogger, проксирующий события в stdlib logging
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
