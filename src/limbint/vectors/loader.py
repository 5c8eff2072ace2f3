"""
Arithmetic Vectors — known-answer векторы для from_string / sum / product

Векторы хранятся в JSON и проверяются по JSON Schema (Draft 2020-12)
до построения моделей. Виды векторов:
- parse:       from_string(input) == BigInt(limbs)
- sum:         sum(a, b) == expected (все операнды — десятичные строки)
- product:     product(a, b) == expected
- parse_error: from_string(input) обязан завершиться DecimalParseError

Пакет содержит набор по умолчанию (data/arithmetic.json); приложение может
передать собственный файл в том же формате.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Файл, не прошедший схему, не порождает ни одного вектора
2. Имена векторов в файле уникальны
3. verify_vector не бросает исключений для валидного вектора
"""

import json
from pathlib import Path
from typing import Any, Final, Literal

from jsonschema import Draft202012Validator
from pydantic import BaseModel, Field

from src.limbint.domain.bigint import BigInt, Limb
from src.limbint.log import get_logger
from src.limbint.math.addition import sum
from src.limbint.math.multiplication import product
from src.limbint.math.parsing import DecimalParseError, from_string

log = get_logger(__name__)

_PACKAGE_DIR: Final[Path] = Path(__file__).parent

# Схема формата файла векторов
SCHEMA_PATH: Final[Path] = _PACKAGE_DIR / "schema" / "vectors.json"

# Набор векторов, поставляемый с пакетом
DEFAULT_VECTORS_PATH: Final[Path] = _PACKAGE_DIR / "data" / "arithmetic.json"

VectorKind = Literal["parse", "sum", "product", "parse_error"]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class VectorFileError(ValueError):
    """
    Файл векторов не читается или не соответствует схеме.

    Attributes:
        path: Путь к файлу
        errors: Сообщения о нарушениях (путь в документе: сообщение)
    """

    def __init__(self, path: Path, errors: list[str]):
        self.path = path
        self.errors = errors
        super().__init__(f"Invalid vector file {path}: " + "; ".join(errors))


# =============================================================================
# MODEL
# =============================================================================


class ArithmeticVector(BaseModel):
    """Один known-answer вектор."""

    kind: VectorKind = Field(..., description="Вид проверяемой операции")
    name: str = Field(..., min_length=1, description="Уникальное имя вектора")

    # parse / parse_error
    input: str | None = Field(default=None, description="Входная строка парсера")
    limbs: tuple[Limb, ...] | None = Field(default=None, description="Ожидаемые limbs")

    # sum / product
    a: str | None = Field(default=None, description="Первый операнд (десятичный)")
    b: str | None = Field(default=None, description="Второй операнд (десятичный)")
    expected: str | None = Field(default=None, description="Ожидаемый результат (десятичный)")

    model_config = {"frozen": True}


# =============================================================================
# LOADING
# =============================================================================


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise VectorFileError(path, [f"<root>: {e}"]) from e


_VALIDATOR: Final[Draft202012Validator] = Draft202012Validator(_read_json(SCHEMA_PATH))


def _format_error(error) -> str:
    location = "/".join(str(p) for p in error.absolute_path) or "<root>"
    return f"{location}: {error.message}"


def load_vectors(path: Path | None = None) -> list[ArithmeticVector]:
    """
    Загрузка и валидация файла векторов.

    Args:
        path: Путь к JSON файлу (default: DEFAULT_VECTORS_PATH)

    Returns:
        Векторы в порядке следования в файле

    Raises:
        FileNotFoundError: Если файл не найден
        VectorFileError: Если файл не JSON, нарушает схему или содержит повторные имена
    """
    path = Path(path) if path is not None else DEFAULT_VECTORS_PATH
    data = _read_json(path)

    errors = sorted(
        _VALIDATOR.iter_errors(data),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if errors:
        raise VectorFileError(path, [_format_error(e) for e in errors])

    vectors = [ArithmeticVector(**item) for item in data["vectors"]]

    seen: set[str] = set()
    duplicates = []
    for vector in vectors:
        if vector.name in seen:
            duplicates.append(f"vectors: duplicate name {vector.name!r}")
        seen.add(vector.name)
    if duplicates:
        raise VectorFileError(path, duplicates)

    log.debug("vectors.loaded", path=str(path), count=len(vectors))
    return vectors


# =============================================================================
# VERIFICATION
# =============================================================================


def verify_vector(vector: ArithmeticVector) -> bool:
    """
    Проверка одного вектора на текущей реализации.

    Returns:
        True если результат совпадает с ожидаемым
    """
    if vector.kind == "parse":
        return from_string(vector.input) == BigInt(limbs=vector.limbs)

    if vector.kind == "parse_error":
        try:
            from_string(vector.input)
        except DecimalParseError:
            return True
        return False

    a = from_string(vector.a)
    b = from_string(vector.b)
    expected = from_string(vector.expected)
    if vector.kind == "sum":
        return sum(a, b) == expected
    return product(a, b) == expected


def failed_vectors(vectors: list[ArithmeticVector]) -> list[str]:
    """
    Прогон набора векторов.

    Returns:
        Имена векторов, результат которых не совпал с ожидаемым
    """
    failed = [v.name for v in vectors if not verify_vector(v)]
    if failed:
        log.debug("vectors.failed", count=len(failed), names=failed)
    return failed
