"""
BigInt — беззнаковое целое произвольной точности

Immutable Pydantic модель: упорядоченная последовательность 32-битных limbs,
младший limb первым. Значение = Σ limbs[i] · 2^(32·i).

Каноническая форма (без хвостовых нулей) структурно НЕ обязательна:
[342] и [342, 0, 0] — одно и то же число. Поэтому все потребители
(равенство, get) трактуют индексы за пределами последовательности как 0.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb — int в [0, 2^32 - 1] (bool и строки отклоняются)
2. Равенство не зависит от хвостовых нулевых limbs
3. hash согласован с равенством
4. Экземпляр неизменяем после создания (frozen=True)
"""

from typing import TYPE_CHECKING, Annotated, Iterable

from pydantic import BaseModel, Field

from src.limbint.domain.limbs import LIMB_MAX

if TYPE_CHECKING:
    from src.limbint.math.parsing import ParserConfig

Limb = Annotated[int, Field(strict=True, ge=0, le=LIMB_MAX)]


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Беззнаковое целое в radix 2^32.

    Ноль представим как пустая последовательность или как любая
    последовательность нулей.
    """

    limbs: tuple[Limb, ...] = Field(
        default=(), description="Limbs в порядке от младшего к старшему"
    )

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "BigInt":
        """Ноль в виде пустой последовательности limbs."""
        return cls(limbs=())

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "BigInt":
        """Создание из произвольного итерируемого набора limbs (младший первым)."""
        return cls(limbs=tuple(limbs))

    @classmethod
    def from_string(cls, text: str, config: "ParserConfig | None" = None) -> "BigInt":
        """Разбор десятичной строки. См. src.limbint.math.parsing.from_string."""
        from src.limbint.math.parsing import from_string

        return from_string(text, config)

    # -------------------------------------------------------------------------
    # Доступ к limbs
    # -------------------------------------------------------------------------

    def get(self, i: int) -> int:
        """
        Limb с индексом i; за пределами последовательности — 0.

        Raises:
            ValueError: Если i < 0
        """
        if i < 0:
            raise ValueError(f"Limb index must be non-negative, got {i}")
        if i < len(self.limbs):
            return self.limbs[i]
        return 0

    def __len__(self) -> int:
        return len(self.limbs)

    def significant_length(self) -> int:
        """Количество limbs без учёта хвостовых нулей."""
        n = len(self.limbs)
        while n > 0 and self.limbs[n - 1] == 0:
            n -= 1
        return n

    def trimmed(self) -> "BigInt":
        """Каноническая копия без хвостовых нулевых limbs."""
        n = self.significant_length()
        if n == len(self.limbs):
            return self
        return BigInt(limbs=self.limbs[:n])

    def is_zero(self) -> bool:
        return self.significant_length() == 0

    # -------------------------------------------------------------------------
    # Равенство
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        largest = max(len(self.limbs), len(other.limbs))
        for i in range(largest):
            if self.get(i) != other.get(i):
                return False
        return True

    def __hash__(self) -> int:
        return hash(self.limbs[: self.significant_length()])

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        from src.limbint.math.addition import sum

        return sum(self, other)

    def __mul__(self, other: object) -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        from src.limbint.math.multiplication import product

        return product(self, other)
